from datetime import datetime, timezone

import pytest

PRODUCT_REVIEW = "This product is absolutely amazing! I love everything about it."


@pytest.fixture
def product_review():
    return PRODUCT_REVIEW


@pytest.fixture
def fixed_clock():
    moment = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
    return lambda: moment
