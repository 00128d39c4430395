from __future__ import annotations

import copy
import json
import os
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from .logger import get_logger

logger = get_logger(__name__)

EXPORT_METADATA = {
    "analyzer": "AI Text Analyzer v1.0",
    "engine": "Advanced NLP Engine",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix, e.g. 2024-05-01T12:00:00.000Z."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


def export_snapshot(results: Dict[str, Any], original_text: str,
                    clock: Optional[Callable[[], datetime]] = None) -> Dict[str, Any]:
    """Serializable record of an analysis. Deterministic for a fixed *clock*."""
    clock = clock or utc_now
    return {
        "timestamp": iso_timestamp(clock()),
        "originalText": original_text,
        "analysis": copy.deepcopy(results),
        "metadata": dict(EXPORT_METADATA),
    }


def export_json(results: Dict[str, Any], original_text: str,
                clock: Optional[Callable[[], datetime]] = None) -> str:
    return json.dumps(export_snapshot(results, original_text, clock), indent=2, ensure_ascii=False)


def save_snapshot_to_file(snapshot: Dict[str, Any], directory: str = "reports",
                          clock: Optional[Callable[[], datetime]] = None) -> Optional[str]:
    """Write *snapshot* as text-analysis-<epoch ms>.json under *directory*; None on failure."""
    clock = clock or utc_now
    stamp = int(clock().timestamp() * 1000)
    filename = os.path.join(directory, f"text-analysis-{stamp}.json")
    try:
        os.makedirs(directory, exist_ok=True)
        with open(filename, "w", encoding="utf-8") as f:
            json.dump(snapshot, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Error saving snapshot to %s: %s", filename, e)
        return None
    logger.info("Snapshot saved to %s", filename)
    return filename
