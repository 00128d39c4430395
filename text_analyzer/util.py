from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 0):
    """
    Round *value* to *places* decimals, halves away from zero.

    Works on the exact binary value of the float, so 0.125 rounds to 0.13
    while 0.145 (stored as 0.14499...) rounds to 0.14. Returns an int when
    places is 0, otherwise a float.
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if places == 0 else float(rounded)


def clamp(value, lower, upper):
    return max(lower, min(upper, value))
