import math


def round_half_up(value: float) -> int | float:
    """
    Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding, which would turn 127.5 into 128
    but 126.5 into 126. Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))
