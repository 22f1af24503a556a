"""Half-up rounding used by every calorie and gram figure."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going towards +infinity.

    Python's built-in round() uses banker's rounding (round(2.5) == 2),
    which would shift published targets by one gram/kcal on ties.

    Args:
        value: Real number to round

    Returns:
        int: Rounded value

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))
