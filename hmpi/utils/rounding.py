"""
HMPI - Rounding Helpers
"""
import math


def round_half_up(value: float, digits: int = 2) -> float:
    """
    Round to a fixed number of decimals with ties going up.

    Reported indices and scores use this rather than the built-in round,
    which rounds ties to even (99.975 -> 99.97 instead of 99.98).

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        floor(value * 10**digits + 0.5) / 10**digits
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale
