"""Zero-safe arithmetic used throughout the capacity model.

Ratios with a zero denominator (an idle line, an empty edge-treatment group)
evaluate to 0.0 instead of propagating ZeroDivisionError or NaN into reports.
"""
import math

from ..constants import HEADCOUNT_TOLERANCE


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is zero.

    Example:
        >>> safe_divide(10.0, 4.0)
        2.5
        >>> safe_divide(10.0, 0.0)
        0.0
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator


def ceil_with_tolerance(value: float, tolerance: float = HEADCOUNT_TOLERANCE) -> int:
    """Round up, ignoring float noise just above a whole number.

    Example:
        >>> ceil_with_tolerance(1.0000000000002)
        1
        >>> ceil_with_tolerance(1.2)
        2
    """
    return math.ceil(value - tolerance)
