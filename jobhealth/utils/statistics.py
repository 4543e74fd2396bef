"""
Statistics Utilities

Shared statistical helpers for heuristic aggregation.

Usage:
    from jobhealth.utils.statistics import MINUTE_IN_MS, average

    avg_runtime_ms = average(runtimes_ms)
    limit_ms = 5 * MINUTE_IN_MS
"""

from collections.abc import Sequence

SECOND_IN_MS = 1000
MINUTE_IN_MS = 60 * SECOND_IN_MS
HOUR_IN_MS = 60 * MINUTE_IN_MS


def average(values: Sequence[int]) -> int:
    """
    Calculate the integer arithmetic mean of a sequence.

    The quotient is truncated toward zero, so the result is always an exact
    integer regardless of the magnitude of the sum.

    Args:
        values: Sequence of integer samples (e.g., milliseconds)

    Returns:
        Truncated mean, or 0 for an empty sequence

    Example:
        >>> average([20000, 18000, 22000])
        20000
        >>> average([1, 2])
        1
        >>> average([])
        0
    """
    if not values:
        return 0

    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def ratio(numerator: float, denominator: float) -> float:
    """
    Floating point ratio that treats a zero denominator as "no signal".

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        numerator / denominator, or 0.0 when denominator is 0
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator
