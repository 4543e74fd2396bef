"""
Heuristic scoring

A heuristic's score weights its severity by the number of tasks it looked
at, so a SEVERE finding across 2,000 tasks outranks the same finding on 20.
"""

from jobhealth.domain.severity import Severity


def get_heuristic_score(severity: Severity, task_count: int) -> int:
    """
    Compute the score reported alongside a heuristic result.

    Args:
        severity: Final severity of the heuristic
        task_count: Number of tasks the heuristic examined (unfiltered)

    Returns:
        severity value x task_count

    Example:
        >>> get_heuristic_score(Severity.MODERATE, 10)
        20
        >>> get_heuristic_score(Severity.LOW, 0)
        0
    """
    if task_count < 0:
        raise ValueError(f"task_count must be non-negative, got {task_count}")

    return int(severity.value) * task_count
