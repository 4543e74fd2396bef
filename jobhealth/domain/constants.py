#!/usr/bin/env python3
"""
Application Constants

Built-in defaults and parameter keys for the heuristics. Values here are
used whenever configuration does not supply a valid override.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GCHeuristicDefaults:
    """
    GC efficiency heuristic parameter keys and default thresholds.

    Attributes:
        GC_RATIO_SEVERITY: Parameter key for GC time / CPU time limits
        RUNTIME_SEVERITY: Parameter key for task runtime limits (minutes)
        VERTEX_BREAKDOWN: Parameter key enabling per-vertex result details
        THRESHOLD_COUNT: Number of boundaries in each threshold list
        GC_RATIO_LIMITS: Default GC/CPU ratio limits (LOW, MODERATE, SEVERE, CRITICAL)
        RUNTIME_LIMITS_MIN: Default average task runtime limits in minutes

    Example:
        >>> defaults = gc_heuristic_defaults
        >>> defaults.GC_RATIO_LIMITS
        (0.01, 0.02, 0.03, 0.04)
    """

    GC_RATIO_SEVERITY: str = "gc_ratio_severity"
    """Parameter key for GC time / CPU time limits"""

    RUNTIME_SEVERITY: str = "runtime_severity_in_min"
    """Parameter key for task runtime limits (minutes)"""

    VERTEX_BREAKDOWN: str = "vertex_breakdown"
    """Parameter key enabling per-vertex result details"""

    THRESHOLD_COUNT: int = 4
    """Number of boundaries in each threshold list"""

    GC_RATIO_LIMITS: tuple[float, ...] = (0.01, 0.02, 0.03, 0.04)
    """Default GC time / CPU time limits"""

    RUNTIME_LIMITS_MIN: tuple[float, ...] = (5.0, 10.0, 12.0, 15.0)
    """Default average task runtime limits in minutes"""


gc_heuristic_defaults = GCHeuristicDefaults()
