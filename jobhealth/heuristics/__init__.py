"""
Heuristics - graders applied to completed job records

Usage:
    from jobhealth.heuristics import GCHeuristic

    heuristic = GCHeuristic(conf)
    result = heuristic.apply(job)
"""

from .base import Heuristic
from .gc_heuristic import GCHeuristic, GCThresholds

__all__ = [
    "Heuristic",
    "GCHeuristic",
    "GCThresholds",
]
