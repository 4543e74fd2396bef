"""
Domain Models - Type-safe data structures for job health heuristics

This package contains the types heuristics read and produce:
    - severity: Severity
    - job: DAGApplicationData, DAGData, VertexData, TaskData, TaskCounters, CounterName
    - metrics: AggregateMetrics
    - result: HeuristicResult, HeuristicResultDetail

Usage:
    from jobhealth.domain import DAGApplicationData, Severity

    job = DAGApplicationData.from_dict(raw_job)
    if job.succeeded:
        ...
"""

from .job import CounterName, DAGApplicationData, DAGData, TaskCounters, TaskData, VertexData
from .metrics import AggregateMetrics, gc_cpu_ratio
from .result import HeuristicResult, HeuristicResultDetail
from .severity import Severity

__all__ = [
    # Severity
    "Severity",
    # Job records
    "CounterName",
    "TaskCounters",
    "TaskData",
    "VertexData",
    "DAGData",
    "DAGApplicationData",
    # Aggregates
    "AggregateMetrics",
    "gc_cpu_ratio",
    # Results
    "HeuristicResult",
    "HeuristicResultDetail",
]
