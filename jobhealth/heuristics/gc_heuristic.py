"""
GC Efficiency Heuristic

Analyses garbage collection efficiency of a completed DAG job.

The signal is the job-wide ratio of average GC time to average CPU time
over all sampled tasks. The ratio is graded against four ascending limits
and the result is capped by a second grade derived from average task
runtime, so short-running jobs never escalate on ratio noise alone:

    severity = min(ratio_severity, runtime_severity)

Usage:
    from jobhealth.heuristics.gc_heuristic import GCHeuristic

    heuristic = GCHeuristic(conf)       # thresholds are loaded once
    result = heuristic.apply(job)       # None for failed jobs
"""

from collections.abc import Sequence
from dataclasses import dataclass

from jobhealth.config import HeuristicConfigurationData
from jobhealth.core.logging_config import log_with_context
from jobhealth.domain.constants import gc_heuristic_defaults
from jobhealth.domain.job import DAGApplicationData, VertexData
from jobhealth.domain.metrics import AggregateMetrics, gc_cpu_ratio
from jobhealth.domain.result import HeuristicResult
from jobhealth.domain.severity import Severity
from jobhealth.heuristics.base import Heuristic
from jobhealth.utils.error_handling import log_and_return_default
from jobhealth.utils.params import get_bool_param, get_param
from jobhealth.utils.scoring import get_heuristic_score
from jobhealth.utils.statistics import MINUTE_IN_MS


def validate_limits(limits: Sequence[float], count: int = gc_heuristic_defaults.THRESHOLD_COUNT) -> None:
    """
    Check a threshold list: exact length, non-decreasing, first >= 0, rest > 0.

    Raises:
        ValueError: If the list violates any of the rules
    """
    if len(limits) != count:
        raise ValueError(f"expected {count} limits, got {len(limits)}")
    if limits[0] < 0:
        raise ValueError(f"first limit must be >= 0, got {limits[0]}")
    if any(limit <= 0 for limit in limits[1:]):
        raise ValueError(f"limits after the first must be > 0: {list(limits)}")
    if any(later < earlier for earlier, later in zip(limits, limits[1:])):
        raise ValueError(f"limits must be non-decreasing: {list(limits)}")


@dataclass(frozen=True)
class GCThresholds:
    """
    Immutable severity limits for the GC heuristic.

    Attributes:
        ratio_limits: GC time / CPU time limits (LOW, MODERATE, SEVERE, CRITICAL)
        runtime_limits_ms: Average task runtime limits in milliseconds
    """

    ratio_limits: tuple[float, float, float, float]
    runtime_limits_ms: tuple[float, float, float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "ratio_limits", tuple(float(limit) for limit in self.ratio_limits))
        object.__setattr__(self, "runtime_limits_ms", tuple(float(limit) for limit in self.runtime_limits_ms))
        validate_limits(self.ratio_limits)
        validate_limits(self.runtime_limits_ms)

    @classmethod
    def from_minutes(cls, ratio_limits: Sequence[float], runtime_limits_min: Sequence[float]) -> "GCThresholds":
        """Build thresholds from runtime limits expressed in minutes."""
        return cls(
            ratio_limits=tuple(ratio_limits),  # type: ignore[arg-type]
            runtime_limits_ms=tuple(limit * MINUTE_IN_MS for limit in runtime_limits_min),  # type: ignore[arg-type]
        )

    @classmethod
    def default(cls) -> "GCThresholds":
        return cls.from_minutes(gc_heuristic_defaults.GC_RATIO_LIMITS, gc_heuristic_defaults.RUNTIME_LIMITS_MIN)

    @property
    def runtime_limits_min(self) -> tuple[float, ...]:
        return tuple(limit / MINUTE_IN_MS for limit in self.runtime_limits_ms)


class GCHeuristic(Heuristic[DAGApplicationData]):
    """Grades GC time relative to CPU time across all sampled tasks of a job"""

    def __init__(self, heuristic_conf_data: HeuristicConfigurationData):
        super().__init__(heuristic_conf_data)
        self._thresholds = self._load_thresholds()
        self._vertex_breakdown = get_bool_param(heuristic_conf_data.get_param(gc_heuristic_defaults.VERTEX_BREAKDOWN))

    @property
    def thresholds(self) -> GCThresholds:
        return self._thresholds

    @property
    def vertex_breakdown(self) -> bool:
        return self._vertex_breakdown

    def _resolve_limits(self, key: str, defaults: tuple[float, ...]) -> tuple[float, ...]:
        """Configured limits for key, or defaults when absent or invalid."""
        configured = get_param(self.heuristic_conf_data.get_param(key), gc_heuristic_defaults.THRESHOLD_COUNT)
        limits = defaults
        if configured is not None:
            try:
                validate_limits(configured)
                limits = configured
            except ValueError as e:
                limits = log_and_return_default(
                    self.logger,
                    e,
                    context={"heuristic": self.name, "param": key, "value": list(configured)},
                    default_value=defaults,
                    error_type="Threshold validation",
                )

        log_with_context(
            self.logger,
            "info",
            f"{self.name} will use {key} with the following threshold settings: {list(limits)}",
            heuristic=self.name,
            param=key,
            thresholds=list(limits),
        )
        return limits

    def _load_thresholds(self) -> GCThresholds:
        ratio_limits = self._resolve_limits(
            gc_heuristic_defaults.GC_RATIO_SEVERITY, gc_heuristic_defaults.GC_RATIO_LIMITS
        )
        runtime_limits_min = self._resolve_limits(
            gc_heuristic_defaults.RUNTIME_SEVERITY, gc_heuristic_defaults.RUNTIME_LIMITS_MIN
        )
        return GCThresholds.from_minutes(ratio_limits, runtime_limits_min)

    def apply(self, data: DAGApplicationData) -> HeuristicResult | None:
        """
        Grade the job's GC efficiency.

        Args:
            data: Completed job record

        Returns:
            HeuristicResult, or None if the job did not succeed
        """
        if not data.succeeded:
            self.logger.debug(f"Skipping {self.name} for failed job {data.app_id}")
            return None

        metrics = self.aggregate(data)

        # Nothing was sampled anywhere in the job
        if not metrics.has_samples:
            severity = Severity.NONE
        else:
            severity = self.grade(metrics.avg_runtime_ms, metrics.avg_cpu_ms, metrics.avg_gc_ms)

        result = HeuristicResult(
            heuristic_class=self.heuristic_conf_data.class_name,
            heuristic_name=self.name,
            severity=severity,
            score=get_heuristic_score(severity, metrics.task_count),
        )

        result.add_result_detail("Number of vertexes", str(metrics.vertex_count))
        result.add_result_detail("Number of tasks", str(metrics.task_count))
        result.add_result_detail("Avg task runtime (ms)", str(metrics.avg_runtime_ms))
        result.add_result_detail("Avg task CPU time (ms)", str(metrics.avg_cpu_ms))
        result.add_result_detail("Avg task GC time (ms)", str(metrics.avg_gc_ms))
        result.add_result_detail("Task GC/CPU ratio", str(metrics.gc_cpu_ratio))

        if self._vertex_breakdown:
            for vertex in data.iter_vertices():
                self._add_vertex_details(result, vertex)

        self.logger.debug(
            f"{self.name} graded {data.app_id} as {severity.text} "
            f"({metrics.sampled_task_count}/{metrics.task_count} tasks sampled)"
        )
        return result

    def aggregate(self, data: DAGApplicationData) -> AggregateMetrics:
        """Job-wide averages over every sampled task of every vertex of every DAG."""
        vertices = list(data.iter_vertices())
        return AggregateMetrics.from_tasks(
            (task for vertex in vertices for task in vertex.tasks),
            vertex_count=len(vertices),
        )

    def grade(self, runtime_ms: float, cpu_ms: float, gc_ms: float) -> Severity:
        """
        Grade averaged task metrics.

        Args:
            runtime_ms: Average task runtime
            cpu_ms: Average task CPU time (0 grades the ratio as 0)
            gc_ms: Average task GC time

        Returns:
            The lesser of the ratio severity and the runtime severity
        """
        ratio_severity = self.get_gc_ratio_severity(gc_cpu_ratio(gc_ms, cpu_ms))

        # Runtime caps the ratio grade
        runtime_severity = self.get_runtime_severity(runtime_ms)

        return Severity.min(ratio_severity, runtime_severity)

    def get_gc_ratio_severity(self, gc_ratio: float) -> Severity:
        return Severity.get_severity_ascending(gc_ratio, *self._thresholds.ratio_limits)

    def get_runtime_severity(self, runtime_ms: float) -> Severity:
        return Severity.get_severity_ascending(runtime_ms, *self._thresholds.runtime_limits_ms)

    def _add_vertex_details(self, result: HeuristicResult, vertex: VertexData) -> None:
        """Append a vertex's own aggregates when that vertex grades above NONE."""
        metrics = AggregateMetrics.from_tasks(vertex.tasks, vertex_count=1)
        if not metrics.has_samples:
            return

        severity = self.grade(metrics.avg_runtime_ms, metrics.avg_cpu_ms, metrics.avg_gc_ms)
        if severity == Severity.NONE:
            return

        result.add_result_detail(f"Number of sampled tasks in vertex {vertex.name}", str(metrics.sampled_task_count))
        result.add_result_detail(f"Avg vertex task runtime (ms) {vertex.name}", str(metrics.avg_runtime_ms))
        result.add_result_detail(f"Avg vertex task CPU time (ms) {vertex.name}", str(metrics.avg_cpu_ms))
        result.add_result_detail(f"Avg vertex task GC time (ms) {vertex.name}", str(metrics.avg_gc_ms))
        result.add_result_detail(f"Vertex task GC/CPU ratio {vertex.name}", str(metrics.gc_cpu_ratio))
