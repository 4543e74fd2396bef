"""
Aggregate task metrics

AggregateMetrics is the per-invocation summary a heuristic grades: how many
vertices and tasks were visited, and the mean runtime / CPU / GC time of the
sampled tasks among them.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from jobhealth.domain.job import TaskData
from jobhealth.utils.statistics import average, ratio


def gc_cpu_ratio(gc_ms: float, cpu_ms: float) -> float:
    """
    Fraction of CPU time spent in garbage collection.

    Zero CPU time is treated as "no GC pressure" and yields 0.0.
    """
    return ratio(gc_ms, cpu_ms)


@dataclass(frozen=True)
class AggregateMetrics:
    """
    Mean task metrics over a set of sampled tasks.

    Attributes:
        vertex_count: Vertices visited (unfiltered)
        task_count: Tasks visited (unfiltered)
        sampled_task_count: Tasks that contributed to the averages
        avg_runtime_ms: Truncated mean wall-clock runtime
        avg_cpu_ms: Truncated mean CPU time
        avg_gc_ms: Truncated mean GC time

    Example:
        >>> metrics = AggregateMetrics.from_tasks(tasks, vertex_count=1)
        >>> metrics.gc_cpu_ratio
        0.03
    """

    vertex_count: int
    task_count: int
    sampled_task_count: int
    avg_runtime_ms: int
    avg_cpu_ms: int
    avg_gc_ms: int

    @property
    def gc_cpu_ratio(self) -> float:
        """avg_gc_ms / avg_cpu_ms, or 0.0 when no CPU time was recorded."""
        return gc_cpu_ratio(self.avg_gc_ms, self.avg_cpu_ms)

    @property
    def has_samples(self) -> bool:
        """True if at least one sampled task contributed."""
        return self.sampled_task_count > 0

    @classmethod
    def from_tasks(cls, tasks: Iterable[TaskData], vertex_count: int) -> "AggregateMetrics":
        """
        Aggregate a flat sequence of tasks.

        Every task counts toward task_count; only sampled tasks contribute
        to the averages.

        Args:
            tasks: Tasks in iteration order
            vertex_count: Number of vertices the tasks were drawn from

        Returns:
            AggregateMetrics for the tasks
        """
        task_count = 0
        runtimes_ms: list[int] = []
        cpu_ms: list[int] = []
        gc_ms: list[int] = []

        for task in tasks:
            task_count += 1
            if task.sampled:
                runtimes_ms.append(task.total_runtime_ms)
                gc_ms.append(task.gc_ms)
                cpu_ms.append(task.cpu_ms)

        return cls(
            vertex_count=vertex_count,
            task_count=task_count,
            sampled_task_count=len(runtimes_ms),
            avg_runtime_ms=average(runtimes_ms),
            avg_cpu_ms=average(cpu_ms),
            avg_gc_ms=average(gc_ms),
        )
