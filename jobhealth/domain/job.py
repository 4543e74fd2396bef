"""
Job domain models - DAG application records

A completed job is modelled as a tree:

    DAGApplicationData (one job, may run several DAGs)
        -> DAGData (one execution plan)
            -> VertexData (one stage)
                -> TaskData (one task attempt with its counters)

The records are populated by an external collector (e.g., from a cluster's
history server) and are read-only to the heuristics. ``from_dict`` builds the
tree from the plain JSON-style mapping such a collector produces:

    {
        "app_id": "application_1700000000000_0042",
        "succeeded": true,
        "dags": [
            {
                "dag_id": "dag_1",
                "vertices": [
                    {
                        "name": "Map 1",
                        "tasks": [
                            {
                                "task_id": "task_0",
                                "sampled": true,
                                "total_runtime_ms": 20000,
                                "counters": {"GC_TIME_MILLIS": 300, "CPU_MILLISECONDS": 10000}
                            }
                        ]
                    }
                ]
            }
        ]
    }
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from jobhealth.core.logging_config import get_logger
from jobhealth.utils.error_handling import log_and_continue

logger = get_logger(__name__)


def _get_flag(data: Mapping[str, Any], key: str) -> bool:
    """Read an optional boolean field (absent means False)."""
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {value!r}")
    return value


class CounterName(str, Enum):
    """Task counters reported by the execution engine (value = counter key)."""

    GC_MILLISECONDS = "GC_TIME_MILLIS"
    CPU_MILLISECONDS = "CPU_MILLISECONDS"

    @classmethod
    def lookup(cls, key: "str | CounterName") -> "CounterName":
        """
        Resolve a counter by member name or counter key.

        Raises:
            ValueError: If the key names no known counter
        """
        if isinstance(key, cls):
            return key
        if key in cls.__members__:
            return cls.__members__[key]
        return cls(key)


class TaskCounters:
    """
    Read-only counter values for a single task.

    Missing (or null) counters read as 0.

    Example:
        counters = TaskCounters({CounterName.GC_MILLISECONDS: 300})
        counters.get(CounterName.GC_MILLISECONDS)   # 300
        counters.get(CounterName.CPU_MILLISECONDS)  # 0
    """

    def __init__(self, values: Mapping[CounterName, int | None] | None = None):
        self._values: Mapping[CounterName, int] = MappingProxyType(
            {CounterName.lookup(name): int(value) for name, value in (values or {}).items() if value is not None}
        )

    def get(self, name: CounterName) -> int:
        """Return the counter value, or 0 if the counter was not reported."""
        return self._values.get(name, 0)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskCounters):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{name.name}={value}" for name, value in self._values.items())
        return f"TaskCounters({items})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskCounters":
        """Build counters from a mapping keyed by counter name; unknown counters are ignored."""
        values: dict[CounterName, int | None] = {}
        for key, value in data.items():
            try:
                values[CounterName.lookup(key)] = value
            except ValueError:
                logger.debug(f"Ignoring unknown task counter {key!r}")
        return cls(values)


@dataclass(frozen=True)
class TaskData:
    """
    A single task and its resource-usage counters.

    Attributes:
        task_id: Task attempt identifier
        sampled: True if this task's counters were actually collected
            (large jobs only profile a subset of tasks)
        total_runtime_ms: Wall-clock runtime in milliseconds
        counters: Counter values for the task
    """

    task_id: str
    sampled: bool
    total_runtime_ms: int
    counters: TaskCounters = field(default_factory=TaskCounters)

    @property
    def gc_ms(self) -> int:
        """Time spent in garbage collection (ms)."""
        return self.counters.get(CounterName.GC_MILLISECONDS)

    @property
    def cpu_ms(self) -> int:
        """CPU time (ms)."""
        return self.counters.get(CounterName.CPU_MILLISECONDS)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskData":
        """
        Build a task from a mapping.

        Raises:
            KeyError: If task_id is missing
            TypeError: If sampled is not a boolean
            TypeError, ValueError: If numeric fields are malformed
        """
        return cls(
            task_id=str(data["task_id"]),
            sampled=_get_flag(data, "sampled"),
            total_runtime_ms=int(data.get("total_runtime_ms") or 0),
            counters=TaskCounters.from_dict(data.get("counters") or {}),
        )


@dataclass(frozen=True)
class VertexData:
    """
    A stage of a DAG, composed of parallel tasks.

    Attributes:
        name: Vertex name (e.g., "Map 1", "Reducer 2")
        tasks: Tasks in execution order
    """

    name: str
    tasks: tuple[TaskData, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tasks", tuple(self.tasks))

    @property
    def task_count(self) -> int:
        return len(self.tasks)

    @property
    def sampled_tasks(self) -> list[TaskData]:
        """Tasks whose counters were collected."""
        return [task for task in self.tasks if task.sampled]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VertexData":
        """Build a vertex from a mapping, skipping malformed task records."""
        name = str(data.get("name", ""))
        tasks: list[TaskData] = []
        for raw_task in data.get("tasks") or []:
            try:
                tasks.append(TaskData.from_dict(raw_task))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                log_and_continue(
                    logger,
                    e,
                    context={"vertex": name, "task": raw_task},
                    error_type="Task record parsing",
                )
                continue
        return cls(name=name, tasks=tuple(tasks))


@dataclass(frozen=True)
class DAGData:
    """
    One execution plan of a job.

    Attributes:
        dag_id: DAG identifier
        vertices: Vertices in iteration order
    """

    dag_id: str
    vertices: tuple[VertexData, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DAGData":
        return cls(
            dag_id=str(data.get("dag_id", "")),
            vertices=tuple(VertexData.from_dict(vertex) for vertex in data.get("vertices") or []),
        )


@dataclass(frozen=True)
class DAGApplicationData:
    """
    A completed job and all DAGs it ran.

    Attributes:
        app_id: Application identifier
        succeeded: False if the job failed (heuristics skip failed jobs)
        dags: DAGs in execution order

    Example:
        job = DAGApplicationData.from_dict(json.loads(path.read_text()))
        if job.succeeded:
            print(f"{job.app_id}: {sum(1 for _ in job.iter_vertices())} vertices")
    """

    app_id: str
    succeeded: bool
    dags: tuple[DAGData, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dags", tuple(self.dags))

    def iter_vertices(self) -> Iterator[VertexData]:
        """Yield every vertex of every DAG in iteration order."""
        for dag in self.dags:
            yield from dag.vertices

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DAGApplicationData":
        """
        Build the job tree from a mapping.

        Raises:
            TypeError: If succeeded is not a boolean
        """
        return cls(
            app_id=str(data.get("app_id", "")),
            succeeded=_get_flag(data, "succeeded"),
            dags=tuple(DAGData.from_dict(dag) for dag in data.get("dags") or []),
        )
