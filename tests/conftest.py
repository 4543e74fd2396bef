"""
Pytest configuration and shared fixtures

Provides common job records and heuristic configurations for the tests.
"""

import pytest

from jobhealth.config import HeuristicConfigurationData
from jobhealth.domain.job import CounterName, DAGApplicationData, DAGData, TaskCounters, TaskData, VertexData

GC_HEURISTIC_CLASS = "jobhealth.heuristics.gc_heuristic.GCHeuristic"


def make_task(
    task_id: str,
    runtime_ms: int,
    cpu_ms: int | None,
    gc_ms: int | None,
    sampled: bool = True,
) -> TaskData:
    """Build a TaskData with GC and CPU counters"""
    counters: dict[CounterName, int | None] = {}
    if cpu_ms is not None:
        counters[CounterName.CPU_MILLISECONDS] = cpu_ms
    if gc_ms is not None:
        counters[CounterName.GC_MILLISECONDS] = gc_ms
    return TaskData(task_id=task_id, sampled=sampled, total_runtime_ms=runtime_ms, counters=TaskCounters(counters))


def make_job(*vertices: VertexData, succeeded: bool = True, app_id: str = "application_1_0001") -> DAGApplicationData:
    """Build a single-DAG job from vertices"""
    return DAGApplicationData(app_id=app_id, succeeded=succeeded, dags=(DAGData(dag_id="dag_1", vertices=vertices),))


# ===== Configuration Fixtures =====


@pytest.fixture
def gc_conf():
    """GC heuristic configuration with no parameters (built-in defaults)"""
    return HeuristicConfigurationData(heuristic_name="Tez GC", class_name=GC_HEURISTIC_CLASS)


@pytest.fixture
def make_gc_conf():
    """Factory for GC heuristic configuration with parameters"""

    def _make(**params: str) -> HeuristicConfigurationData:
        return HeuristicConfigurationData(heuristic_name="Tez GC", class_name=GC_HEURISTIC_CLASS, params=params)

    return _make


# ===== Job Record Fixtures =====


@pytest.fixture
def task_factory():
    """Provide make_task() to tests"""
    return make_task


@pytest.fixture
def job_factory():
    """Provide make_job() to tests"""
    return make_job


@pytest.fixture
def short_running_vertex():
    """Three sampled tasks: avg runtime 20s, avg CPU 10s, avg GC 300ms (ratio 0.03)"""
    return VertexData(
        name="Map 1",
        tasks=(
            make_task("task_0", 20000, 10000, 300),
            make_task("task_1", 18000, 9000, 250),
            make_task("task_2", 22000, 11000, 350),
        ),
    )


@pytest.fixture
def long_running_vertex():
    """Two sampled tasks: avg runtime 20min, avg CPU 15min, avg GC 45s (ratio 0.05)"""
    return VertexData(
        name="Reducer 2",
        tasks=(
            make_task("task_0", 1_200_000, 900_000, 45_000),
            make_task("task_1", 1_200_000, 900_000, 45_000),
        ),
    )


@pytest.fixture
def sample_job(short_running_vertex):
    """Successful single-DAG, single-vertex job"""
    return make_job(short_running_vertex)


@pytest.fixture
def sample_job_dict():
    """Job record in the mapping shape produced by an external collector"""
    return {
        "app_id": "application_1700000000000_0042",
        "succeeded": True,
        "dags": [
            {
                "dag_id": "dag_1",
                "vertices": [
                    {
                        "name": "Map 1",
                        "tasks": [
                            {
                                "task_id": "task_0",
                                "sampled": True,
                                "total_runtime_ms": 20000,
                                "counters": {"GC_TIME_MILLIS": 300, "CPU_MILLISECONDS": 10000},
                            },
                            {
                                "task_id": "task_1",
                                "sampled": False,
                                "total_runtime_ms": 5000,
                                "counters": {},
                            },
                        ],
                    }
                ],
            },
            {
                "dag_id": "dag_2",
                "vertices": [
                    {"name": "Map 1", "tasks": []},
                    {"name": "Reducer 2", "tasks": []},
                ],
            },
        ],
    }
