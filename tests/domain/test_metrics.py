"""
Tests for aggregate task metrics
"""

import pytest

from jobhealth.domain.metrics import AggregateMetrics, gc_cpu_ratio


class TestGcCpuRatio:
    """Test the GC/CPU ratio helper"""

    def test_ratio(self):
        """Test plain division"""
        assert gc_cpu_ratio(300, 10000) == pytest.approx(0.03)

    def test_zero_cpu(self):
        """Test zero CPU time yields 0.0"""
        assert gc_cpu_ratio(500, 0) == 0.0


class TestAggregateMetrics:
    """Test AggregateMetrics.from_tasks"""

    def test_averages(self, short_running_vertex):
        """Test truncated means over sampled tasks"""
        metrics = AggregateMetrics.from_tasks(short_running_vertex.tasks, vertex_count=1)

        assert metrics.task_count == 3
        assert metrics.sampled_task_count == 3
        assert metrics.avg_runtime_ms == 20000
        assert metrics.avg_cpu_ms == 10000
        assert metrics.avg_gc_ms == 300
        assert metrics.gc_cpu_ratio == pytest.approx(0.03)
        assert metrics.has_samples is True

    def test_integer_truncation(self, task_factory):
        """Test averages truncate rather than round"""
        tasks = [task_factory("task_0", 1, 1, 1), task_factory("task_1", 2, 2, 2)]
        metrics = AggregateMetrics.from_tasks(tasks, vertex_count=1)

        assert metrics.avg_runtime_ms == 1
        assert metrics.avg_cpu_ms == 1
        assert metrics.avg_gc_ms == 1

    def test_all_unsampled(self, task_factory):
        """Test unsampled tasks count but average to 0"""
        tasks = [task_factory("task_0", 500, 400, 30, sampled=False)] * 4
        metrics = AggregateMetrics.from_tasks(tasks, vertex_count=2)

        assert metrics.vertex_count == 2
        assert metrics.task_count == 4
        assert metrics.sampled_task_count == 0
        assert (metrics.avg_runtime_ms, metrics.avg_cpu_ms, metrics.avg_gc_ms) == (0, 0, 0)
        assert metrics.gc_cpu_ratio == 0.0
        assert metrics.has_samples is False

    def test_empty(self):
        """Test no tasks at all"""
        metrics = AggregateMetrics.from_tasks([], vertex_count=0)
        assert metrics.task_count == 0
        assert metrics.gc_cpu_ratio == 0.0

    def test_immutability(self):
        """Test aggregates cannot be modified"""
        metrics = AggregateMetrics.from_tasks([], vertex_count=0)
        with pytest.raises(AttributeError):
            metrics.avg_gc_ms = 5  # type: ignore[misc]
