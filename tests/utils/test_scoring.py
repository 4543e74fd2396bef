"""
Tests for heuristic scoring
"""

import pytest

from jobhealth.domain.severity import Severity
from jobhealth.utils.scoring import get_heuristic_score


class TestGetHeuristicScore:
    """Tests for get_heuristic_score()"""

    def test_weights_by_task_count(self):
        """Test score is severity value times task count"""
        assert get_heuristic_score(Severity.MODERATE, 10) == 20
        assert get_heuristic_score(Severity.CRITICAL, 3) == 12

    def test_none_scores_zero(self):
        """Test NONE always scores 0"""
        assert get_heuristic_score(Severity.NONE, 1000) == 0

    def test_no_tasks_scores_zero(self):
        """Test zero tasks scores 0 whatever the severity"""
        assert get_heuristic_score(Severity.SEVERE, 0) == 0

    def test_monotonic_in_severity(self):
        """Test higher severity never scores lower for the same task count"""
        scores = [get_heuristic_score(severity, 7) for severity in Severity]
        assert scores == sorted(scores)

    def test_negative_task_count(self):
        """Test negative task counts are rejected"""
        with pytest.raises(ValueError):
            get_heuristic_score(Severity.LOW, -1)
