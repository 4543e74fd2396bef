"""
Tests for the Severity enumeration

Tests ordering, min/max and ascending threshold classification.
"""

import itertools

import pytest

from jobhealth.domain.severity import Severity

LIMITS = (0.01, 0.02, 0.03, 0.04)


class TestOrdering:
    """Tests for severity ordering and lookup"""

    def test_values(self):
        """Test severity integer values"""
        assert [int(severity) for severity in Severity] == [0, 1, 2, 3, 4]

    def test_ascending_order(self):
        """Test NONE < LOW < MODERATE < SEVERE < CRITICAL"""
        assert Severity.NONE < Severity.LOW < Severity.MODERATE < Severity.SEVERE < Severity.CRITICAL

    def test_text(self):
        """Test display labels"""
        assert Severity.NONE.text == "None"
        assert Severity.MODERATE.text == "Moderate"
        assert Severity.CRITICAL.text == "Critical"

    def test_from_value(self):
        """Test lookup by integer value"""
        assert Severity.from_value(3) is Severity.SEVERE

    def test_from_value_unknown(self):
        """Test unknown values raise ValueError"""
        with pytest.raises(ValueError, match="Unknown severity value: 7"):
            Severity.from_value(7)


class TestMinMax:
    """Tests for Severity.min and Severity.max"""

    def test_min(self):
        """Test min returns the less severe level"""
        assert Severity.min(Severity.SEVERE, Severity.LOW) is Severity.LOW

    def test_max(self):
        """Test max returns the more severe level"""
        assert Severity.max(Severity.SEVERE, Severity.LOW) is Severity.SEVERE

    def test_min_requires_arguments(self):
        """Test min with no severities raises ValueError"""
        with pytest.raises(ValueError):
            Severity.min()

    def test_min_commutative(self):
        """Test min(a, b) == min(b, a)"""
        for a, b in itertools.product(Severity, repeat=2):
            assert Severity.min(a, b) is Severity.min(b, a)

    def test_min_associative(self):
        """Test min(min(a, b), c) == min(a, min(b, c))"""
        for a, b, c in itertools.product(Severity, repeat=3):
            assert Severity.min(Severity.min(a, b), c) is Severity.min(a, Severity.min(b, c))

    def test_min_idempotent(self):
        """Test min(a, a) == a"""
        for severity in Severity:
            assert Severity.min(severity, severity) is severity

    def test_none_and_critical_bounds(self):
        """Test NONE absorbs min and CRITICAL is the identity for min"""
        for severity in Severity:
            assert Severity.min(Severity.NONE, severity) is Severity.NONE
            assert Severity.min(Severity.CRITICAL, severity) is severity
            assert Severity.max(Severity.CRITICAL, severity) is Severity.CRITICAL


class TestAscendingClassification:
    """Tests for Severity.get_severity_ascending"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (-5.0, Severity.NONE),
            (0.0, Severity.NONE),
            (0.0099, Severity.NONE),
            (0.01, Severity.LOW),
            (0.015, Severity.LOW),
            (0.02, Severity.MODERATE),
            (0.03, Severity.SEVERE),
            (0.0399, Severity.SEVERE),
            (0.04, Severity.CRITICAL),
            (100.0, Severity.CRITICAL),
        ],
    )
    def test_boundaries_inclusive_below(self, value, expected):
        """Test each boundary belongs to the level above it"""
        assert Severity.get_severity_ascending(value, *LIMITS) is expected

    def test_monotonic_in_value(self):
        """Test classification never decreases as the value grows"""
        values = [-1.0, 0.0, 0.005, 0.01, 0.012, 0.02, 0.029, 0.03, 0.035, 0.04, 0.5, 10.0]
        severities = [Severity.get_severity_ascending(value, *LIMITS) for value in values]
        assert severities == sorted(severities)

    def test_none_iff_below_first_boundary(self):
        """Test NONE exactly when value < first boundary"""
        for value in [-1.0, 0.0, 0.009, 0.01, 0.011, 1.0]:
            is_none = Severity.get_severity_ascending(value, *LIMITS) is Severity.NONE
            assert is_none == (value < LIMITS[0])

    def test_equal_boundaries_skip_levels(self):
        """Test equal boundaries collapse intermediate levels"""
        assert Severity.get_severity_ascending(5, 5, 5, 10, 10) is Severity.MODERATE
        assert Severity.get_severity_ascending(10, 5, 5, 10, 10) is Severity.CRITICAL

    def test_zero_first_boundary(self):
        """Test a zero first boundary makes zero LOW"""
        assert Severity.get_severity_ascending(0, 0, 1, 2, 3) is Severity.LOW
