"""
Severity - ordered health classification for heuristic findings

Severity levels are totally ordered (NONE < LOW < MODERATE < SEVERE <
CRITICAL) and compare as integers, so ``min``/``max`` and sorting behave
naturally.

Threshold classification is ascending: larger values are worse (GC ratio,
runtime).
"""

import builtins
from enum import IntEnum


class Severity(IntEnum):
    """
    Severity of a heuristic finding.

    Example:
        >>> Severity.get_severity_ascending(0.035, 0.01, 0.02, 0.03, 0.04)
        <Severity.SEVERE: 3>
        >>> Severity.min(Severity.SEVERE, Severity.LOW)
        <Severity.LOW: 1>
    """

    NONE = 0
    LOW = 1
    MODERATE = 2
    SEVERE = 3
    CRITICAL = 4

    @property
    def text(self) -> str:
        """Display label, e.g. "Moderate"."""
        return self.name.capitalize()

    @classmethod
    def from_value(cls, value: int) -> "Severity":
        """
        Look up a severity by its integer value.

        Raises:
            ValueError: If value is not a known severity
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown severity value: {value}") from None

    @classmethod
    def min(cls, *severities: "Severity") -> "Severity":
        """Return the least severe of the given severities."""
        if not severities:
            raise ValueError("Severity.min() requires at least one severity")
        return cls(builtins.min(severities))

    @classmethod
    def max(cls, *severities: "Severity") -> "Severity":
        """Return the most severe of the given severities."""
        if not severities:
            raise ValueError("Severity.max() requires at least one severity")
        return cls(builtins.max(severities))

    @classmethod
    def get_severity_ascending(
        cls,
        value: float,
        low: float,
        moderate: float,
        severe: float,
        critical: float,
    ) -> "Severity":
        """
        Classify a value where larger is worse.

        Boundaries are inclusive on the lower side:
            value < low              -> NONE
            low <= value < moderate  -> LOW
            moderate <= value < severe -> MODERATE
            severe <= value < critical -> SEVERE
            value >= critical        -> CRITICAL

        Args:
            value: Observed value
            low, moderate, severe, critical: Non-decreasing boundaries

        Returns:
            Severity for the value
        """
        if value >= critical:
            return cls.CRITICAL
        if value >= severe:
            return cls.SEVERE
        if value >= moderate:
            return cls.MODERATE
        if value >= low:
            return cls.LOW
        return cls.NONE
