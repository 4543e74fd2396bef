"""
Heuristic result models

A HeuristicResult is what a heuristic hands to the reporting layer: the
final severity, a score, and an ordered list of human-readable details.
Formatting and persistence belong to the consumer.
"""

from dataclasses import dataclass, field
from typing import Any

from .severity import Severity


@dataclass(frozen=True)
class HeuristicResultDetail:
    """
    A single labelled value in a heuristic result.

    Attributes:
        name: Detail label, e.g. "Avg task GC time (ms)"
        value: String rendering of the value
    """

    name: str
    value: str


@dataclass
class HeuristicResult:
    """
    Outcome of applying one heuristic to one job.

    Attributes:
        heuristic_class: Fully qualified class name of the heuristic
        heuristic_name: Display name of the heuristic
        severity: Final severity
        score: Severity weighted by the number of tasks examined
        details: Ordered detail entries

    Example:
        result = HeuristicResult("pkg.GCHeuristic", "Tez GC", Severity.LOW, 12)
        result.add_result_detail("Number of tasks", "12")
        result.get_detail("Number of tasks")  # "12"
    """

    heuristic_class: str
    heuristic_name: str
    severity: Severity
    score: int
    details: list[HeuristicResultDetail] = field(default_factory=list)

    def add_result_detail(self, name: str, value: str) -> None:
        """Append a detail entry, keeping insertion order."""
        self.details.append(HeuristicResultDetail(name=name, value=value))

    def get_detail(self, name: str) -> str | None:
        """Return the value of the first detail with this name, or None."""
        for detail in self.details:
            if detail.name == name:
                return detail.value
        return None

    @property
    def detail_names(self) -> list[str]:
        return [detail.name for detail in self.details]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-serialisable dictionary for the result sink.

        Returns:
            Dictionary with heuristic identity, severity label and value,
            score and the ordered details
        """
        return {
            "heuristic_class": self.heuristic_class,
            "heuristic_name": self.heuristic_name,
            "severity": self.severity.text,
            "severity_value": int(self.severity),
            "score": self.score,
            "details": [{"name": detail.name, "value": detail.value} for detail in self.details],
        }
