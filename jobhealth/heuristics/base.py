"""
Base Heuristic

Every heuristic is constructed once from its HeuristicConfigurationData,
keeps only immutable state afterwards, and is applied to many job records.
A heuristic returns None for jobs it does not grade (e.g., failed jobs).
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from jobhealth.config import HeuristicConfigurationData
from jobhealth.core.logging_config import get_logger
from jobhealth.domain.result import HeuristicResult

T = TypeVar("T")


class Heuristic(ABC, Generic[T]):
    """Base class for all heuristics

    Subclasses must implement:
    - apply(): Grade one job record and build its HeuristicResult
    """

    def __init__(self, heuristic_conf_data: HeuristicConfigurationData):
        """Initialize heuristic with its configuration

        Args:
            heuristic_conf_data: Name, class and parameters for this heuristic
        """
        self._heuristic_conf_data = heuristic_conf_data
        self.logger = get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @property
    def heuristic_conf_data(self) -> HeuristicConfigurationData:
        return self._heuristic_conf_data

    @property
    def name(self) -> str:
        return self._heuristic_conf_data.heuristic_name

    @abstractmethod
    def apply(self, data: T) -> HeuristicResult | None:
        """Grade one job record

        Args:
            data: Job record to analyse

        Returns:
            HeuristicResult, or None if the record is not graded
        """
        pass
