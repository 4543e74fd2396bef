"""
Heuristic Configuration

Provides the configuration record handed to every heuristic at construction
time: the heuristic's display name, its implementing class, and a read-only
map of string parameters (threshold lists and switches).

Usage:
    from jobhealth.config import HeuristicConfigurationData, load_configuration_from_env

    conf = HeuristicConfigurationData(
        heuristic_name="Tez GC",
        class_name="jobhealth.heuristics.gc_heuristic.GCHeuristic",
        params={"gc_ratio_severity": "0.01, 0.02, 0.03, 0.04"},
    )

    # Or from JOBHEALTH_* environment variables / a .env file
    conf = load_configuration_from_env(heuristic_name="Tez GC", class_name="...")

Threshold values themselves are validated leniently by the heuristic that
reads them. Only structurally broken configuration raises ConfigurationError.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "JOBHEALTH_"


class ConfigurationError(Exception):
    """Raised when heuristic configuration is structurally invalid."""

    pass


@dataclass(frozen=True)
class HeuristicConfigurationData:
    """
    Configuration for a single heuristic.

    Attributes:
        heuristic_name: Display name used in results and log lines
        class_name: Fully qualified name of the heuristic class
        view_name: Optional name of the view that renders this heuristic's results
        app_type: Application type the heuristic applies to (e.g., "TEZ")
        params: Read-only mapping of parameter name to raw string value
    """

    heuristic_name: str
    class_name: str
    view_name: str = ""
    app_type: str = "TEZ"
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()
        # Private read-only copy
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def _validate(self) -> None:
        """
        Validate structural configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.heuristic_name or not self.heuristic_name.strip():
            raise ConfigurationError("heuristic_name is required")

        if not self.class_name or not self.class_name.strip():
            raise ConfigurationError(f"class_name is required for heuristic '{self.heuristic_name}'")

        if not isinstance(self.params, Mapping):
            raise ConfigurationError(
                f"params for heuristic '{self.heuristic_name}' must be a mapping, got {type(self.params).__name__}"
            )

        for key, value in self.params.items():
            if not isinstance(key, str):
                raise ConfigurationError(f"Parameter names must be strings, got {key!r}")
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"Parameter '{key}' must be a string, got {type(value).__name__}")

    def get_param(self, name: str) -> str | None:
        """Return the raw parameter value, or None if absent."""
        return self.params.get(name)


def load_configuration_from_env(
    heuristic_name: str,
    class_name: str,
    env_file: Path | None = None,
    prefix: str = ENV_PREFIX,
    **kwargs: str,
) -> HeuristicConfigurationData:
    """
    Build heuristic configuration from environment variables.

    Every variable named ``<prefix><PARAM>`` becomes parameter ``<param>``
    (lower-cased), e.g. ``JOBHEALTH_GC_RATIO_SEVERITY=0.01,0.02,0.03,0.04``
    becomes ``gc_ratio_severity``. Values in an optional .env file are loaded
    first; real environment variables take precedence.

    Args:
        heuristic_name: Display name for the heuristic
        class_name: Fully qualified heuristic class name
        env_file: Optional path to a .env file (defaults to python-dotenv discovery)
        prefix: Environment variable prefix
        **kwargs: Passed through to HeuristicConfigurationData (view_name, app_type)

    Returns:
        HeuristicConfigurationData with collected parameters
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    params = {
        key[len(prefix) :].lower(): value
        for key, value in os.environ.items()
        if key.startswith(prefix) and len(key) > len(prefix)
    }
    logger.debug(f"Loaded {len(params)} parameters for {heuristic_name} from environment")

    return HeuristicConfigurationData(
        heuristic_name=heuristic_name,
        class_name=class_name,
        params=params,
        **kwargs,
    )
