"""
Core Infrastructure - Logging and Configuration

Usage:
    from jobhealth.core import get_logger, HeuristicConfigurationData

    logger = get_logger(__name__)
    conf = HeuristicConfigurationData(heuristic_name="GC", class_name="...", params={})
"""

from .logging_config import (
    ContextFormatter,
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)

from ..config import (
    ConfigurationError,
    HeuristicConfigurationData,
    load_configuration_from_env,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "log_with_context",
    "JSONFormatter",
    "ContextFormatter",
    # Configuration
    "ConfigurationError",
    "HeuristicConfigurationData",
    "load_configuration_from_env",
]
