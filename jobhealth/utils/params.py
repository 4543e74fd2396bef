"""
Heuristic parameter parsing

Threshold parameters arrive as comma separated strings, for example
``"0.01, 0.02, 0.03, 0.04"``. Parsing is lenient: anything that is not
exactly the expected number of finite numbers yields None and the caller
keeps its built-in defaults.
"""

import math

from jobhealth.core.logging_config import get_logger
from jobhealth.utils.error_handling import log_and_return_default

logger = get_logger(__name__)

PARAM_DELIMITER = ","


def get_param(value: str | None, expected_count: int) -> tuple[float, ...] | None:
    """
    Parse a delimited list of numeric thresholds.

    Args:
        value: Raw parameter string, or None when the parameter is absent
        expected_count: Number of values the list must contain

    Returns:
        Tuple of parsed floats, or None when absent or malformed

    Example:
        >>> get_param("5, 10, 12, 15", 4)
        (5.0, 10.0, 12.0, 15.0)
        >>> get_param("5, 10", 4) is None
        True
    """
    if value is None or not value.strip():
        return None

    try:
        parsed = tuple(float(part.strip()) for part in value.split(PARAM_DELIMITER))
    except ValueError as e:
        return log_and_return_default(
            logger,
            e,
            context={"value": value, "expected_count": expected_count},
            default_value=None,
            error_type="Parameter parsing",
        )

    if len(parsed) != expected_count:
        return log_and_return_default(
            logger,
            ValueError(f"expected {expected_count} values, got {len(parsed)}"),
            context={"value": value, "expected_count": expected_count},
            default_value=None,
            error_type="Parameter parsing",
        )

    if not all(math.isfinite(number) for number in parsed):
        return log_and_return_default(
            logger,
            ValueError("threshold values must be finite"),
            context={"value": value},
            default_value=None,
            error_type="Parameter parsing",
        )

    return parsed


def get_bool_param(value: str | None, default: bool = False) -> bool:
    """
    Parse an on/off switch parameter ("true"/"false", "yes"/"no", "1"/"0").

    Unrecognized values fall back to the default.
    """
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in ("true", "yes", "1", "on"):
        return True
    if normalized in ("false", "no", "0", "off"):
        return False

    logger.warning(f"Unrecognized boolean parameter value {value!r}, using default {default}")
    return default
