"""
Error Handling Utility Module

Reusable error handling patterns for tolerated failures. Both helpers log
with structured context so a skipped record or a rejected parameter can be
traced back to its input.

1. log_and_continue() - Log error and continue execution (skip one item)
2. log_and_return_default() - Log error and return a default value
"""

import logging
from typing import Any


def log_and_continue(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> None:
    """
    Log an error with structured context and continue execution gracefully.

    Use this when a single item in a batch is malformed and the rest of the
    batch should still be processed.

    Args:
        logger: Logger instance from get_logger(__name__)
        error: The caught exception
        context: Structured data about what failed (task_id, vertex, etc.)
        error_type: Human-readable description of the operation

    Example:
        for raw in raw_tasks:
            try:
                tasks.append(TaskData.from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                log_and_continue(logger, e, {"vertex": name}, "Task parsing")
                continue
    """
    logger.warning(
        f"{error_type} failed: {error}",
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
        },
    )


def log_and_return_default(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    default_value: Any = None,
    error_type: str = "Operation",
) -> Any:
    """
    Log an error and return a default value.

    Use this when a function should fall back to a default rather than raise.

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        default_value: Value to return on error (None, [], {}, etc.)
        error_type: Human-readable description

    Returns:
        default_value

    Example:
        try:
            return parse_thresholds(raw)
        except ValueError as e:
            return log_and_return_default(
                logger, e,
                context={"param": "gc_ratio_severity", "value": raw},
                default_value=None,
                error_type="Threshold parsing"
            )
    """
    logger.warning(
        f"{error_type} failed, returning default value: {error}",
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
            "default_value": str(default_value),
        },
    )
    return default_value
