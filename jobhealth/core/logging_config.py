"""
Logging setup for the heuristics.

Heuristics log through get_logger(__name__). Threshold and skipped-record
lines carry structured fields (see log_with_context), which JSONFormatter
writes as top-level keys.

Importing this module does not touch the root logger. Applications that
embed the heuristics call setup_logging() once at startup.

Usage:
    from jobhealth.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Thresholds loaded", extra={"extra_fields": {"heuristic": "GC"}})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with structured fields merged in."""

    # Set by log_and_continue() / log_and_return_default()
    ERROR_FIELDS = ("error_type", "exception_class", "context", "default_value")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed through log_with_context()
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        for key in self.ERROR_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """Console formatter; colors the level name when stderr is a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color coding"""
        levelname = record.levelname
        if sys.stderr.isatty():
            color = self.COLORS.get(levelname, "")
            record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_output: bool = False,
) -> None:
    """
    Route heuristic logs to the console and, optionally, a JSON log file.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output (always JSON)
        json_output: If True, use JSON formatter on the console as well

    Example:
        setup_logging(level="DEBUG")

        setup_logging(
            level="INFO",
            log_file=Path(".tmp/logs/jobhealth.log"),
            json_output=True
        )
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ContextFormatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFormatter())

        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: Module name (use __name__ in calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **context: Additional context fields (key-value pairs)

    Example:
        log_with_context(
            logger,
            "info",
            "Thresholds loaded",
            heuristic="Tez GC",
            gc_ratio_severity=[0.01, 0.02, 0.03, 0.04],
        )
    """
    log_func = getattr(logger, level.lower())
    log_func(message, extra={"extra_fields": context})
