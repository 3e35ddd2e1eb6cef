"""
Logging configuration for geocheck.

Provides structured logging with configurable log levels and formatted
output for debugging validation runs.

Usage:
    from geocheck.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Dispatching", extra={"type": "Polygon"})
"""

import logging
import sys
import time
from functools import lru_cache
from typing import Any

from geocheck.config import LogSettings

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

STANDARD_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
    'taskName', 'message', 'asctime',
}


class GeoCheckFormatter(logging.Formatter):
    """
    Formats logs with timestamp, level, logger name, and message.

    Extra fields passed through ``extra=`` are appended as key=value pairs.
    """

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        base_message = super().format(record)

        extra_fields = {
            k: v for k, v in record.__dict__.items()
            if k not in STANDARD_ATTRS and not k.startswith('_')
        }

        if extra_fields:
            extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())
            return base_message + extra_str

        return base_message


def get_log_level() -> int:
    """
    Get log level from settings (GEOCHECK_LOG_LEVEL or .env).

    Supports: DEBUG, INFO, WARNING, ERROR, CRITICAL
    Default: INFO
    """
    level_name = LogSettings().log_level
    return LEVELS.get(level_name.upper(), logging.INFO)


@lru_cache(maxsize=None)
def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Loggers are cached to avoid duplicate handlers.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(get_log_level())

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(get_log_level())
        handler.setFormatter(GeoCheckFormatter())

        logger.addHandler(handler)
        logger.propagate = False

    return logger


class ValidationCallLogger:
    """
    Context manager logging one validation entry point call.

    Usage:
        with ValidationCallLogger(logger, "validate_feature") as log:
            result = run(value)
            log.set_result(result)
    """

    def __init__(self, logger: logging.Logger, entry_point: str):
        self.logger = logger
        self.entry_point = entry_point
        self.result: Any = None
        self._start_time: float = 0

    def __enter__(self) -> "ValidationCallLogger":
        self._start_time = time.perf_counter()
        self.logger.debug(
            f"'{self.entry_point}' called",
            extra={"entry_point": self.entry_point},
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed_ms = (time.perf_counter() - self._start_time) * 1000

        if exc_val is not None:
            self.logger.error(
                f"'{self.entry_point}' failed: {exc_val}",
                extra={"entry_point": self.entry_point, "elapsed_ms": f"{elapsed_ms:.2f}"},
                exc_info=True,
            )
            return False

        self.logger.debug(
            f"'{self.entry_point}' completed",
            extra={
                "entry_point": self.entry_point,
                "elapsed_ms": f"{elapsed_ms:.2f}",
                "result": self._summarize_result(self.result),
            },
        )
        return False

    def set_result(self, result: Any) -> None:
        """Set the result for logging."""
        self.result = result

    def _summarize_result(self, result: Any) -> str:
        if result is None:
            return "None"
        if getattr(result, "valid", None) is True:
            return "valid"
        errors = getattr(result, "errors", None)
        if errors is not None:
            summary = f"invalid errors={len(errors)}"
            if getattr(result, "truncated", False):
                summary += " truncated"
            return summary
        return type(result).__name__
