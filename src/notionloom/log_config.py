# notionloom/log_config.py
"""Logging configuration for the notionloom library using Loguru.

This module provides a centralized function to configure the Loguru logger,
the `LogLevel` enumeration accepted by the client, and the `RequestLogger`
protocol through which the client reports the start and end of each request.
"""

import sys
from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol

from loguru import logger


class LogLevel(str, Enum):
    """Severity levels accepted by the client's `log_level` option."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @classmethod
    def _missing_(cls, value: object) -> "LogLevel | None":
        # Accept "INFO", "Warn", and the loguru spelling "warning".
        if isinstance(value, str):
            lowered = value.lower()
            if lowered == "warning":
                return cls.WARN
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @property
    def loguru_name(self) -> str:
        """The name of the matching Loguru level."""
        return "WARNING" if self is LogLevel.WARN else self.name


_SEVERITY: dict[LogLevel, int] = {
    LogLevel.DEBUG: 20,
    LogLevel.INFO: 40,
    LogLevel.WARN: 60,
    LogLevel.ERROR: 80,
}


class RequestLogger(Protocol):
    """Protocol for the sink that receives request start/end events."""

    def log(self, level: LogLevel, message: str, fields: Mapping[str, Any]) -> None:
        """Emit one log event.

        Args:
            level: Severity of the event.
            message: Short message, e.g. "request start".
            fields: Structured fields attached to the event (method, path, ...).
        """
        ...


class LoguruRequestLogger:
    """Default `RequestLogger` that filters by a minimum level and writes to Loguru.

    Lines are formatted as ``{identifier} {level}: {message} {fields}`` and the
    fields are also bound to the record as Loguru extras.
    """

    def __init__(self, identifier: str, level: LogLevel = LogLevel.WARN):
        self._identifier = identifier
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level.severity >= self._level.severity

    def log(self, level: LogLevel, message: str, fields: Mapping[str, Any]) -> None:
        if not self.is_enabled_for(level):
            return
        logger.bind(**fields).log(
            level.loguru_name,
            f"{self._identifier} {level.value}: {message} {dict(fields)}",
        )


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures Loguru logger.

    Removes default handlers and adds a new one with the specified level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "file.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=True,
    )
    logger.debug(f"Loguru logger configured with level={level.upper()} writing to {sink}")
