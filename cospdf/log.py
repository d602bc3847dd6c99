"""Leveled logging through a pluggable log function."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable
from typing import Any


class LogLevel(enum.IntEnum):
    """How much a log context lets through."""

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    TRACE = 5


class LogMessageLevel(enum.IntEnum):
    """The severity of one message."""

    FATAL = LogLevel.FATAL
    ERROR = LogLevel.ERROR
    WARNING = LogLevel.WARNING
    INFO = LogLevel.INFO
    TRACE = LogLevel.TRACE


LogFunc = Callable[["LogContext", LogMessageLevel, str], None]


class LogContext:
    """Formats messages and passes those at or above its level to a log function."""

    def __init__(self, level: LogLevel | int, log_func: LogFunc, user_data: Any = None) -> None:
        self._level = LogLevel(level)
        self.log_func = log_func
        self.user_data = user_data

    @property
    def level(self) -> LogLevel:
        """The most verbose message level let through."""
        return self._level

    @level.setter
    def level(self, value: LogLevel | int) -> None:
        self._level = LogLevel(value)

    def log(self, message_level: LogMessageLevel | int, fmt: str, *args: Any) -> None:
        """Format ``fmt`` printf-style with ``args`` and pass it on if the level allows."""
        message_level = LogMessageLevel(message_level)
        if self._level is LogLevel.NONE or message_level > self._level:
            return
        message = fmt % args if args else fmt
        self.log_func(self, message_level, message)

    def fatal(self, fmt: str, *args: Any) -> None:
        """Log a fatal message."""
        self.log(LogMessageLevel.FATAL, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        """Log an error message."""
        self.log(LogMessageLevel.ERROR, fmt, *args)

    def warning(self, fmt: str, *args: Any) -> None:
        """Log a warning message."""
        self.log(LogMessageLevel.WARNING, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        """Log an informational message."""
        self.log(LogMessageLevel.INFO, fmt, *args)

    def trace(self, fmt: str, *args: Any) -> None:
        """Log a trace message."""
        self.log(LogMessageLevel.TRACE, fmt, *args)


def _write_to_stderr(context: LogContext, message_level: LogMessageLevel, message: str) -> None:
    sys.stderr.write(f"{message_level.name.lower()}: {message}\n")


_default_context = LogContext(LogLevel.WARNING, _write_to_stderr)


def get_default_log_context() -> LogContext:
    """The shared log context that writes to standard error."""
    return _default_context