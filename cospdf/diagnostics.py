"""Warnings and errors reported to a pluggable handler."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from cospdf.log import LogContext, get_default_log_context


class DiagnosticType(enum.Enum):
    """The severity of a diagnostic."""

    WARNING = enum.auto()
    ERROR = enum.auto()


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem."""

    type: DiagnosticType
    message: str


HandleFunc = Callable[["DiagnosticHandler", Diagnostic], None]


class DiagnosticHandler:
    """Receives diagnostics and passes them to a handle function."""

    def __init__(self, handle_func: HandleFunc, user_data: Any = None) -> None:
        self.handle_func = handle_func
        self.user_data = user_data

    def emit(self, diagnostic: Diagnostic) -> None:
        """Hand ``diagnostic`` to the handle function."""
        self.handle_func(self, diagnostic)

    def diagnose(self, type: DiagnosticType, message: str) -> None:
        """Build a diagnostic from ``type`` and ``message`` and emit it."""
        self.emit(Diagnostic(DiagnosticType(type), message))


def _log_diagnostic(handler: DiagnosticHandler, diagnostic: Diagnostic) -> None:
    context: LogContext = handler.user_data
    if diagnostic.type is DiagnosticType.ERROR:
        context.error("%s", diagnostic.message)
    else:
        context.warning("%s", diagnostic.message)


def logger_handler(log_context: LogContext) -> DiagnosticHandler:
    """A handler that writes diagnostics to ``log_context``."""
    return DiagnosticHandler(_log_diagnostic, user_data=log_context)


_default_handler = logger_handler(get_default_log_context())


def get_default_handler() -> DiagnosticHandler:
    """The shared handler that writes to the default log context."""
    return _default_handler