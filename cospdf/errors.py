"""Error codes and the exceptions raised for them."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """The kinds of error the library reports."""

    NONE = 0
    INVALID_ARGUMENT = 1
    INVALID_STATE = 2
    OUT_OF_RANGE = 3
    IO = 4
    SYNTAX = 5
    PARSE = 6
    XREF = 7
    MEMORY = 8
    NOT_IMPLEMENTED = 9
    UNKNOWN = 10


class CosError(Exception):
    """Base class of all library errors; carries an error code and a message."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str = "", code: ErrorCode | int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = ErrorCode(code)

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(CosError, ValueError):
    """An argument had an unacceptable value."""

    code = ErrorCode.INVALID_ARGUMENT


class InvalidStateError(CosError):
    """An operation was attempted in a state that does not allow it."""

    code = ErrorCode.INVALID_STATE


class OutOfRangeError(CosError, IndexError):
    """An index or range lay outside the valid bounds."""

    code = ErrorCode.OUT_OF_RANGE


class CosIOError(CosError):
    """Reading or writing failed."""

    code = ErrorCode.IO


class SyntaxCosError(CosError):
    """The input was not well-formed."""

    code = ErrorCode.SYNTAX


class ParseError(CosError):
    """The input could not be parsed."""

    code = ErrorCode.PARSE


class XrefError(CosError):
    """A cross-reference table was malformed."""

    code = ErrorCode.XREF


_CLASS_FOR_CODE: dict[ErrorCode, type[CosError]] = {
    ErrorCode.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorCode.INVALID_STATE: InvalidStateError,
    ErrorCode.OUT_OF_RANGE: OutOfRangeError,
    ErrorCode.IO: CosIOError,
    ErrorCode.SYNTAX: SyntaxCosError,
    ErrorCode.PARSE: ParseError,
    ErrorCode.XREF: XrefError,
}


def error_for(code: ErrorCode | int, message: str) -> CosError | None:
    """Build the exception matching ``code``; ``None`` for ``ErrorCode.NONE``."""
    code = ErrorCode(code)
    if code is ErrorCode.NONE:
        return None
    cls = _CLASS_FOR_CODE.get(code, CosError)
    return cls(message, code=code)


def raise_for(code: ErrorCode | int, message: str) -> None:
    """Raise the exception matching ``code``; do nothing for ``ErrorCode.NONE``."""
    error = error_for(code, message)
    if error is not None:
        raise error