"""Tagged numeric values: integer, long integer or real."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1


class NumberType(enum.Enum):
    """Which kind of value a :class:`Number` holds."""

    INTEGER = enum.auto()
    LONG_INTEGER = enum.auto()
    REAL = enum.auto()


def _checked_int(value: int, low: int, high: int, kind: str) -> int:
    number = operator.index(value)
    if not low <= number <= high:
        raise OverflowError(f"{number} does not fit in a {kind}")
    return number


@dataclass(frozen=True)
class Number:
    """A number together with its kind."""

    type: NumberType
    value: int | float

    @staticmethod
    def integer(value: int) -> Number:
        """A 32-bit signed integer number."""
        return Number(NumberType.INTEGER, _checked_int(value, INT_MIN, INT_MAX, "integer"))

    @staticmethod
    def long_integer(value: int) -> Number:
        """A 64-bit signed integer number."""
        return Number(
            NumberType.LONG_INTEGER,
            _checked_int(value, LLONG_MIN, LLONG_MAX, "long integer"),
        )

    @staticmethod
    def real(value: float) -> Number:
        """A floating-point number."""
        return Number(NumberType.REAL, float(value))