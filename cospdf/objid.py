"""Indirect object identifiers."""

from __future__ import annotations

from dataclasses import dataclass

#: Largest byte offset within a stream.
STREAM_OFFSET_MAX = 2**63 - 1

#: Largest object number.
OBJ_NUMBER_MAX = 2**32 - 1

#: Largest generation number; once reached, the object number is never reused.
GEN_NUMBER_MAX = 65535

_UINT_MAX = 2**32 - 1


@dataclass(frozen=True, order=True)
class ObjID:
    """An object number and generation number pair naming an indirect object."""

    obj_number: int
    gen_number: int = 0

    def __post_init__(self) -> None:
        for name in ("obj_number", "gen_number"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer")
            if not 0 <= value <= _UINT_MAX:
                raise ValueError(f"{name} out of range: {value}")

    def is_valid(self) -> bool:
        """Whether the object number is greater than zero."""
        return self.obj_number > 0

    def compare(self, other: ObjID) -> int:
        """Return -1, 0 or 1 as this ID is less than, equal to or greater than ``other``."""
        return (self > other) - (self < other)


#: The identifier that names no object.
INVALID_OBJ_ID = ObjID(0, 0)