"""Entries of a cross-reference table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

_UINT_MAX = 2**32 - 1


class XrefEntryType(enum.Enum):
    """The kind of a cross-reference entry."""

    FREE = 0
    IN_USE = 1
    COMPRESSED = 2


def _check_fields(entry: object, *names: str) -> None:
    for name in names:
        value = getattr(entry, name)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an integer")
        if not 0 <= value <= _UINT_MAX:
            raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class FreeEntry:
    """An entry for an object number that is not in use."""

    next_free_obj_number: int
    gen_number: int

    def __post_init__(self) -> None:
        _check_fields(self, "next_free_obj_number", "gen_number")

    @property
    def type(self) -> XrefEntryType:
        """Always :attr:`XrefEntryType.FREE`."""
        return XrefEntryType.FREE


@dataclass(frozen=True)
class InUseEntry:
    """An entry for an object stored at a byte offset in the file."""

    byte_offset: int
    gen_number: int

    def __post_init__(self) -> None:
        _check_fields(self, "byte_offset", "gen_number")

    @property
    def type(self) -> XrefEntryType:
        """Always :attr:`XrefEntryType.IN_USE`."""
        return XrefEntryType.IN_USE


@dataclass(frozen=True)
class CompressedEntry:
    """An entry for an object stored inside an object stream."""

    obj_stream_number: int
    obj_stream_index: int

    def __post_init__(self) -> None:
        _check_fields(self, "obj_stream_number", "obj_stream_index")

    @property
    def type(self) -> XrefEntryType:
        """Always :attr:`XrefEntryType.COMPRESSED`."""
        return XrefEntryType.COMPRESSED


XrefEntry = Union[FreeEntry, InUseEntry, CompressedEntry]