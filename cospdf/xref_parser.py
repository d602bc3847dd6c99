"""Parsing of classic cross-reference tables."""

from __future__ import annotations

import re
from typing import Protocol

from cospdf.errors import XrefError
from cospdf.objid import OBJ_NUMBER_MAX
from cospdf.stream_reader import StreamReader
from cospdf.xref_entry import FreeEntry, InUseEntry, XrefEntry
from cospdf.xref_table import XrefSection, XrefSubsection

#: The fixed size in bytes of one table entry, end-of-line marker included.
ENTRY_SIZE = 20
_FIRST_NUMBER_SIZE = 10
_SECOND_NUMBER_SIZE = 5

_UINT_MAX = 2**32 - 1
_WHITESPACE = frozenset(b" \t\r\n\f\0")
_SPACES = frozenset(b" \t")
_DIGITS = frozenset(b"0123456789")
_CR = ord("\r")
_LF = ord("\n")
_SPACE = ord(" ")


class _ReadableStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...

    def tell(self) -> int: ...


class XrefTableParser:
    """Reads cross-reference sections, subsections and entries from a stream."""

    def __init__(self, input_stream: _ReadableStream, strict: bool = False) -> None:
        self._reader = StreamReader(input_stream)
        self.strict = strict

    # Entries

    def read_entry(self) -> XrefEntry:
        """Read one fixed-size table entry."""
        raw = bytearray()
        while len(raw) < ENTRY_SIZE:
            byte = self._reader.getc()
            if byte is None:
                raise XrefError("table entry is truncated")
            raw.append(byte)
        data = bytes(raw)

        first, pos = self._read_entry_item(data, 0, _FIRST_NUMBER_SIZE)
        second, pos = self._read_entry_item(data, pos, _SECOND_NUMBER_SIZE)

        if pos >= len(data):
            raise XrefError("table entry is missing a keyword")
        keyword = chr(data[pos])
        if keyword == "n":
            return InUseEntry(first, second)
        if keyword == "f":
            return FreeEntry(first, second)
        raise XrefError("table entry has an invalid keyword")

    def _read_entry_item(self, data: bytes, pos: int, required_length: int) -> tuple[int, int]:
        match = re.compile(rb"\d{1,%d}" % required_length).match(data, pos)
        if match is None:
            raise XrefError("table entry item is missing")
        digits = match.group()
        if len(digits) != required_length and self.strict:
            raise XrefError("table entry item is invalid")
        number = int(digits)
        if number > _UINT_MAX:
            raise XrefError("table entry item is out of range")
        pos = match.end()
        if pos >= len(data) or data[pos] != _SPACE:
            raise XrefError("table entry is missing a space separator")
        return number, pos + 1

    # Subsections

    def read_subsection_header(self) -> tuple[int, int] | None:
        """Read a ``first count`` header line, or return ``None`` if no header follows."""
        self._skip(_WHITESPACE)
        first = self._read_decimal()
        if first is None:
            return None
        if first > OBJ_NUMBER_MAX:
            raise XrefError("subsection header has an invalid object number")
        if not self._skip(_SPACES):
            raise XrefError("subsection header is missing a space separator")
        count = self._read_decimal()
        if count is None:
            raise XrefError("subsection header is missing the entry count")
        self._skip(_SPACES)
        self._read_end_of_line()
        return first, count

    def parse_subsection(self) -> XrefSubsection | None:
        """Read a subsection header and its entries, or return ``None`` if none follows."""
        header = self.read_subsection_header()
        if header is None:
            return None
        first, count = header
        subsection = XrefSubsection(first, count)
        for index in range(count):
            subsection.set_entry(index, self.read_entry())
        return subsection

    def parse_section(self) -> XrefSection:
        """Read consecutive subsections into one section."""
        section = XrefSection()
        while (subsection := self.parse_subsection()) is not None:
            section.add_subsection(subsection)
        return section

    # Low-level helpers

    def _skip(self, allowed: frozenset[int]) -> bool:
        skipped = False
        while (byte := self._reader.peek()) is not None and byte in allowed:
            self._reader.getc()
            skipped = True
        return skipped

    def _read_decimal(self) -> int | None:
        digits = bytearray()
        while (byte := self._reader.peek()) is not None and byte in _DIGITS:
            digits.append(byte)
            self._reader.getc()
        return int(digits) if digits else None

    def _read_end_of_line(self) -> None:
        byte = self._reader.getc()
        if byte is None or byte == _LF:
            return
        if byte == _CR:
            if self._reader.peek() == _LF:
                self._reader.getc()
            return
        raise XrefError("subsection header is not followed by an end of line")