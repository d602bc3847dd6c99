"""Cross-reference tables, their sections and subsections."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

from cospdf.errors import InvalidArgumentError, OutOfRangeError
from cospdf.objid import OBJ_NUMBER_MAX
from cospdf.xref_entry import XrefEntry


def _checked_index(index: int, limit: int) -> int:
    index = operator.index(index)
    if not 0 <= index < limit:
        raise OutOfRangeError("Index out of range")
    return index


class XrefSubsection:
    """A run of consecutive object numbers and their entries."""

    def __init__(
        self,
        first_object_number: int,
        entry_count: int,
        entries: Iterable[XrefEntry | None] | None = None,
    ) -> None:
        if not 0 <= first_object_number <= OBJ_NUMBER_MAX:
            raise InvalidArgumentError(f"invalid object number: {first_object_number}")
        if entry_count < 0:
            raise InvalidArgumentError("entry count must not be negative")
        self._first_object_number = first_object_number
        self._entry_count = entry_count
        self._entries: list[XrefEntry | None] = list(entries) if entries is not None else []
        if len(self._entries) < entry_count:
            self._entries.extend([None] * (entry_count - len(self._entries)))

    @property
    def first_object_number(self) -> int:
        """The object number of the first entry."""
        return self._first_object_number

    @property
    def entry_count(self) -> int:
        """The number of entries in the subsection."""
        return self._entry_count

    def __len__(self) -> int:
        return self._entry_count

    def __iter__(self) -> Iterator[XrefEntry | None]:
        return iter(self._entries[:self._entry_count])

    def __repr__(self) -> str:
        return f"XrefSubsection(first={self._first_object_number}, count={self._entry_count})"

    def covers(self, object_number: int) -> bool:
        """Whether ``object_number`` falls within this subsection."""
        start = self._first_object_number
        return start <= object_number < start + self._entry_count

    def get_entry(self, index: int) -> XrefEntry | None:
        """The entry at ``index``, or ``None`` if it has not been set."""
        return self._entries[_checked_index(index, self._entry_count)]

    def set_entry(self, index: int, entry: XrefEntry) -> None:
        """Store ``entry`` at ``index``."""
        self._entries[_checked_index(index, self._entry_count)] = entry


class XrefSection:
    """One cross-reference section: an ordered list of subsections."""

    def __init__(self) -> None:
        self._subsections: list[XrefSubsection] = []

    @property
    def subsection_count(self) -> int:
        """The number of subsections."""
        return len(self._subsections)

    def __len__(self) -> int:
        return len(self._subsections)

    def __iter__(self) -> Iterator[XrefSubsection]:
        return iter(list(self._subsections))

    def __repr__(self) -> str:
        return f"XrefSection({self._subsections!r})"

    def add_subsection(self, subsection: XrefSubsection) -> None:
        """Append ``subsection``."""
        if subsection is None:
            raise InvalidArgumentError("subsection must not be None")
        self._subsections.append(subsection)

    def get_subsection(self, index: int) -> XrefSubsection:
        """The subsection at ``index``."""
        return self._subsections[_checked_index(index, len(self._subsections))]


class XrefTable:
    """A cross-reference table made of sections, newest first."""

    def __init__(self) -> None:
        self._sections: list[XrefSection] = []

    @property
    def section_count(self) -> int:
        """The number of sections."""
        return len(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[XrefSection]:
        return iter(list(self._sections))

    def __repr__(self) -> str:
        return f"XrefTable({self._sections!r})"

    def add_section(self, section: XrefSection) -> None:
        """Append ``section``; sections added earlier take precedence."""
        if section is None:
            raise InvalidArgumentError("section must not be None")
        self._sections.append(section)

    def get_section(self, index: int) -> XrefSection:
        """The section at ``index``."""
        return self._sections[_checked_index(index, len(self._sections))]

    def find_entry_for_obj_num(self, object_number: int) -> XrefEntry | None:
        """The first set entry for ``object_number`` across sections, or ``None``."""
        for section in self._sections:
            for subsection in section:
                if subsection.covers(object_number):
                    entry = subsection.get_entry(object_number - subsection.first_object_number)
                    if entry is not None:
                        return entry
        return None