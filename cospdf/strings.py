"""A growable text buffer and small string helpers."""

from __future__ import annotations

from cospdf.errors import InvalidArgumentError


class TextBuffer:
    """A mutable string with a tracked capacity."""

    def __init__(self, text: str = "", capacity_hint: int = 0) -> None:
        if capacity_hint < 0:
            raise InvalidArgumentError("capacity hint must not be negative")
        self._text = text
        self._capacity = max(capacity_hint, len(text))

    @property
    def data(self) -> str | None:
        """The text, or ``None`` when empty."""
        return self._text or None

    @property
    def length(self) -> int:
        """The number of characters held."""
        return len(self._text)

    @property
    def capacity(self) -> int:
        """The number of characters that fit without growing."""
        return self._capacity

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"

    def _grow_to(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity * 2)

    def append(self, text: str) -> None:
        """Add ``text`` to the end."""
        self._grow_to(len(self._text) + len(text))
        self._text += text

    def push_back(self, char: str) -> None:
        """Add a single character to the end."""
        if len(char) != 1:
            raise InvalidArgumentError("push_back takes exactly one character")
        self.append(char)

    def copy(self) -> TextBuffer:
        """An independent copy of this buffer."""
        return TextBuffer(self._text, capacity_hint=self._capacity)


def compare_refs(lhs: str | TextBuffer | None, rhs: str | TextBuffer | None) -> int:
    """Return -1, 0 or 1 as ``lhs`` sorts before, equal to or after ``rhs``."""
    left = "" if lhs is None else str(lhs)
    right = "" if rhs is None else str(rhs)
    return (left > right) - (left < right)


def strlcpy(src: str, dest_size: int) -> str:
    """The part of ``src`` that fits a buffer of ``dest_size`` with its terminator."""
    if dest_size < 0:
        raise InvalidArgumentError("destination size must not be negative")
    text = src.split("\0", 1)[0]
    if dest_size == 0:
        return ""
    return text[:dest_size - 1]


def strndup(text: str, n: int) -> str:
    """At most ``n`` characters of ``text``, stopping at any NUL character."""
    if n < 0:
        raise InvalidArgumentError("count must not be negative")
    return text.split("\0", 1)[0][:n]