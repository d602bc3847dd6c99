"""A growable byte buffer."""

from __future__ import annotations

from cospdf.errors import InvalidArgumentError, OutOfRangeError


class Data:
    """A mutable sequence of bytes with a tracked capacity."""

    def __init__(self, initial: bytes | bytearray | memoryview = b"", capacity_hint: int = 0) -> None:
        if capacity_hint < 0:
            raise InvalidArgumentError("capacity hint must not be negative")
        self._buffer = bytearray(initial)
        self._capacity = max(capacity_hint, len(self._buffer))

    @property
    def size(self) -> int:
        """The number of bytes held."""
        return len(self._buffer)

    @property
    def capacity(self) -> int:
        """The number of bytes that fit without growing."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Data):
            return self._buffer == other._buffer
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._buffer == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Data({bytes(self._buffer)!r})"

    def _grow_to(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity * 2)

    def copy(self) -> Data:
        """An independent copy of this buffer."""
        return Data(self._buffer, capacity_hint=self._capacity)

    def get_range(self, offset: int, length: int) -> bytes:
        """The ``length`` bytes starting at ``offset``."""
        if offset < 0 or length < 0 or offset + length > len(self._buffer):
            raise OutOfRangeError("range is out of bounds")
        return bytes(self._buffer[offset:offset + length])

    def reserve(self, capacity: int) -> None:
        """Make room for at least ``capacity`` bytes."""
        if capacity < 0:
            raise InvalidArgumentError("capacity must not be negative")
        if capacity > self._capacity:
            self._capacity = capacity

    def reset(self) -> None:
        """Drop all bytes, keeping the capacity."""
        self._buffer.clear()

    def append(self, data: bytes | bytearray | memoryview) -> None:
        """Add ``data`` to the end."""
        chunk = bytes(data)
        self._grow_to(len(self._buffer) + len(chunk))
        self._buffer += chunk

    def push_back(self, byte: int) -> None:
        """Add a single byte to the end."""
        if not 0 <= byte <= 255:
            raise InvalidArgumentError(f"not a byte value: {byte}")
        self._grow_to(len(self._buffer) + 1)
        self._buffer.append(byte)

    def get_ref(self) -> bytes:
        """A snapshot of the current contents."""
        return bytes(self._buffer)