"""A seekable byte stream held in memory."""

from __future__ import annotations

import io
import operator
import os
from types import TracebackType

from cospdf.errors import InvalidArgumentError, InvalidStateError, OutOfRangeError


class MemoryStream:
    """Reads and writes bytes in an in-memory buffer with a current position."""

    def __init__(self, buffer: bytes | bytearray | memoryview = b"") -> None:
        self._buffer = bytearray(buffer)
        self._position = 0
        self._closed = False

    @property
    def size(self) -> int:
        """The number of bytes in the buffer."""
        return len(self._buffer)

    @property
    def closed(self) -> bool:
        """Whether the stream has been closed."""
        return self._closed

    def __enter__(self) -> MemoryStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"position={self._position}"
        return f"MemoryStream(size={len(self._buffer)}, {state})"

    def _check_open(self) -> None:
        if self._closed:
            raise InvalidStateError("stream is closed")

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left when ``size`` is negative."""
        self._check_open()
        size = operator.index(size)
        available = len(self._buffer) - self._position
        count = available if size < 0 else min(size, available)
        start = self._position
        self._position += count
        return bytes(self._buffer[start:self._position])

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write ``data`` at the current position, growing the buffer as needed."""
        self._check_open()
        chunk = bytes(data)
        end = self._position + len(chunk)
        self._buffer[self._position:end] = chunk
        self._position = end
        return len(chunk)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the position and return it; it must stay within the buffer."""
        self._check_open()
        offset = operator.index(offset)
        if whence == io.SEEK_SET:
            base = 0
        elif whence == io.SEEK_CUR:
            base = self._position
        elif whence == io.SEEK_END:
            base = len(self._buffer)
        else:
            raise InvalidArgumentError(f"invalid whence: {whence}")
        target = base + offset
        if not 0 <= target <= len(self._buffer):
            raise OutOfRangeError(f"position {target} is outside the stream")
        self._position = target
        return target

    def tell(self) -> int:
        """The current position."""
        self._check_open()
        return self._position

    def getvalue(self) -> bytes:
        """The whole buffer."""
        return bytes(self._buffer)

    def close(self) -> None:
        """Close the stream and drop its buffer; closing twice is harmless."""
        if not self._closed:
            self._closed = True
            self._buffer = bytearray()
            self._position = 0