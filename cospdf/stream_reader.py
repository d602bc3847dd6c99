"""Byte-at-a-time reading with peek and one-step push-back over a stream."""

from __future__ import annotations

from typing import Protocol

from cospdf.errors import InvalidArgumentError, InvalidStateError


class _ReadableStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...

    def tell(self) -> int: ...


class StreamReader:
    """Reads single bytes from a stream through an internal buffer."""

    def __init__(self, input_stream: _ReadableStream, chunk_size: int = 4096) -> None:
        if chunk_size < 1:
            raise InvalidArgumentError("chunk size must be positive")
        self._stream = input_stream
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self._index = 0
        self._buffer_start = 0
        self.reset()

    @property
    def position(self) -> int:
        """The stream offset of the next byte to be read."""
        return self._buffer_start + self._index

    def reset(self) -> None:
        """Drop buffered bytes and continue from the stream's current position."""
        self._buffer = bytearray()
        self._index = 0
        self._buffer_start = self._stream.tell()

    def _fill(self) -> bool:
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            return False
        # Keep the last consumed byte so that it can still be pushed back.
        keep = self._buffer[-1:]
        self._buffer_start += len(self._buffer) - len(keep)
        self._buffer = bytearray(keep) + chunk
        self._index = len(keep)
        return True

    def _ensure_available(self) -> bool:
        return self._index < len(self._buffer) or self._fill()

    def getc(self) -> int | None:
        """Read and consume the next byte, or return ``None`` at the end."""
        if not self._ensure_available():
            return None
        byte = self._buffer[self._index]
        self._index += 1
        return byte

    def peek(self) -> int | None:
        """The next byte without consuming it, or ``None`` at the end."""
        if not self._ensure_available():
            return None
        return self._buffer[self._index]

    def ungetc(self) -> None:
        """Step back over the last byte read."""
        if self._index == 0:
            raise InvalidStateError("no byte to push back")
        self._index -= 1