"""A hash table whose key hashing, comparison and ownership are set by callbacks."""

from __future__ import annotations

import builtins
import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from cospdf.errors import InvalidArgumentError


@dataclass(frozen=True)
class KeyCallbacks:
    """How keys are hashed and compared, and hooks run as they enter and leave."""

    hash: Callable[[Any], int] = builtins.hash
    retain: Callable[[Any], None] | None = None
    release: Callable[[Any], None] | None = None
    equal: Callable[[Any, Any], bool] = operator.eq


@dataclass(frozen=True)
class ValueCallbacks:
    """Hooks run as values enter and leave, and how values are compared."""

    retain: Callable[[Any], None] | None = None
    release: Callable[[Any], None] | None = None
    equal: Callable[[Any, Any], bool] | None = None


class HashDict:
    """A mapping from keys to values driven by key and value callbacks."""

    def __init__(
        self,
        key_callbacks: KeyCallbacks | None = None,
        value_callbacks: ValueCallbacks | None = None,
    ) -> None:
        self._keys = key_callbacks if key_callbacks is not None else KeyCallbacks()
        self._values = value_callbacks if value_callbacks is not None else ValueCallbacks()
        self._buckets: dict[int, list[list[Any]]] = {}
        self._count = 0

    @property
    def count(self) -> int:
        """The number of entries."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def _find(self, key: Any) -> tuple[int, list[Any] | None]:
        key_hash = self._keys.hash(key)
        for entry in self._buckets.get(key_hash, ()):
            if self._keys.equal(entry[0], key):
                return key_hash, entry
        return key_hash, None

    def get(self, key: Any) -> Any:
        """The value stored for ``key``, or ``None`` when there is none."""
        _, entry = self._find(key)
        return None if entry is None else entry[1]

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` for ``key``, replacing and releasing any previous value."""
        if key is None or value is None:
            raise InvalidArgumentError("keys and values must not be None")
        key_hash, entry = self._find(key)
        if entry is not None:
            old_value = entry[1]
            if old_value is value:
                return
            if self._values.retain is not None:
                self._values.retain(value)
            entry[1] = value
            if self._values.release is not None:
                self._values.release(old_value)
            return
        if self._keys.retain is not None:
            self._keys.retain(key)
        if self._values.retain is not None:
            self._values.retain(value)
        self._buckets.setdefault(key_hash, []).append([key, value])
        self._count += 1

    def __getitem__(self, key: Any) -> Any:
        _, entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return self._find(key)[1] is not None

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def items(self) -> list[tuple[Any, Any]]:
        """All ``(key, value)`` pairs."""
        return [(entry[0], entry[1]) for bucket in self._buckets.values() for entry in bucket]

    def clear(self) -> None:
        """Remove every entry, releasing its key and value."""
        entries = self.items()
        self._buckets = {}
        self._count = 0
        for key, value in entries:
            if self._keys.release is not None:
                self._keys.release(key)
            if self._values.release is not None:
                self._values.release(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashDict):
            return NotImplemented
        if len(self) != len(other):
            return False
        equal = self._values.equal or operator.eq
        for key, value in self.items():
            entry = other._find(key)[1]
            if entry is None or not equal(value, entry[1]):
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HashDict({dict(self.items())!r})"