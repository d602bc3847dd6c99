"""A dynamic array that calls retain and release hooks on its items."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from cospdf.errors import InvalidArgumentError, OutOfRangeError


@dataclass(frozen=True)
class ArrayCallbacks:
    """Hooks run when items enter or leave an array, and how to compare them."""

    retain: Callable[[Any], None] | None = None
    release: Callable[[Any], None] | None = None
    equal: Callable[[Any, Any], bool] | None = None


class CallbackArray:
    """An ordered, growable sequence that retains items it stores and releases removed ones."""

    def __init__(self, callbacks: ArrayCallbacks | None = None, capacity_hint: int = 0) -> None:
        if capacity_hint < 0:
            raise InvalidArgumentError("capacity hint must not be negative")
        self._callbacks = callbacks if callbacks is not None else ArrayCallbacks()
        self._items: list[Any] = []
        self._capacity = capacity_hint

    @property
    def callbacks(self) -> ArrayCallbacks:
        """The item hooks of this array."""
        return self._callbacks

    @property
    def count(self) -> int:
        """The number of items held."""
        return len(self._items)

    @property
    def capacity(self) -> int:
        """The number of items that fit without growing."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        equal = self._callbacks.equal or operator.eq
        return any(equal(existing, item) for existing in self._items)

    def __repr__(self) -> str:
        return f"CallbackArray({self._items!r})"

    def _grow_to(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity * 2)

    def _retain(self, item: Any) -> None:
        if self._callbacks.retain is not None:
            self._callbacks.retain(item)

    def _release(self, item: Any) -> None:
        if self._callbacks.release is not None:
            self._callbacks.release(item)

    def _check_index(self, index: int, limit: int) -> int:
        index = operator.index(index)
        if not 0 <= index < limit:
            raise OutOfRangeError(f"index {index} is out of range")
        return index

    def get_item(self, index: int) -> Any:
        """The item at ``index``."""
        return self._items[self._check_index(index, len(self._items))]

    def insert_item(self, index: int, item: Any) -> None:
        """Insert ``item`` before position ``index`` (which may equal the count)."""
        self.insert_items(index, [item])

    def append_item(self, item: Any) -> None:
        """Add ``item`` to the end."""
        self.insert_items(len(self._items), [item])

    def insert_items(self, index: int, items: Iterable[Any]) -> None:
        """Insert all of ``items`` before position ``index``."""
        index = self._check_index(index, len(self._items) + 1)
        new_items = list(items)
        self._grow_to(len(self._items) + len(new_items))
        for item in new_items:
            self._retain(item)
        self._items[index:index] = new_items

    def append_items(self, items: Iterable[Any]) -> None:
        """Add all of ``items`` to the end."""
        self.insert_items(len(self._items), items)

    def remove_item(self, index: int) -> None:
        """Remove and release the item at ``index``."""
        self.remove_items(index, 1)

    def remove_last_item(self) -> None:
        """Remove and release the last item."""
        if not self._items:
            raise OutOfRangeError("array is empty")
        self.remove_items(len(self._items) - 1, 1)

    def remove_items(self, index: int, count: int) -> None:
        """Remove and release ``count`` items starting at ``index``."""
        index = operator.index(index)
        count = operator.index(count)
        if index < 0 or count < 0 or index + count > len(self._items):
            raise OutOfRangeError("range is out of bounds")
        removed = self._items[index:index + count]
        del self._items[index:index + count]
        for item in removed:
            self._release(item)

    def push_last_item(self, item: Any) -> None:
        """Add ``item`` to the end."""
        self.append_item(item)

    def pop_last_item(self) -> Any:
        """Remove the last item and hand it to the caller without releasing it."""
        if not self._items:
            raise OutOfRangeError("array is empty")
        return self._items.pop()

    def clear(self) -> None:
        """Remove and release every item."""
        items, self._items = self._items, []
        for item in items:
            self._release(item)