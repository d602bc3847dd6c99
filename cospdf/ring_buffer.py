"""A double-ended queue with a tracked capacity."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterator
from typing import Any

from cospdf.errors import InvalidArgumentError, OutOfRangeError


class RingBuffer:
    """Items may be pushed and popped at either end."""

    def __init__(self, capacity_hint: int = 0) -> None:
        if capacity_hint < 0:
            raise InvalidArgumentError("capacity hint must not be negative")
        self._items: deque[Any] = deque()
        self._capacity = capacity_hint

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

    def __repr__(self) -> str:
        return f"RingBuffer({list(self._items)!r})"

    def _grow_to(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity * 2)

    def _require_items(self) -> None:
        if not self._items:
            raise OutOfRangeError("ring buffer is empty")

    def get_item(self, index: int) -> Any:
        """The item at ``index``, counting from the front."""
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise OutOfRangeError(f"index {index} is out of range")
        return self._items[index]

    def first(self) -> Any:
        """The front item."""
        self._require_items()
        return self._items[0]

    def last(self) -> Any:
        """The back item."""
        self._require_items()
        return self._items[-1]

    def push_front(self, item: Any) -> None:
        """Add ``item`` at the front."""
        self._grow_to(len(self._items) + 1)
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._grow_to(len(self._items) + 1)
        self._items.append(item)

    def pop_front(self) -> Any:
        """Remove and return the front item."""
        self._require_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back item."""
        self._require_items()
        return self._items.pop()