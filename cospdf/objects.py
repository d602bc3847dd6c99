"""Document objects: names, reals, arrays, dictionaries and streams."""

from __future__ import annotations

import enum
import operator
from collections.abc import Iterable, Iterator

from cospdf.data import Data
from cospdf.errors import InvalidArgumentError, OutOfRangeError

#: The stream dictionary key that names a stream's filters.
FILTER_KEY = "Filter"


class ObjValueType(enum.Enum):
    """The kind of value an object holds."""

    UNKNOWN = 0
    BOOLEAN = 1
    INTEGER = 2
    REAL = 3
    STRING = 4
    NAME = 5
    ARRAY = 6
    DICT = 7
    STREAM = 8
    NULL = 9


class Obj:
    """A document object with a value type."""

    def __init__(self, value_type: ObjValueType = ObjValueType.UNKNOWN) -> None:
        self._value_type = ObjValueType(value_type)

    @property
    def type(self) -> ObjValueType:
        """The kind of value this object holds."""
        return self._value_type

    def is_name(self) -> bool:
        """Whether this object is a name."""
        return self._value_type is ObjValueType.NAME

    def __repr__(self) -> str:
        return f"Obj({self._value_type.name})"


def _require_obj(obj: object) -> Obj:
    if not isinstance(obj, Obj):
        raise InvalidArgumentError("expected a document object")
    return obj


class NameObj(Obj):
    """A name, such as ``/Type``; names compare and hash by their text."""

    def __init__(self, value: str) -> None:
        super().__init__(ObjValueType.NAME)
        if not isinstance(value, str):
            raise InvalidArgumentError("a name's value must be a string")
        self._value = value

    @property
    def value(self) -> str:
        """The text of the name, without the leading slash."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NameObj):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return f"/{self._value}"

    def __repr__(self) -> str:
        return f"NameObj({self._value!r})"


class RealObj(Obj):
    """A real number."""

    def __init__(self, value: float) -> None:
        super().__init__(ObjValueType.REAL)
        self._value = float(value)

    @property
    def value(self) -> float:
        """The numeric value."""
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = float(value)

    def __str__(self) -> str:
        return repr(self._value)

    def __repr__(self) -> str:
        return f"RealObj({self._value!r})"


class ArrayObj(Obj):
    """An ordered sequence of objects."""

    def __init__(self, items: Iterable[Obj] | None = None) -> None:
        super().__init__(ObjValueType.ARRAY)
        self._items: list[Obj] = [_require_obj(item) for item in items or ()]

    @property
    def count(self) -> int:
        """The number of objects in the array."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Obj]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ArrayObj({self._items!r})"

    def get_at(self, index: int) -> Obj:
        """The object at ``index``."""
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise OutOfRangeError(f"index {index} is out of range")
        return self._items[index]

    def insert(self, index: int, obj: Obj) -> None:
        """Insert ``obj`` before position ``index`` (which may equal the count)."""
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise OutOfRangeError(f"index {index} is out of range")
        self._items.insert(index, _require_obj(obj))

    def append(self, obj: Obj) -> None:
        """Add ``obj`` to the end."""
        self._items.append(_require_obj(obj))

    def remove_at(self, index: int) -> None:
        """Remove the object at ``index``."""
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise OutOfRangeError(f"index {index} is out of range")
        del self._items[index]


class DictObj(Obj):
    """A mapping from names to objects."""

    def __init__(self, entries: dict[NameObj, Obj] | None = None) -> None:
        super().__init__(ObjValueType.DICT)
        self._entries: dict[NameObj, Obj] = {}
        for key, value in (entries or {}).items():
            self.set(key, value)

    @property
    def count(self) -> int:
        """The number of entries."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NameObj]:
        return iter(list(self._entries))

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            key = NameObj(key)
        return key in self._entries

    def items(self) -> list[tuple[NameObj, Obj]]:
        """All ``(key, value)`` pairs."""
        return list(self._entries.items())

    def __repr__(self) -> str:
        return f"DictObj({self._entries!r})"

    def get_value(self, key: NameObj) -> Obj | None:
        """The value stored for ``key``, or ``None`` when there is none."""
        if not isinstance(key, NameObj):
            raise InvalidArgumentError("dictionary keys must be names")
        return self._entries.get(key)

    def get_value_with_string(self, key: str) -> Obj | None:
        """The value stored for the name spelled ``key``, or ``None``."""
        return self.get_value(NameObj(key))

    def set(self, key: NameObj, value: Obj) -> None:
        """Store ``value`` for ``key``, replacing any previous value."""
        if not isinstance(key, NameObj):
            raise InvalidArgumentError("dictionary keys must be names")
        self._entries[key] = _require_obj(value)


class StreamObj(Obj):
    """A stream: a dictionary describing it and its encoded data."""

    def __init__(self, dict: DictObj, data: Data | bytes | bytearray | memoryview | None = None) -> None:
        super().__init__(ObjValueType.STREAM)
        if not isinstance(dict, DictObj):
            raise InvalidArgumentError("a stream needs a dictionary object")
        self._dict = dict
        if data is None or isinstance(data, Data):
            self._data = data
        else:
            self._data = Data(data)

    @property
    def dict(self) -> DictObj:
        """The stream dictionary."""
        return self._dict

    @property
    def data(self) -> Data | None:
        """The encoded stream data, if any."""
        return self._data

    @property
    def length(self) -> int:
        """The length in bytes of the encoded data."""
        return 0 if self._data is None else len(self._data)

    def __repr__(self) -> str:
        return f"StreamObj(length={self.length})"

    def filter_names(self) -> list[str]:
        """The names of the filters applied to the data, in order; non-names are skipped."""
        value = self._dict.get_value_with_string(FILTER_KEY)
        if value is None:
            return []
        if isinstance(value, NameObj):
            return [value.value]
        if isinstance(value, ArrayObj):
            return [item.value for item in value if isinstance(item, NameObj)]
        return []