"""Nodes of the parsed object tree."""

from __future__ import annotations

import enum
import operator

from cospdf.data import Data
from cospdf.errors import InvalidArgumentError
from cospdf.objid import ObjID

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class NodeType(enum.Enum):
    """The kind of a node."""

    UNKNOWN = 0
    ARRAY = 1
    DICTIONARY = 2
    STREAM = 3
    INDIRECT = 4
    REFERENCE = 5
    NULL = 6
    BOOLEAN = 7
    INTEGER = 8
    REAL = 9
    STRING = 10
    NAME = 11


class Node:
    """A node of the object tree, with a type and an optional parent."""

    def __init__(self, node_type: NodeType = NodeType.UNKNOWN) -> None:
        self._type = NodeType(node_type)
        self._parent: Node | None = None

    @property
    def type(self) -> NodeType:
        """The kind of this node."""
        return self._type

    @property
    def parent(self) -> Node | None:
        """The node that holds this one, if any."""
        return self._parent

    def _adopt(self, child: Node | None) -> None:
        if child is not None:
            child._parent = self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self._type.name})"

    def is_bool(self) -> bool:
        """Whether this is a boolean node."""
        return self._type is NodeType.BOOLEAN

    def is_number(self) -> bool:
        """Whether this is an integer or real node."""
        return self._type in (NodeType.INTEGER, NodeType.REAL)

    def is_integer(self) -> bool:
        """Whether this is an integer node."""
        return self._type is NodeType.INTEGER

    def is_real(self) -> bool:
        """Whether this is a real node."""
        return self._type is NodeType.REAL

    def is_string(self) -> bool:
        """Whether this is a string node."""
        return self._type is NodeType.STRING

    def is_name(self) -> bool:
        """Whether this is a name node."""
        return self._type is NodeType.NAME

    def is_array(self) -> bool:
        """Whether this is an array node."""
        return self._type is NodeType.ARRAY

    def is_dict(self) -> bool:
        """Whether this is a dictionary node."""
        return self._type is NodeType.DICTIONARY

    def is_stream(self) -> bool:
        """Whether this is a stream node."""
        return self._type is NodeType.STREAM

    def is_indirect(self) -> bool:
        """Whether this is an indirect object node."""
        return self._type is NodeType.INDIRECT

    def is_reference(self) -> bool:
        """Whether this is a reference node."""
        return self._type is NodeType.REFERENCE

    def is_null(self) -> bool:
        """Whether this is a null node."""
        return self._type is NodeType.NULL


class BoolNode(Node):
    """A boolean value."""

    def __init__(self, value: bool) -> None:
        super().__init__(NodeType.BOOLEAN)
        self._value = bool(value)

    @property
    def value(self) -> bool:
        """The boolean value."""
        return self._value

    def __repr__(self) -> str:
        return f"BoolNode({self._value!r})"


class IntegerNode(Node):
    """A 32-bit signed integer value."""

    def __init__(self, value: int) -> None:
        super().__init__(NodeType.INTEGER)
        number = operator.index(value)
        if not _INT_MIN <= number <= _INT_MAX:
            raise OverflowError(f"{number} does not fit in an integer node")
        self._value = number

    @property
    def value(self) -> int:
        """The integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"IntegerNode({self._value!r})"


class IndirectNode(Node):
    """An indirect object: an identifier and the value it names."""

    def __init__(self, id: ObjID, value: Node | None = None) -> None:
        super().__init__(NodeType.INDIRECT)
        if not isinstance(id, ObjID):
            raise InvalidArgumentError("id must be an ObjID")
        self._id = id
        self._value = value
        self._adopt(value)

    @property
    def id(self) -> ObjID:
        """The object identifier."""
        return self._id

    @property
    def value(self) -> Node | None:
        """The node the identifier names."""
        return self._value

    def __repr__(self) -> str:
        return f"IndirectNode({self._id!r}, {self._value!r})"


class StreamNode(Node):
    """A stream: a dictionary node plus encoded data."""

    def __init__(self, dict: Node | None, data: Data | bytes | bytearray | memoryview) -> None:
        super().__init__(NodeType.STREAM)
        if dict is not None and not dict.is_dict():
            raise InvalidArgumentError("stream dictionary must be a dictionary node")
        self._dict = dict
        self._data = data if isinstance(data, Data) else Data(data)
        self._adopt(dict)

    @property
    def dict(self) -> Node | None:
        """The stream dictionary."""
        return self._dict

    @property
    def data(self) -> Data:
        """The encoded stream data."""
        return self._data

    def __repr__(self) -> str:
        return f"StreamNode(length={len(self._data)})"