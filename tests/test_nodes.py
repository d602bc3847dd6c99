import pytest

from cospdf.data import Data
from cospdf.errors import InvalidArgumentError
from cospdf.nodes import BoolNode, IndirectNode, IntegerNode, Node, NodeType, StreamNode
from cospdf.objid import ObjID

_PREDICATES = {
    NodeType.ARRAY: "is_array",
    NodeType.DICTIONARY: "is_dict",
    NodeType.STREAM: "is_stream",
    NodeType.INDIRECT: "is_indirect",
    NodeType.REFERENCE: "is_reference",
    NodeType.NULL: "is_null",
    NodeType.BOOLEAN: "is_bool",
    NodeType.INTEGER: "is_integer",
    NodeType.REAL: "is_real",
    NodeType.STRING: "is_string",
    NodeType.NAME: "is_name",
}


@pytest.mark.parametrize("node_type", list(_PREDICATES))
def test_exactly_one_type_predicate_holds(node_type):
    node = Node(node_type)
    results = {name: getattr(node, name)() for name in _PREDICATES.values()}
    assert [name for name, value in results.items() if value] == [_PREDICATES[node_type]]


@pytest.mark.parametrize(
    "node_type,expected",
    [(NodeType.INTEGER, True), (NodeType.REAL, True), (NodeType.STRING, False)],
)
def test_is_number(node_type, expected):
    assert Node(node_type).is_number() is expected


def test_unknown_node_matches_nothing():
    node = Node()
    assert node.type is NodeType.UNKNOWN
    assert not any(getattr(node, name)() for name in _PREDICATES.values())


def test_bool_node():
    node = BoolNode(True)
    assert node.value is True
    assert node.type is NodeType.BOOLEAN
    assert node.is_bool()
    assert node.parent is None


def test_integer_node():
    node = IntegerNode(42)
    assert node.value == 42
    assert node.is_integer() and node.is_number()


def test_integer_node_limits():
    assert IntegerNode(2**31 - 1).value == 2**31 - 1
    assert IntegerNode(-(2**31)).value == -(2**31)
    with pytest.raises(OverflowError):
        IntegerNode(2**31)


def test_indirect_node_adopts_value():
    value = IntegerNode(7)
    node = IndirectNode(ObjID(3, 0), value)
    assert node.id == ObjID(3, 0)
    assert node.value is value
    assert value.parent is node
    assert node.is_indirect()


def test_indirect_node_without_value():
    node = IndirectNode(ObjID(1))
    assert node.value is None


def test_indirect_node_rejects_bad_id():
    with pytest.raises(InvalidArgumentError):
        IndirectNode((1, 0))


def test_stream_node():
    dictionary = Node(NodeType.DICTIONARY)
    node = StreamNode(dictionary, b"abc")
    assert node.dict is dictionary
    assert dictionary.parent is node
    assert node.data == b"abc"
    assert node.is_stream()


def test_stream_node_keeps_data_object():
    data = Data(b"xyz")
    node = StreamNode(Node(NodeType.DICTIONARY), data)
    assert node.data is data


def test_stream_node_rejects_non_dict():
    with pytest.raises(InvalidArgumentError):
        StreamNode(IntegerNode(1), b"")