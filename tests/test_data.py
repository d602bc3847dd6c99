import pytest

from cospdf.data import Data
from cospdf.errors import InvalidArgumentError, OutOfRangeError


def test_append_and_contents():
    data = Data()
    data.append(b"abc")
    data.append(bytearray(b"def"))
    assert bytes(data) == b"abc" + b"def"
    assert data.size == len(b"abcdef")


def test_push_back():
    data = Data(b"ab")
    data.push_back(ord("c"))
    assert data.get_ref() == b"ab" + b"c"


@pytest.mark.parametrize("value", [-1, 256])
def test_push_back_rejects_non_byte(value):
    with pytest.raises(InvalidArgumentError):
        Data().push_back(value)


def test_get_range():
    data = Data(b"hello world")
    assert data.get_range(6, 5) == b"world"
    assert data.get_range(0, 0) == b""


@pytest.mark.parametrize("offset, length", [(0, 12), (11, 1), (-1, 2), (2, -1)])
def test_get_range_out_of_bounds(offset, length):
    with pytest.raises(OutOfRangeError):
        Data(b"hello world").get_range(offset, length)


def test_reserve_increases_capacity_only():
    data = Data(capacity_hint=4)
    data.reserve(100)
    assert data.capacity == 100
    data.reserve(10)
    assert data.capacity == 100


def test_reserve_negative_rejected():
    with pytest.raises(InvalidArgumentError):
        Data().reserve(-5)


def test_capacity_never_below_size():
    data = Data()
    for value in range(50):
        data.push_back(value)
        assert data.capacity >= data.size


def test_reset_keeps_capacity():
    data = Data(b"some bytes")
    capacity = data.capacity
    data.reset()
    assert len(data) == 0
    assert data.capacity == capacity


def test_copy_is_independent():
    data = Data(b"xyz")
    clone = data.copy()
    clone.append(b"!")
    assert data == b"xyz"
    assert clone == b"xyz!"
    assert clone.capacity >= data.capacity


def test_ref_is_snapshot():
    data = Data(b"first")
    ref = data.get_ref()
    data.append(b" second")
    assert ref == b"first"
    assert data.get_ref() == b"first second"


def test_negative_capacity_hint_rejected():
    with pytest.raises(InvalidArgumentError):
        Data(capacity_hint=-1)