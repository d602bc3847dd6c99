import pytest

from cospdf.number import INT_MAX, INT_MIN, LLONG_MAX, LLONG_MIN, Number, NumberType


def test_integer_number():
    number = Number.integer(42)
    assert number.type is NumberType.INTEGER
    assert number.value == 42


def test_integer_limits_accepted():
    assert Number.integer(INT_MAX).value == INT_MAX
    assert Number.integer(INT_MIN).value == INT_MIN


@pytest.mark.parametrize("value", [INT_MAX + 1, INT_MIN - 1])
def test_integer_overflow(value):
    with pytest.raises(OverflowError):
        Number.integer(value)


def test_integer_rejects_float():
    with pytest.raises(TypeError):
        Number.integer(1.5)


def test_long_integer_number():
    number = Number.long_integer(INT_MAX + 1)
    assert number.type is NumberType.LONG_INTEGER
    assert number.value == INT_MAX + 1


@pytest.mark.parametrize("value", [LLONG_MAX + 1, LLONG_MIN - 1])
def test_long_integer_overflow(value):
    with pytest.raises(OverflowError):
        Number.long_integer(value)


def test_real_number_is_float():
    number = Number.real(3)
    assert number.type is NumberType.REAL
    assert isinstance(number.value, float)
    assert number.value == 3.0


def test_numbers_compare_by_type_and_value():
    assert Number.integer(5) == Number.integer(5)
    assert Number.integer(5) != Number.long_integer(5)