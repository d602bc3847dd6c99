import pytest

from cospdf.errors import (
    CosError,
    CosIOError,
    ErrorCode,
    InvalidArgumentError,
    InvalidStateError,
    OutOfRangeError,
    ParseError,
    SyntaxCosError,
    XrefError,
    error_for,
    raise_for,
)


@pytest.mark.parametrize(
    "code, cls",
    [
        (ErrorCode.INVALID_ARGUMENT, InvalidArgumentError),
        (ErrorCode.INVALID_STATE, InvalidStateError),
        (ErrorCode.OUT_OF_RANGE, OutOfRangeError),
        (ErrorCode.IO, CosIOError),
        (ErrorCode.SYNTAX, SyntaxCosError),
        (ErrorCode.PARSE, ParseError),
        (ErrorCode.XREF, XrefError),
    ],
)
def test_error_for_maps_code_to_class(code, cls):
    error = error_for(code, "problem")
    assert type(error) is cls
    assert error.code is code
    assert error.message == "problem"


@pytest.mark.parametrize(
    "code", [ErrorCode.MEMORY, ErrorCode.NOT_IMPLEMENTED, ErrorCode.UNKNOWN]
)
def test_error_for_other_codes_uses_base_class(code):
    error = error_for(code, "other")
    assert type(error) is CosError
    assert error.code is code


def test_error_for_none_gives_nothing():
    assert error_for(ErrorCode.NONE, "ignored") is None


def test_raise_for_none_does_not_raise():
    assert raise_for(ErrorCode.NONE, "ignored") is None


def test_raise_for_out_of_range_is_index_error():
    with pytest.raises(IndexError, match="Index out of range"):
        raise_for(ErrorCode.OUT_OF_RANGE, "Index out of range")


def test_raise_for_invalid_argument_is_value_error():
    with pytest.raises(ValueError, match="bad"):
        raise_for(ErrorCode.INVALID_ARGUMENT, "bad")


def test_raise_for_accepts_plain_int():
    with pytest.raises(XrefError):
        raise_for(int(ErrorCode.XREF), "table entry is missing a keyword")


def test_unknown_integer_code_rejected():
    with pytest.raises(ValueError):
        error_for(999, "nope")


def test_message_is_string_form():
    error = ParseError("unexpected token")
    assert str(error) == "unexpected token"
    assert error.code is ErrorCode.PARSE


def test_explicit_code_overrides_class_code():
    error = CosError("x", code=ErrorCode.MEMORY)
    assert error.code is ErrorCode.MEMORY
    assert CosError("y").code is ErrorCode.UNKNOWN