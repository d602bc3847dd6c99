import pytest

from cospdf.errors import InvalidArgumentError
from cospdf.strings import TextBuffer, compare_refs, strlcpy, strndup


def test_empty_buffer_has_no_data():
    buffer = TextBuffer()
    assert buffer.data is None
    assert buffer.length == 0


def test_append_and_push_back():
    buffer = TextBuffer("Type")
    buffer.append("/")
    buffer.push_back("X")
    assert str(buffer) == "Type" + "/" + "X"
    assert buffer.length == len("Type/X")
    assert buffer.data == str(buffer)


@pytest.mark.parametrize("char", ["", "ab"])
def test_push_back_requires_one_character(char):
    with pytest.raises(InvalidArgumentError):
        TextBuffer().push_back(char)


def test_capacity_never_below_length():
    buffer = TextBuffer(capacity_hint=2)
    for char in "abcdefghij":
        buffer.push_back(char)
        assert buffer.capacity >= buffer.length


def test_copy_is_independent():
    buffer = TextBuffer("Font")
    clone = buffer.copy()
    clone.append("Name")
    assert buffer == "Font"
    assert clone == "FontName"


def test_compare_refs_ordering():
    assert compare_refs("abc", "abd") < 0
    assert compare_refs("abd", "abc") > 0
    assert compare_refs("same", "same") == 0


def test_compare_refs_prefix_sorts_first():
    assert compare_refs("ab", "abc") < 0


def test_compare_refs_accepts_buffers_and_none():
    assert compare_refs(TextBuffer("Root"), "Root") == 0
    assert compare_refs(None, "") == 0
    assert compare_refs(None, "x") < 0


def test_strlcpy_truncates_to_fit_terminator():
    assert strlcpy("hello", 3) == "he"
    assert strlcpy("hello", 100) == "hello"


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ""


def test_strlcpy_negative_size():
    with pytest.raises(InvalidArgumentError):
        strlcpy("hello", -1)


def test_strndup_limits_length():
    text = "duplicate"
    assert strndup(text, 4) == text[:4]
    assert strndup(text, 50) == text


def test_strndup_stops_at_nul():
    assert strndup("abc\0def", 10) == "abc"


def test_strndup_negative_count():
    with pytest.raises(InvalidArgumentError):
        strndup("abc", -2)