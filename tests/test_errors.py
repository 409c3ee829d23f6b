import pytest

from xmlpull.common import TextPosition
from xmlpull.errors import ErrorKind, ParseError


def test_syntax_error_message_and_kind():
    err = ParseError.syntax(TextPosition(2, 4), "Unexpected end of stream")
    assert err.kind is ErrorKind.SYNTAX
    assert err.msg() == "Unexpected end of stream"


def test_display_prefixes_one_based_position():
    pos = TextPosition(2, 4)
    err = ParseError.syntax(pos, "Entity too big")
    assert str(err) == f"{pos} Entity too big"
    assert str(err).endswith(" Entity too big")


def test_unexpected_eof_message():
    err = ParseError.unexpected_eof(TextPosition())
    assert err.kind is ErrorKind.UNEXPECTED_EOF
    assert err.msg() == "Unexpected EOF"
    assert str(err) == f"{TextPosition()} Unexpected EOF"


def test_io_error_uses_underlying_message():
    cause = OSError("disk failure")
    err = ParseError.io(TextPosition(), cause)
    assert err.kind is ErrorKind.IO
    assert err.msg() == str(cause)
    assert err.detail is cause


def test_position_is_copied():
    pos = TextPosition(1, 1)
    err = ParseError.syntax(pos, "bad")
    pos.new_line()
    assert err.position == TextPosition(1, 1)


def test_position_taken_from_object_with_position():
    first = ParseError.syntax(TextPosition(3, 7), "bad")
    second = ParseError.unexpected_eof(first)
    assert second.position == first.position


def test_equality():
    a = ParseError.syntax(TextPosition(1, 2), "bad")
    b = ParseError.syntax(TextPosition(1, 2), "bad")
    c = ParseError.syntax(TextPosition(1, 3), "bad")
    d = ParseError.syntax(TextPosition(1, 2), "worse")
    assert a == b
    assert hash(a) == hash(b)
    assert not (a == c)
    assert not (a == d)


def test_io_errors_compare_by_type_and_message():
    a = ParseError.io(TextPosition(), OSError("x"))
    b = ParseError.io(TextPosition(), OSError("x"))
    c = ParseError.io(TextPosition(), ValueError("x"))
    assert a == b
    assert not (a == c)


def test_different_kinds_not_equal():
    assert not (
        ParseError.unexpected_eof(TextPosition())
        == ParseError.syntax(TextPosition(), "Unexpected EOF")
    )


def test_is_raisable():
    err = ParseError.syntax(TextPosition(), "Unclosed <![CDATA[")
    assert err.msg() == "Unclosed <![CDATA["
    with pytest.raises(ParseError) as info:
        raise err
    assert info.value is err
    assert info.value.position == TextPosition()