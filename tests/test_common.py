import pytest

from xmlpull.common import (
    TextPosition,
    XmlVersion,
    is_name_char,
    is_name_start_char,
    is_whitespace_char,
    is_whitespace_str,
    is_xml10_char,
    is_xml11_char,
    is_xml11_char_not_restricted,
)


def test_new_position_displays_one_based():
    assert str(TextPosition()) == "1:1"


def test_advance_moves_column_only():
    pos = TextPosition()
    pos.advance(5)
    assert pos.column == 5
    assert pos.row == 0


def test_new_line_resets_column():
    pos = TextPosition()
    pos.advance(7)
    pos.new_line()
    assert pos.column == 0
    assert pos.row == 1


@pytest.mark.parametrize("start", [0, 1, 3, 4, 7, 8, 9])
def test_advance_to_tab_lands_on_tab_stop(start):
    pos = TextPosition(0, start)
    pos.advance_to_tab(4)
    assert pos.column % 4 == 0
    assert start < pos.column <= start + 4


def test_display_matches_fields():
    pos = TextPosition(2, 9)
    assert str(pos) == f"{pos.row + 1}:{pos.column + 1}"


def test_version_display_and_order():
    looked_up = XmlVersion(XmlVersion.VERSION_11.value)
    assert looked_up is XmlVersion.VERSION_11
    assert str(XmlVersion.VERSION_10) == "1.0"
    assert str(looked_up) == "1.1"
    assert XmlVersion.VERSION_10 < looked_up
    assert max(XmlVersion) is XmlVersion.VERSION_11


def test_whitespace():
    assert all(is_whitespace_char(c) for c in " \n\t\r")
    assert not is_whitespace_char("a")
    assert not is_whitespace_char("\u00a0")
    assert is_whitespace_str(" \t\r\n ")
    assert is_whitespace_str("")
    assert not is_whitespace_str(" x ")


def test_xml10_chars():
    assert is_xml10_char("\t")
    assert is_xml10_char("a")
    assert is_xml10_char("\U0001f600")
    assert not is_xml10_char("\x01")
    assert not is_xml10_char("\ufffe")


def test_xml11_chars():
    assert is_xml11_char("\x01")
    assert not is_xml11_char("\x00")
    assert not is_xml11_char("\ufffe")
    assert not is_xml11_char_not_restricted("\x01")
    assert not is_xml11_char_not_restricted("\x7f")
    assert is_xml11_char_not_restricted("\x85")
    assert is_xml11_char_not_restricted("\n")


def test_name_chars():
    for c in ":_aZ\u00c0\u3001":
        assert is_name_start_char(c)
        assert is_name_char(c)
    for c in "-.9\u00b7\u0300\u2040":
        assert not is_name_start_char(c)
        assert is_name_char(c)
    for c in " <&\u00d7":
        assert not is_name_start_char(c)
        assert not is_name_char(c)