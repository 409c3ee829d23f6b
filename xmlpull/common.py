"""Text positions, XML versions and character classification helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass
class TextPosition:
    """A zero-based position inside a textual document."""

    row: int = 0
    column: int = 0

    def advance(self, count: int) -> None:
        """Move forward ``count`` columns on the current line."""
        self.column += count

    def advance_to_tab(self, width: int) -> None:
        """Move forward to the next tab stop of the given width."""
        self.column += width - self.column % width

    def new_line(self) -> None:
        """Move to the start of the next line."""
        self.column = 0
        self.row += 1

    @property
    def position(self) -> TextPosition:
        return self

    def __str__(self) -> str:
        return f"{self.row + 1}:{self.column + 1}"


class XmlVersion(enum.Enum):
    """XML version of a document."""

    VERSION_10 = "1.0"
    VERSION_11 = "1.1"

    def __str__(self) -> str:
        return self.value

    def _rank(self) -> int:
        return list(XmlVersion).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, XmlVersion):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, XmlVersion):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, XmlVersion):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, XmlVersion):
            return NotImplemented
        return self._rank() >= other._rank()


def is_whitespace_char(c: str) -> bool:
    """True for the XML white space characters (``S``)."""
    return c in "\x20\x0a\x09\x0d"


def is_whitespace_str(s: str) -> bool:
    """True if every character of ``s`` is XML white space."""
    return all(is_whitespace_char(c) for c in s)


def is_xml10_char(c: str) -> bool:
    """True if ``c`` is allowed in an XML 1.0 document."""
    code = ord(c)
    return (
        code in (0x09, 0x0A, 0x0D)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or code >= 0x10000
    )


def is_xml11_char(c: str) -> bool:
    """True if ``c`` is allowed in an XML 1.1 document."""
    code = ord(c)
    return 0x01 <= code <= 0xD7FF or 0xE000 <= code <= 0xFFFD or code >= 0x10000


_RESTRICTED_11 = ((0x01, 0x08), (0x0B, 0x0C), (0x0E, 0x1F), (0x7F, 0x84), (0x86, 0x9F))


def is_xml11_char_not_restricted(c: str) -> bool:
    """True if ``c`` is an XML 1.1 character outside the restricted set."""
    code = ord(c)
    return is_xml11_char(c) and not any(lo <= code <= hi for lo, hi in _RESTRICTED_11)


_NAME_START_RANGES = (
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x2FF),
    (0x370, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

_NAME_EXTRA_RANGES = ((0x300, 0x36F), (0x203F, 0x2040))


def is_name_start_char(c: str) -> bool:
    """True if ``c`` may start an XML name (``NameStartChar``)."""
    if c == ":" or c == "_" or "A" <= c <= "Z" or "a" <= c <= "z":
        return True
    code = ord(c)
    return any(lo <= code <= hi for lo, hi in _NAME_START_RANGES)


def is_name_char(c: str) -> bool:
    """True if ``c`` may appear inside an XML name (``NameChar``)."""
    if is_name_start_char(c):
        return True
    if c in "-.\u00b7" or "0" <= c <= "9":
        return True
    code = ord(c)
    return any(lo <= code <= hi for lo, hi in _NAME_EXTRA_RANGES)