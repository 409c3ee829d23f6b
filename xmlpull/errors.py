"""Errors reported while parsing an XML document."""

from __future__ import annotations

import enum
from typing import Any

from xmlpull.common import TextPosition

_UNEXPECTED_EOF_MESSAGE = "Unexpected EOF"


class ErrorKind(enum.Enum):
    """The reason a parse failed."""

    SYNTAX = "syntax"
    """The document is ill-formed."""

    IO = "io"
    """The underlying stream reported an error."""

    UTF8 = "utf8"
    """The document contains bytes that are not valid UTF-8."""

    UNEXPECTED_EOF = "unexpected_eof"
    """The document ended while elements, comments or the like were still open."""


def _copy_position(source: Any) -> TextPosition:
    pos = source.position
    return TextPosition(pos.row, pos.column)


class ParseError(Exception):
    """An XML parsing error: a position in the document and a reason.

    ``detail`` is the syntax message for :attr:`ErrorKind.SYNTAX`, the original
    exception for :attr:`ErrorKind.IO` and :attr:`ErrorKind.UTF8`, and unused for
    :attr:`ErrorKind.UNEXPECTED_EOF`.
    """

    def __init__(self, position: Any, kind: ErrorKind, detail: Any = None) -> None:
        self.position = _copy_position(position)
        self.kind = kind
        self.detail = detail
        super().__init__(self._render())

    @classmethod
    def syntax(cls, position: Any, message: str) -> ParseError:
        """An ill-formed document error with a message."""
        return cls(position, ErrorKind.SYNTAX, message)

    @classmethod
    def io(cls, position: Any, error: BaseException) -> ParseError:
        """An error raised by the underlying stream."""
        return cls(position, ErrorKind.IO, error)

    @classmethod
    def unexpected_eof(cls, position: Any) -> ParseError:
        """The document ended too early."""
        return cls(position, ErrorKind.UNEXPECTED_EOF)

    def msg(self) -> str:
        """The message describing this error, without the position."""
        if self.kind is ErrorKind.UNEXPECTED_EOF:
            return _UNEXPECTED_EOF_MESSAGE
        return str(self.detail)

    def _render(self) -> str:
        return f"{self.position} {self.msg()}"

    def __str__(self) -> str:
        return self._render()

    def _key(self) -> tuple[Any, ...]:
        if self.kind in (ErrorKind.IO, ErrorKind.UTF8):
            detail: Any = (type(self.detail), str(self.detail))
        elif self.kind is ErrorKind.SYNTAX:
            detail = self.detail
        else:
            detail = None
        return (self.position.row, self.position.column, self.kind, detail)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.position.row, self.position.column, self.kind, self.msg()))

    def __repr__(self) -> str:
        return (
            f"ParseError(position={self.position!s}, kind={self.kind.name}, "
            f"msg={self.msg()!r})"
        )