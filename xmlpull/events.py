"""Events emitted while reading an XML document."""

from __future__ import annotations

from dataclasses import dataclass, field

from xmlpull.attribute import Attribute
from xmlpull.common import XmlVersion
from xmlpull.name import Name
from xmlpull.namespace import Namespace


def _debug_str(s: str) -> str:
    escaped = s.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _debug_namespace(namespace: Namespace) -> str:
    body = ", ".join(f"{_debug_str(k)}: {_debug_str(v)}" for k, v in namespace)
    return "{" + body + "}"


def _as_name(value: Name | str) -> Name:
    return Name.from_str(value) if isinstance(value, str) else value


class XmlEvent:
    """Base class of all reader events."""

    __slots__ = ()


@dataclass(frozen=True)
class StartDocument(XmlEvent):
    """The document declaration; emitted first, even if the declaration is absent."""

    version: XmlVersion = XmlVersion.VERSION_10
    encoding: str = "UTF-8"
    standalone: bool | None = None

    def __str__(self) -> str:
        standalone = (
            "None" if self.standalone is None else f"Some({str(self.standalone).lower()})"
        )
        return f"StartDocument({self.version}, {self.encoding}, {standalone})"


@dataclass(frozen=True)
class EndDocument(XmlEvent):
    """The end of the document stream."""

    def __str__(self) -> str:
        return "EndDocument"


@dataclass(frozen=True)
class ProcessingInstruction(XmlEvent):
    """A processing instruction: a target name and optional opaque data."""

    name: str
    data: str | None = None

    def __str__(self) -> str:
        data = f", {self.data}" if self.data is not None else ""
        return f"ProcessingInstruction({self.name}{data})"


@dataclass(frozen=True)
class StartElement(XmlEvent):
    """The start of an element, with its attributes and the namespace mapping in scope."""

    name: Name
    attributes: tuple[Attribute, ...] = ()
    namespace: Namespace = field(default_factory=Namespace)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _as_name(self.name))
        object.__setattr__(self, "attributes", tuple(self.attributes))

    def __str__(self) -> str:
        attrs = ""
        if self.attributes:
            joined = ", ".join(f"{a.name} -> {a.value}" for a in self.attributes)
            attrs = f", [{joined}]"
        return f"StartElement({self.name}, {_debug_namespace(self.namespace)}{attrs})"


@dataclass(frozen=True)
class EndElement(XmlEvent):
    """The end of an element."""

    name: Name

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _as_name(self.name))

    def __str__(self) -> str:
        return f"EndElement({self.name})"


@dataclass(frozen=True)
class CData(XmlEvent):
    """Content of a CDATA section, not unescaped."""

    data: str

    def __str__(self) -> str:
        return f"CData({self.data})"


@dataclass(frozen=True)
class Comment(XmlEvent):
    """A comment."""

    data: str

    def __str__(self) -> str:
        return f"Comment({self.data})"


@dataclass(frozen=True)
class Characters(XmlEvent):
    """Unescaped character data outside of tags."""

    data: str

    def __str__(self) -> str:
        return f"Characters({self.data})"


@dataclass(frozen=True)
class Whitespace(XmlEvent):
    """A run of whitespace outside of tags."""

    data: str

    def __str__(self) -> str:
        return f"Whitespace({self.data})"