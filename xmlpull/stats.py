"""Summary statistics over a stream of reader events."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from xmlpull.common import XmlVersion
from xmlpull.events import (
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    StartDocument,
    StartElement,
    XmlEvent,
)
from xmlpull.namespace import NS_EMPTY_URI, NS_XML_URI, NS_XMLNS_URI

_BUILT_IN_URIS = frozenset({NS_EMPTY_URI, NS_XMLNS_URI, NS_XML_URI})


def _byte_length(s: str) -> int:
    return len(s.encode("utf-8"))


@dataclass
class DocumentStats:
    """Counts gathered from one document's events.

    Character counts are measured in UTF-8 bytes.
    """

    version: XmlVersion | None = None
    encoding: str | None = None
    standalone: bool | None = None
    finished: bool = False
    elements: int = 0
    max_depth: int = 0
    namespaces: set[str] = field(default_factory=set)
    characters: int = 0
    character_blocks: int = 0
    cdata_blocks: int = 0
    comment_blocks: int = 0
    comment_characters: int = 0
    processing_instructions: int = 0

    def report(self) -> str:
        """A human-readable summary, one fact per line."""
        lines = []
        if self.version is not None:
            standalone = "" if self.standalone else "not "
            lines.append(
                f"XML document version {self.version}, encoded in {self.encoding}, "
                f"{standalone}standalone"
            )
        if self.finished:
            lines.append("Document finished")
        lines.append(f"Elements: {self.elements}, maximum depth: {self.max_depth}")
        lines.append(f"Namespaces (excluding built-in): {len(self.namespaces)}")
        lines.append(
            f"Characters: {self.characters}, characters blocks: {self.character_blocks}, "
            f"CDATA blocks: {self.cdata_blocks}"
        )
        lines.append(
            f"Comment blocks: {self.comment_blocks}, "
            f"comment characters: {self.comment_characters}"
        )
        lines.append(
            f"Processing instructions (excluding built-in): {self.processing_instructions}"
        )
        return "\n".join(lines)


def analyze_events(events: Iterable[XmlEvent]) -> DocumentStats:
    """Gather statistics from a stream of events.

    Whitespace events are not counted; errors raised by the stream propagate.
    """
    stats = DocumentStats()
    depth = 0
    for event in events:
        match event:
            case StartDocument(version=version, encoding=encoding, standalone=standalone):
                stats.version = version
                stats.encoding = encoding
                stats.standalone = standalone
            case EndDocument():
                stats.finished = True
            case ProcessingInstruction():
                stats.processing_instructions += 1
            case Characters(data=data):
                stats.character_blocks += 1
                stats.characters += _byte_length(data)
            case CData(data=data):
                stats.cdata_blocks += 1
                stats.characters += _byte_length(data)
            case Comment(data=data):
                stats.comment_blocks += 1
                stats.comment_characters += _byte_length(data)
            case StartElement(namespace=namespace):
                depth += 1
                stats.max_depth = max(stats.max_depth, depth)
                stats.elements += 1
                stats.namespaces.update(namespace.mappings.values())
            case EndElement():
                depth -= 1
    stats.namespaces -= _BUILT_IN_URIS
    return stats