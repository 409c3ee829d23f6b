"""An insertion-ordered collection of attributes with fast name lookup."""

from __future__ import annotations

from collections.abc import Iterator

from xmlpull.attribute import Attribute
from xmlpull.name import Name


class AttributesSet:
    """Attributes kept in insertion order, with membership tested by name."""

    def __init__(self) -> None:
        self._attributes: list[Attribute] = []
        self._names: set[Name] = set()

    def push(self, attr: Attribute) -> None:
        """Append an attribute."""
        self._attributes.append(attr)
        self._names.add(attr.name)

    def to_list(self) -> list[Attribute]:
        """The attributes in insertion order."""
        return list(self._attributes)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._attributes)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attributes)