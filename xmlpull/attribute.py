"""XML attributes."""

from __future__ import annotations

from dataclasses import dataclass

from xmlpull.escape import escape_str_attribute
from xmlpull.name import Name


@dataclass(frozen=True)
class Attribute:
    """An attribute: a qualified name and a string value."""

    name: Name
    value: str

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            object.__setattr__(self, "name", Name.from_str(self.name))

    def __str__(self) -> str:
        return f'{self.name}="{escape_str_attribute(self.value)}"'