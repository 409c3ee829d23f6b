"""Parser configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

DEFAULT_MAX_ENTITY_EXPANSION_LENGTH = 1_000_000
"""Default limit on the length of an expanded custom entity."""

DEFAULT_MAX_ENTITY_EXPANSION_DEPTH = 10
"""Default limit on how deeply entities may expand into other entities."""

_MAX_DEPTH_LIMIT = 255

_LIMIT_FIELDS = (
    "max_entity_expansion_length",
    "max_entity_expansion_depth",
    "max_attributes",
    "max_attribute_length",
    "max_data_length",
    "max_name_length",
)


@dataclass(frozen=True)
class ParserConfig:
    """Options that affect how the parser reports a document.

    Instances are immutable; derive changed copies with :meth:`replace` and
    :meth:`add_entity`.

    Attributes:
        trim_whitespace: strip leading and trailing whitespace from text events,
            drop standalone whitespace and text that becomes empty.
        whitespace_to_characters: report whitespace as characters.
        cdata_to_characters: report CDATA sections as characters.
        ignore_comments: do not report comments.
        coalesce_characters: merge consecutive character events.
        extra_entities: additional named entities and their replacement text.
        ignore_end_of_stream: allow pulling more events after an end of stream.
        replace_unknown_entity_references: replace character references that
            are not valid code points with U+FFFD instead of failing.
        ignore_root_level_whitespace: do not report whitespace outside elements.
        override_encoding: encoding to assume for the document, if any.
        ignore_invalid_encoding_declarations: treat unsupported declared
            encodings as Latin-1 instead of failing.
        allow_multiple_root_elements: accept documents with several roots.
        max_entity_expansion_length: longest text a custom entity may expand to.
        max_entity_expansion_depth: how many times entities may nest.
        max_attributes: most attributes allowed on one element.
        max_attribute_length: longest attribute value allowed.
        max_data_length: longest text, comment or processing instruction allowed.
        max_name_length: longest element or attribute name allowed.
    """

    trim_whitespace: bool = False
    whitespace_to_characters: bool = False
    cdata_to_characters: bool = False
    ignore_comments: bool = True
    coalesce_characters: bool = True
    extra_entities: dict[str, str] = field(default_factory=dict)
    ignore_end_of_stream: bool = False
    replace_unknown_entity_references: bool = False
    ignore_root_level_whitespace: bool = True
    override_encoding: str | None = None
    ignore_invalid_encoding_declarations: bool = False
    allow_multiple_root_elements: bool = True
    max_entity_expansion_length: int = DEFAULT_MAX_ENTITY_EXPANSION_LENGTH
    max_entity_expansion_depth: int = DEFAULT_MAX_ENTITY_EXPANSION_DEPTH
    max_attributes: int = 1 << 16
    max_attribute_length: int = 1 << 30
    max_data_length: int = 1 << 30
    max_name_length: int = 1 << 18

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for name in _LIMIT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        if self.max_entity_expansion_depth > _MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_entity_expansion_depth must be at most {_MAX_DEPTH_LIMIT}, "
                f"got {self.max_entity_expansion_depth}"
            )
        object.__setattr__(self, "extra_entities", dict(self.extra_entities))

    def add_entity(self, entity: str, value: str) -> ParserConfig:
        """A copy of this configuration that also recognises ``&entity;``."""
        entities = {**self.extra_entities, entity: value}
        return dataclasses.replace(self, extra_entities=entities)

    def replace(self, **kwargs: object) -> ParserConfig:
        """A copy of this configuration with the given options changed."""
        return dataclasses.replace(self, **kwargs)