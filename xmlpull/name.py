"""Qualified XML names."""

from __future__ import annotations

from dataclasses import dataclass

_NO_PREFIX = ""


@dataclass(frozen=True)
class Name:
    """A qualified XML name: local name, optional namespace URI and optional prefix."""

    local_name: str
    namespace: str | None = None
    prefix: str | None = None

    @classmethod
    def local(cls, local_name: str) -> Name:
        """A plain local name."""
        return cls(local_name)

    @classmethod
    def prefixed(cls, local_name: str, prefix: str) -> Name:
        """A name with a prefix and no namespace URI."""
        return cls(local_name, None, prefix)

    @classmethod
    def qualified(cls, local_name: str, namespace: str, prefix: str | None) -> Name:
        """A name bound to a namespace URI, with or without a prefix."""
        return cls(local_name, namespace, prefix)

    @classmethod
    def from_str(cls, s: str) -> Name:
        """Split ``s`` at its first colon into prefix and local name, without checks."""
        prefix, sep, local_name = s.partition(":")
        if sep:
            return cls.prefixed(local_name, prefix)
        return cls.local(s)

    @classmethod
    def parse(cls, s: str) -> Name:
        """Parse ``s`` as ``name`` or ``prefix:name``; raise ValueError if malformed."""
        parts = s.split(":")
        if len(parts) == 1 and parts[0]:
            return cls.local(parts[0])
        if len(parts) == 2 and all(parts):
            return cls.prefixed(parts[1], parts[0])
        raise ValueError(f"invalid qualified name: {s!r}")

    def to_repr(self) -> str:
        """The name as written in a document: ``prefix:local`` or ``local``."""
        if self.prefix is not None:
            return f"{self.prefix}:{self.local_name}"
        return self.local_name

    def prefix_repr(self) -> str:
        """The prefix, or the empty prefix if there is none."""
        return self.prefix if self.prefix is not None else _NO_PREFIX

    def __str__(self) -> str:
        namespace = f"{{{self.namespace}}}" if self.namespace is not None else ""
        return namespace + self.to_repr()