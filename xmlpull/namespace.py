"""Namespace mappings and stacks of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

NS_XMLNS_PREFIX = "xmlns"
"""Prefix used for namespace declarations."""

NS_XMLNS_URI = "http://www.w3.org/2000/xmlns/"
"""Standard URI bound to the ``xmlns`` prefix."""

NS_XML_PREFIX = "xml"
"""Prefix of the namespace holding the predefined ``xml:*`` attributes."""

NS_XML_URI = "http://www.w3.org/XML/1998/namespace"
"""Standard URI bound to the ``xml`` prefix."""

NS_NO_PREFIX = ""
"""The absent prefix, which designates the default namespace."""

NS_EMPTY_URI = ""
"""The empty namespace URI, equivalent to having no namespace."""

_DEFAULT_MAPPINGS = frozenset(
    {
        (NS_NO_PREFIX, NS_EMPTY_URI),
        (NS_XMLNS_PREFIX, NS_XMLNS_URI),
        (NS_XML_PREFIX, NS_XML_URI),
    }
)


@dataclass
class Namespace:
    """A mapping from prefixes to namespace URIs, iterated in prefix order."""

    mappings: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """True if there are no mappings at all."""
        return not self.mappings

    def is_essentially_empty(self) -> bool:
        """True if there is nothing but the built-in default mappings."""
        if len(self.mappings) > 3:
            return False
        return all(item in _DEFAULT_MAPPINGS for item in self.mappings.items())

    def put(self, prefix: str, uri: str) -> bool:
        """Add a mapping unless the prefix is already mapped; return whether it was added."""
        if prefix in self.mappings:
            return False
        self.mappings[prefix] = uri
        return True

    def force_put(self, prefix: str, uri: str) -> str | None:
        """Set a mapping, replacing any existing one; return the previous URI."""
        previous = self.mappings.get(prefix)
        self.mappings[prefix] = uri
        return previous

    def get(self, prefix: str) -> str | None:
        """The URI bound to ``prefix``, or None."""
        return self.mappings.get(prefix)

    def extend(self, mappings: Iterable[tuple[str, str]]) -> None:
        """Put every ``(prefix, uri)`` pair without overriding existing ones."""
        for prefix, uri in mappings:
            self.put(prefix, uri)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self.mappings

    def __len__(self) -> int:
        return len(self.mappings)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(self.mappings.items()))


@dataclass
class NamespaceStack:
    """A stack of namespaces, combined cumulatively from bottom to top."""

    namespaces: list[Namespace] = field(default_factory=list)

    @classmethod
    def empty(cls) -> NamespaceStack:
        """A stack with no namespaces in it."""
        return cls()

    @classmethod
    def default(cls) -> NamespaceStack:
        """A stack with one namespace holding the ``xml``, ``xmlns`` and empty mappings."""
        stack = cls()
        stack.push_empty()
        stack.put(NS_XML_PREFIX, NS_XML_URI)
        stack.put(NS_XMLNS_PREFIX, NS_XMLNS_URI)
        stack.put(NS_NO_PREFIX, NS_EMPTY_URI)
        return stack

    def push_empty(self) -> NamespaceStack:
        """Push an empty namespace on top and return the stack."""
        self.namespaces.append(Namespace())
        return self

    def pop(self) -> Namespace:
        """Remove and return the topmost namespace; IndexError if the stack is empty."""
        if not self.namespaces:
            raise IndexError("pop from an empty namespace stack")
        return self.namespaces.pop()

    def try_pop(self) -> Namespace | None:
        """Remove and return the topmost namespace, or None if the stack is empty."""
        return self.namespaces.pop() if self.namespaces else None

    def peek(self) -> Namespace:
        """The topmost namespace; IndexError if the stack is empty."""
        if not self.namespaces:
            raise IndexError("peek into an empty namespace stack")
        return self.namespaces[-1]

    def put_checked(self, prefix: str, uri: str) -> bool:
        """Put a mapping on top unless this exact mapping exists anywhere in the stack."""
        if any(ns.get(prefix) == uri for ns in self.namespaces):
            return False
        self.put(prefix, uri)
        return True

    def put(self, prefix: str, uri: str) -> bool:
        """Put a mapping into the topmost namespace without overriding it there."""
        if not self.namespaces:
            return False
        return self.namespaces[-1].put(prefix, uri)

    def get(self, prefix: str) -> str | None:
        """Look ``prefix`` up from the top of the stack down."""
        for ns in reversed(self.namespaces):
            uri = ns.get(prefix)
            if uri is not None:
                return uri
        return None

    def squash(self) -> Namespace:
        """Combine the stack into one namespace; upper mappings take priority."""
        result: dict[str, str] = {}
        for ns in self.namespaces:
            result.update(ns.mappings)
        return Namespace(result)

    def extend(self, mappings: Iterable[tuple[str, str]]) -> None:
        """Put every pair into the topmost namespace with ``put``."""
        for prefix, uri in mappings:
            self.put(prefix, uri)

    def extend_checked(self, mappings: Iterable[tuple[str, str]]) -> None:
        """Put every pair with ``put_checked``."""
        for prefix, uri in mappings:
            self.put_checked(prefix, uri)

    def __len__(self) -> int:
        return len(self.namespaces)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Visible mappings, from the top namespace down, each prefix once."""
        seen: set[str] = set()
        for ns in reversed(self.namespaces):
            for prefix, uri in ns:
                if prefix not in seen:
                    seen.add(prefix)
                    yield prefix, uri