"""Building blocks for pull-based XML reading: names, namespaces, escaping, configuration, errors, events and event statistics."""

__version__ = "0.1.0"

__all__ = [
    "attribute",
    "common",
    "config",
    "errors",
    "escape",
    "events",
    "indexset",
    "name",
    "namespace",
    "stats",
]