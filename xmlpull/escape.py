"""Escaping of XML special characters."""

_ATTRIBUTE_TABLE = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
        "&": "&amp;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)

_PCDATA_TABLE = str.maketrans({"<": "&lt;", ">": "&gt;", "&": "&amp;"})


def escape_str_attribute(s: str) -> str:
    """Escape markup characters and line breaks for use in an attribute value."""
    return s.translate(_ATTRIBUTE_TABLE)


def escape_str_pcdata(s: str) -> str:
    """Escape markup characters for use in character data (not attributes)."""
    return s.translate(_PCDATA_TABLE)