from typing import Any

_XML_ESCAPES = str.maketrans(
    {
        '"': "&quot;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
    }
)


def xml_escape(value: Any) -> str:
    """
    Escape a value for use inside a double-quoted XML attribute.

    Only ``"``, ``&``, ``<`` and ``>`` are replaced; single quotes and every
    other character pass through. Anything that is not a string (None,
    numbers, objects) escapes to the empty string.
    """
    if not isinstance(value, str):
        return ""
    return value.translate(_XML_ESCAPES)
