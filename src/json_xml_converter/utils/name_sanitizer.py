"""Element name sanitization for keys coming from JSON."""

import re

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def sanitize(key: str) -> str:
    """
    Map an arbitrary JSON key to a valid XML element name.

    Every character outside ``[A-Za-z0-9_-]`` becomes ``_`` and a leading
    digit gets a ``_`` prefix. An empty key becomes ``_``.

    Args:
        key: Object key to sanitize

    Returns:
        Sanitized element name
    """
    name = _INVALID_CHARS.sub("_", key)

    if not name:
        return "_"

    if name[0].isdigit():
        name = "_" + name

    return name
