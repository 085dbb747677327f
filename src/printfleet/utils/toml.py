from __future__ import annotations

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def toml_string(value: str) -> str:
    """Render ``value`` as a TOML basic string.

    Non-ASCII characters are written as-is, so the result must be saved as
    UTF-8. Control characters and DEL become ``\\uXXXX`` escapes.
    """
    parts = []
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char < " " or char == "\x7f":
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def toml_bool(value: bool) -> str:
    return "true" if value else "false"
