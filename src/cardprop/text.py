"""Escaping and joining helpers for the plain-text encoding.

Folding and quoted-printable decoding belong to the document reader and
writer, not to this module.
"""

import re
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

_ESCAPE_PATTERN = re.compile(r"([\\,;])")
_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


def escape(value: str) -> str:
    """Escape backslashes, commas, semicolons and newlines.

    Example:
        >>> escape("a,b;c")
        'a\\\\,b\\\\;c'
    """
    escaped = _ESCAPE_PATTERN.sub(r"\\\1", value)
    return _NEWLINE_PATTERN.sub(r"\\n", escaped)


def unescape(value: str) -> str:
    """Reverse :func:`escape`. Unknown escape sequences keep their character."""
    out: list[str] = []
    escaped = False
    for ch in value:
        if escaped:
            out.append("\n" if ch in "nN" else ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        else:
            out.append(ch)
    if escaped:
        out.append("\\")
    return "".join(out)


def split(value: str, delimiter: str, *, unescape_parts: bool = True) -> list[str]:
    """Split on a delimiter, ignoring delimiters preceded by a backslash."""
    parts: list[str] = []
    current: list[str] = []
    escaped = False
    for ch in value:
        if escaped:
            current.append(ch)
            escaped = False
            continue
        if ch == "\\":
            current.append(ch)
            escaped = True
            continue
        if ch == delimiter:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))

    if unescape_parts:
        return [unescape(part) for part in parts]
    return parts


def join(
    values: Iterable[T],
    delimiter: str,
    render: Callable[[T], str] = str,
) -> str:
    """Join values with a delimiter, rendering each through ``render``."""
    return delimiter.join(render(value) for value in values)
