"""Escaping of text for embedding in HTML content and attribute values."""

from __future__ import annotations

from collections.abc import Callable

# Covers both text nodes and double- or single-quoted attribute values.
ESCAPE_MAP: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def write_escaped(write: Callable[[str], object], text: str) -> None:
    """Write ``text`` through ``write`` with the five special characters escaped.

    Unescaped runs are flushed as slices between the replacement strings, so
    text without special characters is written in a single call.
    """
    last = 0
    for i, ch in enumerate(text):
        replacement = ESCAPE_MAP.get(ch)
        if replacement is None:
            continue
        if last < i:
            write(text[last:i])
        write(replacement)
        last = i + 1
    if last == 0:
        if text:
            write(text)
    elif last < len(text):
        write(text[last:])


def escape_html(text: str) -> str:
    if not text:
        return ""
    parts: list[str] = []
    write_escaped(parts.append, text)
    return "".join(parts)
