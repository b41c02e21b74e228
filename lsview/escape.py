"""Escaping of unprintable characters in file names."""

from __future__ import annotations

from lsview.cell import Style, StyledString

__all__ = ["escape"]

_NAMED_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


def _is_printable(char: str) -> bool:
    return char >= "\x20" and char != "\x7f"


def _escape_char(char: str) -> str:
    return _NAMED_ESCAPES.get(char, f"\\u{{{ord(char):x}}}")


def escape(string: str, good: Style, bad: Style) -> list[StyledString]:
    """Split ``string`` into styled pieces, escaping control characters.

    Printable characters are painted with ``good``; control characters are
    replaced by their escape sequence and painted with ``bad``.
    """
    if all(_is_printable(char) for char in string):
        return [good.paint(string)]

    return [
        good.paint(char) if _is_printable(char) else bad.paint(_escape_char(char))
        for char in string
    ]