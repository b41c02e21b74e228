"""Rendering of the file type character in the permissions column."""

from __future__ import annotations

import enum
from typing import Protocol

from lsview.cell import Style, StyledString

__all__ = ["FiletypeColours", "FileType"]


class FiletypeColours(Protocol):
    def normal(self) -> Style: ...

    def directory(self) -> Style: ...

    def pipe(self) -> Style: ...

    def symlink(self) -> Style: ...

    def block_device(self) -> Style: ...

    def char_device(self) -> Style: ...

    def socket(self) -> Style: ...

    def special(self) -> Style: ...


class FileType(enum.Enum):
    """The type of a file as shown in the first permissions character."""

    FILE = "file"
    DIRECTORY = "directory"
    PIPE = "pipe"
    LINK = "link"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    SOCKET = "socket"
    SPECIAL = "special"

    def render(self, colours: FiletypeColours) -> StyledString:
        """The type character painted in its colour."""
        style_name, char = _RENDERING[self]
        return getattr(colours, style_name)().paint(char)

    def is_regular_file(self) -> bool:
        return self is FileType.FILE


_RENDERING = {
    FileType.FILE: ("normal", "."),
    FileType.DIRECTORY: ("directory", "d"),
    FileType.PIPE: ("pipe", "|"),
    FileType.LINK: ("symlink", "l"),
    FileType.BLOCK_DEVICE: ("block_device", "b"),
    FileType.CHAR_DEVICE: ("char_device", "c"),
    FileType.SOCKET: ("socket", "s"),
    FileType.SPECIAL: ("special", "?"),
}