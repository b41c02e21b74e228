"""Rendering of a file's hard link count."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from lsview.cell import Style, TextCell
from lsview.table import NumericLocale

__all__ = ["LinksColours", "Links"]


class LinksColours(Protocol):
    def normal(self) -> Style: ...

    def multi_link_file(self) -> Style: ...


@dataclass(frozen=True)
class Links:
    """How many hard links a file has, and whether that is more than one."""

    count: int
    multiple: bool

    def render(self, colours: LinksColours, numeric: NumericLocale) -> TextCell:
        style = colours.multi_link_file() if self.multiple else colours.normal()
        return TextCell.paint(style, numeric.format_int(self.count))