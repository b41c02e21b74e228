"""Rendering of a file's block count."""

from __future__ import annotations

from typing import Protocol

from lsview.cell import Style, TextCell

__all__ = ["BlocksColours", "render_blocks"]


class BlocksColours(Protocol):
    def block_count(self) -> Style: ...

    def no_blocks(self) -> Style: ...


def render_blocks(blocks: int | None, colours: BlocksColours) -> TextCell:
    """A cell with the block count, or a blank cell if there is none."""
    if blocks is None:
        return TextCell.blank(colours.no_blocks())
    return TextCell.paint(colours.block_count(), str(blocks))