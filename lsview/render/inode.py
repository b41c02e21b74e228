"""Rendering of a file's inode number."""

from __future__ import annotations

from lsview.cell import Style, TextCell

__all__ = ["render_inode"]


def render_inode(inode: int, style: Style) -> TextCell:
    """A cell with the inode number painted in ``style``."""
    return TextCell.paint(style, str(inode))