"""Rendering of a file's timestamps."""

from __future__ import annotations

from datetime import tzinfo

from lsview.cell import Style, TextCell
from lsview.time import TimeFormat

__all__ = ["render_time"]


def render_time(
    time: float | None,
    style: Style,
    tz: tzinfo | None,
    time_format: TimeFormat,
) -> TextCell:
    """A cell with the formatted timestamp, or a hyphen if there is none."""
    if time is None:
        datestamp = "-"
    elif tz is not None:
        datestamp = time_format.format_zoned(time, tz)
    else:
        datestamp = time_format.format_local(time)
    return TextCell.paint(style, datestamp)