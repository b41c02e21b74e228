"""Timestamp formatting for the date columns."""

from __future__ import annotations

import enum
import math
from datetime import datetime, timedelta, timezone, tzinfo

from lsview.cell import display_width

__all__ = ["TimeFormat"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS_PER_SECOND = 1_000_000_000
_MAX_OFFSET = timedelta(hours=24)

_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MAXIMUM_MONTH_WIDTH = max(display_width(name) for name in _MONTH_NAMES)


def _current_year() -> int:
    return datetime.now(timezone.utc).year


def _split(time: float) -> tuple[int, int]:
    """Whole seconds since the epoch (rounded down) and the nanoseconds after them."""
    seconds = math.floor(time)
    nanos = round((time - seconds) * _NANOS_PER_SECOND)
    return seconds, min(max(nanos, 0), _NANOS_PER_SECOND - 1)


def _is_recent(date: datetime) -> bool:
    return date.year == _current_year()


def _month_name(date: datetime) -> str:
    name = _MONTH_NAMES[date.month - 1]
    if _MAXIMUM_MONTH_WIDTH in (4, 5):
        return f"{name:<{_MAXIMUM_MONTH_WIDTH}}"
    return name


def _default(date: datetime) -> str:
    month = _month_name(date)
    if _is_recent(date):
        return f"{date.day:>2} {month} {date.hour:02}:{date.minute:02}"
    return f"{date.day:>2} {month} {date.year:>5}"


def _iso(date: datetime) -> str:
    if _is_recent(date):
        return f"{date.month:02}-{date.day:02} {date.hour:02}:{date.minute:02}"
    return f"{date.year:04}-{date.month:02}-{date.day:02}"


def _long(date: datetime) -> str:
    return (
        f"{date.year:04}-{date.month:02}-{date.day:02} "
        f"{date.hour:02}:{date.minute:02}"
    )


def _full(date: datetime, nanos: int) -> str:
    return (
        f"{date.year:04}-{date.month:02}-{date.day:02} "
        f"{date.hour:02}:{date.minute:02}:{date.second:02}.{nanos:09}"
    )


def _offset_suffix(offset: timedelta) -> str:
    seconds = int(offset.total_seconds())
    hours = int(seconds / 3600)
    minutes = abs((seconds - hours * 3600) // 60) if seconds >= 0 else abs(
        -((-(seconds - hours * 3600)) // 60)
    )
    return f" {hours:+03d}{minutes:02d}"


class TimeFormat(enum.Enum):
    """How a timestamp is rendered."""

    DEFAULT_FORMAT = "default"
    """Month names; minutes for this year's times, the year for older ones."""
    ISO_FORMAT = "iso"
    """Numeric month; minutes for this year's times, the full date for older ones."""
    LONG_ISO = "long-iso"
    """Full date and time down to the minute."""
    FULL_ISO = "full-iso"
    """Full date and time down to the nanosecond, with the zone offset if known."""

    def _render(self, date: datetime, nanos: int) -> str:
        if self is TimeFormat.DEFAULT_FORMAT:
            return _default(date)
        if self is TimeFormat.ISO_FORMAT:
            return _iso(date)
        if self is TimeFormat.LONG_ISO:
            return _long(date)
        return _full(date, nanos)

    def format_local(self, time: float) -> str:
        """Format ``time``, seconds since the Unix epoch, without a time zone."""
        seconds, nanos = _split(time)
        date = _EPOCH + timedelta(seconds=seconds)
        return self._render(date, nanos)

    def format_zoned(self, time: float, zone: tzinfo) -> str:
        """Format ``time``, seconds since the Unix epoch, in the given zone."""
        seconds, nanos = _split(time)
        date = (_EPOCH + timedelta(seconds=seconds)).astimezone(zone)
        text = self._render(date, nanos)
        if self is TimeFormat.FULL_ISO:
            offset = date.utcoffset() or timedelta(0)
            if abs(offset) >= _MAX_OFFSET:
                raise ValueError("Offset out of range")
            text += _offset_suffix(offset)
        return text