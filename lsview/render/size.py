"""Rendering of file sizes and device numbers."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Protocol, Union

from lsview.cell import Style, TextCell, TextCellContents, display_width
from lsview.table import NumericLocale, SizeFormat

__all__ = [
    "SizeColours",
    "Prefix",
    "decimal_prefix",
    "binary_prefix",
    "DeviceIDs",
    "render_size",
]


class Prefix(enum.Enum):
    """A decimal or binary unit prefix."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"

    def symbol(self) -> str:
        return self.value


_DECIMAL = (
    Prefix.KILO, Prefix.MEGA, Prefix.GIGA, Prefix.TERA,
    Prefix.PETA, Prefix.EXA, Prefix.ZETTA, Prefix.YOTTA,
)
_BINARY = (
    Prefix.KIBI, Prefix.MEBI, Prefix.GIBI, Prefix.TEBI,
    Prefix.PEBI, Prefix.EXBI, Prefix.ZEBI, Prefix.YOBI,
)


def _with_prefix(
    number: float, kilo: float, prefixes: tuple[Prefix, ...]
) -> tuple[Prefix | None, float]:
    amount = abs(float(number))
    if amount < kilo:
        return None, float(number)
    steps = 0
    while amount >= kilo and steps < len(prefixes):
        amount /= kilo
        steps += 1
    return prefixes[steps - 1], -amount if number < 0 else amount


def decimal_prefix(number: float) -> tuple[Prefix | None, float]:
    """Scale ``number`` by powers of 1000; the prefix is ``None`` below 1000."""
    return _with_prefix(number, 1000.0, _DECIMAL)


def binary_prefix(number: float) -> tuple[Prefix | None, float]:
    """Scale ``number`` by powers of 1024; the prefix is ``None`` below 1024."""
    return _with_prefix(number, 1024.0, _BINARY)


class SizeColours(Protocol):
    def size(self, prefix: Prefix | None) -> Style: ...

    def unit(self, prefix: Prefix | None) -> Style: ...

    def no_size(self) -> Style: ...

    def major(self) -> Style: ...

    def comma(self) -> Style: ...

    def minor(self) -> Style: ...


@dataclass(frozen=True)
class DeviceIDs:
    """The major and minor numbers of a device file."""

    major: int
    minor: int

    def render(self, colours: SizeColours) -> TextCell:
        major = str(self.major)
        minor = str(self.minor)
        parts = [
            colours.major().paint(major),
            colours.comma().paint(","),
            colours.minor().paint(minor),
        ]
        return TextCell(TextCellContents(parts), len(major) + 1 + len(minor))


def _round_half_away(number: float) -> int:
    return int(math.copysign(math.floor(abs(number) + 0.5), number))


def render_size(
    size: Union[int, DeviceIDs, None],
    colours: SizeColours,
    size_format: SizeFormat,
    numeric: NumericLocale,
) -> TextCell:
    """A cell for a file size, device numbers, or a blank if there is no size."""
    if size is None:
        return TextCell.blank(colours.no_size())
    if isinstance(size, DeviceIDs):
        return size.render(colours)

    if size_format is SizeFormat.JUST_BYTES:
        prefix, _ = binary_prefix(size)
        return TextCell.paint(colours.size(prefix), numeric.format_int(size))

    if size_format is SizeFormat.DECIMAL_BYTES:
        prefix, n = decimal_prefix(size)
    else:
        prefix, n = binary_prefix(size)

    if prefix is None:
        return TextCell.paint(colours.size(None), numeric.format_int(size))

    symbol = prefix.symbol()
    if n < 10:
        number = numeric.format_float(n, 1)
    else:
        number = numeric.format_int(_round_half_away(n))

    parts = [colours.size(prefix).paint(number), colours.unit(prefix).paint(symbol)]
    return TextCell(TextCellContents(parts), display_width(number) + len(symbol))