"""Styled text cells for the details and lines views.

A text cell holds a sequence of ANSI-styled strings together with the
pre-computed display width of all of them combined, so that tables can
query and pad column widths without measuring strings repeatedly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from wcwidth import wcwidth

__all__ = [
    "Colour",
    "Style",
    "StyledString",
    "TextCellContents",
    "TextCell",
    "display_width",
    "BLACK",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "PURPLE",
    "CYAN",
    "WHITE",
]

_RESET = "\x1b[0m"


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    Characters without a defined width, such as control characters,
    count as zero columns.
    """
    return sum(max(wcwidth(char), 0) for char in text)


@dataclass(frozen=True)
class Colour:
    """A terminal colour: one of the eight basic colours or a 256-colour index."""

    code: int
    extended: bool = False

    @classmethod
    def fixed(cls, number: int) -> Colour:
        """Return the colour with the given index in the 256-colour palette."""
        if not 0 <= number <= 255:
            raise ValueError(f"colour index out of range: {number}")
        return cls(number, extended=True)

    def _code(self, background: bool) -> str:
        if self.extended:
            return f"{48 if background else 38};5;{self.code}"
        return str((40 if background else 30) + self.code)

    def normal(self) -> Style:
        """A style with this colour as its foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        return Style(foreground=self, bold=True)

    def italic(self) -> Style:
        return Style(foreground=self, italic=True)

    def underline(self) -> Style:
        return Style(foreground=self, underline=True)

    def blink(self) -> Style:
        return Style(foreground=self, blink=True)

    def on(self, background: Colour) -> Style:
        """A style with this foreground over the given background."""
        return Style(foreground=self, background=background)

    def paint(self, text: str) -> StyledString:
        return self.normal().paint(text)


BLACK = Colour(0)
RED = Colour(1)
GREEN = Colour(2)
YELLOW = Colour(3)
BLUE = Colour(4)
PURPLE = Colour(5)
CYAN = Colour(6)
WHITE = Colour(7)


@dataclass(frozen=True)
class Style:
    """Foreground, background and text attributes for a piece of text."""

    foreground: Colour | None = None
    background: Colour | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False

    @property
    def is_plain(self) -> bool:
        return self == Style()

    def _prefix(self) -> str:
        if self.is_plain:
            return ""
        codes = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        if self.blink:
            codes.append("5")
        if self.background is not None:
            codes.append(self.background._code(background=True))
        if self.foreground is not None:
            codes.append(self.foreground._code(background=False))
        return f"\x1b[{';'.join(codes)}m"

    def paint(self, text: str) -> StyledString:
        """Couple ``text`` with this style."""
        return StyledString(self, text)


@dataclass(frozen=True)
class StyledString:
    """A string together with the style it is to be printed in."""

    style: Style
    text: str

    def __str__(self) -> str:
        if self.style.is_plain:
            return self.text
        return f"{self.style._prefix()}{self.text}{_RESET}"


@dataclass
class TextCellContents:
    """The styled strings of a cell, without a cached width."""

    parts: list[StyledString] = field(default_factory=list)

    def __iter__(self) -> Iterator[StyledString]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index):
        return self.parts[index]

    def strings(self) -> str:
        """Render the contents as one ANSI-formatted string."""
        return "".join(str(part) for part in self.parts)

    def width(self) -> int:
        """The display width of all the unformatted strings combined."""
        return sum(display_width(part.text) for part in self.parts)

    def promote(self) -> TextCell:
        """Make a full cell of these contents with their computed width."""
        return TextCell(contents=self, width=self.width())


@dataclass
class TextCell:
    """Styled strings in a table cell, coupled with their display width."""

    contents: TextCellContents = field(default_factory=TextCellContents)
    width: int = 0

    def __iter__(self) -> Iterator[StyledString]:
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)

    @classmethod
    def paint(cls, style: Style, text: str) -> TextCell:
        """A cell holding ``text`` in ``style``, with its width computed."""
        return cls(TextCellContents([style.paint(text)]), display_width(text))

    @classmethod
    def blank(cls, style: Style) -> TextCell:
        """A cell holding a single hyphen, used in place of an empty cell."""
        return cls(TextCellContents([style.paint("-")]), 1)

    def add_spaces(self, count: int) -> None:
        """Append ``count`` unstyled spaces."""
        self.width += count
        self.contents.parts.append(Style().paint(" " * count))

    def push(self, string: StyledString, extra_width: int) -> None:
        """Append a styled string that takes up ``extra_width`` columns."""
        self.contents.parts.append(string)
        self.width += extra_width

    def append(self, other: TextCell) -> None:
        """Append all the contents of another cell."""
        self.width += other.width
        self.contents.parts.extend(other.contents.parts)

    def strings(self) -> str:
        return self.contents.strings()