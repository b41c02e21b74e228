"""Columns, widths and padding for the details table."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from lsview.cell import Style, TextCell

__all__ = [
    "SizeFormat",
    "UserFormat",
    "TimeType",
    "TimeTypes",
    "Alignment",
    "Column",
    "Columns",
    "NumericLocale",
    "TableWidths",
    "Table",
]


class SizeFormat(enum.Enum):
    """How file sizes are formatted."""

    DECIMAL_BYTES = "decimal"
    """Use decimal prefixes such as kilo, mega or giga."""
    BINARY_BYTES = "binary"
    """Use binary prefixes such as kibi, mebi or gibi."""
    JUST_BYTES = "bytes"
    """Show the size as a plain number of bytes."""


class UserFormat(enum.Enum):
    """How users and groups are shown."""

    NUMERIC = "numeric"
    NAME = "name"


class TimeType(enum.Enum):
    """The kinds of timestamp a file has."""

    MODIFIED = "modified"
    CHANGED = "changed"
    ACCESSED = "accessed"
    CREATED = "created"

    def header(self) -> str:
        """The heading of a column showing this timestamp."""
        return _TIME_HEADERS[self]


_TIME_HEADERS = {
    TimeType.MODIFIED: "Date Modified",
    TimeType.CHANGED: "Date Changed",
    TimeType.ACCESSED: "Date Accessed",
    TimeType.CREATED: "Date Created",
}


@dataclass(frozen=True)
class TimeTypes:
    """Which timestamps to show; by default just the modified time."""

    modified: bool = True
    changed: bool = False
    accessed: bool = False
    created: bool = False


class Alignment(enum.Enum):
    """Which side of its column a cell is padded against."""

    LEFT = "left"
    RIGHT = "right"


class Column(enum.Enum):
    """One kind of column in the details table."""

    PERMISSIONS = "permissions"
    FILE_SIZE = "size"
    TIMESTAMP_MODIFIED = "modified"
    TIMESTAMP_CHANGED = "changed"
    TIMESTAMP_ACCESSED = "accessed"
    TIMESTAMP_CREATED = "created"
    BLOCKS = "blocks"
    USER = "user"
    GROUP = "group"
    HARD_LINKS = "links"
    INODE = "inode"
    GIT_STATUS = "git"
    OCTAL = "octal"

    def alignment(self) -> Alignment:
        """Numbers are right-aligned, text is left-aligned."""
        if self in _RIGHT_ALIGNED:
            return Alignment.RIGHT
        return Alignment.LEFT

    def header(self) -> str:
        """The text shown for this column in the header row."""
        time_type = _COLUMN_TIME_TYPES.get(self)
        if time_type is not None:
            return time_type.header()
        return _HEADERS[self]


_RIGHT_ALIGNED = frozenset(
    {Column.FILE_SIZE, Column.HARD_LINKS, Column.INODE, Column.BLOCKS, Column.GIT_STATUS}
)

_TIMESTAMP_COLUMNS = {
    TimeType.MODIFIED: Column.TIMESTAMP_MODIFIED,
    TimeType.CHANGED: Column.TIMESTAMP_CHANGED,
    TimeType.ACCESSED: Column.TIMESTAMP_ACCESSED,
    TimeType.CREATED: Column.TIMESTAMP_CREATED,
}

_COLUMN_TIME_TYPES = {column: time_type for time_type, column in _TIMESTAMP_COLUMNS.items()}

_HEADERS = {
    Column.PERMISSIONS: "Permissions",
    Column.FILE_SIZE: "Size",
    Column.BLOCKS: "Blocks",
    Column.USER: "User",
    Column.GROUP: "Group",
    Column.HARD_LINKS: "Links",
    Column.INODE: "inode",
    Column.GIT_STATUS: "Git",
    Column.OCTAL: "Octal",
}


@dataclass(frozen=True)
class Columns:
    """Which columns to display in the table."""

    time_types: TimeTypes = field(default_factory=TimeTypes)
    inode: bool = False
    links: bool = False
    blocks: bool = False
    group: bool = False
    git: bool = False
    octal: bool = False
    permissions: bool = True
    filesize: bool = True
    user: bool = True

    def collect(self, actually_enable_git: bool) -> list[Column]:
        """The enabled columns, in display order."""
        wanted = [
            (self.inode, Column.INODE),
            (self.octal, Column.OCTAL),
            (self.permissions, Column.PERMISSIONS),
            (self.links, Column.HARD_LINKS),
            (self.filesize, Column.FILE_SIZE),
            (self.blocks, Column.BLOCKS),
            (self.user, Column.USER),
            (self.group, Column.GROUP),
            (self.time_types.modified, Column.TIMESTAMP_MODIFIED),
            (self.time_types.changed, Column.TIMESTAMP_CHANGED),
            (self.time_types.created, Column.TIMESTAMP_CREATED),
            (self.time_types.accessed, Column.TIMESTAMP_ACCESSED),
            (self.git and actually_enable_git, Column.GIT_STATUS),
        ]
        return [column for enabled, column in wanted if enabled]


@dataclass(frozen=True)
class NumericLocale:
    """Rules for formatting numbers: decimal point and thousands separator."""

    decimal_point: str = "."
    thousands_sep: str = ","

    @classmethod
    def english(cls) -> NumericLocale:
        return cls(".", ",")

    def _group(self, digits: int) -> str:
        return f"{digits:,}".replace(",", self.thousands_sep)

    def format_int(self, number: int) -> str:
        """Format an integer with thousands separators."""
        number = int(number)
        sign = "-" if number < 0 else ""
        return sign + self._group(abs(number))

    def format_float(self, number: float, decimals: int) -> str:
        """Format a number with ``decimals`` digits after the decimal point."""
        text = f"{abs(number):.{decimals}f}"
        sign = "-" if number < 0 and text.strip("0.") else ""
        whole, _, fraction = text.partition(".")
        result = sign + self._group(int(whole))
        if fraction:
            result += self.decimal_point + fraction
        return result


class TableWidths:
    """The width of each column, grown to fit the widest cell."""

    def __init__(self, widths: Sequence[int]) -> None:
        self._widths = list(widths)

    @classmethod
    def zero(cls, count: int) -> TableWidths:
        return cls([0] * count)

    def __iter__(self) -> Iterator[int]:
        return iter(self._widths)

    def __len__(self) -> int:
        return len(self._widths)

    def __getitem__(self, index: int) -> int:
        return self._widths[index]

    def __repr__(self) -> str:
        return f"TableWidths({self._widths!r})"

    def add_widths(self, row: Sequence[TextCell]) -> None:
        """Widen each column to fit the corresponding cell of ``row``."""
        for index, cell in zip(range(len(self._widths)), row):
            self._widths[index] = max(self._widths[index], cell.width)

    def total(self) -> int:
        """The width of a rendered row: all columns plus one space after each."""
        return len(self._widths) + sum(self._widths)


@dataclass
class Table:
    """A set of columns whose widths grow as rows are added."""

    columns: list[Column]
    widths: TableWidths = field(init=False)

    def __post_init__(self) -> None:
        self.columns = list(self.columns)
        self.widths = TableWidths.zero(len(self.columns))

    def header_row(self, style: Style) -> list[TextCell]:
        """A row of column headings painted in ``style``."""
        return [TextCell.paint(style, column.header()) for column in self.columns]

    def add_widths(self, row: Sequence[TextCell]) -> None:
        self.widths.add_widths(row)

    def render(self, row: Sequence[TextCell]) -> TextCell:
        """Pad and join the cells of ``row`` into a single cell."""
        cell = TextCell()
        for column, this_cell, width in zip(self.columns, row, self.widths):
            padding = width - this_cell.width
            if padding < 0:
                raise ValueError(
                    f"cell of width {this_cell.width} does not fit column of width {width}"
                )
            if column.alignment() is Alignment.LEFT:
                cell.append(this_cell)
                cell.add_spaces(padding)
            else:
                cell.add_spaces(padding)
                cell.append(this_cell)
            cell.add_spaces(1)
        return cell