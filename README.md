# lsview

Building blocks for rendering file listings in a terminal: ANSI-styled text
cells that know their display width, aligned tables, tree-drawing
characters, timestamp formatting, and renderers for several metadata
columns (size, hard links, inode, blocks, timestamps, Git status and the
file type character).

## Installation

```
pip install lsview
```

## Styled cells

`lsview.cell` provides `Colour`, `Style`, `StyledString`, `TextCellContents`
and `TextCell`. A `TextCell` holds styled strings along with their Unicode
display width, so columns can be padded correctly even when names contain
wide characters.

```python
from lsview.cell import Colour, TextCell, display_width

cell = TextCell.paint(Colour.fixed(66).normal(), "report.txt")
cell.add_spaces(2)
print(cell.strings())        # ANSI-coloured text followed by two spaces
print(cell.width)            # 12
print(display_width("日本"))  # 4: two columns per wide character
```

`TextCell.blank(style)` produces the single-hyphen placeholder used for
empty table cells; `push` and `append` add more styled text and keep the
width up to date. The basic colours are available as `BLACK`, `RED`,
`GREEN`, `YELLOW`, `BLUE`, `PURPLE`, `CYAN` and `WHITE`.

## Escaping control characters

`lsview.escape.escape(string, good, bad)` splits a name into styled pieces:
printable characters are painted with `good`, and control characters are
replaced by an escape sequence (`\n`, `\t`, `\r`, or `\u{..}`) painted with
`bad`.

```python
from lsview.cell import GREEN, RED
from lsview.escape import escape

pieces = escape("a\nb", GREEN.normal(), RED.bold())
print([piece.text for piece in pieces])  # ['a', '\\n', 'b']
```

## Tree drawing

```python
from lsview.tree import TreeTrunk, iterate_over

trunk = TreeTrunk()
for params, name in iterate_over(["first", "middle", "last"], 1):
    parts = trunk.new_row(params)
    print("".join(part.ascii_art() for part in parts), name)
# ├── first
# ├── middle
# └── last
```

`iterate_over` pairs each item with `TreeParams` whose `last` flag is set on
the final item; `TreeTrunk.new_row` returns the `TreePart`s to draw,
leaving out the zeroth level.

## Tables

`lsview.table.Columns` says which columns are wanted and `collect` returns
them in display order. A `Table` grows its `TableWidths` as rows are added
and pads each row when it renders: size, links, inode, blocks and Git
columns are aligned right, the rest left, with one space after each column.

```python
from lsview.cell import TextCell, Style
from lsview.table import Column, Table

table = Table([Column.FILE_SIZE, Column.USER])
header = table.header_row(Style(bold=True))
row = [TextCell.paint(Style(), "12"), TextCell.paint(Style(), "alice")]
table.add_widths(header)
table.add_widths(row)
print(table.render(row).strings())  # '  12 alice '
```

`NumericLocale` groups digits when formatting numbers;
`NumericLocale.english()` uses `.` and `,`.

## Metadata renderers

Each renderer turns a field into a `TextCell` (or a `StyledString`), taking
its styles from a colours object with the methods listed in the matching
protocol (`BlocksColours`, `FiletypeColours`, `LinksColours`, `GitColours`,
`SizeColours`):

- `lsview.render.blocks.render_blocks(blocks, colours)`
- `lsview.render.inode.render_inode(inode, style)`
- `lsview.render.times.render_time(time, style, tz, time_format)`
- `lsview.render.links.Links(count, multiple).render(colours, numeric)`
- `lsview.render.git.Git(staged, unstaged).render(colours)`
- `lsview.render.filetype.FileType.render(colours)`
- `lsview.render.size.render_size(size, colours, size_format, numeric)`,
  where `size` is a byte count, a `DeviceIDs` or `None`

```python
from lsview.cell import Colour
from lsview.render.size import render_size
from lsview.table import NumericLocale, SizeFormat


class SizeStyles:
    def size(self, prefix):
        return Colour.fixed(66).normal()

    def unit(self, prefix):
        return Colour.fixed(77).bold()

    def no_size(self):
        return Colour.fixed(8).normal()

    def major(self):
        return Colour.fixed(1).normal()

    def comma(self):
        return Colour.fixed(2).normal()

    def minor(self):
        return Colour.fixed(3).normal()


cell = render_size(2_100_000, SizeStyles(), SizeFormat.DECIMAL_BYTES, NumericLocale.english())
print([piece.text for piece in cell], cell.width)  # ['2.1', 'M'] 4
```

`SizeFormat` chooses decimal prefixes, binary prefixes, or plain byte
counts; `decimal_prefix` and `binary_prefix` do the scaling on their own.

## Timestamps

`lsview.time.TimeFormat` formats seconds since the Unix epoch in four
styles: `DEFAULT_FORMAT`, `ISO_FORMAT`, `LONG_ISO` and `FULL_ISO`. The
default and ISO styles show the time of day for timestamps in the current
year and the year otherwise.

```python
from datetime import timezone
from lsview.time import TimeFormat

print(TimeFormat.LONG_ISO.format_local(0))                 # 1970-01-01 00:00
print(TimeFormat.FULL_ISO.format_zoned(0, timezone.utc))   # 1970-01-01 00:00:00.000000000 +0000
```

Month names are always English abbreviations.

## Terminal width

`lsview.terminal.TerminalWidth(80).actual_terminal_width()` returns 80;
`TerminalWidth.automatic()` looks up the width of standard output and
returns `None` when it is not a terminal.

## What this package does not do

It is a library of rendering pieces, not a listing program: there is no
command to run, and it does not read directories, stat files, query Git or
look up users. It has no renderers for the permissions string, octal
permissions, owner or group columns, and no file icons. Callers supply
the field values and compose the pieces themselves.