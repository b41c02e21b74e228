import pytest

from lsview.cell import RED, Style, TextCell
from lsview.table import (
    Alignment,
    Column,
    Columns,
    NumericLocale,
    Table,
    TableWidths,
    TimeType,
    TimeTypes,
)


def test_time_type_headers():
    assert TimeType.MODIFIED.header() == "Date Modified"
    assert TimeType.CHANGED.header() == "Date Changed"
    assert TimeType.ACCESSED.header() == "Date Accessed"
    assert TimeType.CREATED.header() == "Date Created"


def test_column_headers():
    assert Column.PERMISSIONS.header() == "Permissions"
    assert Column.FILE_SIZE.header() == "Size"
    assert Column.INODE.header() == "inode"
    assert Column.GIT_STATUS.header() == "Git"
    assert Column.TIMESTAMP_CREATED.header() == TimeType.CREATED.header()


@pytest.mark.parametrize(
    "column",
    [Column.FILE_SIZE, Column.HARD_LINKS, Column.INODE, Column.BLOCKS, Column.GIT_STATUS],
)
def test_numeric_columns_right_aligned(column):
    assert column.alignment() is Alignment.RIGHT


@pytest.mark.parametrize(
    "column", [Column.PERMISSIONS, Column.USER, Column.GROUP, Column.OCTAL, Column.TIMESTAMP_MODIFIED]
)
def test_text_columns_left_aligned(column):
    assert column.alignment() is Alignment.LEFT


def test_default_columns():
    assert Columns().collect(True) == [
        Column.PERMISSIONS,
        Column.FILE_SIZE,
        Column.USER,
        Column.TIMESTAMP_MODIFIED,
    ]


def test_all_columns_order():
    columns = Columns(
        time_types=TimeTypes(modified=True, changed=True, accessed=True, created=True),
        inode=True, links=True, blocks=True, group=True, git=True, octal=True,
    )
    assert columns.collect(True) == [
        Column.INODE,
        Column.OCTAL,
        Column.PERMISSIONS,
        Column.HARD_LINKS,
        Column.FILE_SIZE,
        Column.BLOCKS,
        Column.USER,
        Column.GROUP,
        Column.TIMESTAMP_MODIFIED,
        Column.TIMESTAMP_CHANGED,
        Column.TIMESTAMP_CREATED,
        Column.TIMESTAMP_ACCESSED,
        Column.GIT_STATUS,
    ]


def test_git_column_needs_enabling():
    columns = Columns(git=True)
    assert Column.GIT_STATUS not in columns.collect(False)
    assert columns.collect(True)[-1] is Column.GIT_STATUS


def test_format_int_english():
    numeric = NumericLocale.english()
    assert numeric.format_int(3005) == "3,005"
    assert numeric.format_int(1048576) == "1,048,576"
    assert numeric.format_int(1) == "1"


def test_format_float_english():
    numeric = NumericLocale.english()
    assert numeric.format_float(2.1, 1) == "2.1"
    assert numeric.format_float(1.0, 1) == "1.0"


def test_custom_separators_round_trip():
    numeric = NumericLocale(decimal_point=",", thousands_sep=".")
    text = numeric.format_int(1048576)
    assert int(text.replace(".", "")) == 1048576


def test_zero_widths_total_counts_spacing():
    widths = TableWidths.zero(3)
    assert list(widths) == [0, 0, 0]
    assert widths.total() == len(widths)


def test_add_widths_takes_maximum():
    widths = TableWidths.zero(2)
    widths.add_widths([TextCell.paint(Style(), "abcd"), TextCell.paint(Style(), "x")])
    widths.add_widths([TextCell.paint(Style(), "ab"), TextCell.paint(Style(), "xyz")])
    assert list(widths) == [4, 3]
    assert widths.total() == len(widths) + sum(widths)


def test_header_row_texts():
    table = Table([Column.PERMISSIONS, Column.FILE_SIZE])
    header = table.header_row(RED.bold())
    assert [cell.contents[0].text for cell in header] == ["Permissions", "Size"]
    assert all(cell.contents[0].style == RED.bold() for cell in header)


def test_render_pads_by_alignment():
    table = Table([Column.PERMISSIONS, Column.FILE_SIZE])
    first = [TextCell.paint(Style(), "rwx"), TextCell.paint(Style(), "10")]
    second = [TextCell.paint(Style(), "r"), TextCell.paint(Style(), "1000")]
    table.add_widths(first)
    table.add_widths(second)

    rendered = table.render(second)
    assert rendered.strings() == "r   1000 "
    assert rendered.width == table.widths.total()

    rendered = table.render(first)
    assert rendered.strings() == "rwx   10 "
    assert rendered.width == table.widths.total()


def test_render_rejects_cell_wider_than_column():
    table = Table([Column.USER])
    with pytest.raises(ValueError):
        table.render([TextCell.paint(Style(), "toolong")])