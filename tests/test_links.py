from lsview.cell import BLUE, RED, TextCell, TextCellContents
from lsview.render.links import Links
from lsview.table import NumericLocale


class TestColours:
    def normal(self):
        return BLUE.normal()

    def multi_link_file(self):
        return BLUE.on(RED)


def test_regular_file():
    links = Links(count=1, multiple=False)
    expected = TextCell(TextCellContents([BLUE.paint("1")]), 1)
    assert links.render(TestColours(), NumericLocale.english()) == expected


def test_regular_directory():
    links = Links(count=3005, multiple=False)
    expected = TextCell(TextCellContents([BLUE.paint("3,005")]), 5)
    assert links.render(TestColours(), NumericLocale.english()) == expected


def test_popular_file():
    links = Links(count=3005, multiple=True)
    expected = TextCell(TextCellContents([BLUE.on(RED).paint("3,005")]), 5)
    assert links.render(TestColours(), NumericLocale.english()) == expected