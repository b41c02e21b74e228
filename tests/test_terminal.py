import os
from unittest import mock

from lsview.terminal import TerminalWidth


def test_set_width_is_returned():
    assert TerminalWidth(80).actual_terminal_width() == 80


def test_set_width_ignores_terminal():
    with mock.patch("lsview.terminal.os.get_terminal_size", return_value=os.terminal_size((200, 50))):
        assert TerminalWidth(33).actual_terminal_width() == 33


def test_automatic_uses_terminal_size():
    with mock.patch("lsview.terminal.os.get_terminal_size", return_value=os.terminal_size((120, 40))):
        assert TerminalWidth.automatic().actual_terminal_width() == 120


def test_automatic_without_terminal():
    with mock.patch("lsview.terminal.os.get_terminal_size", side_effect=OSError):
        assert TerminalWidth.automatic().actual_terminal_width() is None


def test_automatic_has_no_fixed_width():
    assert TerminalWidth.automatic() == TerminalWidth(None)