"""The width of the terminal that output is formatted for."""

from __future__ import annotations

import os
from dataclasses import dataclass

__all__ = ["TerminalWidth"]

_STDOUT_FD = 1


@dataclass(frozen=True)
class TerminalWidth:
    """A fixed number of columns, or ``None`` to look the width up at run time."""

    width: int | None = None

    @classmethod
    def automatic(cls) -> TerminalWidth:
        return cls(None)

    def actual_terminal_width(self) -> int | None:
        """The width to use, or ``None`` if stdout is not a terminal."""
        if self.width is not None:
            return self.width
        try:
            return os.get_terminal_size(_STDOUT_FD).columns
        except (OSError, ValueError):
            return None