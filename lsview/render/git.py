"""Rendering of a file's Git status."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from lsview.cell import Style, StyledString, TextCell, TextCellContents

__all__ = ["GitColours", "GitStatus", "Git"]


class GitColours(Protocol):
    def not_modified(self) -> Style: ...

    def new(self) -> Style: ...

    def modified(self) -> Style: ...

    def deleted(self) -> Style: ...

    def renamed(self) -> Style: ...

    def type_change(self) -> Style: ...

    def ignored(self) -> Style: ...

    def conflicted(self) -> Style: ...


class GitStatus(enum.Enum):
    """The status of a file in the index or the working tree."""

    NOT_MODIFIED = "not_modified"
    NEW = "new"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    TYPE_CHANGE = "type_change"
    IGNORED = "ignored"
    CONFLICTED = "conflicted"

    def render(self, colours: GitColours) -> StyledString:
        """The status letter painted in its colour."""
        style = getattr(colours, self.value)()
        return style.paint(_STATUS_CHARS[self])


_STATUS_CHARS = {
    GitStatus.NOT_MODIFIED: "-",
    GitStatus.NEW: "N",
    GitStatus.MODIFIED: "M",
    GitStatus.DELETED: "D",
    GitStatus.RENAMED: "R",
    GitStatus.TYPE_CHANGE: "T",
    GitStatus.IGNORED: "I",
    GitStatus.CONFLICTED: "U",
}


@dataclass(frozen=True)
class Git:
    """The staged and unstaged statuses of a file."""

    staged: GitStatus = GitStatus.NOT_MODIFIED
    unstaged: GitStatus = GitStatus.NOT_MODIFIED

    def render(self, colours: GitColours) -> TextCell:
        parts = [self.staged.render(colours), self.unstaged.render(colours)]
        return TextCell(TextCellContents(parts), 2)