"""Tree drawing characters such as ``├──`` and ``└──`` for the tree view."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Iterator, TypeVar

__all__ = ["TreePart", "TreeParams", "TreeTrunk", "iterate_over"]

T = TypeVar("T")


class TreePart(enum.Enum):
    """One column of tree characters in a row."""

    EDGE = "├──"
    """Rightmost column, not the last in the directory."""
    LINE = "│  "
    """Not the rightmost column, and the directory has not finished yet."""
    CORNER = "└──"
    """Rightmost column, and the last in the directory."""
    BLANK = "   "
    """Not the rightmost column, and the directory has finished."""

    def ascii_art(self) -> str:
        """The box-drawing characters for this part."""
        return self.value


@dataclass(frozen=True)
class TreeParams:
    """How deep a row is in the tree, and whether it ends its directory."""

    depth: int
    last: bool

    def is_at_root(self) -> bool:
        return self.depth == 0


@dataclass
class TreeTrunk:
    """Builds up the tree parts of successive rows."""

    _stack: list[TreePart] = field(default_factory=list)
    _last_params: TreeParams | None = None

    def new_row(self, params: TreeParams) -> list[TreePart]:
        """Return the tree parts for a row with the given parameters.

        The zeroth level is left out, so that top-level entries are not
        joined together by tree characters.
        """
        if self._last_params is not None:
            last = self._last_params
            self._stack[last.depth] = TreePart.BLANK if last.last else TreePart.LINE

        size = params.depth + 1
        if len(self._stack) < size:
            self._stack.extend([TreePart.EDGE] * (size - len(self._stack)))
        else:
            del self._stack[size:]
        self._stack[params.depth] = TreePart.CORNER if params.last else TreePart.EDGE

        self._last_params = params
        return self._stack[1:]


def iterate_over(items: Iterable[T], depth: int = 0) -> Iterator[tuple[TreeParams, T]]:
    """Yield each item with tree parameters, marking the final one as last."""
    iterator = iter(items)
    sentinel = object()
    current = next(iterator, sentinel)
    while current is not sentinel:
        following = next(iterator, sentinel)
        yield TreeParams(depth, following is sentinel), current
        current = following