"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- CellState: int8 cell codes shared by boards and the 2-bit codec
- Outcome / SearchScore: tagged search results (terminal vs heuristic)
- Move: a board coordinate
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from functools import total_ordering
from typing import NamedTuple, Tuple


class CellState(IntEnum):
    """
    Cell codes. Values match the 2-bit codec:
        0 = first color  (moves first, maximizing side)
        1 = second color
        2 = empty
    """
    FIRST = 0
    SECOND = 1
    EMPTY = 2


MOVERS = (CellState.FIRST, CellState.SECOND)

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {CellState.FIRST: "X", CellState.SECOND: "O", CellState.EMPTY: " "}


def opponent(mover: int) -> CellState:
    """Return the other color. Only defined for the two movers."""
    if mover not in MOVERS:
        raise ValueError(f"Not a mover: {mover!r}")
    return CellState(1 - mover)


class Move(NamedTuple):
    """A placement coordinate; x is the row, y the column."""
    x: int
    y: int


class Outcome(Enum):
    WIN = auto()
    DRAW = auto()
    LOSS = auto()
    HEURISTIC = auto()


# Ordering rank per outcome. DRAW shares the heuristic band and orders as 0.
_RANK = {
    Outcome.LOSS: -1,
    Outcome.DRAW: 0,
    Outcome.HEURISTIC: 0,
    Outcome.WIN: 1,
}


@total_ordering
@dataclass(frozen=True)
class SearchScore:
    """
    Tagged search value, always from the first color's perspective.

    Terminal tags dominate every heuristic value regardless of board size,
    so WIN and LOSS can never collide with a disk count.
    """
    outcome: Outcome
    value: int = 0

    @classmethod
    def win(cls) -> "SearchScore":
        return cls(Outcome.WIN)

    @classmethod
    def loss(cls) -> "SearchScore":
        return cls(Outcome.LOSS)

    @classmethod
    def draw(cls) -> "SearchScore":
        return cls(Outcome.DRAW)

    @classmethod
    def heuristic(cls, value: int) -> "SearchScore":
        return cls(Outcome.HEURISTIC, int(value))

    @classmethod
    def terminal(cls, diff: int) -> "SearchScore":
        """Build the terminal tag from a final disk differential."""
        if diff > 0:
            return cls.win()
        if diff < 0:
            return cls.loss()
        return cls.draw()

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.HEURISTIC

    def sort_key(self) -> Tuple[int, int]:
        return (_RANK[self.outcome], self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SearchScore):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchScore):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __str__(self) -> str:
        if self.outcome is Outcome.HEURISTIC:
            return f"{self.value:+d}"
        return self.outcome.name
