"""
Board construction, validation and rendering.

Uses int8 board indexed board[x, y] (x = row):
    0 = first color
    1 = second color
    2 = empty
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from othello_ai.core.types import CELL_STRINGS, CellState
from othello_ai.errors import InvalidBoardError

STANDARD_SIZE = 8

# Fixture characters for board_from_rows()
_FIXTURE_CHARS = {".": CellState.EMPTY, "X": CellState.FIRST, "O": CellState.SECOND}


def validate_size(size: int) -> int:
    """Return size if it is a playable board size (even, >= 4)."""
    if not isinstance(size, (int, np.integer)) or isinstance(size, bool):
        raise InvalidBoardError(f"Board size must be an integer, got {size!r}")
    if size < 4 or size % 2:
        raise InvalidBoardError(f"Board size must be even and >= 4, got {size}")
    return int(size)


def validate_board(board: np.ndarray) -> np.ndarray:
    """Check shape and cell codes. Returns the board unchanged."""
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise InvalidBoardError(f"Board must be square, got shape {board.shape}")
    validate_size(board.shape[0])
    if np.any((board < CellState.FIRST) | (board > CellState.EMPTY)):
        raise InvalidBoardError("Board contains cell codes outside 0..2")
    return board


def empty_board(size: int = STANDARD_SIZE) -> np.ndarray:
    size = validate_size(size)
    return np.full((size, size), CellState.EMPTY, dtype=np.int8)


def initial_board(size: int = STANDARD_SIZE) -> np.ndarray:
    """Empty board with the central 2x2 block, colors crossed."""
    board = empty_board(size)
    lo, hi = size // 2 - 1, size // 2
    board[lo, lo] = board[hi, hi] = CellState.FIRST
    board[lo, hi] = board[hi, lo] = CellState.SECOND
    return board


def count(board: np.ndarray, cell: int) -> int:
    return int(np.count_nonzero(board == cell))


def disk_difference(board: np.ndarray) -> int:
    """count(first) - count(second); positive favors the first color."""
    return count(board, CellState.FIRST) - count(board, CellState.SECOND)


def board_from_rows(rows: Iterable[str]) -> np.ndarray:
    """
    Build a board from text rows, one string per x:
        '.' = empty, 'X' = first color, 'O' = second color
    Whitespace inside a row is ignored.
    """
    parsed = []
    for row in rows:
        cells = [c for c in row if not c.isspace()]
        try:
            parsed.append([_FIXTURE_CHARS[c] for c in cells])
        except KeyError as e:
            raise InvalidBoardError(f"Unknown board character {e.args[0]!r}") from e

    if not parsed or any(len(r) != len(parsed) for r in parsed):
        raise InvalidBoardError("Board rows must form a non-empty square")

    return validate_board(np.array(parsed, dtype=np.int8))


def board_to_rows(board: np.ndarray) -> list[str]:
    """Inverse of board_from_rows()."""
    chars = {v: k for k, v in _FIXTURE_CHARS.items()}
    return ["".join(chars[CellState(int(c))] for c in row) for row in board]


def render(board: np.ndarray, highlights: Sequence[tuple[int, int]] = ()) -> str:
    """Pretty box-drawn board with row/column labels; highlights shown as '·'."""
    size = board.shape[0]
    marks = set((int(x), int(y)) for x, y in highlights)

    def cell(x: int, y: int) -> str:
        value = CellState(int(board[x, y]))
        if value == CellState.EMPTY and (x, y) in marks:
            return "·"
        return CELL_STRINGS[value]

    header = "    " + "   ".join(str(y) for y in range(size))
    lines = [header, "  ╭" + "┬".join(["───"] * size) + "╮"]
    for x in range(size):
        lines.append(f"{x} │ " + " │ ".join(cell(x, y) for y in range(size)) + " │")
        if x < size - 1:
            lines.append("  ├" + "┼".join(["───"] * size) + "┤")
    lines.append("  ╰" + "┴".join(["───"] * size) + "╯")
    return "\n".join(lines)
