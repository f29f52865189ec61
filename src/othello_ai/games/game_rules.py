"""
Placement rules: ray walking, legality, and disk flipping.

All functions take a board and an explicit mover, and never mutate the
board they are given.
"""

from __future__ import annotations

import itertools
from typing import Iterator, List, Tuple

import numpy as np

from othello_ai.core.types import CellState, Move, opponent
from othello_ai.errors import IllegalMoveError

# {decrease, none, increase} on each axis, minus the (none, none) center
DIRECTIONS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx, dy in itertools.product((-1, 0, 1), repeat=2) if (dx, dy) != (0, 0)
)


def in_bounds(board: np.ndarray, x: int, y: int) -> bool:
    """Return True if (x, y) is inside the board."""
    rows, cols = board.shape
    return 0 <= x < rows and 0 <= y < cols


def captured_along(board: np.ndarray, x: int, y: int, dx: int, dy: int, mover: int) -> List[Move]:
    """
    Opponent cells captured by placing mover at (x, y), along one direction.

    Walks outward from (x, y). Returns the crossed opponent cells if the ray
    ends on a mover-colored cell after at least one of them; otherwise [].
    """
    enemy = opponent(mover)
    crossed: List[Move] = []
    cx, cy = x + dx, y + dy

    while in_bounds(board, cx, cy):
        cell = board[cx, cy]
        if cell == enemy:
            crossed.append(Move(cx, cy))
        elif cell == mover:
            return crossed
        else:
            return []
        cx += dx
        cy += dy

    return []


def flips_for(board: np.ndarray, x: int, y: int, mover: int) -> List[Move]:
    """All cells flipped by placing mover at (x, y); [] if the move is illegal."""
    if not in_bounds(board, x, y) or board[x, y] != CellState.EMPTY:
        return []

    flips: List[Move] = []
    for dx, dy in DIRECTIONS:
        flips.extend(captured_along(board, x, y, dx, dy, mover))
    return flips


def can_place(board: np.ndarray, x: int, y: int, mover: int) -> bool:
    """
    True iff (x, y) is on the board, empty, and at least one direction
    brackets one or more opponent disks between (x, y) and a mover disk.
    """
    if not in_bounds(board, x, y) or board[x, y] != CellState.EMPTY:
        return False

    for dx, dy in DIRECTIONS:
        if captured_along(board, x, y, dx, dy, mover):
            return True
    return False


def apply_move(board: np.ndarray, x: int, y: int, mover: int) -> np.ndarray:
    """
    Return a new board with mover placed at (x, y) and every captured
    opponent disk flipped. The input board is left untouched.
    """
    if not in_bounds(board, x, y):
        raise IllegalMoveError(x, y, "outside the board")
    if board[x, y] != CellState.EMPTY:
        raise IllegalMoveError(x, y, "cell is occupied")

    flips = flips_for(board, x, y, mover)
    if not flips:
        raise IllegalMoveError(x, y)

    new_board = board.copy()
    new_board[x, y] = mover
    for fx, fy in flips:
        new_board[fx, fy] = mover
    return new_board


def legal_moves(board: np.ndarray, mover: int) -> Iterator[Move]:
    """Yield every legal placement for mover in row-major order."""
    rows, cols = board.shape
    for x in range(rows):
        for y in range(cols):
            if can_place(board, x, y, mover):
                yield Move(x, y)


def has_legal_move(board: np.ndarray, mover: int) -> bool:
    return next(legal_moves(board, mover), None) is not None
