"""
Shared test fixtures for othello_ai tests.

Design principles:
- Boards built from readable text rows where the layout matters
- Seeded random boards for property checks
- Minimal, focused fixtures
"""

from typing import Callable

import numpy as np
import pytest

from othello_ai.core.types import CellState, SearchScore
from othello_ai.games.board import board_from_rows, initial_board
from othello_ai.games.game_state import GameState


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def start_board() -> np.ndarray:
    """Standard 8x8 starting layout."""
    return initial_board(8)


@pytest.fixture
def start_state() -> GameState:
    """Standard 8x8 start, first color to move."""
    return GameState.initial(8)


@pytest.fixture
def small_state() -> GameState:
    """4x4 start, first color to move."""
    return GameState.initial(4)


@pytest.fixture
def blocked_board() -> np.ndarray:
    """Board where neither color can move (only first-color disks)."""
    return board_from_rows([
        "XX..",
        "X...",
        "....",
        "...X",
    ])


@pytest.fixture
def pass_board() -> np.ndarray:
    """First color has no move, second color can play (0,2)."""
    return board_from_rows([
        "OX..",
        "....",
        "....",
        "....",
    ])


# =============================================================================
# Random Boards
# =============================================================================

def make_random_board(seed: int, size: int = 4, empty_share: float = 0.4) -> np.ndarray:
    """Random board with roughly empty_share empty cells."""
    rng = np.random.default_rng(seed)
    p_disk = (1.0 - empty_share) / 2
    return rng.choice(
        [CellState.FIRST, CellState.SECOND, CellState.EMPTY],
        size=(size, size),
        p=[p_disk, p_disk, empty_share],
    ).astype(np.int8)


@pytest.fixture
def random_board() -> Callable[..., np.ndarray]:
    return make_random_board


# =============================================================================
# Reference Search
# =============================================================================

class PlainMinimax:
    """Unpruned minimax used as an oracle for the alpha-beta search."""

    def __init__(self):
        self.nodes = 0

    def evaluate(self, state: GameState, depth: int) -> SearchScore:
        self.nodes += 1
        if state.is_terminal():
            return SearchScore.terminal(state.score())
        if depth <= 0:
            return SearchScore.heuristic(state.score())

        values = [self.evaluate(child, depth - 1) for child in state.next_states()]
        return max(values) if state.mover == CellState.FIRST else min(values)


@pytest.fixture
def plain_minimax() -> PlainMinimax:
    return PlainMinimax()
