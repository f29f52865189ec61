"""
Configuration and defaults.
"""

from typing import Optional

from othello_ai.core.types import CellState
from othello_ai.games.board import STANDARD_SIZE, validate_size
from othello_ai.games.game_state import GameState
from othello_ai.search.runner import DEFAULT_WORKER_COUNT


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

COLORS = {
    "first": CellState.FIRST,
    "second": CellState.SECOND,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_DEPTH = 4


class Config:
    """Match configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = STANDARD_SIZE,
        depth: int = DEFAULT_DEPTH,
        num_workers: int = 1,
        human_color: Optional[str] = "first",
    ):
        if human_color is not None and human_color not in COLORS:
            available = ", ".join(COLORS)
            raise ValueError(f"Unknown color: {human_color}. Available: {available}")
        if depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {depth}")
        if num_workers < 1:
            raise ValueError(f"Worker count must be >= 1, got {num_workers}")

        self.board_size = validate_size(board_size)
        self.depth = depth
        self.num_workers = num_workers
        self.human_color = human_color

    @property
    def human_cell(self) -> Optional[CellState]:
        """Color the human plays, or None for self play."""
        return None if self.human_color is None else COLORS[self.human_color]

    def initial_state(self) -> GameState:
        """Standard starting layout; the first color always opens."""
        return GameState.initial(self.board_size)

    def __repr__(self) -> str:
        return (
            f"Config(board_size={self.board_size}, depth={self.depth}, "
            f"num_workers={self.num_workers}, human_color={self.human_color!r})"
        )


# Default configuration
DEFAULT_CONFIG = Config()

__all__ = ["Config", "DEFAULT_CONFIG", "DEFAULT_DEPTH", "DEFAULT_WORKER_COUNT", "COLORS"]
