"""
Static evaluation of non-terminal leaves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from othello_ai.games.board import disk_difference

if TYPE_CHECKING:
    from othello_ai.games.game_state import GameState

# (state) -> int, first color's perspective, magnitude bounded by N²
Evaluator = Callable[["GameState"], int]


def disk_differential(state: "GameState") -> int:
    """Disk count difference; positive favors the first color."""
    return disk_difference(state.board)


DEFAULT_EVALUATOR: Evaluator = disk_differential
