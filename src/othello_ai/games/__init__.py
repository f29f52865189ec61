"""
Games module - board, placement rules, and the immutable game state.
"""

from othello_ai.games.board import (
    STANDARD_SIZE,
    board_from_rows,
    board_to_rows,
    disk_difference,
    empty_board,
    initial_board,
    render,
)
from othello_ai.games.game_rules import (
    DIRECTIONS,
    apply_move,
    can_place,
    flips_for,
    in_bounds,
    legal_moves,
)
from othello_ai.games.game_state import GameState

__all__ = [
    "GameState",
    "STANDARD_SIZE",
    "empty_board",
    "initial_board",
    "board_from_rows",
    "board_to_rows",
    "disk_difference",
    "render",
    "DIRECTIONS",
    "in_bounds",
    "can_place",
    "apply_move",
    "flips_for",
    "legal_moves",
]
