"""
Othello AI - Othello/Reversi engine with an alpha-beta minimax opponent.

Quick Start:
    from othello_ai import GameState

    state = GameState.initial(8)
    if state.can_place(2, 4):
        state = state.play(2, 4)
    board = state.get_next_optimal_board(depth=4)

Modules:
    core    - Cell codes, tagged search scores, 2-bit board codec
    games   - Board helpers, placement rules, immutable GameState
    search  - Evaluator, alpha-beta minimax, root-parallel runner
    match   - Synchronous human-vs-AI turn controller
"""

from othello_ai.api import play_game
from othello_ai.core import CellState, Move, Outcome, SearchScore
from othello_ai.errors import IllegalMoveError, InvalidBoardError
from othello_ai.games import GameState
from othello_ai.match import Match
from othello_ai.search import MinimaxSearch, SearchResult, SearchRunner, best_next_board
from othello_ai.utils.config import Config, DEFAULT_CONFIG

__version__ = "1.0.0"

__all__ = [
    # Main API
    "GameState",
    "Match",
    "play_game",
    "best_next_board",
    "MinimaxSearch",
    "SearchRunner",
    "SearchResult",
    "Config",
    "DEFAULT_CONFIG",
    # Types
    "CellState",
    "Move",
    "Outcome",
    "SearchScore",
    # Errors
    "IllegalMoveError",
    "InvalidBoardError",
]
