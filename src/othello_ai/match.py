"""
Match - synchronous human-vs-AI turn controller.

Sequences turns over immutable GameStates: legality checks for the human,
search for the AI, forced passes, and the final result. Pacing, rendering
and input belong to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from othello_ai.core.types import CellState, Move
from othello_ai.games.game_state import GameState
from othello_ai.search.minimax import MinimaxSearch, SearchResult
from othello_ai.search.runner import SearchRunner
from othello_ai.utils.config import DEFAULT_CONFIG, Config

logger = logging.getLogger(__name__)


class Match:
    """One game between a human color (or nobody) and the AI."""

    def __init__(
        self,
        config: Config = DEFAULT_CONFIG,
        state: Optional[GameState] = None,
        runner: Optional[SearchRunner] = None,
    ):
        self.config = config
        self.state = state if state is not None else config.initial_state()
        self.human_color = config.human_cell
        self.last_search: Optional[SearchResult] = None
        self._search = runner if runner is not None else MinimaxSearch()

    @property
    def ai_color(self) -> Optional[CellState]:
        """The AI's color; None in self play (the AI plays both)."""
        if self.human_color is None:
            return None
        return CellState(1 - self.human_color)

    def current_player(self) -> CellState:
        return self.state.mover

    def is_human_turn(self) -> bool:
        return self.human_color is not None and self.state.mover == self.human_color

    def is_over(self) -> bool:
        return self.state.is_terminal()

    def must_pass(self) -> bool:
        """The side to move has no legal placement but the game goes on."""
        return not self.state.can_make_move() and not self.is_over()

    def pass_turn(self) -> None:
        logger.info("Skipping %s's turn: no legal move", self.state.mover.name)
        self.state = self.state.pass_turn()

    def can_place(self, x: int, y: int) -> bool:
        return self.state.can_place(x, y)

    def play_human(self, x: int, y: int) -> bool:
        """Apply the human's placement. False (state unchanged) if illegal."""
        if not self.is_human_turn() or not self.state.can_place(x, y):
            return False
        self.state = self.state.play(x, y)
        self._log_if_over()
        return True

    def play_ai(self) -> Optional[Move]:
        """
        Search and apply the AI's move for the side to move.

        Returns the move played, or None if the AI had to pass.
        """
        if self.is_over():
            raise RuntimeError("Game is over")

        if not self.state.can_make_move():
            self.pass_turn()
            return None

        result = self._search.search(self.state, self.config.depth)
        self.last_search = result
        self.state = GameState(result.board, self.state.opponent)
        self._log_if_over()
        return result.move

    def winner(self) -> Optional[CellState]:
        """Color with more disks, or None on a tie."""
        score = self.state.score()
        if score > 0:
            return CellState.FIRST
        if score < 0:
            return CellState.SECOND
        return None

    def result_message(self) -> str:
        winner = self.winner()
        if winner is None:
            return "Draw!"
        if self.human_color is None:
            return f"{winner.name.capitalize()} won!"
        return "Player won!" if winner == self.human_color else "AI won!"

    def _log_if_over(self) -> None:
        if self.is_over():
            logger.info(
                "Game over: %d-%d (%s)",
                self.state.count(CellState.FIRST),
                self.state.count(CellState.SECOND),
                self.result_message(),
            )
