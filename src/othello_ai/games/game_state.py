"""
GameState - immutable (board, mover) pairing.

Every transition allocates a fresh board, so states created during search
never alias each other's cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

import numpy as np

from othello_ai.core.types import MOVERS, CellState, Move, opponent
from othello_ai.games import board as boards
from othello_ai.games import game_rules

if TYPE_CHECKING:
    from othello_ai.search.evaluator import Evaluator


class GameState:
    """
    Lightweight immutable game state.

    The board is a private read-only int8 copy; the opponent is derived
    from the mover and never stored.
    """
    __slots__ = ('_board', '_mover')

    def __init__(self, board: np.ndarray, mover: int = CellState.FIRST):
        if mover not in MOVERS:
            raise ValueError(f"Mover must be FIRST or SECOND, got {mover!r}")
        owned = boards.validate_board(np.array(board, dtype=np.int8))
        owned.flags.writeable = False
        self._board = owned
        self._mover = CellState(mover)

    @classmethod
    def initial(cls, size: int = boards.STANDARD_SIZE, mover: int = CellState.FIRST) -> "GameState":
        """Standard starting layout, first color to move by default."""
        return cls(boards.initial_board(size), mover)

    @classmethod
    def _adopt(cls, board: np.ndarray, mover: CellState) -> "GameState":
        """Wrap a board this module just allocated, skipping copy/validation."""
        state = cls.__new__(cls)
        board.flags.writeable = False
        state._board = board
        state._mover = mover
        return state

    # -- accessors ---------------------------------------------------------

    @property
    def board(self) -> np.ndarray:
        return self._board

    @property
    def mover(self) -> CellState:
        return self._mover

    @property
    def opponent(self) -> CellState:
        return opponent(self._mover)

    @property
    def size(self) -> int:
        return self._board.shape[0]

    # -- rules -------------------------------------------------------------

    def can_place(self, x: int, y: int) -> bool:
        """Pre-validate a placement for the mover; out-of-range is just False."""
        return game_rules.can_place(self._board, x, y, self._mover)

    def place_disk(self, x: int, y: int) -> np.ndarray:
        """
        Board after the mover places at (x, y).

        Raises IllegalMoveError if can_place(x, y) is False.
        """
        return game_rules.apply_move(self._board, x, y, self._mover)

    def play(self, x: int, y: int) -> "GameState":
        """Child state after placing at (x, y); the opponent moves next."""
        return GameState._adopt(self.place_disk(x, y), self.opponent)

    def pass_turn(self) -> "GameState":
        """Same board, mover swapped."""
        return GameState._adopt(self._board.copy(), self.opponent)

    def legal_moves(self) -> Iterator[Move]:
        """Legal placements in row-major order. Each call restarts the scan."""
        return game_rules.legal_moves(self._board, self._mover)

    def can_make_move(self) -> bool:
        return game_rules.has_legal_move(self._board, self._mover)

    def successors(self) -> List[Tuple[Optional[Move], "GameState"]]:
        """
        (move, child) pairs for every legal move in row-major order, or a
        single (None, pass child) when the mover has no legal move.
        """
        enemy = self.opponent
        pairs = [
            (move, GameState._adopt(game_rules.apply_move(self._board, move.x, move.y, self._mover), enemy))
            for move in self.legal_moves()
        ]
        return pairs or [(None, self.pass_turn())]

    def next_states(self) -> List["GameState"]:
        """Children of this state; a forced pass yields one mover-swapped child."""
        return [child for _, child in self.successors()]

    def is_terminal(self) -> bool:
        """Neither color has a legal move on this board."""
        return not (
            game_rules.has_legal_move(self._board, self._mover)
            or game_rules.has_legal_move(self._board, self.opponent)
        )

    def score(self) -> int:
        """count(first) - count(second); positive favors the first color."""
        return boards.disk_difference(self._board)

    def count(self, cell: int) -> int:
        return boards.count(self._board, cell)

    def get_next_optimal_board(
        self,
        depth: int,
        evaluator: Optional["Evaluator"] = None,
    ) -> Optional[np.ndarray]:
        """Board the search picks for the mover, or None if nothing to expand."""
        from othello_ai.search.minimax import MinimaxSearch

        return MinimaxSearch(evaluator).best_next_board(self, depth)

    # -- dunder ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._mover == other._mover and np.array_equal(self._board, other._board)

    def __hash__(self) -> int:
        return hash((self._board.tobytes(), int(self._mover)))

    def __reduce__(self):
        return (GameState, (np.array(self._board), int(self._mover)))

    def __repr__(self) -> str:
        return f"GameState(size={self.size}, mover={self._mover.name})"

    def state_string(self) -> str:
        return boards.render(self._board, highlights=list(self.legal_moves()))
