"""
Minimax search with alpha-beta pruning over GameState nodes.

Scores are SearchScore values from the first color's perspective: the first
color maximizes, the second minimizes. Terminal nodes get WIN/LOSS/DRAW tags
that dominate every heuristic value.

Algorithm overview:

    def evaluate(state, depth, alpha, beta):
        if terminal:   return WIN / LOSS / DRAW     # checked first, even at depth 0
        if depth <= 0: return HEURISTIC(evaluator(state))

        best = worst value for the side to move
        for child in state.next_states():          # forced pass = single child
            best = better(best, evaluate(child, depth - 1, alpha, beta))
            if best is outside (alpha, beta): break
            tighten alpha (max side) or beta (min side) to best
        return best

At the root every child is evaluated with a fresh full window, and the
earliest (row-major) child keeps the slot unless a later one is strictly
better.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from othello_ai.core.codec import hash_board
from othello_ai.core.types import CellState, Move, SearchScore
from othello_ai.search.evaluator import DEFAULT_EVALUATOR, Evaluator

if TYPE_CHECKING:
    from othello_ai.games.game_state import GameState

logger = logging.getLogger(__name__)

MAXIMIZER = CellState.FIRST

# Full search window; nothing orders outside these two tags
WINDOW_LOW = SearchScore.loss()
WINDOW_HIGH = SearchScore.win()


@dataclass
class SearchResult:
    """Result of a root search."""
    board: np.ndarray
    move: Optional[Move]  # None when the side to move must pass
    score: SearchScore
    nodes: int
    depth: int


def terminal_score(state: "GameState") -> SearchScore:
    return SearchScore.terminal(state.score())


def is_improvement(candidate: SearchScore, best: SearchScore, maximizing: bool) -> bool:
    """Strict comparison; ties keep the earlier candidate."""
    return candidate > best if maximizing else candidate < best


def select_best(
    scored: Sequence[Tuple[Optional[Move], "GameState", SearchScore]],
    maximizing: bool,
) -> Tuple[Optional[Move], "GameState", SearchScore]:
    """
    Extremal entry of (move, child, score) triples in enumeration order.

    The first entry is retained unless a later one strictly improves on it,
    which makes the earliest row-major move win every tie.
    """
    best = scored[0]
    for entry in scored[1:]:
        if is_improvement(entry[2], best[2], maximizing):
            best = entry
    return best


class MinimaxSearch:
    """
    Depth-limited alpha-beta minimax.

    Single-threaded and synchronous. Counts visited nodes per search.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.evaluator = evaluator or DEFAULT_EVALUATOR
        self.nodes = 0

    def evaluate(
        self,
        state: "GameState",
        depth: int,
        alpha: SearchScore = WINDOW_LOW,
        beta: SearchScore = WINDOW_HIGH,
    ) -> SearchScore:
        """Alpha-beta value of state searched depth plies deep."""
        self.nodes += 1

        if state.is_terminal():
            return terminal_score(state)

        if depth <= 0:
            return SearchScore.heuristic(self.evaluator(state))

        children = state.next_states()
        if not children:
            # Unreachable with a pass child always present; stay total anyway
            return terminal_score(state)

        if state.mover == MAXIMIZER:
            best = WINDOW_LOW
            for child in children:
                best = max(best, self.evaluate(child, depth - 1, alpha, beta))
                if best >= beta:
                    break
                alpha = max(alpha, best)
        else:
            best = WINDOW_HIGH
            for child in children:
                best = min(best, self.evaluate(child, depth - 1, alpha, beta))
                if best <= alpha:
                    break
                beta = min(beta, best)

        return best

    def score_children(
        self,
        state: "GameState",
        depth: int,
    ) -> List[Tuple[Optional[Move], "GameState", SearchScore]]:
        """Every root child scored at depth - 1 with its own full window."""
        return [
            (move, child, self.evaluate(child, depth - 1, WINDOW_LOW, WINDOW_HIGH))
            for move, child in state.successors()
        ]

    def search(self, state: "GameState", depth: int) -> Optional[SearchResult]:
        """
        Pick the best child of state for its mover.

        Returns None when state is terminal (there is nothing to play).
        """
        self.nodes = 0
        if state.is_terminal():
            logger.debug("Root is terminal; no move to search")
            return None

        scored = self.score_children(state, depth)
        if not scored:
            return None

        move, child, score = select_best(scored, maximizing=state.mover == MAXIMIZER)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s plays %s on %s (score %s, depth %d, %d nodes)",
                state.mover.name, move if move is not None else "pass",
                hash_board(state.board), score, depth, self.nodes,
            )

        return SearchResult(
            board=np.array(child.board),
            move=move,
            score=score,
            nodes=self.nodes,
            depth=depth,
        )

    def best_next_board(self, state: "GameState", depth: int) -> Optional[np.ndarray]:
        result = self.search(state, depth)
        return None if result is None else result.board


def evaluate(
    state: "GameState",
    depth: int,
    alpha: SearchScore = WINDOW_LOW,
    beta: SearchScore = WINDOW_HIGH,
    evaluator: Optional[Evaluator] = None,
) -> SearchScore:
    """Alpha-beta value of state; see MinimaxSearch.evaluate."""
    return MinimaxSearch(evaluator).evaluate(state, depth, alpha, beta)


def best_next_board(
    state: "GameState",
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> Optional[np.ndarray]:
    """Board chosen for the mover of state, or None if state is terminal."""
    return MinimaxSearch(evaluator).best_next_board(state, depth)
