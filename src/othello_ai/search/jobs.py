"""
Job data structures for root-parallel search.

Defines the input (RootJob) and output (RootResult) types used
by worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from othello_ai.core.types import Move, SearchScore
    from othello_ai.games.game_state import GameState
    from othello_ai.search.evaluator import Evaluator


@dataclass(frozen=True)
class RootJob:
    """
    Self-contained job for a worker process.

    One root child plus the remaining depth. Each job searches with its own
    full window; no bounds are shared between jobs.
    """
    index: int  # enumeration order at the root
    move: Optional["Move"]
    child: "GameState"
    depth: int  # plies left below the child
    evaluator: Optional["Evaluator"] = None


@dataclass
class RootResult:
    """Score for one root child."""
    index: int
    score: "SearchScore"
    nodes: int
