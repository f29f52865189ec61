"""
Search module - evaluator, alpha-beta minimax, and root-parallel runner.
"""

from othello_ai.search.evaluator import DEFAULT_EVALUATOR, Evaluator, disk_differential
from othello_ai.search.minimax import (
    MinimaxSearch,
    SearchResult,
    best_next_board,
    evaluate,
    select_best,
)
from othello_ai.search.jobs import RootJob, RootResult
from othello_ai.search.runner import DEFAULT_WORKER_COUNT, SearchRunner

__all__ = [
    "Evaluator",
    "DEFAULT_EVALUATOR",
    "disk_differential",
    "MinimaxSearch",
    "SearchResult",
    "evaluate",
    "best_next_board",
    "select_best",
    "RootJob",
    "RootResult",
    "SearchRunner",
    "DEFAULT_WORKER_COUNT",
]
