"""
Worker process logic for root-parallel search.

Workers are stateless: every RootJob carries its child state and evaluator.
"""

from __future__ import annotations

from othello_ai.search.jobs import RootJob, RootResult
from othello_ai.search.minimax import MinimaxSearch, WINDOW_HIGH, WINDOW_LOW


def evaluate_root_job(job: RootJob) -> RootResult:
    """Search one root child with a fresh full window."""
    search = MinimaxSearch(job.evaluator)
    score = search.evaluate(job.child, job.depth, WINDOW_LOW, WINDOW_HIGH)
    return RootResult(index=job.index, score=score, nodes=search.nodes)
