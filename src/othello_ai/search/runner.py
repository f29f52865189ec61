"""
Root-parallel search runner.

Root children are independent by construction (each owns its board), so
they are scored in a process pool, each with its own full alpha-beta window.
Selection afterwards uses the same earliest-candidate tie-break as the
sequential search, so both produce the same move.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
import pickle
import signal
from multiprocessing.pool import Pool
from typing import List, Optional, TYPE_CHECKING

import numpy as np

from othello_ai.core.codec import hash_board
from othello_ai.search.jobs import RootJob, RootResult
from othello_ai.search.minimax import MAXIMIZER, SearchResult, select_best
from othello_ai.search.worker import evaluate_root_job

if TYPE_CHECKING:
    from othello_ai.games.game_state import GameState
    from othello_ai.search.evaluator import Evaluator

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["SearchRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


def _worker_init():
    """Workers ignore SIGINT; only the main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def _check_picklable(evaluator: "Evaluator") -> None:
    try:
        pickle.dumps(evaluator)
    except (pickle.PicklingError, AttributeError, TypeError) as e:
        raise ValueError(
            f"Evaluator {evaluator!r} is not picklable; parallel search needs a module-level function"
        ) from e


if mp.current_process().name == 'MainProcess':
    atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class SearchRunner:
    """
    Scores root children in parallel and picks the best one.

    With num_workers <= 1 no pool is created and jobs run in-process.
    Otherwise the evaluator travels to the workers with each job, so it must
    be picklable (a module-level function, not a lambda or closure).
    """

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT, evaluator: Optional["Evaluator"] = None):
        self.num_workers = num_workers
        self.evaluator = evaluator
        self._pool: Optional[Pool] = None

        if self.parallel and evaluator is not None:
            _check_picklable(evaluator)

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    @property
    def parallel(self) -> bool:
        return self.num_workers > 1

    def _ensure_pool(self) -> Optional[Pool]:
        if self._pool is None and self.parallel:
            self._pool = Pool(processes=self.num_workers, initializer=_worker_init)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def _make_jobs(self, state: "GameState", depth: int) -> List[RootJob]:
        return [
            RootJob(index=i, move=move, child=child, depth=depth - 1, evaluator=self.evaluator)
            for i, (move, child) in enumerate(state.successors())
        ]

    def _run(self, jobs: List[RootJob]) -> List[RootResult]:
        pool = self._ensure_pool()
        if pool is None or len(jobs) < 2:
            return [evaluate_root_job(job) for job in jobs]
        return pool.map(evaluate_root_job, jobs)

    def search(self, state: "GameState", depth: int) -> Optional[SearchResult]:
        """Same contract as MinimaxSearch.search, with root children fanned out."""
        if state.is_terminal():
            return None

        jobs = self._make_jobs(state, depth)
        if not jobs:
            return None

        try:
            results = sorted(self._run(jobs), key=lambda r: r.index)
        except KeyboardInterrupt:
            logger.info("Interrupted during root search")
            raise

        scored = [(job.move, job.child, result.score) for job, result in zip(jobs, results)]
        move, child, score = select_best(scored, maximizing=state.mover == MAXIMIZER)
        nodes = sum(r.nodes for r in results)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s plays %s on %s (score %s, depth %d, %d nodes, %d workers)",
                state.mover.name, move if move is not None else "pass",
                hash_board(state.board), score, depth, nodes, self.num_workers,
            )

        return SearchResult(board=np.array(child.board), move=move, score=score, nodes=nodes, depth=depth)

    def best_next_board(self, state: "GameState", depth: int) -> Optional[np.ndarray]:
        result = self.search(state, depth)
        return None if result is None else result.board
