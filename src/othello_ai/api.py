"""
Public API for playing against the engine in a terminal.

Usage:
    from othello_ai import Config, play_game

    play_game(Config(depth=4, human_color="first"))
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from othello_ai.core.types import CellState, Move
from othello_ai.match import Match
from othello_ai.search.runner import SearchRunner
from othello_ai.utils.config import DEFAULT_CONFIG, Config

logger = logging.getLogger(__name__)


def parse_move(raw: str) -> Move:
    """Parse 'x,y' into a Move. Raises ValueError on malformed input."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 'x,y', got {raw!r}")
    return Move(int(parts[0]), int(parts[1]))


def _human_turn(match: Match, read: Callable[[str], str]) -> Move:
    """Prompt until the human enters a legal move, apply it, return it."""
    print(f"\nYour turn ({match.current_player().name})")
    print("Format: x,y (row,column)")

    while True:
        try:
            move = parse_move(read("Move: "))
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue
        if match.play_human(move.x, move.y):
            return move
        print("You cannot place the disk here.")


def _ai_turn(match: Match) -> Optional[Move]:
    """AI searches and applies its move. Returns None if it passed."""
    return match.play_ai()


def play_game(
    config: Config = DEFAULT_CONFIG,
    read: Callable[[str], str] = input,
) -> Match:
    """
    Main entry point: run one match to completion in the terminal.

    Parameters
    ----------
    config : Config
        Board size, search depth, worker count and human color
        (None for AI self play).
    read : Callable[[str], str]
        Line reader for human input.
    """
    runner = SearchRunner(config.num_workers)
    match = Match(config, runner=runner)

    print(f"Starting {config.board_size}x{config.board_size} game, search depth {config.depth}")
    print(match.state.state_string())

    try:
        with runner:
            while not match.is_over():
                mover = match.current_player()
                if match.must_pass():
                    match.pass_turn()
                    print(f"\nSkipping {mover.name}'s turn.")
                    continue

                if match.is_human_turn():
                    move = _human_turn(match, read)
                    print(f"\nYou played: {move.x},{move.y}")
                else:
                    move = _ai_turn(match)
                    print(f"\nAI ({mover.name}) played: {move.x},{move.y}")

                print(match.state.state_string())

            print("\n" + "=" * 40)
            print("GAME OVER")
            print("=" * 40)
            print(
                f"Final: X {match.state.count(CellState.FIRST)} - O {match.state.count(CellState.SECOND)}. "
                f"{match.result_message()}"
            )

    except KeyboardInterrupt:
        print("\nInterrupted - shutting down...")
        runner.shutdown(force=True)
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return match


__all__ = ["play_game", "parse_move", "Match"]
