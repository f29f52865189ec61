"""
Command-line interface for playing against the engine.
"""

import argparse
import logging
from typing import List, Optional

from othello_ai.api import play_game
from othello_ai.utils.config import COLORS, DEFAULT_DEPTH, Config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Othello against an alpha-beta minimax AI"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=8,
        help="Board size, even and >= 4 (default: 8)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"AI search depth in plies (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--color", "-c",
        choices=list(COLORS.keys()),
        default="first",
        help="Color the human plays; first moves first (default: first)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays both colors (no human player)",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=1,
        help="Worker processes for root-parallel search (default: 1)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Translate parsed arguments into a validated Config."""
    return Config(
        board_size=args.size,
        depth=args.depth,
        num_workers=args.workers,
        human_color=None if args.self_play else args.color,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        raise SystemExit(f"error: {e}") from e

    play_game(config)


if __name__ == "__main__":
    main()
