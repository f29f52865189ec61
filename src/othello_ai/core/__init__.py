"""
Core module - fundamental types and the board codec.
"""

from othello_ai.core.types import (
    CELL_STRINGS,
    MOVERS,
    CellState,
    Move,
    Outcome,
    SearchScore,
    opponent,
)
from othello_ai.core.codec import decode_board, encode_board, encoded_length, hash_board

__all__ = [
    # Types
    "CellState",
    "Move",
    "Outcome",
    "SearchScore",
    "opponent",
    "MOVERS",
    "CELL_STRINGS",
    # Codec
    "encode_board",
    "decode_board",
    "encoded_length",
    "hash_board",
]
