"""
Board codec - 2-bit cell codes, row-major, four cells per byte.

    00 = first color
    01 = second color
    10 = empty

The first cell of each byte occupies the high bits. A trailing partial byte
is padded with empty codes. Used for fixtures and board fingerprints.
"""

from __future__ import annotations

import hashlib

import numpy as np

from othello_ai.core.types import CellState
from othello_ai.errors import InvalidBoardError

_SHIFTS = np.array([6, 4, 2, 0], dtype=np.uint8)


def encoded_length(size: int) -> int:
    """Number of bytes needed for a size x size board."""
    return (size * size + 3) // 4


def encode_board(board: np.ndarray) -> bytes:
    """Pack a board into 2-bit codes."""
    flat = np.asarray(board, dtype=np.uint8).ravel()
    if np.any(flat > CellState.EMPTY):
        raise InvalidBoardError("Board contains cell codes outside 0..2")

    pad = (-flat.size) % 4
    if pad:
        flat = np.concatenate([flat, np.full(pad, CellState.EMPTY, dtype=np.uint8)])

    quads = flat.reshape(-1, 4) << _SHIFTS
    return np.bitwise_or.reduce(quads, axis=1).astype(np.uint8).tobytes()


def decode_board(data: bytes, size: int) -> np.ndarray:
    """Unpack 2-bit codes into a fresh int8 (size, size) board."""
    if len(data) != encoded_length(size):
        raise InvalidBoardError(
            f"Expected {encoded_length(size)} bytes for a {size}x{size} board, got {len(data)}"
        )

    packed = np.frombuffer(data, dtype=np.uint8)
    cells = ((packed[:, None] >> _SHIFTS) & 0b11).ravel()[: size * size]
    if np.any(cells > CellState.EMPTY):
        raise InvalidBoardError("Payload contains reserved cell code 11")

    return cells.astype(np.int8).reshape(size, size)


def hash_board(board: np.ndarray) -> str:
    """Short stable fingerprint of a board, for logging."""
    return hashlib.sha256(encode_board(board)).hexdigest()[:16]
