"""
Exceptions raised by the engine.

Legality *queries* (can_place, can_make_move) never raise; these are for
operations the caller was expected to pre-validate.
"""


class IllegalMoveError(ValueError):
    """Placement on an occupied, out-of-range, or non-capturing cell."""

    def __init__(self, x: int, y: int, reason: str = "no disks to flip"):
        self.x = x
        self.y = y
        self.reason = reason
        super().__init__(f"Illegal move at ({x},{y}): {reason}")


class InvalidBoardError(ValueError):
    """Board array or encoded payload does not describe a valid board."""
