"""
Tests for othello_ai.games.game_rules

Tests ray walking, legality and flipping against an independent
string-matching oracle.
"""

import re

import numpy as np
import pytest

from othello_ai.core.types import CellState, Move, opponent
from othello_ai.errors import IllegalMoveError
from othello_ai.games.board import board_from_rows, board_to_rows, count
from othello_ai.games.game_rules import (
    DIRECTIONS, apply_move, can_place, captured_along, flips_for, in_bounds, legal_moves,
)


def ray_cells(board, x, y, dx, dy):
    cells = []
    cx, cy = x + dx, y + dy
    while 0 <= cx < board.shape[0] and 0 <= cy < board.shape[1]:
        cells.append((cx, cy))
        cx, cy = cx + dx, cy + dy
    return cells


def oracle_can_place(board, x, y, mover):
    """Legal iff some ray reads as one or more opponent disks then a mover disk."""
    if board[x, y] != CellState.EMPTY:
        return False
    enemy = opponent(mover)
    for dx, dy in DIRECTIONS:
        text = "".join(
            "m" if board[c] == mover else "o" if board[c] == enemy else "."
            for c in ray_cells(board, x, y, dx, dy)
        )
        if re.match(r"o+m", text):
            return True
    return False


class TestDirections:
    def test_eight_unit_directions(self):
        assert len(DIRECTIONS) == 8
        assert len(set(DIRECTIONS)) == 8
        assert (0, 0) not in DIRECTIONS
        assert all(dx in (-1, 0, 1) and dy in (-1, 0, 1) for dx, dy in DIRECTIONS)


class TestInBounds:
    @pytest.mark.parametrize("x,y,expected", [
        (0, 0, True), (7, 7, True), (-1, 0, False), (0, 8, False), (8, 3, False),
    ])
    def test_cases(self, start_board, x, y, expected):
        assert in_bounds(start_board, x, y) is expected


class TestCanPlace:
    """Legality tests."""

    def test_initial_first_moves(self, start_board):
        moves = list(legal_moves(start_board, CellState.FIRST))
        assert moves == [Move(2, 4), Move(3, 5), Move(4, 2), Move(5, 3)]

    def test_initial_second_moves(self, start_board):
        moves = list(legal_moves(start_board, CellState.SECOND))
        assert moves == [Move(2, 3), Move(3, 2), Move(4, 5), Move(5, 4)]

    def test_occupied_cell(self, start_board):
        assert can_place(start_board, 3, 3, CellState.SECOND) is False

    @pytest.mark.parametrize("x,y", [(-1, 4), (2, -1), (8, 0), (0, 8)])
    def test_out_of_range_declined(self, start_board, x, y):
        """Out-of-range coordinates are declined, never wrapped."""
        assert can_place(start_board, x, y, CellState.FIRST) is False

    def test_adjacent_own_disk_not_enough(self):
        """A mover disk right next to the cell with nothing between does not count."""
        board = board_from_rows([
            "....",
            ".X..",
            "....",
            "....",
        ])
        assert can_place(board, 0, 0, CellState.FIRST) is False

    def test_ray_ending_in_empty_fails(self):
        board = board_from_rows([
            ".OO.",
            "....",
            "....",
            "....",
        ])
        assert can_place(board, 0, 0, CellState.FIRST) is False

    def test_ray_ending_off_board_fails(self):
        board = board_from_rows([
            ".OOO",
            "....",
            "....",
            "....",
        ])
        assert can_place(board, 0, 0, CellState.FIRST) is False

    def test_long_ray(self):
        board = board_from_rows([
            ".OOX",
            "....",
            "....",
            "....",
        ])
        assert can_place(board, 0, 0, CellState.FIRST) is True

    def test_diagonal(self):
        board = board_from_rows([
            "....",
            ".O..",
            "..X.",
            "....",
        ])
        assert can_place(board, 0, 0, CellState.FIRST) is True
        # (2,2) X is bracketed against the O at (1,1)
        assert can_place(board, 3, 3, CellState.SECOND) is True

    def test_diagonal_without_bracket(self):
        """Opponent disks running into the board edge capture nothing."""
        board = board_from_rows([
            "....",
            ".O..",
            "..O.",
            "...O",
        ])
        assert can_place(board, 0, 0, CellState.FIRST) is False
        assert captured_along(board, 0, 0, 1, 1, CellState.FIRST) == []

    @pytest.mark.parametrize("seed", range(12))
    def test_matches_oracle(self, seed, random_board):
        board = random_board(seed, size=6)
        for mover in (CellState.FIRST, CellState.SECOND):
            for x in range(6):
                for y in range(6):
                    assert can_place(board, x, y, mover) == oracle_can_place(board, x, y, mover)


class TestCapturedAlong:
    def test_returns_crossed_cells(self):
        board = board_from_rows([
            ".OOX",
            "....",
            "....",
            "....",
        ])
        assert captured_along(board, 0, 0, 0, 1, CellState.FIRST) == [Move(0, 1), Move(0, 2)]
        assert captured_along(board, 0, 0, 1, 0, CellState.FIRST) == []


class TestApplyMove:
    """Placement and flipping tests."""

    def test_scenario_single_flip(self, start_board):
        """A at (2,4) captures exactly (3,4) and nothing else changes."""
        assert can_place(start_board, 2, 4, CellState.FIRST)
        new_board = apply_move(start_board, 2, 4, CellState.FIRST)

        expected = start_board.copy()
        expected[2, 4] = CellState.FIRST
        expected[3, 4] = CellState.FIRST
        assert np.array_equal(new_board, expected)

    def test_input_untouched(self, start_board):
        before = start_board.copy()
        apply_move(start_board, 2, 4, CellState.FIRST)
        assert np.array_equal(start_board, before)

    def test_multiple_directions(self):
        """Captures along every succeeding ray are collected in direction order."""
        board = board_from_rows([
            ".OX.",
            "O...",
            "X...",
            "....",
        ])
        assert flips_for(board, 0, 0, CellState.FIRST) == [Move(0, 1), Move(1, 0)]
        new_board = apply_move(board, 0, 0, CellState.FIRST)
        assert board_to_rows(new_board) == ["XXX.", "X...", "X...", "...."]

    def test_flips_stop_at_first_own_disk(self):
        board = board_from_rows([
            ".OXO",
            "....",
            "....",
            "...X",
        ])
        new_board = apply_move(board, 0, 0, CellState.FIRST)
        assert board_from_rows(["XXXO", "....", "....", "...X"]).tolist() == new_board.tolist()

    def test_every_direction_flips(self):
        board = board_from_rows([
            "X.X.X.",
            ".OOO..",
            "XO.OX.",
            ".OOO..",
            "X.X.X.",
            "......",
        ])
        new_board = apply_move(board, 2, 2, CellState.FIRST)
        assert count(new_board, CellState.SECOND) == 0
        assert count(new_board, CellState.FIRST) == 8 + 8 + 1

    def test_occupied_raises(self, start_board):
        with pytest.raises(IllegalMoveError, match="occupied"):
            apply_move(start_board, 3, 3, CellState.FIRST)

    def test_no_capture_raises(self, start_board):
        with pytest.raises(IllegalMoveError):
            apply_move(start_board, 0, 0, CellState.FIRST)

    def test_out_of_range_raises(self, start_board):
        with pytest.raises(IllegalMoveError, match="outside"):
            apply_move(start_board, -1, 0, CellState.FIRST)
        with pytest.raises(ValueError):
            apply_move(start_board, 0, 8, CellState.FIRST)


class TestPlacementProperties:
    """Properties over every legal move on random boards."""

    @pytest.mark.parametrize("seed", range(10))
    def test_counts_and_locality(self, seed, random_board):
        board = random_board(seed, size=6)
        for mover in (CellState.FIRST, CellState.SECOND):
            enemy = opponent(mover)
            for x, y in legal_moves(board, mover):
                flips = flips_for(board, x, y, mover)
                new_board = apply_move(board, x, y, mover)

                assert len(flips) >= 1
                assert count(new_board, mover) == count(board, mover) + 1 + len(flips)
                assert count(new_board, enemy) == count(board, enemy) - len(flips)

                on_rays = {(x, y)}
                for dx, dy in DIRECTIONS:
                    on_rays.update(ray_cells(board, x, y, dx, dy))
                changed = {tuple(int(v) for v in c) for c in np.argwhere(new_board != board)}
                assert changed <= on_rays
                assert changed == {(x, y)} | {tuple(f) for f in flips}
