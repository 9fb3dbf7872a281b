"""
Tests for the Board grid.

Tests:
- Gravity placement and column fullness
- Win scanning in every direction
- Fullness and rendering
"""

import numpy as np
import pytest

from connectfour.game.board import Board
from connectfour.utils import Player


def board_with(cells, player=Player.ONE, height=6, width=7) -> Board:
    board = Board(height, width)
    for row, col in cells:
        board.place(row, col, player)
    return board


class TestPlacement:
    """Tests for dropping and placing pieces."""

    def test_new_board_is_empty(self):
        """A new board has only EMPTY cells."""
        board = Board()
        assert board.grid.shape == (6, 7)
        assert np.all(board.grid == Player.EMPTY.value)

    def test_find_spot_starts_at_bottom(self):
        """Empty columns land on the bottom row."""
        board = Board()
        assert board.find_spot(3) == 5

    def test_find_spot_stacks_upward(self):
        """Each piece lands on top of the previous one."""
        board = Board()
        board.place(5, 2, Player.ONE)
        board.place(4, 2, Player.TWO)
        assert board.find_spot(2) == 3

    def test_full_column(self):
        """A column with no empty cell reports None and is full."""
        board = Board(height=2, width=3)
        board.place(1, 0, Player.ONE)
        board.place(0, 0, Player.TWO)
        assert board.find_spot(0) is None
        assert board.is_column_full(0)
        assert not board.is_column_full(1)

    def test_occupied_cell_is_never_overwritten(self):
        """Placing onto an occupied cell raises."""
        board = Board()
        board.place(5, 0, Player.ONE)
        with pytest.raises(ValueError):
            board.place(5, 0, Player.TWO)
        assert board.cell(5, 0) == Player.ONE

    def test_cell_out_of_bounds(self):
        """Reading off the board raises IndexError."""
        board = Board()
        with pytest.raises(IndexError):
            board.cell(6, 0)
        with pytest.raises(IndexError):
            board.cell(0, -1)

    def test_copy_is_independent(self):
        """Changes to a copy do not leak back."""
        board = Board()
        clone = board.copy()
        clone.place(5, 0, Player.ONE)
        assert board.cell(5, 0) == Player.EMPTY

    def test_is_full(self):
        """is_full is true only once every cell is occupied."""
        board = Board(height=1, width=2)
        board.place(0, 0, Player.ONE)
        assert not board.is_full()
        board.place(0, 1, Player.TWO)
        assert board.is_full()


class TestWinScan:
    """Tests for find_winning_run and has_win."""

    @pytest.mark.parametrize("cells", [
        [(2, 1), (2, 2), (2, 3), (2, 4)],        # horizontal
        [(1, 6), (2, 6), (3, 6), (4, 6)],        # vertical
        [(0, 0), (1, 1), (2, 2), (3, 3)],        # down-right
        [(2, 6), (3, 5), (4, 4), (5, 3)],        # down-left
    ])
    def test_every_direction_detected(self, cells):
        """A run of four is found whichever way it points."""
        board = board_with(cells)
        assert board.has_win(Player.ONE)
        assert sorted(board.find_winning_run(Player.ONE)) == sorted(cells)
        assert not board.has_win(Player.TWO)

    def test_three_is_not_a_win(self):
        """Three in a row is not enough."""
        board = board_with([(5, 0), (5, 1), (5, 2)])
        assert not board.has_win(Player.ONE)

    def test_runs_do_not_wrap_around_edges(self):
        """Cells split across the right and left edges are not a run."""
        board = board_with([(5, 5), (5, 6), (4, 0), (4, 1)])
        assert not board.has_win(Player.ONE)

    def test_mixed_players_do_not_win(self):
        """A run containing the other player's piece does not count."""
        board = board_with([(5, 0), (5, 1), (5, 3)])
        board.place(5, 2, Player.TWO)
        assert not board.has_win(Player.ONE)
        assert not board.has_win(Player.TWO)

    def test_first_run_in_scan_order(self):
        """With five in a row the run starting furthest left is reported."""
        board = board_with([(5, 1), (5, 2), (5, 3), (5, 4), (5, 5)])
        assert board.find_winning_run(Player.ONE) == [(5, 1), (5, 2), (5, 3), (5, 4)]

    def test_board_smaller_than_run(self):
        """Boards too small for four in a row never report a win."""
        board = board_with([(0, 0), (0, 1), (0, 2)], height=1, width=3)
        assert board.find_winning_run(Player.ONE) is None


class TestRender:
    """Tests for ASCII rendering."""

    def test_render_shows_pieces_and_columns(self):
        """Pieces are drawn with their symbols and columns are numbered."""
        board = Board(height=2, width=3)
        board.place(1, 0, Player.ONE)
        board.place(1, 1, Player.TWO)
        text = board.render()
        lines = text.splitlines()
        assert lines[2] == "| X | O |   |"
        assert "0" in lines[-1] and "2" in lines[-1]

    def test_render_highlights_cells(self):
        """Highlighted cells are bracketed."""
        board = Board(height=1, width=2)
        board.place(0, 1, Player.TWO)
        assert "[O]" in board.render(highlight=[(0, 1)])
