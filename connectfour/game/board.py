"""
board.py - Grid storage, gravity placement and win scanning

The Board knows nothing about turns or outcomes. It stores pieces, answers
where a dropped piece would land, and checks the whole grid for runs.
"""

from typing import List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, CONNECT_N, DIRECTION_VECTORS, Player, Position,
                               is_valid_position, render_board_ascii, run_from)


class Board:
    """
    A ``height`` x ``width`` Connect Four grid backed by a numpy array.

    Cells only ever go from EMPTY to occupied; nothing on the board is
    removed or replaced.
    """

    def __init__(self, height: int = ROWS, width: int = COLS):
        debug.trace(f"Initializing {height}x{width} board", "board")
        self.height = height
        self.width = width
        self.grid = np.zeros((height, width), dtype=int)

    def in_bounds(self, row: int, col: int) -> bool:
        return is_valid_position(row, col, self.height, self.width)

    def cell(self, row: int, col: int) -> Player:
        """
        Get the occupant of a cell.

        Raises:
            IndexError: If (row, col) is off the board
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.height}x{self.width} board")
        return Player(int(self.grid[row, col]))

    def find_spot(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would land in.

        Args:
            column: Column index, assumed to be on the board

        Returns:
            Lowest empty row, or None if the column is full
        """
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def is_column_full(self, column: int) -> bool:
        return self.find_spot(column) is None

    def place(self, row: int, column: int, player: Player):
        """Occupy an empty cell. Occupied cells are never overwritten."""
        if self.grid[row, column] != Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")
        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def is_full(self) -> bool:
        return bool(np.all(self.grid != Player.EMPTY.value))

    def _is_winning_run(self, cells: List[Position], player: Player) -> bool:
        return all(self.in_bounds(r, c) and self.grid[r, c] == player.value for r, c in cells)

    def find_winning_run(self, player: Player) -> Optional[List[Position]]:
        """
        Scan every cell for a run of four belonging to ``player``.

        Each cell starts four candidate runs (horizontal, vertical and both
        downward diagonals). The first winning run in row-major order wins.

        Returns:
            The winning cells, or None if the player has no run
        """
        for row in range(self.height):
            for col in range(self.width):
                for direction in DIRECTION_VECTORS:
                    cells = run_from(row, col, direction, CONNECT_N)
                    if self._is_winning_run(cells, player):
                        return cells
        return None

    def has_win(self, player: Player) -> bool:
        return self.find_winning_run(player) is not None

    def copy(self) -> 'Board':
        new_board = Board(self.height, self.width)
        new_board.grid = self.grid.copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """Return a copy of the grid that callers may modify freely."""
        return self.grid.copy()

    def render(self, highlight: Optional[List[Position]] = None) -> str:
        return render_board_ascii(self.grid, highlight)

    def __str__(self) -> str:
        return self.render()
