"""
utils.py - Constants, enumerations and helpers shared across the package

Row 0 is the top of the board and row ``height - 1`` the bottom, so pieces
fall towards larger row indices.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

# Board defaults
ROWS = 6
COLS = 7
CONNECT_N = 4  # Pieces in a run needed to win

PLAYER_ONE_COLOR = "red"
PLAYER_TWO_COLOR = "black"

Position = Tuple[int, int]


class Player(Enum):
    """Players, plus EMPTY for unoccupied cells."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the opponent. EMPTY has no opponent."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class Outcome(Enum):
    """State of the game: in progress, won by a player, or tied."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    TIE = auto()

    @classmethod
    def won_by(cls, player: Player) -> 'Outcome':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        elif player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win outcome for {player!r}")

    @property
    def winner(self) -> Optional[Player]:
        if self == Outcome.PLAYER_ONE_WIN:
            return Player.ONE
        elif self == Outcome.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    def is_game_over(self) -> bool:
        return self != Outcome.IN_PROGRESS


class Direction(Enum):
    """Directions a run extends in from its starting cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (row, col) steps; the order is the order runs are checked in
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def run_from(row: int, col: int, direction: Direction, length: int = CONNECT_N) -> List[Position]:
    """
    Build the run of ``length`` cells starting at (row, col).

    Cells are not bounds-checked here; callers decide what out-of-bounds means.
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * i, col + dc * i) for i in range(length)]


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """Check if a position lies on a ``rows`` x ``cols`` board."""
    return 0 <= row < rows and 0 <= col < cols


def render_board_ascii(grid: np.ndarray, highlight: Optional[List[Position]] = None) -> str:
    """
    Render a board grid as ASCII art with column numbers underneath.

    Args:
        grid: 2D array of Player values
        highlight: Cells drawn in upper case brackets, e.g. a winning run

    Returns:
        Multi-line string
    """
    rows, cols = grid.shape
    marked = set(highlight or [])
    border = "+" + "-" * (cols * 4 - 1) + "+"

    lines = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            symbol = str(Player(int(grid[row, col])))
            if (row, col) in marked:
                cells.append(f"[{symbol}]")
            else:
                cells.append(f" {symbol} ")
        lines.append("|" + "|".join(cells) + "|")
    lines.append(border)
    lines.append(" " + " ".join(f"{col:^3}" for col in range(cols)))

    return "\n".join(lines)
