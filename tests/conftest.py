"""
Pytest fixtures for Connect Four tests.
"""

from typing import Iterable, List

import pytest

from connectfour.game.rules import GameState, MoveResult, new_game

# Fills a 6x7 board without anyone ever having four in a row. Columns end up
# striped (bottom to top) 1212 12 / 2121 21 in the order A A B B A A B.
TIE_SEQUENCE = (
    [0, 2, 2, 0] * 3
    + [1, 3, 3, 1] * 3
    + [4, 6, 6, 4] * 3
    + [5] * 6
)


def play(state: GameState, columns: Iterable[int]) -> List[MoveResult]:
    """Drop pieces into ``columns`` in order and collect the results."""
    return [state.drop_piece(col) for col in columns]


@pytest.fixture
def game() -> GameState:
    """A fresh default 6x7 game."""
    return new_game()


@pytest.fixture
def tie_sequence() -> List[int]:
    return list(TIE_SEQUENCE)
