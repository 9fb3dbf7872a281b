"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation and the game state machine.
"""

from connectfour.game.board import Board
from connectfour.game.rules import (GameConfig, GameState, MoveKind, MoveResult, RejectReason,
                                    cell_at, drop_piece, new_game, outcome)

__all__ = ['Board', 'GameConfig', 'GameState', 'MoveKind', 'MoveResult', 'RejectReason',
           'cell_at', 'drop_piece', 'new_game', 'outcome']
