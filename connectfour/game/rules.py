"""
rules.py - Game state management for Connect Four

This module provides:
1. GameConfig, the per-game board size and cosmetic player colours
2. MoveResult, the value every move attempt returns
3. GameState, which owns the board, the turn pointer and the outcome
4. Free functions (new_game, drop_piece, cell_at, outcome) for callers that
   prefer to pass the state around explicitly
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, PLAYER_ONE_COLOR, PLAYER_TWO_COLOR,
                               Outcome, Player, Position)
from connectfour.game.board import Board


class MoveKind(Enum):
    """What a move attempt did."""
    PLACED = auto()
    WIN = auto()
    TIE = auto()
    REJECTED = auto()


class RejectReason(Enum):
    """Why a move attempt was refused."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions and the colours echoed back in move results."""
    height: int = ROWS
    width: int = COLS
    player1_color: str = PLAYER_ONE_COLOR
    player2_color: str = PLAYER_TWO_COLOR

    def __post_init__(self):
        for name in ("height", "width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    def color_for(self, player: Player) -> Optional[str]:
        if player == Player.ONE:
            return self.player1_color
        elif player == Player.TWO:
            return self.player2_color
        return None


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single drop_piece call.

    Placements (PLACED, WIN, TIE) carry the landing row and column, the
    player who moved and that player's colour. REJECTED results carry only
    a reason.
    """
    kind: MoveKind
    row: Optional[int] = None
    col: Optional[int] = None
    player: Optional[Player] = None
    color: Optional[str] = None
    reason: Optional[RejectReason] = None

    @classmethod
    def placed(cls, row: int, col: int, player: Player, color: Optional[str] = None) -> 'MoveResult':
        return cls(MoveKind.PLACED, row, col, player, color)

    @classmethod
    def win(cls, row: int, col: int, player: Player, color: Optional[str] = None) -> 'MoveResult':
        return cls(MoveKind.WIN, row, col, player, color)

    @classmethod
    def tie(cls, row: int, col: int, player: Player, color: Optional[str] = None) -> 'MoveResult':
        return cls(MoveKind.TIE, row, col, player, color)

    @classmethod
    def rejected(cls, reason: RejectReason) -> 'MoveResult':
        return cls(MoveKind.REJECTED, reason=reason)

    @property
    def is_rejected(self) -> bool:
        return self.kind == MoveKind.REJECTED

    @property
    def ends_game(self) -> bool:
        return self.kind in (MoveKind.WIN, MoveKind.TIE)

    def to_dict(self) -> Dict:
        """Plain representation for adapters that log or serialise results."""
        return {
            'kind': self.kind.name,
            'row': self.row,
            'col': self.col,
            'player': self.player.value if self.player else None,
            'color': self.color,
            'reason': self.reason.name if self.reason else None,
        }


def _is_column_index(column) -> bool:
    return isinstance(column, (int, np.integer)) and not isinstance(column, bool)


class GameState:
    """
    A single Connect Four game.

    The state is mutated only by drop_piece. Once the outcome is a win or a
    tie every further move is rejected with GAME_ALREADY_OVER.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Start a fresh game.

        Args:
            config: Board size and colours (defaults to 6x7, red/black)
        """
        self.config = config or GameConfig()
        debug.debug(f"Starting {self.config.height}x{self.config.width} game", "game")
        self.reset()

    def reset(self):
        """Reinitialise every field for a new game on the same config."""
        self.board = Board(self.config.height, self.config.width)
        self.current_player = Player.ONE
        self.outcome = Outcome.IN_PROGRESS
        self.winning_run: Optional[List[Position]] = None

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def width(self) -> int:
        return self.board.width

    def check_move(self, column) -> Optional[RejectReason]:
        """
        Check whether a drop into ``column`` would be accepted.

        Args:
            column: Column index (0-indexed)

        Returns:
            The reason the move would be rejected, or None if it is legal
        """
        if not _is_column_index(column) or not (0 <= column < self.width):
            return RejectReason.INVALID_COLUMN

        if self.outcome.is_game_over():
            return RejectReason.GAME_ALREADY_OVER

        if self.board.is_column_full(int(column)):
            return RejectReason.COLUMN_FULL

        return None

    def is_valid_move(self, column) -> bool:
        return self.check_move(column) is None

    def get_valid_moves(self) -> List[int]:
        if self.outcome.is_game_over():
            return []
        return [col for col in range(self.width) if self.is_valid_move(col)]

    def drop_piece(self, column) -> MoveResult:
        """
        Drop the current player's piece into ``column``.

        Args:
            column: Column index (0-indexed)

        Returns:
            PLACED, WIN or TIE with the landing cell, or REJECTED with a
            reason. Rejected moves change nothing, including whose turn it is.
        """
        reason = self.check_move(column)
        if reason is not None:
            debug.debug(f"Rejected move in column {column!r}: {reason.name}", "game")
            return MoveResult.rejected(reason)

        column = int(column)
        player = self.current_player
        color = self.config.color_for(player)
        row = self.board.find_spot(column)
        self.board.place(row, column, player)

        debug.start_timer("win_check")
        run = self.board.find_winning_run(player)
        debug.end_timer("win_check", "game")

        if run is not None:
            self.outcome = Outcome.won_by(player)
            self.winning_run = run
            debug.info(f"Player {player.name} wins with {run}", "game")
            return MoveResult.win(row, column, player, color)

        if self.board.is_full():
            self.outcome = Outcome.TIE
            debug.info("Board full, game is a tie", "game")
            return MoveResult.tie(row, column, player, color)

        self.current_player = player.other()
        debug.debug(f"{player.name} placed at ({row}, {column}); "
                    f"{self.current_player.name} to move", "game")
        return MoveResult.placed(row, column, player, color)

    def cell_at(self, row: int, col: int) -> Player:
        return self.board.cell(row, col)

    def is_game_over(self) -> bool:
        return self.outcome.is_game_over()

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    def render(self) -> str:
        return self.board.render(self.winning_run)


def new_game(config: Optional[GameConfig] = None, **overrides) -> GameState:
    """
    Create a GameState.

    Args:
        config: Full configuration; keyword overrides (height, width,
            player1_color, player2_color) build one when it is omitted

    Returns:
        A fresh game with Player ONE to move
    """
    if config is not None and overrides:
        raise TypeError("Pass either a GameConfig or keyword overrides, not both")
    if config is None:
        config = GameConfig(**overrides)
    return GameState(config)


def drop_piece(state: GameState, column) -> MoveResult:
    return state.drop_piece(column)


def cell_at(state: GameState, row: int, col: int) -> Player:
    return state.cell_at(row, col)


def outcome(state: GameState) -> Outcome:
    return state.outcome
