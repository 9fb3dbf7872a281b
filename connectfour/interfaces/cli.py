"""
cli.py - Command-line interface for playing Connect Four

Two people share one terminal. This module only turns typed column numbers
into drop_piece calls and prints what the engine reports back.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO

from connectfour.debug import debug, DebugLevel, parse_level
from connectfour.utils import ROWS, COLS, PLAYER_ONE_COLOR, PLAYER_TWO_COLOR
from connectfour.game.rules import GameConfig, GameState, MoveKind, RejectReason, new_game

QUIT = 'q'
RESTART = 'r'

REJECT_MESSAGES = {
    RejectReason.INVALID_COLUMN: "Column must be between 0 and {last}.",
    RejectReason.COLUMN_FULL: "Column {column} is full, pick another.",
    RejectReason.GAME_ALREADY_OVER: "The game is already over.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four CLI')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
    play_parser.add_argument('--rows', type=int, default=ROWS, help='Board height (default: 6)')
    play_parser.add_argument('--cols', type=int, default=COLS, help='Board width (default: 7)')
    play_parser.add_argument('--player1-color', default=PLAYER_ONE_COLOR,
                             help='Display colour for player 1')
    play_parser.add_argument('--player2-color', default=PLAYER_TWO_COLOR,
                             help='Display colour for player 2')
    play_parser.add_argument('--debug', action='store_true',
                             help='Enable debug mode (equivalent to --debug_level debug)')
    play_parser.add_argument('--debug_level',
                             choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                             default=None,
                             help='Set debug level (default: CONNECTFOUR_DEBUG_LEVEL or info)')
    return parser


class SimpleCLI:
    """Terminal front end that drives a GameState from typed input."""

    def __init__(self, input_fn: Callable[[str], str] = input, output: Optional[TextIO] = None):
        """
        Args:
            input_fn: Prompt-and-read function, ``input`` by default
            output: Stream to print to, stdout by default
        """
        self.input_fn = input_fn
        self.output = output or sys.stdout
        self.config = GameConfig()
        self.game: Optional[GameState] = None
        self.args = None

    def say(self, message: str = ""):
        print(message, file=self.output)

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply logging options."""
        parser = build_parser()
        self.args = parser.parse_args(argv)

        if self.args.command is None:
            return

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        elif self.args.debug_level:
            debug.configure(level=parse_level(self.args.debug_level))

        try:
            self.config = GameConfig(
                height=self.args.rows,
                width=self.args.cols,
                player1_color=self.args.player1_color,
                player2_color=self.args.player2_color,
            )
        except ValueError as e:
            parser.error(str(e))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI and return a process exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
            return 0

        self.say("Please specify a command. Use --help for options.")
        return 1

    def new_game(self):
        """Discard any current game and start a new one."""
        self.game = new_game(self.config)
        debug.info("New game started", "cli")

    def player_label(self, player) -> str:
        return f"Player {player.value} ({player}, {self.config.color_for(player)})"

    def play_game(self) -> None:
        """Play games until a player quits or input runs out."""
        self.new_game()
        self.say("Starting a new Connect Four game!")
        self.say(f"Enter a column number (0-{self.config.width - 1}) to drop a piece.")
        self.say(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        self.say(self.game.render())

        while not self.game.is_game_over():
            command = self.read_command()
            if command is None or command == QUIT:
                self.say("Quitting game.")
                return
            if command == RESTART:
                self.new_game()
                self.say("Game restarted.")
                self.say(self.game.render())
                continue
            if isinstance(command, int):
                self.play_move(command)

        self.announce_result()

    def read_command(self):
        """
        Read one line from the current player.

        Returns:
            A column index, QUIT, RESTART, None at end of input, or "" when
            the line could not be understood
        """
        prompt = f"{self.player_label(self.game.current_player)}, your move: "
        try:
            text = self.input_fn(prompt).strip().lower()
        except EOFError:
            return None

        if text in (QUIT, RESTART):
            return text
        try:
            return int(text)
        except ValueError:
            self.say("Invalid input. Please enter a column number or a command.")
            return ""

    def play_move(self, column: int):
        result = self.game.drop_piece(column)

        if result.kind == MoveKind.REJECTED:
            self.say(REJECT_MESSAGES[result.reason].format(
                column=column, last=self.config.width - 1))
            return

        self.say(self.game.render())

    def announce_result(self):
        self.say("Game over!")
        winner = self.game.winner
        if winner is not None:
            self.say(f"{self.player_label(winner)} won!")
        else:
            self.say("Tie!")


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
