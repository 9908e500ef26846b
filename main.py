"""
Main entry point for console TicTacToe.

This script ties together:
- Game (board, game state machine, move input state machine)
- Console (line reader, board renderer)

Run this script to play TicTacToe with two players at one terminal!
"""

import logging
import sys
from typing import List, Optional

from game.board import Board
from game.config import GameConfig
from game.errors import Terminated, TicTacToeError
from game.game_states import GameState, GameStateMachine, initial_state

from console import AsciiRenderer, BoxDrawingRenderer, Console

logger = logging.getLogger(__name__)

# Exit status after Ctrl-C, as shells report it
EXIT_INTERRUPTED = 130


class TicTacToeGame:
    """
    Owns the board and the current game state for one match.

    Game flow:
    1. Both players enter their names
    2. Players take turns until someone wins or the board is full
    3. The result and final board are shown
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Args:
            console: Console to play on (stdin/stdout by default).
        """
        self.console = console or Console()
        self.board = Board()
        self.machine = GameStateMachine(self.console)
        self.state: GameState = initial_state()

    def run(self) -> None:
        """
        Play the match to the end.

        Raises:
            TicTacToeError: Something fatal happened. The match can't go on.
        """
        while True:
            logger.debug("Running %s", self.state)
            self.machine.run(self.state, self.board)
            try:
                self.state = self.machine.next(self.state, self.board)
            except Terminated:
                logger.debug("Game over")
                return


def configure_logging(level: str = GameConfig.DEFAULT_LOG_LEVEL) -> None:
    """Send diagnostics to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level),
        format=GameConfig.LOG_FORMAT,
        stream=sys.stderr
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit status.
    """
    import argparse

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--log-level",
        choices=GameConfig.LOG_LEVELS,
        default=GameConfig.DEFAULT_LOG_LEVEL,
        help="Diagnostic log level (logs go to stderr)"
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Draw the board with plain ASCII instead of box-drawing characters"
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    renderer = AsciiRenderer() if args.ascii else BoxDrawingRenderer()
    game = TicTacToeGame(Console(renderer=renderer))

    print("Welcome to Tic-Tac-Toe!!!\n")

    try:
        game.run()
    except TicTacToeError as e:
        logger.error("Fatal error in state %s: %s", game.state, e)
        print(f"Fatal Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return EXIT_INTERRUPTED

    return 0


if __name__ == "__main__":
    sys.exit(main())
