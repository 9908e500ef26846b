"""
Game state machine for console TicTacToe.

    EnterInfo(1) -> EnterInfo(2) -> PlayerMove(1) <-> PlayerMove(2)
                                          |
                                          v
                                PlayerWin(n) / PlayerDraw

Each state's run() does its I/O and changes the board; next() picks the
state that follows, or raises Terminated once the game is over.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .board import Board
from .config import GameConfig
from .errors import Terminated
from .move_states import MoveStateMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnterInfo:
    """Ask a player for their name."""
    player_id: int


@dataclass(frozen=True)
class PlayerMove:
    """A player takes their turn."""
    player_id: int


@dataclass(frozen=True)
class PlayerWin:
    """A player has won. Terminal."""
    player_id: int


@dataclass(frozen=True)
class PlayerDraw:
    """The board filled up with no winner. Terminal."""


GameState = Union[EnterInfo, PlayerMove, PlayerWin, PlayerDraw]


def initial_state() -> GameState:
    """The state every match starts in."""
    return EnterInfo(GameConfig.FIRST_PLAYER)


class GameStateMachine:
    """
    Runs the game states.

    Args:
        console: Console used for prompts, input and drawing the board.
    """

    def __init__(self, console):
        self.console = console
        self.moves = MoveStateMachine(console)

    def run(self, state: GameState, board: Board) -> None:
        """
        Perform the state's action.

        Args:
            state: The current game state.
            board: The board being played on.
        """
        if isinstance(state, EnterInfo):
            self._enter_info(state, board)
        elif isinstance(state, PlayerMove):
            self.moves.resolve(state.player_id, board)
        elif isinstance(state, PlayerWin):
            self._announce_win(state, board)
        elif isinstance(state, PlayerDraw):
            self._announce_draw(board)
        else:
            raise TypeError(f"Unknown game state: {state!r}")

    def next(self, state: GameState, board: Board) -> GameState:
        """
        Decide which state follows.

        Args:
            state: The state that just ran.
            board: The board being played on.

        Returns:
            The next state.

        Raises:
            Terminated: The game is over.
        """
        if isinstance(state, EnterInfo):
            if state.player_id < GameConfig.TOTAL_PLAYERS:
                return EnterInfo(state.player_id + 1)
            return PlayerMove(GameConfig.FIRST_PLAYER)

        if isinstance(state, PlayerMove):
            next_id = (state.player_id % GameConfig.TOTAL_PLAYERS) + 1
            # A move that completes a line and fills the board is a win
            if board.check_win(state.player_id):
                return PlayerWin(state.player_id)
            if board.is_full():
                return PlayerDraw()
            return PlayerMove(next_id)

        if isinstance(state, (PlayerWin, PlayerDraw)):
            raise Terminated()

        raise TypeError(f"Unknown game state: {state!r}")

    def _enter_info(self, state: EnterInfo, board: Board) -> None:
        name = self.console.ask(f"Player {state.player_id}: Please enter your name:")
        board.set_name(state.player_id, name.strip())
        logger.debug("Player %d is %r", state.player_id, name.strip())

    def _announce_win(self, state: PlayerWin, board: Board) -> None:
        name = board.get_name(state.player_id)
        self.console.say(f"\n\nP{state.player_id}: {name} is the winner!")
        self._show_final_board(board)

    def _announce_draw(self, board: Board) -> None:
        self.console.say("\n\nThe game ended in a draw!")
        self._show_final_board(board)

    def _show_final_board(self, board: Board) -> None:
        self.console.say("The final board state is:\n")
        self.console.show_board(board)
        self.console.say()
