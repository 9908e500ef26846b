"""
Move input state machine for console TicTacToe.

Resolves one player's turn:

    Request -> Parse -> Check -> done
                 |        |
                 v        v
               ReRequest <-

Bad input or a taken cell sends the player back to ReRequest with the
error shown. The loop only ends once a legal move is on the board.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .board import Board
from .config import GameConfig
from .coordinate import Coordinate
from .errors import CellOccupied, InvalidEntry, Terminated, TicTacToeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    """Show the board and ask for a move."""
    player_id: int


@dataclass(frozen=True)
class ReRequest:
    """Ask again after a rejected move."""
    player_id: int
    error: TicTacToeError   # InvalidEntry or CellOccupied


@dataclass(frozen=True)
class Parse:
    """Turn the typed text into a cell."""
    player_id: int
    text: str


@dataclass(frozen=True)
class Check:
    """Try to claim the parsed cell."""
    player_id: int
    coord: Coordinate


MoveState = Union[Request, ReRequest, Parse, Check]


def parse_move(text: str) -> Coordinate:
    """
    Parse console notation like "a1" or "C3" into a cell.

    The first character is the column (a-c, any case), the rest is the
    row (1-3). Surrounding whitespace is ignored.

    Args:
        text: Raw line typed by the player.

    Returns:
        The named cell.

    Raises:
        InvalidEntry: The text doesn't name a cell.
    """
    trimmed = text.strip()
    col_token, row_token = trimmed[:1].lower(), trimmed[1:]

    if len(col_token) != 1 or col_token not in GameConfig.COLUMN_LABELS:
        raise InvalidEntry(trimmed)
    if len(row_token) != 1 or row_token not in GameConfig.ROW_LABELS:
        raise InvalidEntry(trimmed)

    return Coordinate(
        row=GameConfig.ROW_LABELS.index(row_token),
        col=GameConfig.COLUMN_LABELS.index(col_token)
    )


class MoveStateMachine:
    """
    Runs the move input states for one turn at a time.

    Args:
        console: Console used for prompts, input and drawing the board.
    """

    def __init__(self, console):
        self.console = console

    def resolve(self, player_id: int, board: Board) -> None:
        """
        Run a whole turn, from the first prompt until a move is committed.

        Args:
            player_id: The player whose turn it is.
            board: The board the move goes on.
        """
        state: MoveState = Request(player_id)
        while True:
            try:
                state = self.run(state, board)
            except Terminated:
                return

    def run(self, state: MoveState, board: Board) -> MoveState:
        """
        Perform one state's action.

        Args:
            state: The current move state.
            board: The board being played on.

        Returns:
            The state to run next.

        Raises:
            Terminated: The move was committed and the turn is over.
        """
        if isinstance(state, Request):
            return self._request(state, board)
        if isinstance(state, ReRequest):
            return self._re_request(state, board)
        if isinstance(state, Parse):
            return self._parse(state)
        if isinstance(state, Check):
            return self._check(state, board)
        raise TypeError(f"Unknown move state: {state!r}")

    def _request(self, state: Request, board: Board) -> Parse:
        name = board.get_name(state.player_id)

        self.console.say("\nThe current board state is:\n")
        self.console.show_board(board)
        self.console.say(f"\nP{state.player_id}: {name} is up next.")
        text = self.console.ask("Please enter your next move (e.g. a1, b2):")

        return Parse(state.player_id, text)

    def _re_request(self, state: ReRequest, board: Board) -> Parse:
        name = board.get_name(state.player_id)
        text = self.console.ask(
            f"P{state.player_id}: {state.error} {name}, please enter a valid space: "
        )
        return Parse(state.player_id, text)

    def _parse(self, state: Parse) -> MoveState:
        try:
            coord = parse_move(state.text)
        except InvalidEntry as e:
            logger.info("Player %d entered invalid move %r", state.player_id, e.text)
            return ReRequest(state.player_id, e)
        return Check(state.player_id, coord)

    def _check(self, state: Check, board: Board) -> ReRequest:
        try:
            board.update(state.player_id, state.coord)
        except CellOccupied as e:
            logger.info("Player %d picked occupied cell %s", state.player_id, e.coord.label)
            return ReRequest(state.player_id, e)

        raise Terminated()
