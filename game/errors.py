"""
Errors raised by the TicTacToe engine.

InvalidEntry and CellOccupied are recovered by asking the same player
again. Everything else is fatal and ends the game.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for all game errors."""


class InvalidEntry(TicTacToeError):
    """Input text doesn't name a board cell."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f'Entry "{text}" is not a valid input.')


class CellOccupied(TicTacToeError):
    """The cell has already been claimed."""

    def __init__(self, coord):
        self.coord = coord
        super().__init__(f'Coord "{coord.label}" has already been used.')


class InternalDuplicate(TicTacToeError):
    """A cell turned up in a player's set twice. Means the occupancy bookkeeping is broken."""

    def __init__(self, coord):
        self.coord = coord
        super().__init__(
            f"Fatal Logic Error.  Coord {coord} was duplicated.  Debug required"
        )


class NoSuchPlayer(TicTacToeError):
    """No player registered under this id."""

    def __init__(self, player_id: int):
        self.player_id = player_id
        super().__init__(f"No player with id {player_id}")


class InputClosed(TicTacToeError):
    """The input stream ended while a line was expected."""

    def __init__(self, prompt: Optional[str] = None):
        self.prompt = prompt
        super().__init__("Input stream closed while waiting for a line")


class Terminated(Exception):
    """
    Raised by a state machine when it has nothing further to do.

    Not an error: works like StopIteration for the move loop and the
    outer game loop.
    """
