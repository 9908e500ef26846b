"""
Game module for console TicTacToe.
Handles the board, the game state machine, and move input.
"""

__version__ = "1.0.0"

from .coordinate import Coordinate
from .errors import (
    TicTacToeError,
    InvalidEntry,
    CellOccupied,
    InternalDuplicate,
    NoSuchPlayer,
    InputClosed,
    Terminated,
)
from .config import GameConfig
from .board import Board
from .move_states import MoveStateMachine, Request, ReRequest, Parse, Check
from .game_states import (
    GameStateMachine,
    EnterInfo,
    PlayerMove,
    PlayerWin,
    PlayerDraw,
)
