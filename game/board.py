"""
Board for console TicTacToe.
Tracks which player owns which cell, the winning lines, and player names.
"""

import logging
from typing import Dict, FrozenSet, List, Set

import numpy as np

from .config import GameConfig
from .coordinate import Coordinate, all_coordinates
from .errors import CellOccupied, InternalDuplicate, NoSuchPlayer

logger = logging.getLogger(__name__)


def build_win_lines() -> List[FrozenSet[Coordinate]]:
    """
    Build all 8 winning lines.

    Returns:
        3 rows, 3 columns and 2 diagonals, each a set of 3 cells.
    """
    size = GameConfig.BOARD_SIZE
    lines = []

    # Rows
    for row in range(size):
        lines.append(frozenset(Coordinate(row, col) for col in range(size)))

    # Columns
    for col in range(size):
        lines.append(frozenset(Coordinate(row, col) for row in range(size)))

    # Diagonals
    lines.append(frozenset(Coordinate(i, i) for i in range(size)))
    lines.append(frozenset(Coordinate(size - 1 - i, i) for i in range(size)))

    return lines


class Board:
    """
    The state of a TicTacToe match.

    Every cell is owned by exactly one of:
    - GameConfig.UNCLAIMED (0) - nobody yet
    - player 1
    - player 2

    The board does no I/O. Drawing is left to a BoardRenderer, which
    takes the grid from render().
    """

    def __init__(self):
        """Create an empty board with no players named yet."""
        self.win_lines: List[FrozenSet[Coordinate]] = build_win_lines()

        self.occupancy: Dict[int, Set[Coordinate]] = {
            GameConfig.UNCLAIMED: set(all_coordinates()),
        }
        for player_id in GameConfig.PLAYER_MARKERS:
            self.occupancy[player_id] = set()

        self.names: Dict[int, str] = {}

    def _player_cells(self, player_id: int) -> Set[Coordinate]:
        if player_id == GameConfig.UNCLAIMED or player_id not in self.occupancy:
            raise NoSuchPlayer(player_id)
        return self.occupancy[player_id]

    def update(self, player_id: int, coord: Coordinate) -> None:
        """
        Claim a cell for a player.

        Args:
            player_id: The player making the move (1 or 2).
            coord: The cell to claim.

        Raises:
            NoSuchPlayer: player_id is not 1 or 2.
            CellOccupied: The cell is already claimed. The board is unchanged.
            InternalDuplicate: The player already held the cell. Should never happen.
        """
        player_cells = self._player_cells(player_id)
        unclaimed = self.occupancy[GameConfig.UNCLAIMED]

        if coord not in unclaimed:
            raise CellOccupied(coord)

        if coord in player_cells:
            raise InternalDuplicate(coord)

        unclaimed.remove(coord)
        player_cells.add(coord)
        logger.debug("Player %d claimed %s", player_id, coord.label)

    def check_win(self, player_id: int) -> bool:
        """
        Check if a player has completed any winning line.

        Args:
            player_id: The player (1 or 2).

        Returns:
            True if one of the 8 lines is entirely owned by the player.
        """
        player_cells = self._player_cells(player_id)
        return any(line <= player_cells for line in self.win_lines)

    def is_full(self) -> bool:
        """True when no unclaimed cells are left."""
        return not self.occupancy[GameConfig.UNCLAIMED]

    def set_name(self, player_id: int, name: str) -> None:
        """Register a player's display name."""
        self._player_cells(player_id)
        self.names[player_id] = name

    def get_name(self, player_id: int) -> str:
        """Get a player's display name, or raise NoSuchPlayer if it was never set."""
        if player_id not in self.names:
            raise NoSuchPlayer(player_id)
        return self.names[player_id]

    def owned_cells(self, owner: int) -> FrozenSet[Coordinate]:
        """
        Get the cells held by one owner.

        Args:
            owner: GameConfig.UNCLAIMED, 1 or 2.

        Returns:
            A read-only copy of that owner's cells.
        """
        if owner not in self.occupancy:
            raise NoSuchPlayer(owner)
        return frozenset(self.occupancy[owner])

    def render(self) -> np.ndarray:
        """
        Get the board as a 3x3 grid of markers.

        Returns:
            Array indexed [row, col] holding "X", "O" or " ".
        """
        size = GameConfig.BOARD_SIZE
        grid = np.full((size, size), GameConfig.EMPTY_MARKER, dtype="<U1")

        for player_id, marker in GameConfig.PLAYER_MARKERS.items():
            for coord in self.occupancy[player_id]:
                grid[coord.row, coord.col] = marker

        return grid


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    board.update(1, Coordinate(0, 0))
    board.update(2, Coordinate(1, 1))
    board.update(1, Coordinate(1, 0))
    board.update(2, Coordinate(2, 2))
    board.update(1, Coordinate(2, 0))

    print(board.render())
    print(f"Player 1 wins: {board.check_win(1)}")
    print(f"Board full: {board.is_full()}")

    print("\nBoard test done!")
