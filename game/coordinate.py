"""
Board coordinates for TicTacToe.
"""

from dataclasses import dataclass

from .config import GameConfig


@dataclass(frozen=True, order=True)
class Coordinate:
    """
    A cell on the 3x3 board.

    Ordered by row, then column.
    """
    row: int    # 0-2, shown as 1-3
    col: int    # 0-2, shown as a-c

    @property
    def label(self) -> str:
        """Console notation for this cell, e.g. "a1" for (0, 0)."""
        return f"{GameConfig.COLUMN_LABELS[self.col]}{GameConfig.ROW_LABELS[self.row]}"

    def __str__(self) -> str:
        return f"(row={self.row}, col={self.col})"


def all_coordinates():
    """Every cell on the board, row by row."""
    size = GameConfig.BOARD_SIZE
    return [Coordinate(row, col) for row in range(size) for col in range(size)]
