"""
Board renderers for TicTacToe.
Turn the board's 3x3 grid of markers into lines of text.
"""

from typing import Callable, List

import numpy as np

from game.config import GameConfig


class BoardRenderer:
    """
    Draws a grid of cell markers to a display sink.

    The sink is any callable taking one line of text (print by default).
    """

    # Frame characters, overridden by subclasses
    TOP_LEFT = TOP_RIGHT = BOTTOM_LEFT = BOTTOM_RIGHT = "+"
    OUTER_HORIZ = "-"
    TOP_JOIN = BOTTOM_JOIN = "+"
    OUTER_VERT = "|"
    LEFT_JOIN = RIGHT_JOIN = "+"
    INNER_HORIZ = "-"
    INNER_VERT = "|"
    INNER_CROSS = "+"

    def __init__(self, sink: Callable[[str], None] = print):
        self.sink = sink

    def format_lines(self, grid: np.ndarray) -> List[str]:
        """
        Lay out the grid with column labels on top and row labels on the left.

        Args:
            grid: 3x3 array of "X", "O" or " ", indexed [row, col].

        Returns:
            The board as a list of lines.
        """
        size = GameConfig.BOARD_SIZE
        indent = "    "

        def rule(left: str, fill: str, join: str, right: str) -> str:
            return indent + left + join.join([fill] * size) + right

        lines = [indent + " " + " ".join(GameConfig.COLUMN_LABELS)]
        lines.append(rule(self.TOP_LEFT, self.OUTER_HORIZ, self.TOP_JOIN, self.TOP_RIGHT))

        for row in range(size):
            cells = self.INNER_VERT.join(str(cell) for cell in grid[row])
            lines.append(f"   {GameConfig.ROW_LABELS[row]}{self.OUTER_VERT}{cells}{self.OUTER_VERT}")
            if row < size - 1:
                lines.append(rule(self.LEFT_JOIN, self.INNER_HORIZ, self.INNER_CROSS, self.RIGHT_JOIN))

        lines.append(rule(self.BOTTOM_LEFT, self.OUTER_HORIZ, self.BOTTOM_JOIN, self.BOTTOM_RIGHT))
        return lines

    def render(self, grid: np.ndarray) -> None:
        """Write the formatted board to the sink, one line at a time."""
        for line in self.format_lines(grid):
            self.sink(line)


class BoxDrawingRenderer(BoardRenderer):
    """Double-line outer frame with single-line inner rules."""

    TOP_LEFT = "\u2554"       # ╔
    TOP_RIGHT = "\u2557"      # ╗
    BOTTOM_LEFT = "\u255A"    # ╚
    BOTTOM_RIGHT = "\u255D"   # ╝
    OUTER_HORIZ = "\u2550"    # ═
    TOP_JOIN = "\u2564"       # ╤
    BOTTOM_JOIN = "\u2567"    # ╧
    OUTER_VERT = "\u2551"     # ║
    LEFT_JOIN = "\u255F"      # ╟
    RIGHT_JOIN = "\u2562"     # ╢
    INNER_HORIZ = "\u2500"    # ─
    INNER_VERT = "\u2502"     # │
    INNER_CROSS = "\u253C"    # ┼


class AsciiRenderer(BoardRenderer):
    """Plain ASCII frame for terminals without box-drawing glyphs."""
