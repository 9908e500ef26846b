"""
Console I/O used by the game states.
Bundles the line reader, the board renderer, and the output sink.
"""

from typing import Callable, Optional

from .line_reader import LineReader, StdinLineReader
from .renderer import BoardRenderer, BoxDrawingRenderer


class Console:
    """
    Everything the state machines need to talk to the players.

    Args:
        reader: Where player input comes from (stdin by default).
        renderer: How the board is drawn (box-drawing by default).
        sink: Where text goes (print by default). Also used by the
            default renderer.
    """

    def __init__(
        self,
        reader: Optional[LineReader] = None,
        renderer: Optional[BoardRenderer] = None,
        sink: Callable[[str], None] = print
    ):
        self.reader = reader or StdinLineReader()
        self.renderer = renderer or BoxDrawingRenderer(sink)
        self.sink = sink

    def say(self, text: str = "") -> None:
        """Show a message to the players."""
        self.sink(text)

    def ask(self, prompt: str) -> str:
        """Show a prompt and wait for one line of input."""
        self.sink(prompt)
        return self.reader.read_line()

    def show_board(self, board) -> None:
        """Draw the board's current grid."""
        self.renderer.render(board.render())
