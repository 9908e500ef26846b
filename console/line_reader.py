"""
Line readers for TicTacToe.
Each prompt in the game waits on exactly one line of input.
"""

from typing import Iterable, List

from game.errors import InputClosed


class LineReader:
    """
    Blocking source of input lines.

    Subclasses return one line per call, without the trailing newline,
    and raise InputClosed once no more input will arrive.
    """

    def read_line(self) -> str:
        raise NotImplementedError


class StdinLineReader(LineReader):
    """Reads from standard input via input()."""

    def read_line(self) -> str:
        try:
            return input()
        except EOFError:
            raise InputClosed() from None


class ScriptedLineReader(LineReader):
    """
    Replays a fixed list of lines.

    Used by the tests to play whole games without a terminal.
    """

    def __init__(self, lines: Iterable[str]):
        """
        Args:
            lines: The lines to hand out, in order.
        """
        self._lines: List[str] = list(lines)
        self._position = 0

    @property
    def remaining(self) -> int:
        """How many lines haven't been read yet."""
        return len(self._lines) - self._position

    def read_line(self) -> str:
        if self._position >= len(self._lines):
            raise InputClosed()
        line = self._lines[self._position]
        self._position += 1
        return line
