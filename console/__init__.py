"""
Console module for TicTacToe.
Reads player input and draws the board in a text terminal.
"""

from .line_reader import LineReader, StdinLineReader, ScriptedLineReader
from .renderer import BoardRenderer, BoxDrawingRenderer, AsciiRenderer
from .terminal import Console
