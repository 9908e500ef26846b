"""
Tests for the game state machine and the match driver.
"""

from typing import List, Tuple

import pytest

from console import AsciiRenderer, Console, ScriptedLineReader
from game.board import Board
from game.coordinate import Coordinate
from game.errors import InputClosed, NoSuchPlayer, Terminated
from game.game_states import (
    EnterInfo,
    GameStateMachine,
    PlayerDraw,
    PlayerMove,
    PlayerWin,
    initial_state,
)
from main import TicTacToeGame


# Player 1 takes column a, player 2 stays out of the way
COLUMN_WIN = ["Alice", "Bob", "a1", "b1", "a2", "b2", "a3"]

# X O X / X O O / O X X - nobody gets a line
DRAW = ["Alice", "Bob", "a1", "b1", "c1", "b2", "a2", "c2", "b3", "a3", "c3"]


def make_console(lines: List[str]) -> Tuple[Console, ScriptedLineReader, List[str]]:
    output: List[str] = []
    reader = ScriptedLineReader(lines)
    console = Console(reader=reader, renderer=AsciiRenderer(output.append), sink=output.append)
    return console, reader, output


def named_board() -> Board:
    board = Board()
    board.set_name(1, "Alice")
    board.set_name(2, "Bob")
    return board


def play_through(machine: GameStateMachine, board: Board) -> list:
    """Run the machine from the start, returning every state visited."""
    states = [initial_state()]
    while True:
        machine.run(states[-1], board)
        try:
            states.append(machine.next(states[-1], board))
        except Terminated:
            return states


def test_initial_state():
    assert initial_state() == EnterInfo(1)


def test_enter_info_stores_trimmed_name():
    console, _, output = make_console(["  Alice \n"])
    machine = GameStateMachine(console)
    board = Board()

    machine.run(EnterInfo(1), board)

    assert board.get_name(1) == "Alice"
    assert output == ["Player 1: Please enter your name:"]


def test_enter_info_transitions():
    machine = GameStateMachine(make_console([])[0])
    board = Board()

    assert machine.next(EnterInfo(1), board) == EnterInfo(2)
    assert machine.next(EnterInfo(2), board) == PlayerMove(1)


def test_player_move_transitions():
    machine = GameStateMachine(make_console([])[0])
    board = named_board()

    board.update(1, Coordinate(1, 1))
    assert machine.next(PlayerMove(1), board) == PlayerMove(2)

    board.update(2, Coordinate(0, 0))
    assert machine.next(PlayerMove(2), board) == PlayerMove(1)


def test_player_move_win():
    machine = GameStateMachine(make_console([])[0])
    board = named_board()
    for coord in [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0)]:
        board.update(1, coord)

    assert machine.next(PlayerMove(1), board) == PlayerWin(1)


def test_win_on_last_cell_is_not_a_draw():
    machine = GameStateMachine(make_console([])[0])
    board = named_board()
    # X O X / O X O / O X X, player 1 finishing the diagonal on the last cell
    for coord in [Coordinate(0, 0), Coordinate(0, 2), Coordinate(1, 1), Coordinate(2, 1)]:
        board.update(1, coord)
    for coord in [Coordinate(0, 1), Coordinate(1, 0), Coordinate(1, 2), Coordinate(2, 0)]:
        board.update(2, coord)
    assert not board.check_win(1)
    board.update(1, Coordinate(2, 2))

    assert board.is_full()
    assert machine.next(PlayerMove(1), board) == PlayerWin(1)


def test_player_move_draw():
    machine = GameStateMachine(make_console([])[0])
    board = named_board()
    for coord in [Coordinate(0, 0), Coordinate(0, 2), Coordinate(1, 0), Coordinate(2, 1), Coordinate(2, 2)]:
        board.update(1, coord)
    for coord in [Coordinate(0, 1), Coordinate(1, 1), Coordinate(1, 2), Coordinate(2, 0)]:
        board.update(2, coord)

    assert machine.next(PlayerMove(1), board) == PlayerDraw()


def test_player_move_unknown_player_is_fatal():
    machine = GameStateMachine(make_console([])[0])
    with pytest.raises(NoSuchPlayer):
        machine.next(PlayerMove(3), named_board())


@pytest.mark.parametrize("state", [PlayerWin(1), PlayerWin(2), PlayerDraw()])
def test_terminal_states_end_the_machine(state):
    machine = GameStateMachine(make_console([])[0])
    with pytest.raises(Terminated):
        machine.next(state, named_board())


def test_win_announcement():
    console, _, output = make_console([])
    machine = GameStateMachine(console)
    board = named_board()

    machine.run(PlayerWin(2), board)

    text = "\n".join(output)
    assert "P2: Bob is the winner!" in text
    assert "The final board state is:" in text
    assert output[-1] == ""


def test_draw_announcement():
    console, _, output = make_console([])
    machine = GameStateMachine(console)

    machine.run(PlayerDraw(), named_board())

    assert "The game ended in a draw!" in "\n".join(output)


def test_column_win_scenario():
    console, reader, output = make_console(COLUMN_WIN)
    machine = GameStateMachine(console)
    board = Board()

    states = play_through(machine, board)

    assert states[-1] == PlayerWin(1)
    assert states[:3] == [EnterInfo(1), EnterInfo(2), PlayerMove(1)]
    assert board.check_win(1)
    assert not board.check_win(2)
    assert reader.remaining == 0
    assert "P1: Alice is the winner!" in "\n".join(output)


def test_draw_scenario():
    console, reader, output = make_console(DRAW)
    machine = GameStateMachine(console)
    board = Board()

    states = play_through(machine, board)

    assert states[-1] == PlayerDraw()
    assert board.is_full()
    assert not board.check_win(1)
    assert not board.check_win(2)
    assert reader.remaining == 0


def test_rejected_move_keeps_same_player():
    lines = ["Alice", "Bob", "a1", "a1", "nope", "b1", "a2", "b2", "a3"]
    console, reader, output = make_console(lines)
    game = TicTacToeGame(console)

    game.run()

    assert game.state == PlayerWin(1)
    assert game.board.owned_cells(2) == {Coordinate(0, 1), Coordinate(1, 1)}
    assert reader.remaining == 0
    text = "\n".join(output)
    assert 'P2: Coord "a1" has already been used. Bob, please enter a valid space: ' in text
    assert 'P2: Entry "nope" is not a valid input. Bob, please enter a valid space: ' in text


def test_game_stops_when_input_closes():
    console, _, _ = make_console(["Alice", "Bob", "a1"])
    game = TicTacToeGame(console)

    with pytest.raises(InputClosed):
        game.run()
    assert game.state == PlayerMove(2)
