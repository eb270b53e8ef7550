import pytest

from fourwin.ai.computer import ComputerPlayer, PlayerInvariantError
from fourwin.ai.moves import MoveGenerator
from fourwin.game.board import Board, CellOccupied
from fourwin.utils import Player, Position

t = Player.TWO
f = Player.ONE
n = None


def test_make_move_takes_the_win():
    player = ComputerPlayer(Player.ONE)
    board = Board.from_rows([[f, f, t, t], [t, t, f, f], [f, t, n, t], [f, f, n, f]])
    before = board.copy()
    assert player.make_move(board) == Position(2, 3)
    assert board == before


@pytest.mark.parametrize("generator", list(MoveGenerator))
def test_make_move_avoids_three_in_a_row(generator):
    # (3, 3) would close the diagonal triple through (2, 2)
    board = Board.from_rows([[t, t, f, f], [f, f, t, t], [t, t, f, f], [f, n, t, n]])
    player = ComputerPlayer(Player.ONE, move_generator=generator, root_generator=generator)
    assert player.make_move(board) == Position(1, 3)


def test_make_move_for_player_two():
    board = Board.from_rows([[t, t, f, f], [f, f, t, t], [t, t, f, f], [f, n, t, n]])
    player = ComputerPlayer(Player.TWO)
    assert player.make_move(board) == Position(1, 3)


def test_make_move_on_full_board_is_an_invariant_violation():
    board = Board.from_rows([[t, t, f, f], [f, f, t, t], [t, t, f, f], [f, f, t, t]])
    with pytest.raises(PlayerInvariantError):
        ComputerPlayer(Player.ONE).make_move(board)


def test_rejected_computer_move_is_fatal():
    player = ComputerPlayer(Player.TWO)
    error = CellOccupied(Position(0, 0), Player.ONE)
    with pytest.raises(PlayerInvariantError) as excinfo:
        player.invalid_move(Board(), Position(0, 0), error)
    assert excinfo.value.__cause__ is error
