from fourwin.ai.moves import (MoveGenerator, possible_moves,
                              possible_moves_symmetrical_if_sparse,
                              possible_non_symmetrical_moves)
from fourwin.game.board import Board
from fourwin.utils import Player, Position

t = Player.TWO
f = Player.ONE
n = None


def positions(*pairs):
    return [Position(x, y) for x, y in pairs]


def test_possible_moves_empty_board_is_column_major():
    expected = positions(*[(x, y) for x in range(4) for y in range(4)])
    moves = possible_moves(Board())
    assert moves == expected
    assert moves[:5] == positions((0, 0), (0, 1), (0, 2), (0, 3), (1, 0))


def test_possible_moves_skips_occupied_cells():
    board = Board.from_rows([[f, f, f, f], [n, n, n, n], [n, n, n, n], [n, n, n, n]])
    assert possible_moves(board) == positions(
        (0, 1), (0, 2), (0, 3), (1, 1), (1, 2), (1, 3),
        (2, 1), (2, 2), (2, 3), (3, 1), (3, 2), (3, 3))

    board = Board.from_rows([[f, n, n, n], [n, f, n, n], [n, n, f, n], [n, n, n, f]])
    assert possible_moves(board) == positions(
        (0, 1), (0, 2), (0, 3), (1, 0), (1, 2), (1, 3),
        (2, 0), (2, 1), (2, 3), (3, 0), (3, 1), (3, 2))


def test_possible_moves_last_cell_and_full_board():
    board = Board.from_rows([[f, f, f, f], [f, f, f, f], [f, f, f, f], [f, f, f, n]])
    assert possible_moves(board) == positions((3, 3))

    board.force_set(Position(3, 3), t)
    assert possible_moves(board) is None
    assert possible_non_symmetrical_moves(board) is None
    assert possible_moves_symmetrical_if_sparse(board) is None


def test_non_symmetrical_moves_on_empty_board():
    assert possible_non_symmetrical_moves(Board()) == positions((0, 0), (0, 1), (1, 0), (1, 1))


def test_non_symmetrical_moves_with_full_top_row():
    # Only the left/right mirror maps this board onto itself
    board = Board.from_rows([[f, f, f, f], [n, n, n, n], [n, n, n, n], [n, n, n, n]])
    assert possible_non_symmetrical_moves(board) == positions(
        (0, 1), (0, 2), (0, 3), (1, 1), (1, 2), (1, 3))


def test_non_symmetrical_moves_without_symmetry_keeps_everything():
    board = Board.from_rows([[f, t, n, n], [n, n, n, n], [n, n, n, n], [n, n, n, n]])
    assert possible_non_symmetrical_moves(board) == possible_moves(board)


def test_non_symmetrical_moves_do_not_touch_board():
    board = Board.from_rows([[n, n, n, n], [n, t, n, n], [n, n, n, n], [n, n, n, n]])
    before = board.copy()
    possible_non_symmetrical_moves(board)
    assert board == before


def test_hybrid_switches_after_threshold():
    board = Board.from_rows([[f, f, f, f], [t, n, n, t], [n, n, n, n], [n, n, n, n]])
    assert board.count_occupied() == 6
    assert possible_moves_symmetrical_if_sparse(board) == possible_moves(board)
    assert possible_non_symmetrical_moves(board) != possible_moves(board)

    board.force_set(Position(0, 1), None)
    board.force_set(Position(3, 1), None)
    assert board.count_occupied() == 4
    assert possible_moves_symmetrical_if_sparse(board) == possible_non_symmetrical_moves(board)
    assert len(possible_moves_symmetrical_if_sparse(board)) < len(possible_moves(board))


def test_move_generator_dispatch():
    board = Board()
    assert MoveGenerator.EXHAUSTIVE(board) == possible_moves(board)
    assert MoveGenerator.SYMMETRIC(board) == possible_non_symmetrical_moves(board)
    assert MoveGenerator.HYBRID(board) == possible_non_symmetrical_moves(board)
    assert MoveGenerator("hybrid") is MoveGenerator.HYBRID
    assert str(MoveGenerator.SYMMETRIC) == "symmetric"
