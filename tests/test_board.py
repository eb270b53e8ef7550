import pytest

from fourwin.game.board import (Board, CellOccupied, InvalidConstructionSize,
                                OutOfBounds)
from fourwin.utils import Player, Position

t = Player.TWO
f = Player.ONE
n = None


def sample_column() -> Board:
    return Board.from_rows([[f, n, n, n], [t, n, n, n], [f, n, n, n], [t, n, n, n]])


def test_from_flat_is_row_major():
    cells = [None] * 16
    assert Board.from_flat(cells) == Board()

    cells[0] = f
    cells[4] = t
    cells[8] = f
    cells[12] = t
    assert Board.from_flat(cells) == sample_column()

    cells[3] = cells[7] = cells[11] = cells[15] = t
    expected = Board.from_rows([[f, n, n, t], [t, n, n, t], [f, n, n, t], [t, n, n, t]])
    assert Board.from_flat(cells) == expected


def test_from_flat_wrong_size():
    with pytest.raises(InvalidConstructionSize) as excinfo:
        Board.from_flat([0] * 15)
    assert excinfo.value.size == 15


def test_set():
    board = Board()
    board.set(Position(0, 0), Player.ONE)
    board.set(Position(0, 1), Player.TWO)
    board.set((0, 2), Player.ONE)
    board.set((0, 3), Player.TWO)
    assert board == sample_column()
    assert board.get(Position(0, 1)) == Player.TWO


def test_set_out_of_bounds_leaves_board_unchanged():
    board = sample_column()
    with pytest.raises(OutOfBounds) as excinfo:
        board.set(Position(1, 4), Player.TWO)
    assert excinfo.value.position == Position(1, 4)
    with pytest.raises(OutOfBounds):
        board.set(Position(4, 1), Player.ONE)
    with pytest.raises(OutOfBounds):
        board.set(Position(-1, 0), Player.ONE)
    assert board == sample_column()


def test_set_occupied_reports_occupant():
    board = sample_column()
    for player in (Player.ONE, Player.TWO):
        with pytest.raises(CellOccupied) as excinfo:
            board.set(Position(0, 3), player)
        assert excinfo.value.position == Position(0, 3)
        assert excinfo.value.occupant == Player.TWO

        with pytest.raises(CellOccupied) as excinfo:
            board.set(Position(0, 0), player)
        assert excinfo.value.occupant == Player.ONE
    assert board == sample_column()


def test_set_rejects_empty_mark():
    board = sample_column()
    with pytest.raises(ValueError):
        board.set(Position(1, 1), Player.EMPTY)
    assert board == sample_column()


def test_force_set():
    board = sample_column()
    with pytest.raises(OutOfBounds):
        board.force_set(Position(4, 1), None)

    for y in range(4):
        board.force_set(Position(0, y), None)
    assert board == Board()

    board.force_set(Position(0, 0), Player.TWO)
    board.force_set(Position(0, 0), Player.TWO)
    assert board.get(Position(0, 0)) == Player.TWO
    board.force_set(Position(0, 0), Player.ONE)
    assert board.get(Position(0, 0)) == Player.ONE
    assert board.count_occupied() == 1


def test_set_then_force_set_restores_board():
    board = sample_column()
    before = board.copy()
    board.set(Position(2, 2), Player.ONE)
    assert board != before
    board.force_set(Position(2, 2), None)
    assert board == before
    assert board.key() == before.key()


def test_force_set_current_value_is_noop():
    board = sample_column()
    before = board.copy()
    for x in range(4):
        for y in range(4):
            board.force_set(Position(x, y), board.get(Position(x, y)))
    assert board == before


def test_count_occupied():
    board = Board.from_rows([[f, n, n, t], [t, n, n, t], [f, n, n, t], [t, n, n, t]])
    assert board.count_occupied() == 8
    assert Board().count_occupied() == 0
    assert not board.is_full()


def test_mirrors():
    board = Board.from_rows([[t, f, n, n], [n, t, f, n], [n, n, t, f], [f, n, n, t]])
    mirror_rows = Board.from_rows([[f, n, n, t], [n, n, t, f], [n, t, f, n], [t, f, n, n]])
    mirror_columns = Board.from_rows([[n, n, f, t], [n, f, t, n], [f, t, n, n], [t, n, n, f]])
    before = board.copy()

    assert board.mirror_horizontal() == mirror_rows
    assert board.mirror_vertical() == mirror_columns
    assert board.mirror_horizontal().mirror_horizontal() == board
    assert board == before


def test_copy_is_independent():
    board = sample_column()
    clone = board.copy()
    clone.set(Position(3, 3), Player.ONE)
    assert board.get(Position(3, 3)) == Player.EMPTY
    assert board != clone


def test_render_marks():
    text = sample_column().render()
    assert "X" in text and "O" in text
    assert text.splitlines()[0].split() == ["0", "1", "2", "3"]
