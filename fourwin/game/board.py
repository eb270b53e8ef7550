"""
board.py - Board representation for Four Win Three Lose

This module implements the Board class, a fixed 4x4 grid of cells that are
either empty or hold the mark of one of the two players, together with the
errors raised when a move cannot be placed.
"""

from typing import Iterable, Sequence, Union

import numpy as np

from fourwin.debug import DebugLevel, debug
from fourwin.utils import (FIELD_SIZE, FIELD_X, FIELD_Y, Player, Position,
                           is_valid_position, render_board_ascii)


class BoardError(Exception):
    """Base class for moves the board refuses."""


class OutOfBounds(BoardError):
    """The position lies outside of the 4x4 field."""

    def __init__(self, position: Position):
        self.position = Position(*position)
        super().__init__(f"Position {self.position} is outside of field.")


class CellOccupied(BoardError):
    """The target cell already holds a mark."""

    def __init__(self, position: Position, occupant: Player):
        self.position = Position(*position)
        self.occupant = occupant
        owner = "Player One" if occupant == Player.ONE else "Player Two"
        super().__init__(f"The place at position {self.position} is already occupied from {owner}.")


class InvalidConstructionSize(BoardError):
    """A flat cell sequence did not have exactly 16 entries."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Can't create an {FIELD_X}x{FIELD_Y} field from {size} elements.")


CellValue = Union[Player, int, None]


def _cell_value(value: CellValue) -> int:
    if value is None:
        return Player.EMPTY.value
    if isinstance(value, Player):
        return value.value
    return Player(value).value


class Board:
    """
    A 4x4 Four Win Three Lose board.

    Cells are stored in a numpy array indexed as ``grid[y, x]`` and hold the
    integer value of a Player. Positions are given as (x, y).
    """

    def __init__(self):
        """Initialize an empty board."""
        self.grid = np.zeros((FIELD_Y, FIELD_X), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellValue]]) -> 'Board':
        """
        Build a board from nested rows, ``rows[y][x]``.

        Cells may be given as Player members, their integer values or None
        for an empty cell.
        """
        if len(rows) != FIELD_Y or any(len(row) != FIELD_X for row in rows):
            raise InvalidConstructionSize(sum(len(row) for row in rows))
        board = cls()
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                board.grid[y, x] = _cell_value(value)
        return board

    @classmethod
    def from_flat(cls, cells: Iterable[CellValue]) -> 'Board':
        """
        Build a board from 16 cells listed row by row.

        Raises:
            InvalidConstructionSize: If the sequence is not 16 cells long
        """
        cells = list(cells)
        if len(cells) != FIELD_SIZE:
            raise InvalidConstructionSize(len(cells))
        board = cls()
        for i, value in enumerate(cells):
            board.grid[i // FIELD_X, i % FIELD_X] = _cell_value(value)
        return board

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, pos: Position) -> Player:
        """
        Read a cell.

        Raises:
            OutOfBounds: If pos lies outside the field
        """
        x, y = pos
        if not is_valid_position(x, y):
            raise OutOfBounds(pos)
        return Player(int(self.grid[y, x]))

    def set(self, pos: Position, player: Player):
        """
        Place a player's mark on an empty cell.

        Args:
            pos: Target (x, y) position
            player: Player.ONE or Player.TWO

        Raises:
            OutOfBounds: If pos lies outside the field
            CellOccupied: If the cell already holds a mark
            ValueError: If player is Player.EMPTY
        """
        if player == Player.EMPTY:
            raise ValueError("set needs a player's mark, use force_set to clear a cell")
        x, y = pos
        if not is_valid_position(x, y):
            raise OutOfBounds(pos)
        current = int(self.grid[y, x])
        if current != Player.EMPTY.value:
            raise CellOccupied(pos, Player(current))
        self.grid[y, x] = player.value
        if debug.is_enabled_for(DebugLevel.TRACE, "board"):
            debug.trace(f"{player.name} placed at {Position(x, y)}", "board")

    def force_set(self, pos: Position, value: CellValue):
        """
        Overwrite a cell unconditionally, None or Player.EMPTY clears it.

        Only the search uses this to take back a trial move.

        Raises:
            OutOfBounds: If pos lies outside the field
        """
        x, y = pos
        if not is_valid_position(x, y):
            raise OutOfBounds(pos)
        self.grid[y, x] = _cell_value(value)

    def count_occupied(self) -> int:
        """Number of non-empty cells (0 to 16)."""
        return int(np.count_nonzero(self.grid))

    def is_full(self) -> bool:
        return self.count_occupied() == FIELD_SIZE

    def mirror_horizontal(self) -> 'Board':
        """Return a new board with the row order reversed."""
        mirrored = Board()
        mirrored.grid = self.grid[::-1, :].copy()
        return mirrored

    def mirror_vertical(self) -> 'Board':
        """Return a new board with every row reversed."""
        mirrored = Board()
        mirrored.grid = self.grid[:, ::-1].copy()
        return mirrored

    def key(self) -> bytes:
        """Exact board content in hashable form, used as cache key."""
        return self.grid.tobytes()

    def rows(self):
        """Cell values as nested lists, ``rows()[y][x]``."""
        return self.grid.tolist()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None

    def __repr__(self):
        return f"Board.from_flat({self.grid.flatten().tolist()!r})"

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
