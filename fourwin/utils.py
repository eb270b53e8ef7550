"""
utils.py - Constants, enumerations and helpers for the Four Win Three Lose game

This module provides the board geometry, the player and result enumerations,
the Position type and a few helpers for parsing and rendering positions that
are shared by the game, AI and interface packages.
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

# Board geometry. The winner/loser patterns in rules.py assume a 4x4 field.
FIELD_X = 4
FIELD_Y = 4
FIELD_SIZE = FIELD_X * FIELD_Y

# Above this many occupied cells the hybrid move generator stops pruning
# mirrored moves.
SYMMETRY_THRESHOLD = 5


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """
    Enumeration representing a finished game's outcome.

    There is no fixed ranking between the values; use better_eq_for() to
    compare two results from the point of view of one player.
    """
    DRAW = 0
    PLAYER_ONE_WIN = 1
    PLAYER_TWO_WIN = 2

    @classmethod
    def from_player(cls, player: Player) -> 'GameResult':
        """
        Get the result in which the given player wins.

        Args:
            player: Player.ONE or Player.TWO

        Returns:
            The matching winning result
        """
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No winning result for {player!r}")

    def opposite(self) -> 'GameResult':
        """Swap the winner; a draw stays a draw."""
        if self == GameResult.PLAYER_ONE_WIN:
            return GameResult.PLAYER_TWO_WIN
        if self == GameResult.PLAYER_TWO_WIN:
            return GameResult.PLAYER_ONE_WIN
        return GameResult.DRAW

    def better_eq_for(self, other: 'GameResult', player: Player) -> bool:
        """
        Check whether this result is at least as good as another for a player.

        A win for the player beats everything, a draw beats a loss, and a
        loss is only as good as another loss.

        Args:
            other: The result to compare against
            player: The player whose preference is used

        Returns:
            True if this result is better than or equal to other
        """
        if self == other:
            return True
        favourable = GameResult.from_player(player)
        if self == favourable:
            return True
        return other == favourable.opposite()


class Position(NamedTuple):
    """A cell coordinate; x is the column, y is the row."""
    x: int
    y: int

    def __str__(self):
        return f"({self.x}, {self.y})"


def is_valid_position(x: int, y: int) -> bool:
    """
    Check if a coordinate lies on the field.

    Args:
        x: Column index
        y: Row index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= x < FIELD_X and 0 <= y < FIELD_Y


def parse_position(text: str) -> Position:
    """
    Parse user input of the form 'x y' (a comma also works as separator).

    Raises:
        ValueError: If the text does not hold exactly two integers
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'x y', got {text!r}")
    return Position(int(parts[0]), int(parts[1]))


def parse_cells(text: str) -> List[int]:
    """
    Parse a board position string of 16 comma separated cell values.

    Values are 0 (empty), 1 (player one) and 2 (player two), row by row.

    Raises:
        ValueError: If a value is not 0, 1 or 2 or the count is wrong
    """
    cells = [int(c) for c in text.replace(" ", "").split(",") if c != ""]
    if len(cells) != FIELD_SIZE:
        raise ValueError(f"Position string must have {FIELD_SIZE} values, got {len(cells)}")
    for value in cells:
        if value not in (Player.EMPTY.value, Player.ONE.value, Player.TWO.value):
            raise ValueError(f"Invalid cell value {value}")
    return cells


def format_positions(positions: Optional[Sequence[Position]]) -> str:
    """Format a move list the way the human player types moves."""
    if not positions:
        return "none"
    return ", ".join(f"'{p.x} {p.y}'" for p in positions)


def render_board_ascii(rows: Sequence[Sequence[int]]) -> str:
    """
    Render a board as ASCII art.

    Args:
        rows: Cell values indexed as rows[y][x]

    Returns:
        ASCII representation of the board with coordinate labels
    """
    symbols = {
        Player.EMPTY.value: " ",
        Player.ONE.value: "X",
        Player.TWO.value: "O",
    }
    result = ["   " + " ".join(str(x) for x in range(FIELD_X))]
    for y in range(FIELD_Y):
        result.append(f"{y}: " + "|".join(symbols[int(rows[y][x])] for x in range(FIELD_X)))
        if y < FIELD_Y - 1:
            result.append("   " + "+".join("-" for _ in range(FIELD_X)))
    return "\n".join(result)
