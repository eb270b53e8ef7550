"""
rules.py - Terminal detection and game state management for Four Win Three Lose

This module provides:
1. winner() / loser(): pattern matching for four-in-a-row (wins) and
   three-in-a-row (loses) on the 4x4 field
2. game_state(): the result of a board, if the game is over
3. FourWinGame: the live game, tracking the board and whose turn it is
"""

from typing import List, Optional

from fourwin.debug import debug
from fourwin.game.board import Board
from fourwin.utils import FIELD_SIZE, GameResult, Player, Position

EMPTY = Player.EMPTY.value

# Centers of the inner 2x2 block, as (x, y). Every diagonal run of exactly
# three cells on a 4x4 field passes through one of them.
INNER_CENTERS = [(1, 1), (2, 1), (1, 2), (2, 2)]


def winner(board: Board) -> Optional[Player]:
    """
    Find a player owning a full row, column or diagonal.

    Args:
        board: The board to check

    Returns:
        The player with four in a row, or None
    """
    f = board.rows()

    for row in f:
        if row[0] != EMPTY and row[0] == row[1] == row[2] == row[3]:
            return Player(row[0])

    for x in range(4):
        if f[0][x] != EMPTY and f[0][x] == f[1][x] == f[2][x] == f[3][x]:
            return Player(f[0][x])

    if f[0][0] != EMPTY and f[0][0] == f[1][1] == f[2][2] == f[3][3]:
        return Player(f[0][0])
    if f[0][3] != EMPTY and f[0][3] == f[1][2] == f[2][1] == f[3][0]:
        return Player(f[0][3])

    return None


def loser(board: Board) -> Optional[Player]:
    """
    Find a player with three in a row.

    Diagonal triples are matched through the four inner cells. For rows and
    columns the two middle cells must match and exactly one of the two outer
    cells must match them too; both matching is four in a row, which wins.

    Args:
        board: The board to check

    Returns:
        The player who lost, or None
    """
    f = board.rows()

    for cx, cy in INNER_CENTERS:
        center = f[cy][cx]
        if center == EMPTY:
            continue
        if f[cy - 1][cx - 1] == center and f[cy + 1][cx + 1] == center:
            return Player(center)
        if f[cy + 1][cx - 1] == center and f[cy - 1][cx + 1] == center:
            return Player(center)

    for row in f:
        middle = row[1]
        if middle != EMPTY and middle == row[2] and ((row[0] == middle) != (row[3] == middle)):
            return Player(middle)

    for x in range(4):
        middle = f[1][x]
        if middle != EMPTY and middle == f[2][x] and ((f[0][x] == middle) != (f[3][x] == middle)):
            return Player(middle)

    return None


def is_terminal(board: Board) -> bool:
    """True if the board has a winner, a loser or no empty cell."""
    return (winner(board) is not None
            or loser(board) is not None
            or board.count_occupied() == FIELD_SIZE)


def game_state(board: Board) -> Optional[GameResult]:
    """
    Get the result of a board, or None while the game is still running.

    A four in a row is checked before a three in a row, so a move that
    completes both wins.
    """
    won = winner(board)
    if won is not None:
        return GameResult.from_player(won)
    lost = loser(board)
    if lost is not None:
        return GameResult.from_player(lost).opposite()
    if board.count_occupied() == FIELD_SIZE:
        return GameResult.DRAW
    return None


class FourWinGame:
    """
    Game state management for a live game.

    Player one always moves first. Moves go through Board.set, so a rejected
    move raises and leaves both the board and the turn unchanged.
    """

    def __init__(self, board: Optional[Board] = None, current_player: Player = Player.ONE):
        self.board = board if board is not None else Board()
        self.current_player = current_player
        self.moves_made: List[Position] = []
        self.result = game_state(self.board)

    def is_game_over(self) -> bool:
        return self.result is not None

    def make_move(self, pos: Position) -> Optional[GameResult]:
        """
        Play a move for the current player.

        Args:
            pos: Target (x, y) position

        Returns:
            The game result if this move ended the game, otherwise None

        Raises:
            OutOfBounds, CellOccupied: If the board rejects the move
            RuntimeError: If the game is already over
        """
        if self.is_game_over():
            raise RuntimeError(f"Game is already over: {self.result.name}")
        pos = Position(*pos)
        self.board.set(pos, self.current_player)
        self.moves_made.append(pos)
        debug.debug(f"{self.current_player.name} played {pos}", "rules")

        self.result = game_state(self.board)
        if self.result is not None:
            debug.info(f"Game over after {len(self.moves_made)} moves: {self.result.name}", "rules")
        self.current_player = self.current_player.other()
        return self.result
