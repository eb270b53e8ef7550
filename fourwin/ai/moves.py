"""
moves.py - Candidate move generation for the brute force search

Three generators produce the moves the search branches on:

- EXHAUSTIVE: every empty cell, column by column (x outer, y inner)
- SYMMETRIC: the same walk, dropping any move whose resulting board is a
  mirror image of a board reached by an earlier move
- HYBRID: SYMMETRIC while the board is sparse, EXHAUSTIVE afterwards

The walk order decides ties in the search fold, so it is part of the contract.
"""

from enum import Enum
from typing import List, Optional, Tuple

from fourwin.game.board import Board
from fourwin.utils import FIELD_X, FIELD_Y, SYMMETRY_THRESHOLD, Player, Position

EMPTY = Player.EMPTY.value


def possible_moves(board: Board) -> Optional[List[Position]]:
    """
    List every empty cell.

    Args:
        board: The board to generate moves for

    Returns:
        Positions in column-major order, or None if the board is full
    """
    grid = board.rows()
    moves = [Position(x, y)
             for x in range(FIELD_X)
             for y in range(FIELD_Y)
             if grid[y][x] == EMPTY]
    return moves or None


def possible_non_symmetrical_moves(board: Board) -> Optional[List[Position]]:
    """
    List empty cells, keeping one move per mirror-symmetry class.

    Each candidate is played on a copy (always as player one, only the
    board shape matters) and dropped if its board equals the horizontal,
    vertical or double mirror of a board kept earlier.

    Args:
        board: The board to generate moves for

    Returns:
        The first representative of each class, or None if the board is full
    """
    candidates = possible_moves(board)
    if candidates is None:
        return None

    kept: List[Tuple[Position, Board]] = []
    for pos in candidates:
        played = board.copy()
        played.set(pos, Player.ONE)
        flipped_rows = played.mirror_horizontal()
        images = (flipped_rows, played.mirror_vertical(), flipped_rows.mirror_vertical())
        if not any(earlier == image for _, earlier in kept for image in images):
            kept.append((pos, played))

    return [pos for pos, _ in kept] or None


def possible_moves_symmetrical_if_sparse(board: Board) -> Optional[List[Position]]:
    """Prune mirrored moves only while at most SYMMETRY_THRESHOLD cells are taken."""
    if board.count_occupied() > SYMMETRY_THRESHOLD:
        return possible_moves(board)
    return possible_non_symmetrical_moves(board)


class MoveGenerator(Enum):
    """The closed set of move generation strategies."""
    EXHAUSTIVE = "exhaustive"
    SYMMETRIC = "symmetric"
    HYBRID = "hybrid"

    def __call__(self, board: Board) -> Optional[List[Position]]:
        return _GENERATORS[self](board)

    def __str__(self):
        return self.value


_GENERATORS = {
    MoveGenerator.EXHAUSTIVE: possible_moves,
    MoveGenerator.SYMMETRIC: possible_non_symmetrical_moves,
    MoveGenerator.HYBRID: possible_moves_symmetrical_if_sparse,
}
