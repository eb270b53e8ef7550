"""
fourwin.game - Core game mechanics for Four Win Three Lose

This package contains the board representation, the winner/loser rules,
game state management and the game loop.
"""

from fourwin.game.board import (Board, BoardError, CellOccupied,
                                InvalidConstructionSize, OutOfBounds)
from fourwin.game.rules import FourWinGame, game_state, is_terminal, loser, winner

__all__ = ['Board', 'BoardError', 'CellOccupied', 'InvalidConstructionSize', 'OutOfBounds',
           'FourWinGame', 'game_state', 'is_terminal', 'loser', 'winner']
