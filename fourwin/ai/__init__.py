"""
fourwin/ai/__init__.py - Game tree search for Four Win Three Lose

This package provides the move generators, the memoized brute force search
and the computer player that uses it.
"""

from fourwin.ai.computer import ComputerPlayer, PlayerInvariantError
from fourwin.ai.moves import MoveGenerator
from fourwin.ai.brute_force import BruteForceSearch, best_move, brute_force_game_state, search

__all__ = ['ComputerPlayer', 'PlayerInvariantError', 'MoveGenerator',
           'BruteForceSearch', 'best_move', 'brute_force_game_state', 'search']
