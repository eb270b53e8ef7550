"""
fourwin - Four Win Three Lose, a 4x4 game where four in a row wins and
three in a row loses

This package provides the board representation, terminal pattern detection,
an exhaustive game tree search with symmetry-aware move generation, a
computer player built on it and a terminal interface.
"""

# Version number
__version__ = '0.1.0'
