"""
fourwin.interfaces - User interfaces for Four Win Three Lose

This package contains the terminal interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
