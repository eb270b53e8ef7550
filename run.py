#!/usr/bin/env python3
"""
run.py - Main entry point for Four Win Three Lose

Examples:

    # Play against the computer, human moves first
    python run.py play --mode hvc

    # Solve a position with the hybrid move generator
    python run.py solve --position 2,2,1,1,1,1,2,2,0,0,0,0,0,0,0,0 --generator hybrid

    # Show winner, loser and candidate moves of a position
    python run.py test --position 1,1,1,0,0,0,0,0,0,0,0,0,0,0,0,0

    # Compare the move generators
    python run.py benchmark --iterations 12
"""

import sys

from fourwin.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
