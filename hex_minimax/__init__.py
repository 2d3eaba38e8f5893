"""
hex_minimax: a Hex engine with a depth-limited minimax opponent.

The engine keeps the board and turn order, detects wins, and picks moves for
the automated side with minimax search and optional alpha-beta pruning.
"""

__version__ = "2025.1.0"

__all__ = [
    "config",
    "enums",
    "engine",
    "error_handling",
]
