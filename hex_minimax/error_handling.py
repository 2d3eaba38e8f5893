"""
Error types for the Hex minimax engine.

Move rejections are local, recoverable conditions: they are raised to the
caller and never leave a partially mutated game state behind. Configuration
errors fail fast when a SearchConfig is built. WinnerInvariantError marks a
board that legal alternating play cannot produce.
"""


class HexEngineError(Exception):
    """Base class for all engine errors."""
    pass


class MoveError(HexEngineError, ValueError):
    """A move was rejected. The game state is unchanged."""

    def __init__(self, message: str, row: int | None = None, col: int | None = None):
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfBoundsError(MoveError, IndexError):
    """Row or column outside [0, N)."""
    pass


class CellOccupiedError(MoveError):
    """Target cell already holds a piece."""
    pass


class GameOverError(MoveError):
    """A move was attempted after a winner was recorded."""
    pass


class NotYourTurnError(MoveError):
    """A move was attempted by a side other than the side to move, or while the
    automated move is pending."""
    pass


class SearchConfigError(HexEngineError, ValueError):
    """Malformed search configuration (e.g. non-positive depth)."""
    pass


class WinnerInvariantError(HexEngineError, RuntimeError):
    """Both sides appear connected on the same board."""
    pass


def check_bounds(row: int, col: int, board_size: int) -> None:
    """Raise OutOfBoundsError unless 0 <= row, col < board_size."""
    if not (0 <= row < board_size and 0 <= col < board_size):
        raise OutOfBoundsError(
            f"Position ({row}, {col}) is out of bounds for board size {board_size}", row, col
        )
