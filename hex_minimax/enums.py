"""
Centralized enum definitions for Hex semantic types.

This module is the single source of truth for representing players, pieces
and winners. Other modules should import these Enums rather than duplicating
constants.
"""

from enum import Enum


class StrictEnum(Enum):
    """Base class for enums that prevent cross-type comparisons."""
    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            raise TypeError(f"Cannot compare {self.__class__.__name__} with {type(other).__name__}")
        return super().__eq__(other)

    def __hash__(self):
        """Make enums hashable so they can be used as dictionary keys."""
        return hash(self.value)


class Winner(StrictEnum):
    BLUE = 0
    RED = 1


class Player(StrictEnum):
    """
    The two sides.

    BLUE connects the left edge (col 0) to the right edge (col N-1).
    RED connects the top edge (row 0) to the bottom edge (row N-1).
    """
    BLUE = 0
    RED = 1


class Piece(StrictEnum):
    """Cell marks for the N×N board representation (character encoding)."""
    EMPTY = "e"
    BLUE = "b"
    RED = "r"


# ============================================================================
# Helper Functions for Enum-Primitive Conversion
# ============================================================================

def piece_to_char(piece: Piece) -> str:
    """Convert Piece enum to character representation."""
    return piece.value


def char_to_piece(char: str) -> Piece:
    """Convert character to Piece enum."""
    mapping = {"e": Piece.EMPTY, "b": Piece.BLUE, "r": Piece.RED}
    if char not in mapping:
        raise ValueError(f"Invalid piece character: {char}")
    return mapping[char]


def get_opponent(player: Player) -> Player:
    if not isinstance(player, Player):
        raise TypeError(f"player must be Player, got {type(player)}")
    return Player.RED if player == Player.BLUE else Player.BLUE


def player_to_piece(player: Player) -> Piece:
    """The mark a player places on the board."""
    if not isinstance(player, Player):
        raise TypeError(f"player must be Player, got {type(player)}")
    return Piece.BLUE if player == Player.BLUE else Piece.RED


def player_to_winner(player: Player) -> Winner:
    if not isinstance(player, Player):
        raise TypeError(f"player must be Player, got {type(player)}")
    return Winner(player.value)


def winner_to_player(winner: Winner) -> Player:
    if not isinstance(winner, Winner):
        raise TypeError(f"winner must be Winner, got {type(winner)}")
    return Player(winner.value)


def winner_to_color(winner: Winner) -> str:
    """UI-friendly colour string ("blue"|"red")."""
    return "blue" if winner == Winner.BLUE else "red"


# ============================================================================
# Display Helpers
# ============================================================================

def get_piece_display_symbol(piece: Piece) -> str:
    """Get the display symbol for a piece."""
    symbols = {
        Piece.EMPTY: ".",
        Piece.BLUE: "B",
        Piece.RED: "R"
    }
    return symbols[piece]


def get_piece_unicode_symbol(piece: Piece) -> str:
    """Get the unicode symbol for a piece."""
    symbols = {
        Piece.EMPTY: "◯",
        Piece.BLUE: "●",
        Piece.RED: "●"
    }
    return symbols[piece]
