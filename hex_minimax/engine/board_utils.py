"""
Board utility functions for Hex game operations.

This module provides utility functions for board operations, including
piece placement, validation and legal move enumeration. Boards are N×N numpy
arrays holding Piece character values; the board size is read from the array
shape so the same helpers serve any N.
"""

from typing import List, Tuple

import numpy as np

from hex_minimax.config import BOARD_SIZE, MAX_BOARD_SIZE
from hex_minimax.enums import Piece, char_to_piece, get_piece_display_symbol, piece_to_char
from hex_minimax.error_handling import CellOccupiedError, check_bounds


def create_empty_board(board_size: int = BOARD_SIZE) -> np.ndarray:
    """Create an empty N×N board with proper dtype."""
    if board_size < 1:
        raise ValueError(f"Board size must be positive, got {board_size}")
    if board_size > MAX_BOARD_SIZE:
        raise ValueError(f"Board size {board_size} exceeds the maximum of {MAX_BOARD_SIZE}")
    return np.full((board_size, board_size), piece_to_char(Piece.EMPTY), dtype='U1')


def get_piece_at(board_nxn: np.ndarray, row: int, col: int) -> Piece:
    """
    Get the piece at a specific position.

    Args:
        board_nxn: N×N board array
        row: Row index (0-indexed)
        col: Column index (0-indexed)

    Returns:
        Piece enum at the position

    Raises:
        OutOfBoundsError: If coordinates are out of bounds
    """
    check_bounds(row, col, board_nxn.shape[0])
    return char_to_piece(board_nxn[row, col])


def has_piece_at(board_nxn: np.ndarray, row: int, col: int, piece: Piece) -> bool:
    """True if the specified piece is at the position. Out of bounds is False."""
    board_size = board_nxn.shape[0]
    if not (0 <= row < board_size and 0 <= col < board_size):
        return False
    return board_nxn[row, col] == piece_to_char(piece)


def is_empty(board_nxn: np.ndarray, row: int, col: int) -> bool:
    """True if the position is on the board and empty."""
    return has_piece_at(board_nxn, row, col, Piece.EMPTY)


def place_piece(board_nxn: np.ndarray, row: int, col: int, piece: Piece) -> np.ndarray:
    """
    Place a piece at the specified position.

    The input board is never modified, so callers can hand the result to a
    search branch without affecting its siblings.

    Args:
        board_nxn: N×N board array
        row: Row index (0-indexed)
        col: Column index (0-indexed)
        piece: Piece enum to place

    Returns:
        New board array with the piece placed

    Raises:
        OutOfBoundsError: If position is out of bounds
        CellOccupiedError: If the position is already occupied
    """
    check_bounds(row, col, board_nxn.shape[0])
    if board_nxn[row, col] != piece_to_char(Piece.EMPTY):
        raise CellOccupiedError(f"Position ({row}, {col}) is already occupied", row, col)
    if piece == Piece.EMPTY:
        raise ValueError("Cannot place an EMPTY piece")

    new_board = board_nxn.copy()
    new_board[row, col] = piece_to_char(piece)
    return new_board


def get_legal_moves(board_nxn: np.ndarray) -> List[Tuple[int, int]]:
    """
    All empty cells in row-major order.

    The order is the tie-break order of the search: the first move found wins
    ties, so it must stay row-major.
    """
    empty = piece_to_char(Piece.EMPTY)
    cells = board_nxn.tolist()
    return [(row, col)
            for row, line in enumerate(cells)
            for col, value in enumerate(line)
            if value == empty]


def board_to_string(board_nxn: np.ndarray) -> str:
    """
    Convert board to a human-readable string representation.

    Returns:
        String representation with '.' for empty, 'B' for blue, 'R' for red
    """
    lines = []
    for row in range(board_nxn.shape[0]):
        line = " " * row  # Indent for hex shape
        for col in range(board_nxn.shape[1]):
            symbol = get_piece_display_symbol(char_to_piece(board_nxn[row, col]))
            line += symbol + " "
        lines.append(line.rstrip())
    return "\n".join(lines)


def validate_board(board_nxn: np.ndarray) -> bool:
    """True if the board is a square 2D array of valid piece characters."""
    if board_nxn.ndim != 2 or board_nxn.shape[0] != board_nxn.shape[1]:
        return False

    valid_values = {piece_to_char(Piece.EMPTY), piece_to_char(Piece.BLUE), piece_to_char(Piece.RED)}
    return all(value in valid_values for line in board_nxn.tolist() for value in line)


def count_pieces(board_nxn: np.ndarray) -> tuple[int, int]:
    """
    Count the number of blue and red pieces on the board.

    Returns:
        Tuple of (blue_count, red_count)
    """
    blue_count = np.sum(board_nxn == piece_to_char(Piece.BLUE))
    red_count = np.sum(board_nxn == piece_to_char(Piece.RED))

    return int(blue_count), int(red_count)
