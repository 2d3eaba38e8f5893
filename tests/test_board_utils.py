"""
Tests for board utilities and board display.
"""

import io

import numpy as np
import pytest

from hex_minimax.engine.board_display import display_hex_board
from hex_minimax.engine.board_utils import (
    board_to_string, count_pieces, create_empty_board, get_legal_moves, get_piece_at,
    has_piece_at, is_empty, place_piece, validate_board
)
from hex_minimax.enums import Piece
from hex_minimax.error_handling import CellOccupiedError, OutOfBoundsError


class TestBoardUtils:
    def test_create_empty_board(self):
        board = create_empty_board(5)
        assert board.shape == (5, 5)
        assert board.dtype == np.dtype('U1')
        assert np.all(board == 'e')
        assert validate_board(board)

    def test_create_empty_board_rejects_bad_size(self):
        with pytest.raises(ValueError):
            create_empty_board(0)
        with pytest.raises(ValueError):
            create_empty_board(27)
        assert create_empty_board(26).shape == (26, 26)

    def test_place_piece_returns_new_board(self):
        board = create_empty_board(5)
        new_board = place_piece(board, 1, 3, Piece.RED)
        assert board[1, 3] == 'e'
        assert new_board[1, 3] == 'r'
        assert get_piece_at(new_board, 1, 3) == Piece.RED
        assert has_piece_at(new_board, 1, 3, Piece.RED)
        assert not is_empty(new_board, 1, 3)

    def test_place_piece_rejects_occupied_and_out_of_bounds(self):
        board = place_piece(create_empty_board(5), 0, 0, Piece.BLUE)
        with pytest.raises(CellOccupiedError):
            place_piece(board, 0, 0, Piece.RED)
        with pytest.raises(OutOfBoundsError):
            place_piece(board, 5, 0, Piece.RED)
        with pytest.raises(OutOfBoundsError):
            get_piece_at(board, 0, -1)
        with pytest.raises(ValueError):
            place_piece(board, 1, 1, Piece.EMPTY)

    def test_out_of_bounds_lookups_are_false(self):
        board = create_empty_board(3)
        assert not is_empty(board, 3, 0)
        assert not has_piece_at(board, -1, 0, Piece.EMPTY)

    def test_legal_moves_row_major(self):
        board = create_empty_board(3)
        board[0, 0] = 'b'
        board[1, 2] = 'r'
        assert get_legal_moves(board) == [(0, 1), (0, 2), (1, 0), (1, 1), (2, 0), (2, 1), (2, 2)]

    def test_full_board_has_no_legal_moves(self):
        board = np.full((2, 2), 'b', dtype='U1')
        assert get_legal_moves(board) == []

    def test_count_pieces(self):
        board = create_empty_board(4)
        board[0, 0] = 'b'
        board[1, 1] = 'b'
        board[2, 2] = 'r'
        assert count_pieces(board) == (2, 1)

    def test_validate_board(self):
        assert not validate_board(np.full((2, 3), 'e', dtype='U1'))
        bad = create_empty_board(3)
        bad[1, 1] = 'x'
        assert not validate_board(bad)

    def test_board_to_string(self):
        board = create_empty_board(3)
        board[0, 1] = 'b'
        board[2, 0] = 'r'
        assert board_to_string(board) == ". B .\n . . .\n  R . ."


class TestBoardDisplay:
    def test_display_to_file_has_labels(self):
        board = create_empty_board(3)
        board[1, 1] = 'b'
        out = io.StringIO()
        display_hex_board(board, file=out)
        lines = out.getvalue().splitlines()
        assert lines[0].split() == ['a', 'b', 'c']
        assert lines[1].split()[0] == '1'
        assert lines[3].split()[0] == '3'
        assert '\033[' not in out.getvalue()

    def test_display_highlights_move(self):
        board = create_empty_board(3)
        board[2, 2] = 'r'
        out = io.StringIO()
        display_hex_board(board, file=out, highlight_move=(2, 2))
        assert out.getvalue().splitlines()[-1].split()[-1] == "*"
