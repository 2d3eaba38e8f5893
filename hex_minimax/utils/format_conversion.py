"""
Format conversion utilities for Hex move notation.

Cells are named TRMPH style: a column letter followed by a 1-based row number,
so (0, 0) is "a1" and (2, 4) is "e3". A game record is the concatenated moves
after a "#N," preamble, e.g. "#5,a1b2c3".
"""

import re
import string
from typing import List, Tuple

from hex_minimax.config import BOARD_SIZE, TRMPH_PREFIX_TEMPLATE

LETTERS = string.ascii_lowercase

_PREAMBLE = re.compile(r"#(\d+),")


def trmph_prefix(board_size: int = BOARD_SIZE) -> str:
    if not (1 <= board_size <= len(LETTERS)):
        raise ValueError(f"Board size {board_size} cannot be written in trmph notation")
    return TRMPH_PREFIX_TEMPLATE.format(board_size=board_size)


def strip_trmph_preamble(trmph_text: str) -> str:
    match = _PREAMBLE.match(trmph_text)
    if not match:
        raise ValueError(f"No board preamble found in trmph string: {trmph_text}")
    return trmph_text[match.end():]


def trmph_board_size(trmph_text: str) -> int:
    """Board size declared in a record's "#N," preamble."""
    match = _PREAMBLE.match(trmph_text)
    if not match:
        raise ValueError(f"No board preamble found in trmph string: {trmph_text}")
    return int(match.group(1))


def split_trmph_moves(bare_moves: str) -> List[str]:
    moves = []
    i = 0
    while i < len(bare_moves):
        if bare_moves[i] not in LETTERS:
            raise ValueError(f"Expected letter at position {i} in {bare_moves}")
        j = i + 1
        while j < len(bare_moves) and bare_moves[j].isdigit():
            j += 1
        moves.append(bare_moves[i:j])
        i = j
    return moves


def trmph_move_to_rowcol(move: str, board_size: int = BOARD_SIZE) -> Tuple[int, int]:
    if len(move) < 2 or len(move) > 3 or not move[1:].isdigit():
        raise ValueError(f"Invalid trmph move: {move}")
    letter = move[0]
    number = int(move[1:])
    if letter not in LETTERS[:board_size]:
        raise ValueError(f"Invalid letter in move: {move}")
    if not (1 <= number <= board_size):
        raise ValueError(f"Invalid number in move: {move}")
    return number - 1, LETTERS.index(letter)


def rowcol_to_trmph(row: int, col: int, board_size: int = BOARD_SIZE) -> str:
    if board_size > len(LETTERS):
        raise ValueError(f"Board size {board_size} cannot be written in trmph notation")
    if not (0 <= row < board_size) or not (0 <= col < board_size):
        raise ValueError(f"Invalid coordinates: ({row}, {col}) for board size {board_size}")
    return LETTERS[col] + str(row + 1)


def trmph_to_moves(trmph_text: str) -> List[Tuple[int, int]]:
    """Parse a full "#N,..." record into (row, col) moves."""
    board_size = trmph_board_size(trmph_text)
    return [trmph_move_to_rowcol(move, board_size)
            for move in split_trmph_moves(strip_trmph_preamble(trmph_text))]


def moves_to_trmph(moves: List[Tuple[int, int]], board_size: int = BOARD_SIZE) -> str:
    return trmph_prefix(board_size) + "".join(rowcol_to_trmph(r, c, board_size) for r, c in moves)
