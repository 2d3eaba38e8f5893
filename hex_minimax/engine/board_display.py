import sys
from typing import Optional, Tuple

import numpy as np

from hex_minimax.enums import Piece, char_to_piece, get_piece_unicode_symbol
from hex_minimax.utils.format_conversion import LETTERS


def ansi_colored(text, color):
    colors = {
        'blue': '\033[34m',
        'red': '\033[31m',
        'reset': '\033[0m',
    }
    return f"{colors.get(color, '')}{text}{colors['reset']}"


def display_hex_board(board: np.ndarray, file=None, highlight_move: Optional[Tuple[int, int]] = None) -> None:
    """
    Display a Hex board (N×N format) as ASCII art, with optional move highlighting.

    Columns are labelled with TRMPH letters and rows with 1-based numbers so
    the labels match what the CLI accepts as input.

    Args:
        board: np.ndarray of shape (N, N), values 'e'=empty, 'b'=blue, 'r'=red
        file: file-like object to write to (default: stdout)
        highlight_move: (row, col) tuple to highlight, or None
    """
    N = board.shape[0]

    highlight_symbol = '*'
    lines = []
    header = '    ' + ' '.join(LETTERS[i] for i in range(N))
    lines.append(header)
    use_color = file is None and sys.stdout.isatty()

    for row in range(N):
        indent = ' ' * row
        row_str = f"{row + 1:2d}  " + indent
        for col in range(N):
            piece = char_to_piece(board[row, col])
            symbol = get_piece_unicode_symbol(piece)

            if highlight_move is not None and (row, col) == tuple(highlight_move):
                row_str += highlight_symbol + ' '
            else:
                if use_color:
                    if piece == Piece.BLUE:
                        symbol = ansi_colored(symbol, 'blue')
                    elif piece == Piece.RED:
                        symbol = ansi_colored(symbol, 'red')
                row_str += symbol + ' '
        lines.append(row_str.rstrip())

    output = '\n'.join(lines)
    if file is not None:
        print(output, file=file)
    else:
        print(output)
