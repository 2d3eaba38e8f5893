"""
Static evaluation of Hex positions.
"""

import numpy as np

from hex_minimax.engine.connectivity import shortest_connection_distance
from hex_minimax.enums import Player, get_opponent


def evaluate_board(board: np.ndarray, perspective: Player) -> int:
    """
    Score a board from a fixed player's perspective.

    score = distance(opponent) - distance(perspective)

    Higher is better for `perspective`: it rewards being closer to a
    connection and the opponent being farther from one. The perspective is
    not flipped per ply; the search threads the same player through the
    whole tree.
    """
    if not isinstance(perspective, Player):
        raise TypeError(f"perspective must be Player, got {type(perspective)}")
    return (shortest_connection_distance(board, get_opponent(perspective))
            - shortest_connection_distance(board, perspective))
