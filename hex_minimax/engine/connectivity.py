"""
Connectivity analysis for Hex boards.

Two questions are answered over the hex adjacency relation:

- has a side completed a path between its two edges (win detection), and
- how many more empty cells does a side need to claim to get there
  (the shortest-connection distance that drives the evaluator).

BLUE owns the left/right edges (col 0 and col N-1); RED owns the top/bottom
edges (row 0 and row N-1).
"""

from collections import deque
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from hex_minimax.enums import Player, Winner, get_opponent, player_to_piece
from hex_minimax.error_handling import WinnerInvariantError

# Hex neighbor directions (same for all positions)
HEX_NEIGHBOR_DIRECTIONS = [(-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0)]


@lru_cache(maxsize=None)
def neighbor_table(board_size: int) -> Tuple[Tuple[Tuple[int, int], ...], ...]:
    """
    Precomputed neighbor lookup for a board size.

    Entry r * board_size + c holds the in-bounds neighbors of (r, c).
    """
    table = []
    for r in range(board_size):
        for c in range(board_size):
            table.append(tuple(
                (r + dr, c + dc)
                for dr, dc in HEX_NEIGHBOR_DIRECTIONS
                if 0 <= r + dr < board_size and 0 <= c + dc < board_size
            ))
    return tuple(table)


def get_neighbors(row: int, col: int, board_size: int) -> Tuple[Tuple[int, int], ...]:
    """Adjacent positions of (row, col), clipped to the board."""
    return neighbor_table(board_size)[row * board_size + col]


def start_edge_cells(player: Player, board_size: int) -> List[Tuple[int, int]]:
    """Cells on the edge a player's paths start from (col 0 for BLUE, row 0 for RED)."""
    if player == Player.BLUE:
        return [(r, 0) for r in range(board_size)]
    return [(0, c) for c in range(board_size)]


def has_connected(board: np.ndarray, player: Player) -> bool:
    """
    True iff the player's pieces form a path between the player's two edges.

    Depth-first traversal over the player's own cells, seeded from every own
    cell on the start edge. Each cell is visited at most once.
    """
    board_size = board.shape[0]
    cells = board.tolist()
    own = player_to_piece(player).value
    table = neighbor_table(board_size)
    horizontal = player == Player.BLUE
    last = board_size - 1

    visited = [[False] * board_size for _ in range(board_size)]
    for sr, sc in start_edge_cells(player, board_size):
        if cells[sr][sc] != own or visited[sr][sc]:
            continue
        visited[sr][sc] = True
        stack = [(sr, sc)]
        while stack:
            r, c = stack.pop()
            if (c if horizontal else r) == last:
                return True
            for nr, nc in table[r * board_size + c]:
                if not visited[nr][nc] and cells[nr][nc] == own:
                    visited[nr][nc] = True
                    stack.append((nr, nc))
    return False


def check_winner(board: np.ndarray) -> Optional[Winner]:
    """
    Return the winner on this board, or None.

    Legal alternating play stops at the first connection, so at most one side
    can be connected. A board where both are connected was not produced by
    play and raises WinnerInvariantError.
    """
    blue_connected = has_connected(board, Player.BLUE)
    red_connected = has_connected(board, Player.RED)
    if blue_connected and red_connected:
        raise WinnerInvariantError("Both BLUE and RED are connected on the same board")
    if blue_connected:
        return Winner.BLUE
    if red_connected:
        return Winner.RED
    return None


def shortest_connection_distance(board: np.ndarray, player: Player) -> int:
    """
    Minimum number of additional empty cells the player needs to connect.

    Weighted shortest path over hex adjacency: stepping onto an own cell
    costs 0, onto an empty cell costs 1, opponent cells are impassable.
    Every start-edge cell not held by the opponent is a source at distance 0.
    Edge weights are 0 or 1, so a 0-1 BFS (zero-cost steps pushed to the
    front of the deque) pops cells in nondecreasing distance order and the
    first target-edge cell popped carries the minimum.

    Returns:
        The minimum distance, capped at 2 * N. 2 * N is also returned when
        the target edge is unreachable.
    """
    board_size = board.shape[0]
    cells = board.tolist()
    own = player_to_piece(player).value
    blocked = player_to_piece(get_opponent(player)).value
    table = neighbor_table(board_size)
    unreachable = 2 * board_size
    horizontal = player == Player.BLUE
    last = board_size - 1

    dist = [[board_size * board_size + 1] * board_size for _ in range(board_size)]
    frontier = deque()
    for r, c in start_edge_cells(player, board_size):
        if cells[r][c] != blocked:
            dist[r][c] = 0
            frontier.append((0, r, c))

    while frontier:
        d, r, c = frontier.popleft()
        if d > dist[r][c]:
            continue  # stale entry
        if (c if horizontal else r) == last:
            return min(d, unreachable)
        for nr, nc in table[r * board_size + c]:
            value = cells[nr][nc]
            if value == blocked:
                continue
            step = 0 if value == own else 1
            nd = d + step
            if nd < dist[nr][nc]:
                dist[nr][nc] = nd
                if step == 0:
                    frontier.appendleft((nd, nr, nc))
                else:
                    frontier.append((nd, nr, nc))
    return unreachable
