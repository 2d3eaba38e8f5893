"""
Depth-limited minimax search for the automated Hex player.

The search is plain recursion over board snapshots:

1. Each legal move (row-major order) is tried on a private copy of the board,
   so sibling branches never observe each other's stones.
2. Leaves are scored with evaluate_board() from ONE fixed perspective, the
   automated player's. Maximizing plies place the perspective player's stone,
   minimizing plies place the opponent's.
3. With use_pruning, alpha-beta cutoffs skip siblings once beta <= alpha.
   The root is always searched with a full (-inf, +inf) window per move, so
   pruning changes only the number of nodes visited, never the score or the
   chosen move.

The search is synchronous and cannot be cancelled: the caller bounds its cost
through SearchConfig.depth.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from hex_minimax.config import DEFAULT_SEARCH_DEPTH, DEFAULT_USE_PRUNING, MAX_RECOMMENDED_DEPTH
from hex_minimax.engine.board_utils import get_legal_moves, place_piece
from hex_minimax.engine.connectivity import check_winner
from hex_minimax.engine.evaluation import evaluate_board
from hex_minimax.enums import Player, get_opponent, player_to_piece
from hex_minimax.error_handling import SearchConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConfig:
    """
    Parameters for one search invocation.

    depth: plies searched, counting the automated player's own move (>= 1).
    use_pruning: enable alpha-beta cutoffs.
    """

    depth: int = DEFAULT_SEARCH_DEPTH
    use_pruning: bool = DEFAULT_USE_PRUNING

    def __post_init__(self):
        # bool is an int subclass; True is not a depth
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise SearchConfigError(f"depth must be an int, got {type(self.depth).__name__}")
        if self.depth < 1:
            raise SearchConfigError(f"depth must be positive, got {self.depth}")
        if not isinstance(self.use_pruning, bool):
            raise SearchConfigError(f"use_pruning must be a bool, got {type(self.use_pruning).__name__}")
        if self.depth > MAX_RECOMMENDED_DEPTH:
            logger.warning(
                f"Search depth {self.depth} exceeds the recommended maximum of {MAX_RECOMMENDED_DEPTH}; "
                f"the search cannot be interrupted once started"
            )


@dataclass
class SearchStats:
    """Counters collected while a search runs."""
    nodes_visited: int = 0


@dataclass
class SearchResult:
    best_move: Optional[Tuple[int, int]]
    score: float
    nodes_visited: int
    elapsed_sec: float
    config: SearchConfig


def minimax(
    board: np.ndarray,
    depth: int,
    maximizing: bool,
    perspective: Player,
    alpha: float = -math.inf,
    beta: float = math.inf,
    use_pruning: bool = False,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Minimax value of `board` from `perspective`'s point of view.

    Args:
        board: N×N board; never modified
        depth: remaining plies
        maximizing: True if `perspective` places the next stone
        perspective: player whose evaluation is maximized at every level
        alpha: best score the maximizer can already guarantee
        beta: best score the minimizer can already guarantee
        use_pruning: stop scanning siblings once beta <= alpha
        stats: optional counters, updated in place

    Returns:
        evaluate_board(board, perspective) at terminal nodes (a connection,
        depth 0, or a full board), else the max/min over the children.
    """
    if stats is not None:
        stats.nodes_visited += 1

    if depth == 0 or check_winner(board) is not None:
        return evaluate_board(board, perspective)

    moves = get_legal_moves(board)
    if not moves:
        return evaluate_board(board, perspective)

    piece = player_to_piece(perspective if maximizing else get_opponent(perspective))
    best_score = -math.inf if maximizing else math.inf

    for row, col in moves:
        child = place_piece(board, row, col, piece)
        score = minimax(child, depth - 1, not maximizing, perspective,
                        alpha, beta, use_pruning, stats)

        if maximizing:
            best_score = max(best_score, score)
        else:
            best_score = min(best_score, score)

        if use_pruning:
            if maximizing:
                alpha = max(alpha, best_score)
            else:
                beta = min(beta, best_score)
            if beta <= alpha:
                break

    return best_score


def search(board: np.ndarray, config: SearchConfig, automated_player: Player) -> SearchResult:
    """
    Pick the automated player's move and report how the search went.

    Each legal move is scored by placing the automated player's stone and
    running minimax(child, depth - 1, maximizing=False, ...) with a fresh
    (-inf, +inf) window. The strictly greatest score wins, so the first move
    in row-major order wins ties.
    """
    if not isinstance(config, SearchConfig):
        raise TypeError(f"config must be SearchConfig, got {type(config)}")
    if not isinstance(automated_player, Player):
        raise TypeError(f"automated_player must be Player, got {type(automated_player)}")

    stats = SearchStats()
    piece = player_to_piece(automated_player)
    best_move = None
    best_score = -math.inf

    t0 = time.perf_counter()
    moves = get_legal_moves(board)
    logger.debug(
        f"Starting search: player={automated_player.name} depth={config.depth} "
        f"pruning={config.use_pruning} legal_moves={len(moves)}"
    )
    for row, col in moves:
        child = place_piece(board, row, col, piece)
        score = minimax(child, config.depth - 1, False, automated_player,
                        -math.inf, math.inf, config.use_pruning, stats)
        logger.debug(f"Move ({row}, {col}): score = {score}")
        if score > best_score:
            best_score = score
            best_move = (row, col)
    elapsed = time.perf_counter() - t0

    logger.info(
        f"Search complete: best move = {best_move}, score = {best_score}, "
        f"nodes = {stats.nodes_visited}, time = {elapsed:.3f}s "
        f"(depth={config.depth}, pruning={config.use_pruning})"
    )
    return SearchResult(
        best_move=best_move,
        score=best_score,
        nodes_visited=stats.nodes_visited,
        elapsed_sec=elapsed,
        config=config,
    )


def best_move(board: np.ndarray, config: SearchConfig, automated_player: Player) -> Optional[Tuple[int, int]]:
    """Best move for `automated_player`, or None if the board is full."""
    return search(board, config, automated_player).best_move


def request_automated_move(board: np.ndarray, config: SearchConfig,
                           automated_player: Player) -> Optional[Tuple[int, int]]:
    """
    Compute the automated opponent's move.

    A pure function of its inputs: the board is not modified and no state is
    kept between calls.
    """
    return best_move(board, config, automated_player)
