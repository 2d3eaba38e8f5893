"""
Unit tests for minimax_search.

To run these tests, use:
    python -m pytest tests/test_minimax_search.py -v
"""

import logging
import math
import random

import numpy as np
import pytest

from hex_minimax.engine.board_utils import create_empty_board, place_piece
from hex_minimax.engine.connectivity import check_winner
from hex_minimax.engine.evaluation import evaluate_board
from hex_minimax.engine.minimax_search import (
    SearchConfig, SearchStats, best_move, minimax, request_automated_move, search
)
from hex_minimax.enums import Piece, Player, Winner
from hex_minimax.error_handling import SearchConfigError


def make_board(blue=(), red=(), size=5):
    board = create_empty_board(size)
    for row, col in blue:
        board[row, col] = Piece.BLUE.value
    for row, col in red:
        board[row, col] = Piece.RED.value
    return board


def midgame_board():
    return make_board(
        blue=[(2, 2), (1, 3), (3, 0), (0, 4), (4, 1)],
        red=[(1, 2), (2, 1), (3, 3), (0, 0), (4, 4)],
    )


def red_threat_board():
    # Red needs one more stone in row 4 to join its column-2 chain to the bottom
    return make_board(
        blue=[(0, 0), (1, 0), (2, 0), (3, 0)],
        red=[(0, 2), (1, 2), (2, 2), (3, 2)],
    )


SEARCH_POSITIONS = {
    "empty_4x4": lambda: create_empty_board(4),
    "midgame_5x5": midgame_board,
    "red_threat_5x5": red_threat_board,
}


class TestSearchConfig:
    def test_defaults(self):
        config = SearchConfig()
        assert config.depth == 1
        assert config.use_pruning is False

    @pytest.mark.parametrize("depth", [0, -1, 1.5, "2", None, True])
    def test_invalid_depth_fails_fast(self, depth):
        with pytest.raises(SearchConfigError):
            SearchConfig(depth=depth)

    def test_invalid_pruning_flag_fails_fast(self):
        with pytest.raises(SearchConfigError):
            SearchConfig(depth=2, use_pruning="yes")

    def test_config_is_immutable(self):
        config = SearchConfig(depth=2, use_pruning=True)
        with pytest.raises(AttributeError):
            config.depth = 3

    def test_deep_search_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hex_minimax.engine.minimax_search"):
            SearchConfig(depth=5)
        assert "exceeds the recommended maximum" in caplog.text


class TestMinimax:
    def test_depth_zero_returns_evaluation(self):
        board = make_board(blue=[(2, 2)])
        assert minimax(board, 0, True, Player.BLUE) == evaluate_board(board, Player.BLUE)
        assert minimax(board, 0, False, Player.RED) == evaluate_board(board, Player.RED)

    def test_decided_board_is_terminal(self):
        board = make_board(red=[(r, 2) for r in range(5)])
        stats = SearchStats()
        assert minimax(board, 3, True, Player.BLUE, stats=stats) == -10
        assert stats.nodes_visited == 1

    def test_full_board_is_terminal(self):
        rng = random.Random(3)
        cells = [(r, c) for r in range(3) for c in range(3)]
        rng.shuffle(cells)
        board = make_board(blue=cells[:5], red=cells[5:], size=3)
        assert minimax(board, 2, True, Player.RED) == evaluate_board(board, Player.RED)

    def test_node_count_one_ply(self):
        stats = SearchStats()
        minimax(create_empty_board(2), 1, True, Player.RED, stats=stats)
        assert stats.nodes_visited == 1 + 4

    def test_maximizing_places_perspective_stone(self):
        # One ply from a 2x2 board: Red's best reply is a bottom-row cell
        board = create_empty_board(2)
        assert minimax(board, 1, True, Player.RED) == 1
        # Blue places for the minimizer; Red's best guaranteed score is then lower
        assert minimax(board, 1, False, Player.RED) == -1

    def test_does_not_mutate_board(self):
        board = midgame_board()
        before = board.copy()
        minimax(board, 2, True, Player.RED, use_pruning=True)
        assert np.array_equal(board, before)

    @pytest.mark.parametrize("position", sorted(SEARCH_POSITIONS))
    @pytest.mark.parametrize("depth", [1, 2, 3])
    @pytest.mark.parametrize("perspective", [Player.BLUE, Player.RED])
    @pytest.mark.parametrize("maximizing", [True, False])
    def test_pruning_returns_same_score(self, position, depth, perspective, maximizing):
        board = SEARCH_POSITIONS[position]()
        plain = minimax(board, depth, maximizing, perspective, -math.inf, math.inf, use_pruning=False)
        pruned = minimax(board, depth, maximizing, perspective, -math.inf, math.inf, use_pruning=True)
        assert plain == pruned


class TestBestMove:
    def test_first_move_wins_ties(self):
        # (1, 0) and (1, 1) both score 1 for Red; (1, 0) comes first in row-major order
        config = SearchConfig(depth=1)
        assert best_move(create_empty_board(2), config, Player.RED) == (1, 0)

    @pytest.mark.parametrize("depth", [1, 2])
    @pytest.mark.parametrize("use_pruning", [False, True])
    def test_takes_immediate_win(self, depth, use_pruning):
        board = red_threat_board()
        move = best_move(board, SearchConfig(depth=depth, use_pruning=use_pruning), Player.RED)
        assert move == (4, 1)
        assert check_winner(place_piece(board, *move, Piece.RED)) == Winner.RED

    @pytest.mark.parametrize("use_pruning", [False, True])
    def test_blocks_single_winning_threat(self, use_pruning):
        # Blue's row-2 chain can only be completed at (2, 4)
        board = make_board(
            blue=[(2, 0), (2, 1), (2, 2), (2, 3)],
            red=[(1, 4), (0, 0), (4, 4)],
        )
        move = best_move(board, SearchConfig(depth=2, use_pruning=use_pruning), Player.RED)
        assert move == (2, 4)

    def test_full_board_returns_none(self):
        rng = random.Random(0)
        cells = [(r, c) for r in range(3) for c in range(3)]
        rng.shuffle(cells)
        board = make_board(blue=cells[:5], red=cells[5:], size=3)
        assert best_move(board, SearchConfig(depth=2), Player.RED) is None

    @pytest.mark.parametrize("position", sorted(SEARCH_POSITIONS))
    @pytest.mark.parametrize("depth", [1, 2, 3])
    @pytest.mark.parametrize("player", [Player.BLUE, Player.RED])
    def test_pruning_picks_same_move(self, position, depth, player):
        board = SEARCH_POSITIONS[position]()
        plain = search(board, SearchConfig(depth=depth, use_pruning=False), player)
        pruned = search(board, SearchConfig(depth=depth, use_pruning=True), player)
        assert plain.best_move == pruned.best_move
        assert plain.score == pruned.score
        assert pruned.nodes_visited <= plain.nodes_visited

    def test_pruning_visits_fewer_nodes(self):
        board = create_empty_board(4)
        plain = search(board, SearchConfig(depth=3, use_pruning=False), Player.RED)
        pruned = search(board, SearchConfig(depth=3, use_pruning=True), Player.RED)
        assert pruned.nodes_visited < plain.nodes_visited
        # Without pruning every node below the root is visited: 16 + 16*15 + 16*15*14
        assert plain.nodes_visited == 16 + 16 * 15 + 16 * 15 * 14

    def test_search_result_fields(self):
        config = SearchConfig(depth=2, use_pruning=True)
        result = search(create_empty_board(3), config, Player.BLUE)
        assert result.best_move is not None
        assert result.config is config
        assert result.nodes_visited > 0
        assert result.elapsed_sec >= 0.0

    def test_request_automated_move_is_pure(self):
        board = midgame_board()
        before = board.copy()
        config = SearchConfig(depth=2, use_pruning=True)
        first = request_automated_move(board, config, Player.RED)
        second = request_automated_move(board, config, Player.RED)
        assert first == second
        assert np.array_equal(board, before)
        assert board[first] == Piece.EMPTY.value

    def test_rejects_bad_arguments(self):
        board = create_empty_board(3)
        with pytest.raises(TypeError):
            best_move(board, {"depth": 1}, Player.RED)
        with pytest.raises(TypeError):
            best_move(board, SearchConfig(), Winner.RED)
