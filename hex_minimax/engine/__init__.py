"""
Game engine and search for Hex.

This module provides board utilities, connectivity analysis, evaluation,
minimax search and the game controller.
"""

from .game_engine import GamePhase, HexGameController, HexGameState, get_winner, new_game
from .minimax_search import SearchConfig, SearchResult, request_automated_move

__all__ = [
    'GamePhase',
    'HexGameController',
    'HexGameState',
    'SearchConfig',
    'SearchResult',
    'get_winner',
    'new_game',
    'request_automated_move',
]
