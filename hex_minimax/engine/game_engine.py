"""
Game engine for Hex.

This module owns the authoritative game state. HexGameState holds the board,
the side to move, the move history and the winner; HexGameController layers
the turn state machine on top of it:

    WAITING_HUMAN_MOVE --(legal move)--> AUTOMATED_TURN | GAME_OVER
    AUTOMATED_TURN --(search + move)--> WAITING_HUMAN_MOVE | GAME_OVER
    GAME_OVER --(new_game)--> initial phase

Every rejected move is validated before anything is written, so a rejection
leaves the state exactly as it was. Search only ever sees board copies.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from hex_minimax.config import BOARD_SIZE, DEFAULT_AUTOMATED_PLAYER, FIRST_PLAYER
from hex_minimax.engine.board_utils import board_to_string, create_empty_board, get_legal_moves, is_empty, place_piece
from hex_minimax.engine.connectivity import check_winner
from hex_minimax.engine.minimax_search import SearchConfig, SearchResult, search
from hex_minimax.enums import Player, StrictEnum, Winner, get_opponent, player_to_piece
from hex_minimax.error_handling import CellOccupiedError, GameOverError, MoveError, NotYourTurnError, check_bounds
from hex_minimax.utils.format_conversion import moves_to_trmph, trmph_board_size, trmph_to_moves

logger = logging.getLogger(__name__)


class GamePhase(StrictEnum):
    WAITING_HUMAN_MOVE = "waiting_human_move"
    AUTOMATED_TURN = "automated_turn"
    GAME_OVER = "game_over"


@dataclass(init=False, eq=False)
class HexGameState:
    """
    Represents the state of a Hex game using N×N character format.
    """
    board: np.ndarray
    _current_player: Player = field(repr=False)
    move_history: List[Tuple[int, int]] = field(default_factory=list)
    _winner: Optional[Winner] = field(default=None, repr=False)

    def __init__(self, _current_player: Player, board: Optional[np.ndarray] = None,
                 move_history: Optional[List[Tuple[int, int]]] = None,
                 winner: Optional[Winner] = None, board_size: int = BOARD_SIZE):
        if not isinstance(_current_player, Player):
            raise TypeError(f"_current_player must be Player, got {type(_current_player)}")
        self.board = board if board is not None else create_empty_board(board_size)
        self._current_player = _current_player
        self.move_history = move_history.copy() if move_history is not None else []
        self.winner = winner

    @property
    def board_size(self) -> int:
        return self.board.shape[0]

    @property
    def current_player(self) -> Player:
        """The side to move."""
        return self._current_player

    @property
    def winner(self) -> Optional[Winner]:
        return self._winner

    @winner.setter
    def winner(self, value: Optional[Winner]) -> None:
        """Accept Winner enum or None; fail fast on invalid inputs."""
        if value is not None and not isinstance(value, Winner):
            raise TypeError(f"winner must be Winner enum or None; got {type(value)}")
        self._winner = value

    @property
    def game_over(self) -> bool:
        return self._winner is not None

    def is_valid_move(self, row: int, col: int) -> bool:
        if self.game_over:
            return False
        return is_empty(self.board, row, col)

    def validate_move(self, row: int, col: int) -> None:
        """
        Raise the MoveError that apply_move() would raise, without applying.

        Raises:
            GameOverError: a winner is already recorded
            OutOfBoundsError: row or col outside [0, N)
            CellOccupiedError: the cell is not empty
        """
        if self.game_over:
            raise GameOverError(f"Game is over ({self._winner.name} won); start a new game", row, col)
        check_bounds(row, col, self.board_size)
        if not is_empty(self.board, row, col):
            raise CellOccupiedError(f"Position ({row}, {col}) is already occupied", row, col)

    def apply_move(self, row: int, col: int) -> None:
        """
        Apply a move in-place for the side to move.

        Validation happens before any field is written, so a rejected move
        leaves the state unchanged.
        """
        self.validate_move(row, col)

        self.board = place_piece(self.board, row, col, player_to_piece(self._current_player))
        self.move_history.append((row, col))
        self._current_player = get_opponent(self._current_player)
        self.winner = check_winner(self.board)

    def make_move(self, row: int, col: int) -> 'HexGameState':
        """Return a new state with the move applied; this state is untouched."""
        new_state = self.copy()
        new_state.apply_move(row, col)
        return new_state

    def copy(self) -> 'HexGameState':
        return HexGameState(
            _current_player=self._current_player,
            board=self.board.copy(),
            move_history=self.move_history,
            winner=self._winner,
        )

    def get_legal_moves(self) -> List[Tuple[int, int]]:
        if self.game_over:
            return []
        return get_legal_moves(self.board)

    def to_trmph(self) -> str:
        """Game record in TRMPH notation, e.g. "#5,a1b2"."""
        return moves_to_trmph(self.move_history, self.board_size)

    @classmethod
    def from_trmph(cls, trmph: str, first_player: Player = FIRST_PLAYER) -> 'HexGameState':
        """Replay a TRMPH record from an empty board, alternating from first_player."""
        state = make_empty_hex_state(trmph_board_size(trmph), first_player)
        for row, col in trmph_to_moves(trmph):
            state.apply_move(row, col)
        return state

    def __str__(self) -> str:
        status = f"Player {self._current_player.name.capitalize()}'s turn"
        if self.game_over:
            status = f"Game over - {self._winner.name.capitalize()} wins!"
        return f"HexGameState(moves={len(self.move_history)}, {status})\n" + board_to_string(self.board)

    def __repr__(self) -> str:
        return self.__str__()


def make_empty_hex_state(board_size: int = BOARD_SIZE, first_player: Player = FIRST_PLAYER) -> HexGameState:
    """Create an empty Hex game state with `first_player` to move (Blue by convention)."""
    return HexGameState(first_player, board_size=board_size)


def new_game(board_size: int = BOARD_SIZE) -> HexGameState:
    """Start a new game: empty board, Blue to move, no winner."""
    return make_empty_hex_state(board_size)


def get_winner(board: np.ndarray) -> Optional[Winner]:
    """Winner on this board, or None."""
    return check_winner(board)


class HexGameController:
    """
    Turn order and move application for a human-vs-engine game.

    The controller is the only component that mutates the game state. The
    automated move is a separate call so the caller can schedule it (for
    example after a short "thinking" display); at most one automated move
    computation runs at a time.
    """

    def __init__(self, board_size: int = BOARD_SIZE,
                 automated_player: Player = DEFAULT_AUTOMATED_PLAYER,
                 search_config: Optional[SearchConfig] = None,
                 first_player: Player = FIRST_PLAYER):
        if not isinstance(automated_player, Player):
            raise TypeError(f"automated_player must be Player, got {type(automated_player)}")
        if not isinstance(first_player, Player):
            raise TypeError(f"first_player must be Player, got {type(first_player)}")
        self.board_size = board_size
        self.automated_player = automated_player
        self.human_player = get_opponent(automated_player)
        self.first_player = first_player
        self._search_config = SearchConfig()
        if search_config is not None:
            self.set_search_config(search_config)
        self._automated_lock = threading.Lock()
        self.last_search_result: Optional[SearchResult] = None
        self.new_game()

    @property
    def state(self) -> HexGameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def winner(self) -> Optional[Winner]:
        return self._state.winner

    @property
    def search_config(self) -> SearchConfig:
        return self._search_config

    def set_search_config(self, config: SearchConfig) -> None:
        """Change depth/pruning; takes effect from the next automated move."""
        if not isinstance(config, SearchConfig):
            raise TypeError(f"config must be SearchConfig, got {type(config)}")
        self._search_config = config

    def new_game(self, board_size: Optional[int] = None) -> HexGameState:
        """Reset to an empty board and the initial phase."""
        if board_size is None:
            board_size = self.board_size
        state = make_empty_hex_state(board_size, self.first_player)

        self.board_size = board_size
        self._state = state
        self.last_search_result = None
        self._phase = self._next_phase()
        logger.info(f"New game: {self.board_size}x{self.board_size}, "
                    f"human={self.human_player.name}, engine={self.automated_player.name}")
        return self._state

    def _next_phase(self) -> GamePhase:
        if self._state.game_over:
            return GamePhase.GAME_OVER
        if self._state.current_player == self.automated_player:
            return GamePhase.AUTOMATED_TURN
        return GamePhase.WAITING_HUMAN_MOVE

    def apply_human_move(self, row: int, col: int, player: Optional[Player] = None) -> HexGameState:
        """
        Apply the human's move.

        Args:
            row: Row index
            col: Column index
            player: Optional side claiming the move; must be the side to move

        Returns:
            The updated game state

        Raises:
            GameOverError, NotYourTurnError, OutOfBoundsError, CellOccupiedError.
            The state is unchanged whenever one of these is raised.
        """
        try:
            if self._phase == GamePhase.GAME_OVER:
                raise GameOverError("Game is over; start a new game", row, col)
            if self._phase != GamePhase.WAITING_HUMAN_MOVE or self._automated_lock.locked():
                raise NotYourTurnError(
                    f"Not the human's turn ({self._state.current_player.name} to move)", row, col
                )
            if player is not None and player != self._state.current_player:
                raise NotYourTurnError(
                    f"{player.name} cannot move; {self._state.current_player.name} to move", row, col
                )
            self._state.apply_move(row, col)
        except MoveError as e:
            logger.debug(f"Rejected human move ({row}, {col}): {e}")
            raise

        self._phase = self._next_phase()
        if self._phase == GamePhase.GAME_OVER:
            logger.info(f"{self._state.winner.name} wins after {len(self._state.move_history)} moves")
        return self._state

    def play_automated_move(self) -> Optional[Tuple[int, int]]:
        """
        Compute and apply the engine's move.

        Returns:
            The move played, or None if a new game was started while the
            search ran (the result is discarded).

        Raises:
            GameOverError: the game is over
            NotYourTurnError: it is not the engine's turn, or another
                automated move is still being computed
        """
        if self._phase == GamePhase.GAME_OVER:
            raise GameOverError("Game is over; start a new game")
        if self._phase != GamePhase.AUTOMATED_TURN:
            raise NotYourTurnError(f"Not the engine's turn ({self._state.current_player.name} to move)")
        if not self._automated_lock.acquire(blocking=False):
            raise NotYourTurnError("An automated move is already being computed")

        try:
            state = self._state
            result = search(state.board.copy(), self._search_config, self.automated_player)
            if self._state is not state:
                logger.info("Game was reset during search; discarding automated move")
                return None
            if result.best_move is None:
                raise RuntimeError("Automated player has no legal moves on an undecided board")

            state.apply_move(*result.best_move)
            self.last_search_result = result
            self._phase = self._next_phase()
            if self._phase == GamePhase.GAME_OVER:
                logger.info(f"{state.winner.name} wins after {len(state.move_history)} moves")
            return result.best_move
        finally:
            self._automated_lock.release()
