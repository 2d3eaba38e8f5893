#!/usr/bin/env python3
"""
Play Hex against the minimax engine in the terminal.

Examples:
    python scripts/play_vs_ai_cli.py
    python scripts/play_vs_ai_cli.py --depth 3 --alpha-beta --think-delay 0.2
    python scripts/play_vs_ai_cli.py --board-size 4 --human-side red
"""
import argparse
import logging
import sys
import time

from hex_minimax.config import BOARD_SIZE, DEFAULT_SEARCH_DEPTH, VERBOSE_LEVEL
from hex_minimax.engine.board_display import ansi_colored, display_hex_board
from hex_minimax.engine.game_engine import GamePhase, HexGameController
from hex_minimax.engine.minimax_search import SearchConfig
from hex_minimax.enums import Player, get_opponent, player_to_winner, winner_to_color
from hex_minimax.error_handling import MoveError, SearchConfigError
from hex_minimax.utils.format_conversion import rowcol_to_trmph, trmph_move_to_rowcol


def parse_args():
    parser = argparse.ArgumentParser(description="Play Hex against the minimax engine (CLI)")
    parser.add_argument('--board-size', type=int, default=BOARD_SIZE, help=f'Board size (default: {BOARD_SIZE})')
    parser.add_argument('--depth', type=int, default=DEFAULT_SEARCH_DEPTH,
                        help=f'Search depth in plies, 1-4 recommended (default: {DEFAULT_SEARCH_DEPTH})')
    parser.add_argument('--alpha-beta', action='store_true', help='Enable alpha-beta pruning')
    parser.add_argument('--human-side', choices=['blue', 'red'], default='blue',
                        help='Side you play; Blue connects left-right and moves first (default: blue)')
    parser.add_argument('--think-delay', type=float, default=0.0,
                        help='Seconds to wait before the engine moves (default: 0)')
    parser.add_argument('--verbose', type=int, default=VERBOSE_LEVEL,
                        help='Verbosity: 0=critical, 1=warning, 2=info, 3=debug')
    return parser.parse_args()


def setup_logging(verbose: int) -> None:
    if verbose <= 0:
        logging.basicConfig(level=logging.CRITICAL)
    elif verbose == 1:
        logging.basicConfig(level=logging.WARNING)
    elif verbose == 2:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.DEBUG)


def get_human_move(board_size: int):
    while True:
        try:
            move = input("Enter your move (e.g., 'a1', 'c3', or 'q' to quit): ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            print("\nKeyboard interrupt detected. Exiting game.")
            sys.exit(0)
        if move in ('q', 'quit', 'exit'):
            print("Quitting game by user request.")
            sys.exit(0)
        try:
            return trmph_move_to_rowcol(move, board_size=board_size)
        except ValueError as e:
            print(f"Invalid input: {e}")


def main():
    args = parse_args()
    setup_logging(args.verbose)

    try:
        config = SearchConfig(depth=args.depth, use_pruning=args.alpha_beta)
    except SearchConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    human = Player.BLUE if args.human_side == 'blue' else Player.RED
    controller = HexGameController(board_size=args.board_size, automated_player=get_opponent(human),
                                   search_config=config)

    print(f"\nWelcome to Hex! Board size: {args.board_size}x{args.board_size}")
    print("Blue connects left to right, Red connects top to bottom.")
    print(f"You play {human.name.capitalize()}. Engine depth {config.depth}, "
          f"alpha-beta {'on' if config.use_pruning else 'off'}.")

    last_move = None
    try:
        while controller.phase != GamePhase.GAME_OVER:
            print()
            display_hex_board(controller.state.board, highlight_move=last_move)
            if controller.phase == GamePhase.WAITING_HUMAN_MOVE:
                row, col = get_human_move(controller.board_size)
                try:
                    controller.apply_human_move(row, col)
                except MoveError as e:
                    print(f"Invalid move: {e}")
                    continue
                last_move = (row, col)
            else:
                print("Engine is thinking...")
                if args.think_delay > 0:
                    time.sleep(args.think_delay)
                last_move = controller.play_automated_move()
                result = controller.last_search_result
                engine_color = winner_to_color(player_to_winner(controller.automated_player))
                colored_move = ansi_colored(rowcol_to_trmph(*last_move, board_size=controller.board_size),
                                            engine_color)
                print(f"Engine plays: {colored_move} (score {result.score}, "
                      f"{result.nodes_visited} nodes, {result.elapsed_sec:.2f}s)")
    except KeyboardInterrupt:
        print("\nKeyboard interrupt detected. Exiting game.")
        sys.exit(0)

    print("\nFinal board:")
    display_hex_board(controller.state.board, highlight_move=last_move)
    print(f"Final .trmph: {controller.state.to_trmph()}")
    winner = controller.winner
    print(f"Game over! Winner: {ansi_colored(winner.name.capitalize(), winner_to_color(winner))}")


if __name__ == "__main__":
    main()
