#!/usr/bin/env python3
"""
Compare minimax search with and without alpha-beta pruning.

For each depth the same position is searched twice. The best move and score
must match; the node count and wall time show what pruning saves.

Examples:
    python scripts/compare_pruning.py --max-depth 3
    python scripts/compare_pruning.py --start-trmph '#5,c3b3' --max-depth 4 --output json
"""
import argparse
import json
import logging
import sys

from hex_minimax.config import BOARD_SIZE, MAX_RECOMMENDED_DEPTH
from hex_minimax.engine.game_engine import HexGameState, make_empty_hex_state
from hex_minimax.engine.minimax_search import SearchConfig, search
from hex_minimax.enums import Player


def parse_args():
    p = argparse.ArgumentParser(description="Compare node counts and timing of minimax with and without pruning")
    p.add_argument("--board-size", type=int, default=BOARD_SIZE)
    p.add_argument("--max-depth", type=int, default=3, help=f"Deepest search to run (recommended <= {MAX_RECOMMENDED_DEPTH})")
    p.add_argument("--player", choices=["blue", "red"], default=None,
                   help="Side to search for (default: the side to move)")
    p.add_argument("--start-trmph", default=None, help="Optional starting position, e.g. '#5,c3b3'")
    p.add_argument("--output", choices=["table", "json"], default="table")
    return p.parse_args()


def run_depth(state: HexGameState, player: Player, depth: int):
    plain = search(state.board, SearchConfig(depth=depth, use_pruning=False), player)
    pruned = search(state.board, SearchConfig(depth=depth, use_pruning=True), player)
    return {
        "depth": depth,
        "best_move": plain.best_move,
        "score": plain.score,
        "nodes_plain": plain.nodes_visited,
        "nodes_pruned": pruned.nodes_visited,
        "ms_plain": plain.elapsed_sec * 1e3,
        "ms_pruned": pruned.elapsed_sec * 1e3,
        "agree": plain.best_move == pruned.best_move and plain.score == pruned.score,
    }


def main():
    args = parse_args()
    logging.basicConfig(level=logging.WARNING)

    if args.start_trmph:
        try:
            state = HexGameState.from_trmph(args.start_trmph)
        except ValueError as e:
            print(f"Error parsing --start-trmph: {e}")
            sys.exit(1)
    else:
        state = make_empty_hex_state(args.board_size)
    if state.game_over:
        print("Error: the starting position is already decided.")
        sys.exit(1)

    if args.player is None:
        player = state.current_player
    else:
        player = Player.BLUE if args.player == "blue" else Player.RED

    rows = [run_depth(state, player, depth) for depth in range(1, args.max_depth + 1)]

    if args.output == "json":
        print(json.dumps(rows, indent=2))
    else:
        print(f"Position: {state.to_trmph()}  searching for {player.name}")
        print(f"{'depth':>5} {'move':>8} {'score':>6} {'nodes':>10} {'pruned':>10} {'ratio':>7} "
              f"{'ms':>9} {'ms_ab':>9} agree")
        for r in rows:
            ratio = r["nodes_pruned"] / r["nodes_plain"] if r["nodes_plain"] else 1.0
            print(f"{r['depth']:>5} {str(r['best_move']):>8} {r['score']:>6} {r['nodes_plain']:>10} "
                  f"{r['nodes_pruned']:>10} {ratio:>7.3f} {r['ms_plain']:>9.1f} {r['ms_pruned']:>9.1f} "
                  f"{r['agree']}")

    if not all(r["agree"] for r in rows):
        print("ERROR: pruned and unpruned searches disagree", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
