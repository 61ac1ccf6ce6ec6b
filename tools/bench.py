#!/usr/bin/env python3
"""
Benchmark: measure nodes visited and time per readout at the policy depth.

The search is full-width, so cost grows as b^d. Run this after changing the
evaluator, the depth policy or the move adapter to see what a readout costs
on typical positions.

Usage: python3 tools/bench.py
"""
import sys
import time

import chess

from winprob.search import search_position

# Fixed positions spanning opening, middlegame, and endgame.
POSITIONS = [
    ("Start",        chess.STARTING_FEN, []),
    ("After 1.e4",   chess.STARTING_FEN, ["e2e4"]),
    ("Sicilian",     chess.STARTING_FEN, ["e2e4", "c7c5"]),
    ("Italian",      chess.STARTING_FEN, ["e2e4", "e7e5", "g1f3", "b8c6", "f1c4"]),
    ("Mid-open",     "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4", []),
    ("Queen ending", "6k1/ppp2ppp/8/3p4/3P4/8/PPP2PPP/6K1 w - - 0 1", []),
    ("Rook ending",  "8/5pk1/6p1/7p/7P/6P1/5PK1/8 w - - 0 1", []),
    ("Pawn race",    "8/1p4k1/p7/P1K5/8/8/8/8 w - - 0 1", []),
]


def run_position(label: str, fen: str, moves: list[str]) -> dict:
    """Search one position at its policy depth and return metrics."""
    board = chess.Board(fen)
    for uci in moves:
        board.push_uci(uci)

    start = time.perf_counter()
    result, depth = search_position(board)
    time_ms = int((time.perf_counter() - start) * 1000)

    return {
        "label": label,
        "depth": depth,
        "eval": result.eval,
        "nodes": result.session.node_count,
        "time_ms": time_ms,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    print(f"Win-probability search benchmark — {sys.executable}")
    print()
    print(f"{'Position':<14} {'Depth':>5} {'Eval':>6} {'Nodes':>9} {'Time(ms)':>9}")
    print("-" * 48)

    results = []
    for label, fen, moves in POSITIONS:
        r = run_position(label, fen, moves)
        results.append(r)
        print(
            f"{r['label']:<14} {r['depth']:>5} {r['eval']:>6.1f} "
            f"{r['nodes']:>9,} {r['time_ms']:>9,}"
        )

    avg_nodes = sum(r["nodes"] for r in results) // len(results)
    avg_time = sum(r["time_ms"] for r in results) // len(results)
    print("-" * 48)
    print(f"{'AVERAGE':<14} {'':>5} {'':>6} {avg_nodes:>9,} {avg_time:>9,}")


if __name__ == "__main__":
    main()
