#!/usr/bin/env python3
from __future__ import annotations
import argparse, math, time
from typing import List, Optional

from tilesolver.domains.grid import Grid, InvalidGrid, replay
from tilesolver.domains.moves import Move, OutOfBounds
from tilesolver.domains.puzzlen import NPuzzle
from tilesolver.search.best_first import HEURISTICS, TIE_BREAKS, UNSOLVABLE, choose_hfun, solve
from tilesolver.utils.logging_utils import get_level_from_string, setup_logger


def parse_board(tokens: List[str]) -> Grid:
    """Parse N*N integers (0 = blank), separated by spaces and/or commas."""
    values = [int(t) for tok in tokens for t in tok.replace(",", " ").split()]
    n = math.isqrt(len(values))
    if n * n != len(values):
        raise InvalidGrid(f"{len(values)} values do not form a square board")
    return Grid.from_ui_rows([values[r * n:(r + 1) * n] for r in range(n)])


def parse_moves(text: str) -> List[Move]:
    """Parse move names separated by commas and/or spaces (e.g. 'up,LEFT')."""
    return [Move.parse(t) for t in text.replace(",", " ").split()]


def play(start: Grid, moves: List[Move], delay: float) -> Grid:
    """Apply moves one at a time, printing the board after each."""
    g = start
    for i, m in enumerate(moves, start=1):
        g = g.apply(m)
        print(f"\n[{i}/{len(moves)}] {m}")
        print(g)
        if delay > 0:
            time.sleep(delay)
    return g


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve an N×N sliding-tile puzzle with best-first search.")
    ap.add_argument("board", nargs="*", help="Tiles row by row, 0 for the blank (e.g. '1 2 3 4 5 6 7 0 8')")
    ap.add_argument("--n", type=int, default=4, help="Board size for a random scramble when no board is given")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the random scramble")
    ap.add_argument("--scramble_moves", type=int, default=None, help="Random moves for the scramble (default N**4)")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="fifo")
    ap.add_argument("--optimal", action="store_true", help="Rank by depth + heuristic (A*) for shortest solutions")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Give up after this many seconds")
    ap.add_argument("--moves", default=None,
                    help="Check a move sequence instead of solving (e.g. 'UP,LEFT'); replays it and reports the result")
    ap.add_argument("--replay", action="store_true", help="Print the board after every move")
    ap.add_argument("--delay", type=float, default=0.1, help="Seconds between replayed moves")
    ap.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    ap.add_argument("--log-file", default=None, help="Also append log records to this file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logger(level=get_level_from_string(args.log_level), log_file=args.log_file)

    if args.board:
        try:
            start = parse_board(args.board)
        except (InvalidGrid, ValueError) as e:
            ap.error(str(e))
    else:
        try:
            start = NPuzzle(args.n).scramble(args.scramble_moves, args.seed)
        except InvalidGrid:
            ap.error(f"--n must be at least 2, got {args.n}")

    print(start)
    print()

    if args.moves is not None:
        try:
            given = parse_moves(args.moves)
            end = replay(start, given)
        except (ValueError, OutOfBounds) as e:
            ap.error(str(e))
        if args.replay:
            play(start, given, args.delay)
        if end.is_goal():
            print(f"Solved after {len(given)} moves.")
            return 0
        print(f"Not solved after {len(given)} moves:")
        print(end)
        return 1

    res = solve(start, choose_hfun(args.heuristic), tie_break=args.tie_break,
                optimal=args.optimal, timeout_sec=args.timeout_sec)

    if res["termination"] == UNSOLVABLE:
        print("Unsolvable!")
        return 1
    if res["moves"] is None:
        print(f"No solution ({res['termination']} after {res['expanded']} expansions).")
        return 1

    moves = res["moves"]
    print(f"Solvable in {len(moves)} moves:")
    print(", ".join(str(m) for m in moves))

    if args.replay:
        play(start, moves, args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
