from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from tilesolver.domains.grid import Grid
from tilesolver.domains.puzzlen import NPuzzle
from tilesolver.search.best_first import HEURISTICS, TIE_BREAKS, choose_hfun, solve
from tilesolver.utils.logging_utils import get_level_from_string, setup_logger

HEADER = [
    "algorithm", "heuristic", "n", "scramble_moves", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "tie_break", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    scramble_moves: int
    grid: Grid


def make_instances(dom: NPuzzle, scramble_moves: List[int], per_setting: int,
                   start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for k in scramble_moves:
        for _ in range(per_setting):
            out.append(Instance(seed=seed, scramble_moves=k, grid=dom.scramble(k, seed)))
            seed += 1
    return out


def write_row(w, res, n: int, inst: Instance, solvable_flag: int):
    w.writerow([
        res["algorithm"], res["heuristic"], n, inst.scramble_moves, inst.seed,
        res["expanded"], res["generated"], res["duplicates"],
        "" if res["g"] is None else res["g"],
        f"{res['time']:.6f}",
        res["peak_open"], res["peak_closed"], res["tie_break"], res["termination"], solvable_flag,
    ])


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Greedy best-first / A* N-puzzle experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--scramble_moves", type=int, nargs="+", default=[10, 20, 40, 80])
    ap.add_argument("--per_setting", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), nargs="+", default=["manhattan"])
    ap.add_argument("--algo", choices=["greedy", "astar", "both"], default="greedy")
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="fifo")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (small N recommended)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    ap.add_argument("--log-file", default=None, help="Also append log records to this file")
    return ap


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    logger = setup_logger(level=get_level_from_string(args.log_level), log_file=args.log_file)

    dom = NPuzzle(args.n)
    insts = make_instances(dom, args.scramble_moves, args.per_setting, args.start_seed)
    modes = {"greedy": [False], "astar": [True], "both": [False, True]}[args.algo]

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            variants = [(inst.grid, 1)]
            if args.include_unsolvable:
                variants.append((dom.make_unsolvable_variant(inst.grid), 0))
            for grid, solvable_flag in variants:
                for heur in args.heuristic:
                    for optimal in modes:
                        res = solve(grid, choose_hfun(heur), tie_break=args.tie_break,
                                    optimal=optimal, timeout_sec=args.timeout_sec)
                        logger.info("seed=%d k=%d %s/%s -> %s g=%s",
                                    inst.seed, inst.scramble_moves, res["algorithm"], heur,
                                    res["termination"], res["g"])
                        write_row(w, res, args.n, inst, solvable_flag)

    print(f"Wrote {args.out} ({len(insts)} instances)")


if __name__ == "__main__":
    main()
