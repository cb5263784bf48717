#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from tilesolver.domains.grid import Grid
from tilesolver.domains.puzzlen import NPuzzle
from tilesolver.search.best_first import HEURISTICS, choose_hfun, solve


def draw_board(g: Grid, out_path: Path, title: str = ""):
    n = g.n
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    for idx, t in enumerate(g.cells):
        if t == g.blank: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one scramble and save board images along the path.")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--scramble_moves", type=int, default=20)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--optimal", action="store_true")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    start = NPuzzle(args.n).scramble(args.scramble_moves, args.seed)
    res = solve(start, choose_hfun(args.heuristic), optimal=args.optimal)
    if res["moves"] is None:
        print(f"No path ({res['termination']}).")
        return

    outdir = Path(args.outdir)
    g = start
    draw_board(g, outdir / "step_000.png", "start")
    for i, m in enumerate(res["moves"], start=1):
        g = g.apply(m)
        draw_board(g, outdir / f"step_{i:03d}.png", str(m))
    print(f"Saved {len(res['moves']) + 1} frames to {outdir}")


if __name__ == "__main__":
    main()
