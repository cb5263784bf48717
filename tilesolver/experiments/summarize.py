#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["expanded", "generated", "duplicates", "g", "time_sec"]
GROUP = ["algorithm", "heuristic", "n", "scramble_moves"]


def load(paths) -> pd.DataFrame:
    dfs = [pd.read_csv(p) for p in paths]
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in METRICS + ["n", "scramble_moves", "seed", "solvable"]:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if "termination" in df.columns:
        df["termination"] = df["termination"].fillna("ok")
    return df


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean / sem per (algorithm, heuristic, n, scramble_moves) over solved rows,
    plus the share of rows that ended with each termination."""
    solved = df[df["termination"] == "ok"]
    table = solved.groupby(GROUP)[METRICS].agg(["mean", sem])
    table.columns = [f"{m}_{s}" for m, s in table.columns]
    counts = df.groupby(GROUP)["termination"].value_counts().unstack(fill_value=0)
    return table.join(counts, how="outer").reset_index()


def errorbar_plot(table: pd.DataFrame, metric: str, outdir: Path):
    fig, ax = plt.subplots(figsize=(8, 5))
    for (algo, heur), part in table.groupby(["algorithm", "heuristic"]):
        part = part.sort_values("scramble_moves")
        ax.errorbar(part["scramble_moves"], part[f"{metric}_mean"], yerr=part[f"{metric}_sem"],
                    marker="o", capsize=3, label=f"{algo} | {heur}")
    ax.set_xlabel("Scramble moves")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs scramble length (mean ± sem)")
    ax.grid(True)
    ax.legend()
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"{metric}.png"
    fig.savefig(p, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {p}")


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs and save plots.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory for plots and the summary CSV")
    ap.add_argument("--no_plots", action="store_true")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return

    table = summarize(df)
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(table.to_string(index=False))

    outdir = Path(args.save)
    outdir.mkdir(parents=True, exist_ok=True)
    table.to_csv(outdir / "summary.csv", index=False)
    if not args.no_plots:
        for metric in ["expanded", "g", "time_sec"]:
            errorbar_plot(table.dropna(subset=[f"{metric}_mean"]), metric, outdir)


if __name__ == "__main__":
    main()
