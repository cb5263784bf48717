#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m tilesolver.experiments.runner --n 3 --scramble_moves 10 20 40 80 --per_setting 10 --heuristic manhattan linear_conflict --algo both --out results/p8.csv")
    run("python -m tilesolver.experiments.runner --n 4 --scramble_moves 10 20 40 --per_setting 10 --heuristic manhattan --algo greedy --timeout_sec 30 --out results/p15.csv")
    run("python -m tilesolver.experiments.summarize results/p8.csv results/p15.csv --save results/plots")

if __name__ == "__main__":
    main()
