import csv

import pandas as pd

from tilesolver.experiments import runner, summarize
from tilesolver.experiments.visualize_path import main as visualize_main


def run_small(out):
    runner.main([
        "--n", "2", "--scramble_moves", "3", "6", "--per_setting", "2",
        "--algo", "both", "--include_unsolvable", "--out", str(out),
    ])


def test_runner_writes_schema(tmp_path):
    out = tmp_path / "run.csv"
    run_small(out)
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == runner.HEADER
    # 4 instances x (solvable + flipped) x (greedy + A*)
    assert len(rows) == 16
    assert {r["algorithm"] for r in rows} == {"GBFS", "A*"}
    for r in rows:
        if r["solvable"] == "1":
            assert r["termination"] == "ok"
        else:
            assert r["termination"] == "unsolvable"
            assert r["g"] == ""


def test_make_instances_seeds_are_sequential():
    from tilesolver.domains.puzzlen import NPuzzle
    insts = runner.make_instances(NPuzzle(3), [5, 10], 3, start_seed=100)
    assert [i.seed for i in insts] == list(range(100, 106))
    assert [i.scramble_moves for i in insts] == [5, 5, 5, 10, 10, 10]


def test_summarize_groups_rows(tmp_path):
    out = tmp_path / "run.csv"
    run_small(out)
    df = summarize.load([out])
    table = summarize.summarize(df)
    assert set(table["algorithm"]) == {"GBFS", "A*"}
    assert {"expanded_mean", "g_sem", "ok", "unsolvable"} <= set(table.columns)
    assert (table["ok"] == 2).all()
    assert (table["unsolvable"] == 2).all()


def test_summarize_main_saves_outputs(tmp_path, capsys):
    out = tmp_path / "run.csv"
    run_small(out)
    plots = tmp_path / "plots"
    summarize.main([str(out), "--save", str(plots)])
    assert (plots / "summary.csv").exists()
    assert (plots / "expanded.png").exists()
    assert not pd.read_csv(plots / "summary.csv").empty


def test_visualize_path_writes_frames(tmp_path, capsys):
    outdir = tmp_path / "frames"
    visualize_main(["--n", "2", "--scramble_moves", "4", "--seed", "2", "--outdir", str(outdir)])
    frames = sorted(outdir.glob("step_*.png"))
    assert frames and frames[0].name == "step_000.png"


def test_runner_log_file(tmp_path, capsys, reset_package_logger):
    out = tmp_path / "run.csv"
    log = tmp_path / "run.log"
    runner.main([
        "--n", "2", "--scramble_moves", "4", "--per_setting", "1",
        "--log-level", "info", "--log-file", str(log), "--out", str(out),
    ])
    text = log.read_text()
    assert "seed=0 k=4 GBFS/manhattan -> ok" in text


def test_errorbar_plot_writes_png(tmp_path, capsys):
    out = tmp_path / "run.csv"
    run_small(out)
    table = summarize.summarize(summarize.load([out]))
    summarize.errorbar_plot(table, "expanded", tmp_path / "plots")
    assert (tmp_path / "plots" / "expanded.png").exists()
