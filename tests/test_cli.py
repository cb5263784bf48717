import pytest

from tilesolver.cli import main, parse_board
from tilesolver.domains.grid import InvalidGrid


def test_parse_board_accepts_commas_and_spaces():
    g = parse_board(["1,2,3", "4 5 6", "7", "0", "8"])
    assert g.to_ui_rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


def test_parse_board_rejects_non_square():
    with pytest.raises(InvalidGrid):
        parse_board(["1", "2", "0"])


def test_solves_given_board(capsys):
    assert main(["1", "2", "3", "4", "5", "6", "7", "0", "8"]) == 0
    out = capsys.readouterr().out
    assert "Solvable in 1 moves:" in out
    assert out.rstrip().endswith("LEFT")


def test_replay_prints_each_board(capsys):
    assert main(["1 2 3 4 5 6 0 7 8", "--replay", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "Solvable in 2 moves:" in out
    assert "LEFT, LEFT" in out
    assert "[2/2] LEFT" in out
    assert out.rstrip().endswith("7 8 .")


def test_unsolvable_board(capsys):
    assert main(["1 0 2 3", "--optimal"]) == 1
    assert "Unsolvable!" in capsys.readouterr().out


def test_random_scramble(capsys):
    assert main(["--n", "3", "--seed", "5", "--scramble_moves", "20"]) == 0
    assert "Solvable in" in capsys.readouterr().out


def test_bad_board_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["1", "1", "2", "0"])
    assert exc.value.code == 2
    assert "permutation" in capsys.readouterr().err


def test_moves_that_solve_the_board(capsys):
    assert main(["1 2 3 4 5 6 7 0 8", "--moves", "left"]) == 0
    assert "Solved after 1 moves." in capsys.readouterr().out


def test_moves_that_leave_board_unsolved(capsys):
    assert main(["1 2 3 4 5 6 7 0 8", "--moves", "RIGHT"]) == 1
    out = capsys.readouterr().out
    assert "Not solved after 1 moves:" in out
    assert out.rstrip().endswith(". 7 8")


def test_moves_replay_prints_each_board(capsys):
    assert main(["1 2 3 4 5 6 0 7 8", "--moves", "LEFT, LEFT", "--replay", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "[2/2] LEFT" in out
    assert "Solved after 2 moves." in out


def test_unknown_move_name_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["1 2 3 4 5 6 7 0 8", "--moves", "LEFT,sideways"])
    assert exc.value.code == 2
    assert "unknown move 'sideways'" in capsys.readouterr().err


def test_out_of_bounds_move_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["1 2 3 4 5 6 7 0 8", "--moves", "UP"])
    assert exc.value.code == 2
    assert "leaves a 3x3 grid" in capsys.readouterr().err


def test_parse_moves_splits_commas_and_spaces():
    from tilesolver.cli import parse_moves
    from tilesolver.domains.moves import Move
    assert parse_moves("up, Left DOWN") == [Move.UP, Move.LEFT, Move.DOWN]
    assert parse_moves("") == []


def test_too_small_scramble_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--n", "1"])
    assert exc.value.code == 2
    assert "--n must be at least 2" in capsys.readouterr().err


def test_log_file_receives_solver_records(tmp_path, capsys, reset_package_logger):
    log = tmp_path / "solve.log"
    assert main(["1 2 3 4 5 6 7 0 8", "--log-level", "info", "--log-file", str(log)]) == 0
    text = log.read_text()
    assert "tilesolver.search.best_first - INFO - GBFS solved in 1 moves" in text


def test_heuristic_alias_resolves_through_cli(capsys):
    assert main(["1 2 3 4 5 6 7 0 8", "--heuristic", "linear_conflict"]) == 0
    assert "Solvable in 1 moves:" in capsys.readouterr().out
