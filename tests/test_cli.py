import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import csv

import pytest

from cli import compare_agents, run_plan
from tests.levels_fixtures import CORRIDOR_TRAP, SEALED


def test_run_plan_on_level_file(tmp_path, capsys):
    p = tmp_path / "trap.txt"
    p.write_text(CORRIDOR_TRAP)
    out_csv = tmp_path / "out" / "plan.csv"
    rows = run_plan.main(["--level", str(p), "--agents", "bfs,greedy,a_star", "--csv", str(out_csv)])

    by_agent = {r["agent"]: r for r in rows}
    assert by_agent["Breadth First Search"]["path_length"] == 12
    assert by_agent["Greedy Best First Search"]["path_length"] == 14
    assert by_agent["Astar Agent"]["path_length"] == 12

    printed = capsys.readouterr().out
    assert "Astar Agent: OK" in printed
    with open(out_csv, newline="") as f:
        written = list(csv.DictReader(f))
    assert [w["agent"] for w in written] == ["Breadth First Search", "Greedy Best First Search", "Astar Agent"]
    assert written[0]["success"] == "1"


def test_run_plan_reports_no_path(tmp_path, capsys):
    p = tmp_path / "sealed.txt"
    p.write_text(SEALED)
    rows = run_plan.main(["--level", str(p), "--agents", "bfs", "--connectivity", "8"])
    assert rows[0]["success"] is False
    assert "NO_PATH" in capsys.readouterr().out


def test_run_plan_start_goal_override(tmp_path):
    p = tmp_path / "open.txt"
    p.write_text("....\n....\n")
    rows = run_plan.main(["--level", str(p), "--agents", "a_star", "--start", "0,0", "--goal", "30,0"])
    assert rows[0]["path"] == [(0, 0), (10, 0), (20, 0), (30, 0)]


def test_run_plan_rejects_bad_input(tmp_path):
    with pytest.raises(SystemExit):
        run_plan.main(["--agents", "dijkstra"])
    p = tmp_path / "nomarks.txt"
    p.write_text("...\n...\n")
    with pytest.raises(SystemExit):
        run_plan.main(["--level", str(p)])


def test_run_plan_random_level():
    rows = run_plan.main(["--size", "8x8", "--density", "0", "--agents", "bfs"])
    assert rows[0]["path_length"] == 14


def test_compare_agents_writes_csv(tmp_path):
    out_csv = compare_agents.main(["--sizes", "6x6", "--densities", "0,10%", "--num-levels", "2",
                                   "--connectivity", "8", "--outdir", str(tmp_path)])
    with open(out_csv, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1 * 2 * 2 * 3
    empty = [r for r in rows if r["density"] == "0.0"]
    assert all(r["success"] == "1" and r["path_length"] == "5" for r in empty)


def test_diagonal_steps():
    assert compare_agents.diagonal_steps([(0, 0), (10, 10), (20, 10)]) == 1
    assert compare_agents.diagonal_steps(None) == 0
