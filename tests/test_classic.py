import io

import pytest

from mazewalk.classic import main, run, solve_in_place
from mazewalk.maze import CYAN, DEST, PASSED, find_start, parse_maze, render_maze
from mazewalk.search import dfs

MAZE = "3 4\nOoxo\nxoox\nxxoX\n"
BLOCKED = "2 3\nOxX\nooo\n".replace("ooo", "oxx")
NO_START = "2 2\noo\noX\n"


def test_solve_finds_destination():
    grid = parse_maze(MAZE)
    result = solve_in_place(grid)
    assert result.found
    assert grid[result.exit.y][result.exit.x] == DEST
    assert result.visits[-1] == result.exit


def test_solve_marks_grid_itself_including_start():
    grid = parse_maze(MAZE)
    start = find_start(grid)
    result = solve_in_place(grid)
    assert result.grid is grid
    assert grid[start.y][start.x] == PASSED


def test_solve_matches_copying_search_except_start():
    original = parse_maze(MAZE)
    start = find_start(original)
    expected = dfs(original)
    grid = parse_maze(MAZE)
    result = solve_in_place(grid)
    assert result.visits == expected.visits
    assert result.exit == expected.exit
    expected.grid[start.y][start.x] = PASSED
    assert grid == expected.grid


def test_solve_without_start_leaves_grid():
    grid = parse_maze(NO_START)
    result = solve_in_place(grid)
    assert result.visits == []
    assert not result.found
    assert grid == parse_maze(NO_START)


def test_solve_unreachable_destination():
    grid = parse_maze(BLOCKED)
    result = solve_in_place(grid)
    assert not result.found
    assert len(result.visits) == 2


def test_run_header():
    out = run(MAZE)
    assert out.startswith(
        "starting point=O\nwall=x\npath=o\ndestination=X\npassed=@\n\n"
        "=====The Maze=====\n"
    )


def test_run_trace_prints_row_first():
    out = run("2 1\nO\nX\n")
    trace = out.split("\n=====DFS=====\n", 1)[1].split("\n=====After DFS=====\n")[0]
    assert trace == "(0, 0)\n(1, 0)\n"


def test_run_after_section_is_marked_grid():
    grid = parse_maze(MAZE)
    solve_in_place(grid)
    out = run(MAZE)
    assert out.split("\n=====After DFS=====\n", 1)[1] == render_maze(grid, color=False)
    assert CYAN not in out


def test_run_no_solution():
    out = run(BLOCKED)
    assert out.endswith("\n=====After DFS=====\nNo solution\n")


def test_run_without_start_still_prints_trace_header():
    out = run(NO_START)
    assert "\n=====DFS=====\n\n=====After DFS=====\nNo solution\n" in out


def test_run_rejects_bad_maze():
    with pytest.raises(ValueError):
        run("3 3\nOoX\n")


def test_main_prints_report(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(MAZE))
    assert main([]) == 0
    assert capsys.readouterr().out == run(MAZE)


def test_main_bad_input_returns_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "mazewalk-classic:" in captured.err