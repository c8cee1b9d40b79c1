import pytest

from drills.maze import DEFAULT_MAZE, format_solution, main, solve_maze


def test_default_maze_solution():
    assert solve_maze(DEFAULT_MAZE) == [
        [1, 0, 0, 0],
        [1, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 1, 1, 1],
    ]


def test_solution_only_uses_open_cells_and_joins_corners():
    maze = [
        [1, 1, 1, 0, 1],
        [0, 0, 1, 1, 1],
        [1, 1, 0, 0, 1],
        [1, 0, 1, 1, 1],
    ]
    solution = solve_maze(maze)
    assert solution[0][0] == 1
    assert solution[-1][-1] == 1
    for sol_row, maze_row in zip(solution, maze):
        for marked, open_cell in zip(sol_row, maze_row):
            assert not marked or open_cell == 1
    assert sum(map(sum, solution)) == len(maze) + len(maze[0]) - 1


def test_no_path_returns_none():
    assert solve_maze([[1, 0], [0, 1]]) is None


def test_blocked_start_returns_none():
    assert solve_maze([[0, 1], [1, 1]]) is None


def test_single_open_cell():
    assert solve_maze([[1]]) == [[1]]


def test_ragged_maze_raises():
    with pytest.raises(ValueError):
        solve_maze([[1, 1], [1]])


def test_empty_maze_raises():
    with pytest.raises(ValueError):
        solve_maze([])


def test_format_solution():
    assert format_solution([[1, 0], [0, 1]]) == " 1  0 \n 0  1 \n"


def test_main_prints_default_solution(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_solution(solve_maze(DEFAULT_MAZE))