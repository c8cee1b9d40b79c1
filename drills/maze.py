"""Rat-in-a-maze path finding by backtracking."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_MAZE: tuple[tuple[int, ...], ...] = (
    (1, 0, 0, 0),
    (1, 1, 0, 1),
    (0, 1, 0, 0),
    (1, 1, 1, 1),
)


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path of open (1) cells from the top-left to the bottom-right corner.

    Moves go down first, then right. Returns a grid with the path marked by 1s,
    or None if no path exists.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must not be empty")
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows must all have the same length")

    solution = [[0] * cols for _ in range(rows)]
    goal = (rows - 1, cols - 1)
    dead_ends: set[tuple[int, int]] = set()

    def visit(x: int, y: int) -> bool:
        if (x, y) == goal and maze[x][y] == 1:
            solution[x][y] = 1
            return True
        if x >= rows or y >= cols or maze[x][y] != 1 or solution[x][y]:
            return False
        if (x, y) in dead_ends:
            return False
        solution[x][y] = 1
        if visit(x + 1, y) or visit(x, y + 1):
            return True
        solution[x][y] = 0
        dead_ends.add((x, y))
        return False

    return solution if visit(0, 0) else None


def format_solution(solution: Sequence[Sequence[int]]) -> str:
    """Render a solution grid, one row per line, each cell padded by spaces."""
    return "".join("".join(f" {cell} " for cell in row) + "\n" for row in solution)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the built-in maze and print the path grid."""
    parser = argparse.ArgumentParser(description="Find a path through the built-in maze.")
    parser.parse_args(argv)
    solution = solve_maze(DEFAULT_MAZE)
    if solution is None:
        print("Solution doesn't exist", end="")
    else:
        print(format_solution(solution), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())