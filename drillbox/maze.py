"""Enumerate every route a rat can take through a square maze."""

from __future__ import annotations

from collections.abc import Sequence

# Exploration order fixes the order of the returned paths.
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def find_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every simple path from the top-left to the bottom-right cell.

    Open cells hold 1. Each path is a string of moves D, L, R and U;
    paths come out in that move order, which is also lexicographic order.
    """
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid):
        raise ValueError("grid must be a non-empty square")
    if grid[0][0] != 1:
        return []

    target = (size - 1, size - 1)
    paths: list[str] = []
    visited = {(0, 0)}
    route: list[str] = []

    def walk(row: int, col: int) -> None:
        if (row, col) == target:
            paths.append("".join(route))
            return
        for letter, d_row, d_col in _MOVES:
            cell = (row + d_row, col + d_col)
            next_row, next_col = cell
            if (
                0 <= next_row < size
                and 0 <= next_col < size
                and cell not in visited
                and grid[next_row][next_col] == 1
            ):
                visited.add(cell)
                route.append(letter)
                walk(next_row, next_col)
                route.pop()
                visited.remove(cell)

    walk(0, 0)
    return paths