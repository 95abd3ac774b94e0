"""Matrix and grid exercises: rotation, zeroing and path finding."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def _require_square(matrix: Sequence[Sequence[int]]) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")


def rotate_matrix(matrix: list[list[int]]) -> list[list[int]]:
    """Return a new matrix turned 90 degrees clockwise.

    A matrix of at most one row is returned as it is.
    """
    if len(matrix) <= 1:
        return matrix
    _require_square(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_matrix_in_place(matrix: list[list[int]]) -> list[list[int]]:
    """Turn a square matrix 90 degrees clockwise in place and return it."""
    if all(not row for row in matrix):
        return matrix
    _require_square(matrix)
    for i, j in combinations(range(len(matrix)), 2):
        matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()
    return matrix


def _zero_lines(matrix: list[list[int]]) -> list[list[int]]:
    rows = {i for i, row in enumerate(matrix) if 0 in row}
    columns = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in rows or j in columns:
                row[j] = 0
    return matrix


def zero_matrix(matrix: list[list[int]]) -> list[list[int]]:
    """Zero every row and column holding a zero, in place."""
    return _zero_lines(matrix)


def zero_matrix_marked(matrix: list[list[int]]) -> list[list[int]]:
    """Zero every row and column holding a zero, in place.

    A matrix with a single row or a single column is left unchanged.
    """
    if len(matrix) <= 1 or len(matrix[0]) <= 1:
        return matrix
    return _zero_lines(matrix)


def find_path(grid: Sequence[Sequence[bool]]) -> list[list[int]] | None:
    """Find a path of open cells from the top left to the bottom right.

    Moves go right first, then down. Returns the visited ``[row, column]``
    cells, or None when no path exists.
    """
    if not grid or not grid[0]:
        return None
    last_row, last_column = len(grid) - 1, len(grid[0]) - 1
    dead_ends: set[tuple[int, int]] = set()

    def walk(x: int, y: int) -> list[list[int]] | None:
        if (x, y) in dead_ends or not grid[x][y]:
            return None
        if x == last_row and y == last_column:
            return [[x, y]]
        for nx, ny in ((x, y + 1), (x + 1, y)):
            if nx <= last_row and ny <= last_column:
                rest = walk(nx, ny)
                if rest is not None:
                    return [[x, y], *rest]
        dead_ends.add((x, y))
        return None

    return walk(0, 0)