"""Shared fixtures for the test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest

from sudokugen.core.constraint_grid import ConstraintGrid


# A known solved grid
SOLVED_ROWS = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def solved_grid():
    return ConstraintGrid.from_rows(SOLVED_ROWS)


@pytest.fixture
def first_row_grid():
    """Grid with row 0 = 1..9 and everything else empty."""
    grid = ConstraintGrid()
    for x in range(9):
        grid.set(x + 1, (x, 0))
    return grid
