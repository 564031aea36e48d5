"""Generic bounds-checked 2D grid."""

from __future__ import annotations
import copy
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ErrorKind, SudokuError

Coord = Tuple[int, int]


def is_integer(value: Any) -> bool:
    """True for Python and numpy integers, False for bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Grid:
    """
    Rectangular grid of optional values addressed by (x, y) coordinates.

    ``x`` is the column and ``y`` the row. Empty cells hold None.
    Every access is bounds-checked; negative coordinates never wrap.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an empty grid.

        Args:
            width: Number of columns, a positive integer.
            height: Number of rows, a positive integer.
        """
        Grid.check_dimension(width)
        Grid.check_dimension(height)

        self.width = int(width)
        self.height = int(height)
        self._matrix = np.full((self.height, self.width), None, dtype=object)

    @staticmethod
    def check_dimension(dimension: Any) -> None:
        """Raise INVALID_DIMENSION unless dimension is a positive integer."""
        if not is_integer(dimension) or dimension <= 0:
            raise SudokuError(ErrorKind.INVALID_DIMENSION, dimension=dimension)

    @staticmethod
    def check_matrix_shape(rows: Sequence[Sequence[Any]]) -> None:
        """Raise INVALID_MATRIX_SHAPE if the rows don't all share one length."""
        Grid.check_dimension(len(rows))

        first_row_length = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != first_row_length:
                raise SudokuError(
                    ErrorKind.INVALID_MATRIX_SHAPE,
                    row=y, expected=first_row_length, found=len(row)
                )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> Grid:
        """Create a grid from a rectangular list of rows."""
        cls.check_matrix_shape(rows)
        grid = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                grid.set(value, (x, y))
        return grid

    def check_coord(self, coord: Coord) -> None:
        """Raise COORD_OUT_OF_BOUNDS if coord lies outside the grid."""
        x, y = coord
        if not (is_integer(x) and is_integer(y)) or not (0 <= x < self.width and 0 <= y < self.height):
            raise SudokuError(
                ErrorKind.COORD_OUT_OF_BOUNDS,
                coord=(x, y), width=self.width, height=self.height
            )

    def get(self, coord: Coord) -> Any:
        """Get the value at coord. None means empty."""
        self.check_coord(coord)
        x, y = coord
        return self._matrix[y, x]

    def set(self, value: Any, coord: Coord) -> None:
        """Store value at coord."""
        self.check_coord(coord)
        x, y = coord
        self._matrix[y, x] = value

    def delete(self, coord: Coord) -> None:
        """Empty the cell at coord."""
        self.check_coord(coord)
        x, y = coord
        self._matrix[y, x] = None

    def is_empty(self, coord: Coord) -> bool:
        return self.get(coord) is None

    def cells(self) -> Iterator[Coord]:
        """Iterate over every coordinate, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def count_empty(self) -> int:
        return int(sum(1 for value in self._matrix.flat if value is None))

    def count_filled(self) -> int:
        return self.width * self.height - self.count_empty()

    def to_rows(self) -> List[List[Optional[Any]]]:
        """Return the contents as a list of rows."""
        return [list(row) for row in self._matrix]

    def _blank(self) -> Grid:
        return Grid(self.width, self.height)

    def copy(self) -> Grid:
        """Create a deep, independently mutable copy of the grid."""
        new_grid = self._blank()
        new_grid._matrix = copy.deepcopy(self._matrix)
        return new_grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.to_rows() == other.to_rows()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height}, filled={self.count_filled()})"
