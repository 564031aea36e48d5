"""Sudoku grid: a 9x9 Grid that enforces row, column and quadrant constraints."""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional, Sequence, Set

import numpy as np

from .errors import ErrorKind, SudokuError
from .grid import Coord, Grid, is_integer
from .setops import set_union

SIZE = 9
BOX_SIZE = 3
ALL_DIGITS: FrozenSet[int] = frozenset(range(1, SIZE + 1))


def quadrant_index(x: int, y: int) -> int:
    """Index (0-8, row-major) of the quadrant containing (x, y)."""
    return (y // BOX_SIZE) * BOX_SIZE + (x // BOX_SIZE)


@dataclass(eq=False)
class RemovalBudget:
    """How many more digits each row, column and quadrant may lose while masking."""
    rows: np.ndarray
    columns: np.ndarray
    quadrants: np.ndarray

    @classmethod
    def full(cls, per_unit: int, size: int = SIZE) -> RemovalBudget:
        return cls(
            rows=np.full(size, per_unit, dtype=np.int32),
            columns=np.full(size, per_unit, dtype=np.int32),
            quadrants=np.full(size, per_unit, dtype=np.int32),
        )

    def allows(self, x: int, y: int) -> bool:
        return (
            self.rows[y] > 0
            and self.columns[x] > 0
            and self.quadrants[quadrant_index(x, y)] > 0
        )

    def consume(self, x: int, y: int) -> None:
        self.rows[y] -= 1
        self.columns[x] -= 1
        self.quadrants[quadrant_index(x, y)] -= 1

    def __str__(self) -> str:
        """
        Draw the remaining counts around an empty grid outline.

        Column counts run along the top, row counts down the left side and
        each quadrant's count sits in the middle of its box.
        """
        lines = ["  " + "".join(
            f"   {count}" if x % BOX_SIZE == 0 else f" {count}"
            for x, count in enumerate(self.columns)
        ) + "  "]
        separator = "    ------- ------- ------- "
        lines.append(separator)

        for y, count in enumerate(self.rows):
            if y % BOX_SIZE == 1:
                first = (y // BOX_SIZE) * BOX_SIZE
                boxes = "|".join(f"   {q}   " for q in self.quadrants[first:first + BOX_SIZE])
                lines.append(f" {count} |{boxes}|")
            else:
                lines.append(f" {count} |       |       |       |")
            if (y + 1) % BOX_SIZE == 0:
                lines.append(separator)

        return "\n".join(lines)


class ConstraintGrid(Grid):
    """
    A 9x9 Sudoku grid.

    Only digits 1-9 that don't clash with their row, column or 3x3 quadrant
    can be written with ``set``. Empty cells hold None.
    """

    def __init__(self):
        super().__init__(SIZE, SIZE)
        self.all_digits = ALL_DIGITS

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> ConstraintGrid:
        """
        Create a grid from 9 rows of 9 values, 0 or None meaning empty.

        Every digit goes through ``set`` so conflicting input is rejected.
        """
        Grid.check_matrix_shape(rows)
        if len(rows) != SIZE or len(rows[0]) != SIZE:
            raise SudokuError(
                ErrorKind.INVALID_MATRIX_SHAPE,
                expected=(SIZE, SIZE), found=(len(rows[0]), len(rows))
            )

        grid = cls()
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                if value is not None and value != 0:
                    grid.set(value, (x, y))
        return grid

    def _blank(self) -> ConstraintGrid:
        return ConstraintGrid()

    def row_digits(self, y: int) -> Set[int]:
        """Digits currently present in row y."""
        self.check_coord((0, y))
        return {value for value in self._matrix[y, :] if value is not None}

    def column_digits(self, x: int) -> Set[int]:
        """Digits currently present in column x."""
        self.check_coord((x, 0))
        return {value for value in self._matrix[:, x] if value is not None}

    def quadrant_digits(self, coord: Coord) -> Set[int]:
        """Digits currently present in the 3x3 quadrant containing coord."""
        self.check_coord(coord)
        x, y = coord
        start_x = (x // BOX_SIZE) * BOX_SIZE
        start_y = (y // BOX_SIZE) * BOX_SIZE
        block = self._matrix[start_y:start_y + BOX_SIZE, start_x:start_x + BOX_SIZE]
        return {value for value in block.flat if value is not None}

    def possible_digits(self, coord: Coord) -> Set[int]:
        """
        Digits that can be written at coord right now.

        Returns an empty set if the cell is already occupied.
        """
        if self.get(coord) is not None:
            return set()

        x, y = coord
        used = set_union(self.row_digits(y), self.column_digits(x), self.quadrant_digits(coord))
        return set(self.all_digits - used)

    def set(self, value: Any, coord: Coord) -> None:
        """Write a digit at coord, enforcing range and the live constraints."""
        if not is_integer(value):
            raise SudokuError(ErrorKind.NUMBER_NOT_INTEGER, value=value)
        if not 1 <= value <= SIZE:
            raise SudokuError(ErrorKind.NUMBER_NOT_IN_RANGE, value=value, minimum=1, maximum=SIZE)

        possible = self.possible_digits(coord)
        if value not in possible:
            raise SudokuError(
                ErrorKind.NUMBER_NOT_POSSIBLE,
                value=value, coord=tuple(coord), accepted=sorted(possible)
            )
        super().set(int(value), coord)

    def clear_row(self, y: int) -> None:
        """Empty every cell in row y."""
        self.check_coord((0, y))
        for x in range(self.width):
            self.delete((x, y))

    def is_complete(self) -> bool:
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """True if every row, column and quadrant holds each digit 1-9."""
        for i in range(SIZE):
            quadrant_origin = ((i % BOX_SIZE) * BOX_SIZE, (i // BOX_SIZE) * BOX_SIZE)
            if (
                self.row_digits(i) != self.all_digits
                or self.column_digits(i) != self.all_digits
                or self.quadrant_digits(quadrant_origin) != self.all_digits
            ):
                return False
        return True

    def _removable_columns(self, y: int, budget: RemovalBudget, already_removed: Set[int]) -> List[int]:
        return [
            x for x in range(self.width)
            if x not in already_removed
            and self._matrix[y, x] is not None
            and budget.allows(x, y)
        ]

    def unsolve(self, per_unit: int, rng: Optional[random.Random] = None) -> RemovalBudget:
        """
        Empty cells to turn a solved grid into a playable puzzle.

        Each row loses up to ``per_unit`` digits, picked at random among the
        columns whose row, column and quadrant can all still lose one. No row,
        column or quadrant loses more than ``per_unit`` digits in total.

        Args:
            per_unit: Removal budget per row, column and quadrant (0-9).
            rng: Random source. A fresh unseeded one is used when omitted.

        Returns:
            The budget left over for each unit.
        """
        if not is_integer(per_unit):
            raise SudokuError(ErrorKind.NUMBER_NOT_INTEGER, value=per_unit)
        if not 0 <= per_unit <= self.width:
            raise SudokuError(ErrorKind.NUMBER_NOT_IN_RANGE, value=per_unit, minimum=0, maximum=self.width)

        rng = rng or random.Random()
        budget = RemovalBudget.full(per_unit, self.width)

        for y in range(self.height):
            removed: Set[int] = set()
            for _ in range(per_unit):
                candidates = self._removable_columns(y, budget, removed)
                if not candidates:
                    break
                x = rng.choice(candidates)
                removed.add(x)
                budget.consume(x, y)
                self.delete((x, y))

        return budget

    def to_display_string(self, empty: str = "0") -> str:
        """Box-drawn rendering of the grid, ``empty`` standing in for blank cells."""
        separator = " ------- ------- ------- "
        lines = []
        for y in range(self.height):
            if y % BOX_SIZE == 0:
                lines.append(separator)
            row = "| "
            for x in range(self.width):
                value = self._matrix[y, x]
                row += f"{empty if value is None else value} "
                if (x + 1) % BOX_SIZE == 0:
                    row += "|" if x == self.width - 1 else "| "
            lines.append(row)
        lines.append(separator)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_display_string()
