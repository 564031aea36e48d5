"""Sudoku grid generator: fewest-options-first row filling with backtracking."""

from __future__ import annotations
import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..core.constraint_grid import ConstraintGrid, RemovalBudget, SIZE
from ..core.errors import ErrorKind, SudokuError
from ..core.possibilities import PossibilityIndex
from ..core.setops import set_intersection, set_union

log = logging.getLogger(__name__)


class Difficulty(Enum):
    """Difficulty levels for generated puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def removals_per_unit(self) -> int:
        """How many digits each row, column and quadrant may lose."""
        removals = {
            Difficulty.EASY: 4,
            Difficulty.MEDIUM: 5,
            Difficulty.HARD: 6,
            Difficulty.EXPERT: 7,
        }
        return removals[self]


@dataclass
class GenerationStats:
    """Statistics from a single generation run."""
    assignments: int = 0
    row_retries: int = 0
    backtracks: int = 0
    retries_by_row: List[int] = field(default_factory=lambda: [0] * SIZE)
    backtracks_by_row: List[int] = field(default_factory=lambda: [0] * SIZE)
    time_seconds: float = 0.0
    valid: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "assignments": self.assignments,
            "row_retries": self.row_retries,
            "backtracks": self.backtracks,
            "retries_by_row": list(self.retries_by_row),
            "backtracks_by_row": list(self.backtracks_by_row),
            "time_seconds": self.time_seconds,
            "valid": self.valid,
        }


def mask(
    grid: ConstraintGrid,
    per_unit: int,
    rng: Optional[random.Random] = None
) -> Tuple[ConstraintGrid, RemovalBudget]:
    """
    Return a masked copy of a solved grid along with the leftover budget.

    The input grid is left untouched.
    """
    puzzle = grid.copy()
    budget = puzzle.unsolve(per_unit, rng=rng)
    return puzzle, budget


class SudokuGenerator:
    """
    Generator for complete Sudoku grids and playable puzzles.

    Algorithm:
    1. Fill the grid row by row. For the current row, index which digits fit
       in each cell and which cells each digit fits in.
    2. Repeatedly place the most constrained digit in one of its most
       constrained cells, updating both indexes after each placement.
    3. When the row runs out of options, clear it and start the row over.
       When a row can't be completed at all, clear it and the row above and
       step back.
    4. Optionally mask the finished grid under per-unit removal budgets.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_row_retries: int = 25,
        max_backtracks: Optional[int] = 10_000,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source to draw every choice from.
            max_row_retries: Restarts of a single row before stepping back a row.
            max_backtracks: Row step-backs allowed per grid before giving up.
                None means no limit.
        """
        if max_row_retries < 1:
            raise SudokuError(ErrorKind.NUMBER_NOT_IN_RANGE, value=max_row_retries, minimum=1)
        if max_backtracks is not None and max_backtracks < 0:
            raise SudokuError(ErrorKind.NUMBER_NOT_IN_RANGE, value=max_backtracks, minimum=0)

        self.rng = rng if rng is not None else random.Random(seed)
        self.max_row_retries = max_row_retries
        self.max_backtracks = max_backtracks
        self.stats = GenerationStats()

    def _choose(self, options: Iterable[int]) -> int:
        return self.rng.choice(sorted(options))

    def best_option(
        self,
        by_number: PossibilityIndex,
        by_cell: PossibilityIndex
    ) -> Tuple[int, int]:
        """
        Pick the next (cell x, digit) pair to place in the row.

        The digit comes from the smallest by-number group that shares a digit
        with the most constrained cells; the cell is one of the most
        constrained cells that the chosen digit can go in.

        Raises:
            SudokuError: OUT_OF_OPTIONS_GROUPS if no pair is left.
        """
        cells_group = by_cell.get_options_group(0)
        digits_from_cells = set_union(*cells_group.values())

        rank = 0
        numbers_group = by_number.get_options_group(rank)
        digits = set_intersection(set(numbers_group), digits_from_cells)
        while not digits:
            rank += 1
            numbers_group = by_number.get_options_group(rank)
            digits = set_intersection(set(numbers_group), digits_from_cells)

        chosen_digit = self._choose(digits)

        cells = set_intersection(
            set(cells_group),
            set_union(*numbers_group.values()),
            numbers_group[chosen_digit],
        )
        chosen_x = self._choose(cells)
        return chosen_x, chosen_digit

    def _build_indexes(self, grid: ConstraintGrid, y: int) -> Tuple[PossibilityIndex, PossibilityIndex]:
        return PossibilityIndex.by_number(grid, y), PossibilityIndex.by_cell(grid, y)

    def _fill_row(self, grid: ConstraintGrid, y: int) -> bool:
        """
        Complete row y, restarting it whenever the choices run out.

        Returns False once the row has been restarted ``max_row_retries`` times.
        """
        by_number, by_cell = self._build_indexes(grid, y)
        retries = 0

        while len(grid.row_digits(y)) < grid.width:
            try:
                x, digit = self.best_option(by_number, by_cell)
            except SudokuError as e:
                if e.kind is not ErrorKind.OUT_OF_OPTIONS_GROUPS:
                    raise

                self.stats.row_retries += 1
                self.stats.retries_by_row[y] += 1
                retries += 1
                log.debug("Row %d ran out of options, restarting it (attempt %d)", y, retries)

                grid.clear_row(y)
                if retries >= self.max_row_retries:
                    return False
                by_number, by_cell = self._build_indexes(grid, y)
                continue

            grid.set(digit, (x, y))
            self.stats.assignments += 1
            by_number.update(digit, x)
            by_cell.update(x, digit)

        return True

    def _step_back(self, grid: ConstraintGrid, y: int) -> int:
        """Clear row y and the one above it; return the row to resume from."""
        self.stats.backtracks += 1
        self.stats.backtracks_by_row[y] += 1
        if self.max_backtracks is not None and self.stats.backtracks > self.max_backtracks:
            raise SudokuError(
                ErrorKind.GENERATION_EXHAUSTED,
                backtracks=self.stats.backtracks, row=y
            )

        grid.clear_row(y)
        if y == 0:
            return 0
        grid.clear_row(y - 1)
        return y - 1

    def fill(self, grid: ConstraintGrid) -> ConstraintGrid:
        """
        Complete grid in place, row by row.

        Digits already present are kept as long as no row needs to be
        cleared to get past them.
        """
        y = 0
        while y < grid.height:
            by_number, by_cell = self._build_indexes(grid, y)
            if not (by_number.is_sufficient() and by_cell.is_sufficient()):
                log.info("Row %d has not enough possibilities left, going back one row", y)
                y = self._step_back(grid, y)
                continue

            if self._fill_row(grid, y):
                y += 1
            else:
                log.info("Row %d kept running out of options, going back one row", y)
                y = self._step_back(grid, y)

        return grid

    def generate(self) -> ConstraintGrid:
        """
        Generate a complete, valid Sudoku grid.

        Returns:
            A fully solved ConstraintGrid. ``self.stats`` describes the run.
        """
        self.stats = GenerationStats()
        start_time = time.perf_counter()

        try:
            grid = self.fill(ConstraintGrid())
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time

        self.stats.valid = grid.is_valid()
        log.debug(
            "Generated grid in %.4fs: %d assignments, %d row retries, %d backtracks",
            self.stats.time_seconds, self.stats.assignments,
            self.stats.row_retries, self.stats.backtracks
        )
        return grid

    def _resolve_budget(self, level: Union[Difficulty, int]) -> int:
        if isinstance(level, Difficulty):
            return level.removals_per_unit
        return level

    def generate_with_solution(
        self,
        level: Union[Difficulty, int] = Difficulty.MEDIUM
    ) -> Tuple[ConstraintGrid, ConstraintGrid]:
        """
        Generate a puzzle along with its solution.

        Args:
            level: A Difficulty, or the removal budget per unit (0-9).

        Returns:
            Tuple of (puzzle, solution) grids.
        """
        solution = self.generate()
        puzzle, _ = mask(solution, self._resolve_budget(level), rng=self.rng)
        return puzzle, solution

    def generate_puzzle(self, level: Union[Difficulty, int] = Difficulty.MEDIUM) -> ConstraintGrid:
        """Generate a ready-to-play puzzle."""
        puzzle, _ = self.generate_with_solution(level)
        return puzzle

    def generate_batch(
        self,
        count: int,
        level: Union[Difficulty, int] = Difficulty.MEDIUM
    ) -> List[Tuple[ConstraintGrid, ConstraintGrid]]:
        """Generate ``count`` (puzzle, solution) pairs."""
        return [self.generate_with_solution(level) for _ in range(count)]
