"""Per-row possibility tracking grouped by how many options each subject has left."""

from __future__ import annotations
import bisect
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Set, TYPE_CHECKING

from .errors import ErrorKind, SudokuError

if TYPE_CHECKING:
    from .constraint_grid import ConstraintGrid


class IndexView(Enum):
    """Which side of the cell/digit relation a PossibilityIndex is keyed by."""
    BY_CELL = "by_cell"      # subject: cell x, options: digits
    BY_NUMBER = "by_number"  # subject: digit, options: cell x coords


class PossibilityIndex:
    """
    Subjects of one grid row, bucketed by the size of their option sets.

    In the by-cell view every empty cell of the row maps to the digits it
    can still take; in the by-number view every missing digit maps to the
    cells it can still go in. Buckets are addressed by rank: rank 0 is the
    smallest option count present, i.e. the most constrained subjects.

    Invariants:
    - every subject sits in exactly one bucket, keyed by its option count
    - empty buckets are pruned
    - subjects with no options left are dropped
    """

    def __init__(
        self,
        view: IndexView,
        row: int,
        possibilities: Mapping[int, Iterable[int]],
        required: Iterable[int],
    ):
        """
        Args:
            view: Which view this index represents.
            row: The grid row the index describes.
            possibilities: Subject -> options it can currently take.
            required: Subjects that still need an assignment in the row.
        """
        self.view = view
        self.row = row
        self.required: Set[int] = set(required)

        self._options: Dict[int, Set[int]] = {}
        self._groups: Dict[int, Set[int]] = {}
        self._sizes: List[int] = []

        for subject, options in possibilities.items():
            self._file(subject, set(options))

    @classmethod
    def by_cell(cls, grid: ConstraintGrid, y: int) -> PossibilityIndex:
        """Index every cell of row y by the digits it can still take."""
        possibilities = {x: grid.possible_digits((x, y)) for x in range(grid.width)}
        required = [x for x in range(grid.width) if grid.is_empty((x, y))]
        return cls(IndexView.BY_CELL, y, possibilities, required)

    @classmethod
    def by_number(cls, grid: ConstraintGrid, y: int) -> PossibilityIndex:
        """Index every digit by the cells of row y it can still go in."""
        possibilities: Dict[int, Set[int]] = {digit: set() for digit in sorted(grid.all_digits)}
        for x in range(grid.width):
            for digit in grid.possible_digits((x, y)):
                possibilities[digit].add(x)
        required = grid.all_digits - grid.row_digits(y)
        return cls(IndexView.BY_NUMBER, y, possibilities, required)

    def _file(self, subject: int, options: Set[int]) -> None:
        size = len(options)
        if size == 0:
            self._options.pop(subject, None)
            return

        self._options[subject] = options
        if size not in self._groups:
            self._groups[size] = set()
            bisect.insort(self._sizes, size)
        self._groups[size].add(subject)

    def _unfile(self, subject: int) -> None:
        size = len(self._options[subject])
        group = self._groups[size]
        group.discard(subject)
        if not group:
            del self._groups[size]
            del self._sizes[bisect.bisect_left(self._sizes, size)]

    @property
    def group_sizes(self) -> List[int]:
        """Option counts currently present, ascending."""
        return list(self._sizes)

    def options_of(self, subject: int) -> Set[int]:
        """Options left for subject (empty if it has none or was assigned)."""
        return set(self._options.get(subject, ()))

    def get_options_group(self, rank: int) -> Dict[int, Set[int]]:
        """
        Return the subjects of the rank-th smallest bucket with their options.

        Raises:
            SudokuError: OUT_OF_OPTIONS_GROUPS if there is no bucket at that rank.
        """
        if not 0 <= rank < len(self._sizes):
            raise SudokuError(
                ErrorKind.OUT_OF_OPTIONS_GROUPS,
                view=self.view.value, rank=rank, groups=len(self._sizes)
            )

        size = self._sizes[rank]
        return {subject: set(self._options[subject]) for subject in sorted(self._groups[size])}

    def is_sufficient(self) -> bool:
        """True if every subject still needed by the row has at least one option."""
        return self.required.issubset(self._options)

    def update(self, subject: int, option: int) -> None:
        """
        Record that subject has just been assigned option.

        The subject leaves the index, and option is no longer available to
        any other subject, which moves each of them one bucket down.
        """
        if subject in self._options:
            self._unfile(subject)
            del self._options[subject]
        self.required.discard(subject)

        for other, options in list(self._options.items()):
            if option in options:
                self._unfile(other)
                options.discard(option)
                self._file(other, options)

    def __contains__(self, subject: object) -> bool:
        return subject in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        lines = [f"{self.view.value} row {self.row}: {{"]
        for size in self._sizes:
            lines.append(f"\t{size} {{")
            for subject in sorted(self._groups[size]):
                lines.append(f"\t\t{subject} => {sorted(self._options[subject])}")
            lines.append("\t}")
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"PossibilityIndex(view={self.view.name}, row={self.row}, sizes={self._sizes})"
