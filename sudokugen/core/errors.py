"""Error kinds raised by the grid, possibility and generator modules."""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict


class ErrorKind(Enum):
    """Every failure the core can report."""
    INVALID_DIMENSION = "invalid_dimension"
    COORD_OUT_OF_BOUNDS = "coord_out_of_bounds"
    EMPTY_ARGUMENT = "empty_argument"
    OUT_OF_OPTIONS_GROUPS = "out_of_options_groups"
    NUMBER_NOT_IN_RANGE = "number_not_in_range"
    NUMBER_NOT_INTEGER = "number_not_integer"
    NUMBER_NOT_POSSIBLE = "number_not_possible"
    INVALID_MATRIX_SHAPE = "invalid_matrix_shape"
    GENERATION_EXHAUSTED = "generation_exhausted"

    @property
    def description(self) -> str:
        """Human readable summary of the failure."""
        descriptions = {
            ErrorKind.INVALID_DIMENSION: "Dimension must be a positive integer",
            ErrorKind.COORD_OUT_OF_BOUNDS: "Coordinate is outside the grid",
            ErrorKind.EMPTY_ARGUMENT: "At least one operand is required",
            ErrorKind.OUT_OF_OPTIONS_GROUPS: "No more options groups to choose from",
            ErrorKind.NUMBER_NOT_IN_RANGE: "Number is not in the accepted range",
            ErrorKind.NUMBER_NOT_INTEGER: "Number must be an integer",
            ErrorKind.NUMBER_NOT_POSSIBLE: "Number breaks a row, column or quadrant constraint",
            ErrorKind.INVALID_MATRIX_SHAPE: "Rows must all have the same expected length",
            ErrorKind.GENERATION_EXHAUSTED: "Gave up filling the grid after too many backtracks",
        }
        return descriptions[self]


class SudokuError(ValueError):
    """
    Single exception type for the package, tagged with an ErrorKind.

    Structured details (offending value, bounds, accepted set...) live in
    ``context`` so callers can inspect them without parsing the message.
    """

    def __init__(self, kind: ErrorKind, **context: Any):
        self.kind = kind
        self.context: Dict[str, Any] = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.context:
            return self.kind.description
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.kind.description} ({details})"

    def __repr__(self) -> str:
        return f"SudokuError({self.kind.name}, {self.context!r})"
