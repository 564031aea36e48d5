"""Core module: grids, constraint queries and per-row possibility tracking."""

from .errors import ErrorKind, SudokuError
from .grid import Grid
from .constraint_grid import ConstraintGrid, RemovalBudget
from .possibilities import IndexView, PossibilityIndex

__all__ = [
    "ErrorKind",
    "SudokuError",
    "Grid",
    "ConstraintGrid",
    "RemovalBudget",
    "IndexView",
    "PossibilityIndex",
]
