"""Sudoku grid generation and masking."""

from .core import ConstraintGrid, ErrorKind, Grid, PossibilityIndex, SudokuError
from .generator import Difficulty, SudokuGenerator, mask

__all__ = [
    "ConstraintGrid",
    "ErrorKind",
    "Grid",
    "PossibilityIndex",
    "SudokuError",
    "Difficulty",
    "SudokuGenerator",
    "mask",
]
