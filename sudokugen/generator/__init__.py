"""Generator module for creating Sudoku grids and puzzles."""

from .generator import SudokuGenerator, Difficulty, GenerationStats, mask

__all__ = ["SudokuGenerator", "Difficulty", "GenerationStats", "mask"]
