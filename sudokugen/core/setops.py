"""N-ary set helpers used when combining possibility groups."""

from __future__ import annotations
from typing import AbstractSet, Set, TypeVar

from .errors import ErrorKind, SudokuError

T = TypeVar("T")


def set_union(*sets: AbstractSet[T]) -> Set[T]:
    """Union of all the given sets. Raises EMPTY_ARGUMENT with no operands."""
    if not sets:
        raise SudokuError(ErrorKind.EMPTY_ARGUMENT, operation="union")
    return set().union(*sets)


def set_intersection(*sets: AbstractSet[T]) -> Set[T]:
    """Elements common to all the given sets. Raises EMPTY_ARGUMENT with no operands."""
    if not sets:
        raise SudokuError(ErrorKind.EMPTY_ARGUMENT, operation="intersection")
    return set(sets[0]).intersection(*sets[1:])
