"""Unit tests for the per-row possibility index."""

import pytest

from sudokugen.core.constraint_grid import ALL_DIGITS, ConstraintGrid
from sudokugen.core.errors import ErrorKind, SudokuError
from sudokugen.core.possibilities import IndexView, PossibilityIndex


def assert_grouping_consistent(index):
    """Every subject sits under the key equal to its option count."""
    seen = set()
    for rank, size in enumerate(index.group_sizes):
        group = index.get_options_group(rank)
        assert group, "empty groups must be pruned"
        for subject, options in group.items():
            assert len(options) == size
            assert subject not in seen
            seen.add(subject)
    assert len(seen) == len(index)


class TestPossibilityIndex:
    """Tests for PossibilityIndex class."""

    def test_empty_row_by_number(self):
        """On an empty row every digit fits in all 9 cells: one group, key 9."""
        index = PossibilityIndex.by_number(ConstraintGrid(), 0)
        assert index.view is IndexView.BY_NUMBER
        assert index.group_sizes == [9]

        group = index.get_options_group(0)
        assert set(group) == ALL_DIGITS
        assert all(cells == set(range(9)) for cells in group.values())

        with pytest.raises(SudokuError) as excinfo:
            index.get_options_group(1)
        assert excinfo.value.kind is ErrorKind.OUT_OF_OPTIONS_GROUPS
        assert excinfo.value.context["groups"] == 1

    def test_negative_rank(self):
        index = PossibilityIndex.by_cell(ConstraintGrid(), 0)
        with pytest.raises(SudokuError) as excinfo:
            index.get_options_group(-1)
        assert excinfo.value.kind is ErrorKind.OUT_OF_OPTIONS_GROUPS

    def test_by_cell_under_filled_row(self, first_row_grid):
        """Row 1 cells lose their column digit and the quadrant's digits."""
        index = PossibilityIndex.by_cell(first_row_grid, 1)
        assert index.view is IndexView.BY_CELL
        assert index.group_sizes == [6]
        assert index.options_of(0) == {4, 5, 6, 7, 8, 9}
        assert index.options_of(4) == {1, 2, 3, 7, 8, 9}
        assert index.is_sufficient()
        assert_grouping_consistent(index)

    def test_by_number_under_filled_row(self, first_row_grid):
        index = PossibilityIndex.by_number(first_row_grid, 1)
        assert index.options_of(1) == {3, 4, 5, 6, 7, 8}
        assert index.options_of(9) == {0, 1, 2, 3, 4, 5}
        assert index.is_sufficient()
        assert_grouping_consistent(index)

    def test_full_row_is_empty_index(self, first_row_grid):
        """A complete row has nothing left to place and nothing required."""
        for index in (PossibilityIndex.by_cell(first_row_grid, 0),
                      PossibilityIndex.by_number(first_row_grid, 0)):
            assert len(index) == 0
            assert index.group_sizes == []
            assert index.is_sufficient()
            with pytest.raises(SudokuError):
                index.get_options_group(0)

    def test_groups_ordered_numerically(self):
        """Rank follows numeric order of group sizes, not insertion order."""
        index = PossibilityIndex(
            IndexView.BY_CELL, 0,
            {0: set(range(1, 11)), 1: {1, 2}, 2: {3}, 3: {4, 5, 6}},
            required=[0, 1, 2, 3],
        )
        assert index.group_sizes == [1, 2, 3, 10]
        assert index.get_options_group(0) == {2: {3}}
        assert index.get_options_group(3) == {0: set(range(1, 11))}

    def test_empty_options_are_omitted(self):
        index = PossibilityIndex(IndexView.BY_CELL, 0, {0: set(), 1: {4}}, required=[1])
        assert 0 not in index
        assert 1 in index
        assert index.group_sizes == [1]

    def test_update(self):
        index = PossibilityIndex(
            IndexView.BY_CELL, 0,
            {0: {1, 2}, 1: {2, 3, 4}, 2: {5}, 3: {2, 5}},
            required=[0, 1, 2, 3],
        )
        index.update(0, 2)

        assert 0 not in index
        assert index.options_of(1) == {3, 4}
        assert index.options_of(3) == {5}
        assert index.group_sizes == [1, 2]
        assert index.get_options_group(0) == {2: {5}, 3: {5}}
        assert index.get_options_group(1) == {1: {3, 4}}
        assert_grouping_consistent(index)

    def test_update_leaves_unrelated_subjects(self):
        index = PossibilityIndex(
            IndexView.BY_NUMBER, 0,
            {1: {0, 1, 2}, 2: {3, 4}, 3: {0, 5}},
            required=[1, 2, 3],
        )
        index.update(1, 0)
        assert index.options_of(2) == {3, 4}
        assert index.options_of(3) == {5}

    def test_update_drops_exhausted_subjects(self):
        index = PossibilityIndex(IndexView.BY_CELL, 0, {0: {1}, 1: {1}}, required=[0, 1])
        index.update(0, 1)

        assert len(index) == 0
        assert 1 not in index
        assert not index.is_sufficient()
        with pytest.raises(SudokuError) as excinfo:
            index.get_options_group(0)
        assert excinfo.value.kind is ErrorKind.OUT_OF_OPTIONS_GROUPS

    def test_update_releases_requirement(self):
        index = PossibilityIndex(IndexView.BY_CELL, 0, {0: {1}, 1: {2}}, required=[0, 1])
        index.update(0, 1)
        assert index.required == {1}
        assert index.is_sufficient()

    def test_insufficient_row(self):
        """A cell with no digit left, and a digit with no cell left, fail the check."""
        rows = [[0] * 9 for _ in range(9)]
        rows[1] = [0, 2, 3, 4, 5, 6, 7, 8, 9]
        rows[2][0] = 1
        grid = ConstraintGrid.from_rows(rows)

        by_cell = PossibilityIndex.by_cell(grid, 1)
        by_number = PossibilityIndex.by_number(grid, 1)
        assert 0 not in by_cell
        assert not by_cell.is_sufficient()
        assert 1 not in by_number
        assert not by_number.is_sufficient()

    def test_views_stay_in_step(self, first_row_grid):
        """Updating both views after a placement matches a rebuild from the grid."""
        by_cell = PossibilityIndex.by_cell(first_row_grid, 1)
        by_number = PossibilityIndex.by_number(first_row_grid, 1)

        for x, digit in [(0, 4), (4, 1), (8, 2)]:
            first_row_grid.set(digit, (x, 1))
            by_cell.update(x, digit)
            by_number.update(digit, x)

            rebuilt_cell = PossibilityIndex.by_cell(first_row_grid, 1)
            rebuilt_number = PossibilityIndex.by_number(first_row_grid, 1)
            assert by_cell.group_sizes == rebuilt_cell.group_sizes
            assert by_number.group_sizes == rebuilt_number.group_sizes
            for rank in range(len(by_cell.group_sizes)):
                assert by_cell.get_options_group(rank) == rebuilt_cell.get_options_group(rank)
            for rank in range(len(by_number.group_sizes)):
                assert by_number.get_options_group(rank) == rebuilt_number.get_options_group(rank)

    def test_returned_group_is_a_copy(self):
        index = PossibilityIndex(IndexView.BY_CELL, 0, {0: {1, 2}}, required=[0])
        index.get_options_group(0)[0].add(9)
        assert index.options_of(0) == {1, 2}

    def test_str(self):
        index = PossibilityIndex(IndexView.BY_CELL, 3, {0: {1, 2}}, required=[0])
        text = str(index)
        assert "by_cell row 3" in text
        assert "0 => [1, 2]" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
