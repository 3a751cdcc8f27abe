# -*- coding: utf-8 -*-
"""Tests for the numbering grids of each traversal direction."""

import numpy as np
import pytest

from rackspatial import InvalidConfigError, TraversalDirection, number_sequence, sequence_at


def test_serpentine_uses_every_number_once():
    """A serpentine grid holds each number of 1..rows*cols exactly once."""
    grid = number_sequence(5, 7, "serpentine")
    assert grid.shape == (5, 7)
    assert sorted(grid.ravel().tolist()) == list(range(1, 36)), "Serpentine numbers are not a permutation."


def test_serpentine_reverses_odd_rows():
    """Odd rows run right to left so the counter stays continuous."""
    grid = number_sequence(3, 4, TraversalDirection.SERPENTINE)
    assert grid.tolist() == [[1, 2, 3, 4], [8, 7, 6, 5], [9, 10, 11, 12]]


def test_sequential_rows_repeat_column_numbers():
    """Every row restarts at 1."""
    assert number_sequence(2, 3, "sequential_rows").tolist() == [[1, 2, 3], [1, 2, 3]]


def test_sequential_cols_is_transpose_of_rows():
    """Every column restarts at 1."""
    grid = number_sequence(2, 3, "sequential_cols")
    assert grid.tolist() == [[1, 1, 1], [2, 2, 2]]
    assert np.array_equal(number_sequence(3, 2, "sequential_rows").T, number_sequence(2, 3, "sequential_cols"))


def test_cross_aisle_four_by_three():
    """Facing rows share odd and even numbers, cumulative across pairs."""
    grid = number_sequence(4, 3, "cross_aisle")
    assert grid.tolist() == [[1, 3, 5], [2, 4, 6], [7, 9, 11], [8, 10, 12]]


def test_cross_aisle_odd_row_count():
    """An unpaired last row still gets the odd numbers of its pair."""
    assert number_sequence(3, 2, "cross_aisle").tolist() == [[1, 3], [2, 4], [5, 7]]


def test_empty_grid():
    """A 0 x 0 arrangement gives an empty matrix."""
    grid = number_sequence(0, 0, "serpentine")
    assert grid.shape == (0, 0)
    assert number_sequence(3, 0, "cross_aisle").size == 0


def test_sequence_at_falls_back_outside_grid():
    """Out-of-range lookups use the row-major number instead of failing."""
    grid = number_sequence(2, 3, "serpentine")
    assert sequence_at(grid, 1, 0) == 6
    assert sequence_at(grid, 5, 1) == 17
    assert sequence_at(number_sequence(0, 0, "serpentine"), 0, 0, cols=4) == 1
    assert sequence_at(number_sequence(0, 0, "serpentine"), 2, 1, cols=4) == 10


def test_unknown_direction_raises():
    """Directions outside the four conventions are rejected."""
    with pytest.raises(InvalidConfigError):
        number_sequence(2, 2, "diagonal")
    with pytest.raises(ValueError):
        TraversalDirection.coerce("zigzag")


def test_direction_coercion_is_case_insensitive():
    """Upper case direction names are accepted."""
    assert TraversalDirection.coerce("CROSS_AISLE") is TraversalDirection.CROSS_AISLE
