# -*- coding: utf-8 -*-
"""Numbering grids for the warehouse traversal conventions.

A numbering grid assigns every (row, column) cell of a rectangular arrangement a 1-based sequence number.
Four conventions are supported, matching the way storage locations are usually numbered on the floor:
serpentine (snake), sequential rows, sequential columns and cross-aisle (odd/even sides of an aisle).
"""

from enum import Enum

import numpy as np

from ..errors import InvalidConfigError


class TraversalDirection(str, Enum):
    """Numbering convention used when walking a grid of locations."""

    SERPENTINE = "serpentine"
    SEQUENTIAL_ROWS = "sequential_rows"
    SEQUENTIAL_COLS = "sequential_cols"
    CROSS_AISLE = "cross_aisle"

    @classmethod
    def coerce(cls, value):
        """Return the direction for a member or its string value.

        Raises InvalidConfigError for anything else.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise InvalidConfigError(f"Unknown traversal direction '{value}'. Expected one of: {valid}") from None


DIRECTION_INFO = {
    TraversalDirection.SERPENTINE: {
        "name": "Serpentine",
        "description": "Snake pattern - numbers flow continuously, reversing each row",
        "example": [
            ["1", "2", "3", "→"],
            ["←", "6", "5", "4"],
            ["7", "8", "9", "→"],
        ],
    },
    TraversalDirection.SEQUENTIAL_ROWS: {
        "name": "Sequential Rows",
        "description": "Each row restarts numbering - use with Row/Col pattern",
        "example": [
            ["1", "2", "3", "→"],
            ["1", "2", "3", "→"],
            ["1", "2", "3", "→"],
        ],
    },
    TraversalDirection.SEQUENTIAL_COLS: {
        "name": "Sequential Columns",
        "description": "Each column increments independently",
        "example": [
            ["1", "1", "1", "↓"],
            ["2", "2", "2", "↓"],
            ["3", "3", "3", "↓"],
        ],
    },
    TraversalDirection.CROSS_AISLE: {
        "name": "Cross-Aisle",
        "description": "Odd numbers on one side, even on other - for double-sided aisles",
        "example": [
            ["1", "3", "5", "7"],
            ["2", "4", "6", "8"],
        ],
    },
}


def _cross_aisle_pair(pair_index, cols):
    """Numbers for one pair of facing rows: odd on the first, even on the second."""
    odd = pair_index * cols * 2 + 2 * np.arange(cols) + 1
    return np.vstack([odd, odd + 1])


def number_sequence(rows, cols, direction):
    """Build the numbering grid for a rows x cols arrangement.

    Parameters:
    -----------
    rows : int
        Number of rows
    cols : int
        Number of columns
    direction : TraversalDirection or str
        Numbering convention

    Returns:
    --------
    grid : numpy.ndarray
        Integer array of shape (rows, cols) holding 1-based sequence numbers.
        sequential_rows and sequential_cols repeat numbers across rows/columns;
        uniqueness for those comes from combining with {ROW}/{COL} in a label pattern.
    """
    direction = TraversalDirection.coerce(direction)
    rows = max(int(rows), 0)
    cols = max(int(cols), 0)

    if rows == 0 or cols == 0:
        return np.zeros((rows, cols), dtype=int)

    row_idx, col_idx = np.indices((rows, cols))

    if direction is TraversalDirection.SERPENTINE:
        grid = row_idx * cols + col_idx + 1
        grid[1::2] = grid[1::2, ::-1].copy()
    elif direction is TraversalDirection.SEQUENTIAL_ROWS:
        grid = col_idx + 1
    elif direction is TraversalDirection.SEQUENTIAL_COLS:
        grid = row_idx + 1
    else:
        pairs = [_cross_aisle_pair(k, cols) for k in range((rows + 1) // 2)]
        grid = np.vstack(pairs)[:rows]

    return grid.astype(int)


def sequence_at(grid, row, col, cols=None):
    """Look up a cell of a numbering grid.

    Out-of-range cells fall back to the row-major number ``row * cols + col + 1``
    instead of failing.

    Parameters:
    -----------
    grid : numpy.ndarray
        Numbering grid from number_sequence
    row, col : int
        0-based cell position
    cols : int, optional
        Column count used by the fallback. Defaults to the grid width.

    Returns:
    --------
    number : int
        Sequence number for the cell
    """
    grid = np.asarray(grid)
    height = grid.shape[0] if grid.ndim == 2 else 0
    width = grid.shape[1] if grid.ndim == 2 else 0

    if 0 <= row < height and 0 <= col < width:
        return int(grid[row, col])

    if cols is None:
        cols = width
    return row * cols + col + 1
