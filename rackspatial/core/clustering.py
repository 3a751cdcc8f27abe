# -*- coding: utf-8 -*-
"""Tolerance based clustering of entity coordinates and grid structure detection.

Coordinates on one axis are sorted and walked with an anchor: a value more than ``tolerance`` away from the
anchor opens a new cluster and becomes the new anchor. The anchor is the first value of its cluster and does
not follow later members. Row bucketing in the spatial sorter and row/column counting in the grid detector
both go through ``cluster_axis``.
"""

import logging

import numpy as np

from .entity import entities_to_frame

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 10


class GridStructure:
    """Row and column counts inferred from entity positions."""

    def __init__(self, rows=0, columns=0):
        """Initialize a grid structure.

        Parameters:
        -----------
        rows : int
            Number of detected rows
        columns : int
            Number of detected columns
        """
        self.rows = int(rows)
        self.columns = int(columns)

    @property
    def size(self):
        """Number of cells in the grid."""
        return self.rows * self.columns

    def to_dict(self):
        """Return the structure as a plain dict."""
        return {"rows": self.rows, "columns": self.columns}

    def __iter__(self):
        """Allow ``rows, columns = structure``."""
        return iter((self.rows, self.columns))

    def __eq__(self, other):
        """Compare against another structure or a (rows, columns) tuple."""
        if isinstance(other, GridStructure):
            return (self.rows, self.columns) == (other.rows, other.columns)
        if isinstance(other, tuple):
            return (self.rows, self.columns) == other
        return NotImplemented

    def __hash__(self):
        """Hash on the counts."""
        return hash((self.rows, self.columns))

    def __repr__(self):
        """String representation of the structure."""
        return f"GridStructure(rows={self.rows}, columns={self.columns})"


def cluster_axis(values, tolerance=DEFAULT_TOLERANCE):
    """Assign each coordinate to a cluster along one axis.

    Parameters:
    -----------
    values : array-like of float
        Coordinates on one axis
    tolerance : float
        Maximum distance from the cluster anchor for a value to join the cluster

    Returns:
    --------
    labels : numpy.ndarray
        Cluster index for each value, in input order. Clusters are numbered
        from 0 in ascending coordinate order.
    """
    values = np.asarray(values, dtype=float)
    labels = np.zeros(len(values), dtype=int)

    if len(values) == 0:
        return labels

    order = np.argsort(values, kind="stable")
    anchor = values[order[0]]
    cluster = 0

    for idx in order:
        if abs(values[idx] - anchor) > tolerance:
            cluster += 1
            anchor = values[idx]
        labels[idx] = cluster

    return labels


def count_clusters(values, tolerance=DEFAULT_TOLERANCE):
    """Number of clusters ``cluster_axis`` finds for the values."""
    labels = cluster_axis(values, tolerance)
    return int(labels.max()) + 1 if len(labels) else 0


def detect_grid_structure(entities, tolerance=DEFAULT_TOLERANCE):
    """Infer the row and column counts of a set of entities.

    Rows are clusters on y and columns are clusters on x, each computed independently.
    Empty input gives a 0 x 0 structure.

    Parameters:
    -----------
    entities : iterable of SpatialEntity or dict, pandas.DataFrame, or Layer
        Entities with x and y positions
    tolerance : float
        Clustering distance

    Returns:
    --------
    structure : GridStructure
        Detected rows and columns
    """
    frame = entities_to_frame(entities)

    structure = GridStructure(
        rows=count_clusters(frame["y"].to_numpy(), tolerance),
        columns=count_clusters(frame["x"].to_numpy(), tolerance),
    )
    logger.debug("Detected %s from %d entities (tolerance=%s)", structure, len(frame), tolerance)
    return structure
