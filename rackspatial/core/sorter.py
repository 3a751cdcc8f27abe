# -*- coding: utf-8 -*-
"""Orders entities into a visiting sequence for a traversal direction.

Entities are bucketed into rows with the shared axis clustering, each row is sorted by x, and the rows are
flattened according to the direction. ``sequential_rows`` and ``sequential_cols`` flatten identically here:
the difference between them only shows up in which label placeholder carries the number.
"""

import pandas as pd

from .clustering import DEFAULT_TOLERANCE, cluster_axis
from .entity import entities_to_frame
from .sequencer import TraversalDirection


def row_buckets(frame, tolerance=DEFAULT_TOLERANCE):
    """Group the rows of an entity frame into spatial rows.

    Parameters:
    -----------
    frame : pandas.DataFrame
        Entity frame with x and y columns
    tolerance : float
        Clustering distance on y

    Returns:
    --------
    buckets : list of list
        Index labels of the frame, one list per row (top to bottom),
        each sorted by x ascending
    """
    if len(frame) == 0:
        return []

    ordered = pd.DataFrame(
        {
            "row": cluster_axis(frame["y"].to_numpy(), tolerance),
            "x": frame["x"].to_numpy(),
            "y": frame["y"].to_numpy(),
        },
        index=frame.index,
    ).sort_values(["row", "x", "y"], kind="stable")

    return [list(group.index) for _, group in ordered.groupby("row", sort=True)]


def _interleave(first, second):
    merged = []
    for j in range(max(len(first), len(second))):
        if j < len(first):
            merged.append(first[j])
        if j < len(second):
            merged.append(second[j])
    return merged


def visiting_order(frame, direction, tolerance=DEFAULT_TOLERANCE):
    """Index labels of an entity frame in visiting order.

    Parameters:
    -----------
    frame : pandas.DataFrame
        Entity frame with x and y columns
    direction : TraversalDirection or str
        Numbering convention
    tolerance : float
        Row clustering distance

    Returns:
    --------
    order : list
        Frame index labels, each exactly once
    """
    direction = TraversalDirection.coerce(direction)
    buckets = row_buckets(frame, tolerance)
    order = []

    if direction is TraversalDirection.SERPENTINE:
        for i, bucket in enumerate(buckets):
            order.extend(reversed(bucket) if i % 2 == 1 else bucket)
    elif direction is TraversalDirection.CROSS_AISLE:
        for i in range(0, len(buckets), 2):
            second = buckets[i + 1] if i + 1 < len(buckets) else []
            order.extend(_interleave(buckets[i], second))
    else:
        for bucket in buckets:
            order.extend(bucket)

    return order


def sort_by_position(entities, direction, tolerance=DEFAULT_TOLERANCE):
    """Sort entities by their position on the layout.

    Parameters:
    -----------
    entities : iterable of SpatialEntity or dict, pandas.DataFrame, or Layer
        Entities to sort. Entities with non-finite coordinates are left out.
    direction : TraversalDirection or str
        Numbering convention
    tolerance : float
        Row clustering distance

    Returns:
    --------
    sorted_entities : list or geopandas.GeoDataFrame
        The input entities in visiting order. DataFrame and Layer input give an entity
        frame; any other iterable gives a list of the original items.
    """
    if isinstance(entities, pd.DataFrame) or hasattr(entities, "objects"):
        frame = entities_to_frame(entities)
        return frame.loc[visiting_order(frame, direction, tolerance)]

    items = list(entities)
    frame = entities_to_frame(items)
    return [items[i] for i in visiting_order(frame, direction, tolerance)]
