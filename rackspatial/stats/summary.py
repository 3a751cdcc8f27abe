# -*- coding: utf-8 -*-
"""Summary statistics for layers in rackspatial."""

from ..core.clustering import DEFAULT_TOLERANCE, cluster_axis, detect_grid_structure


def attach_grid_structure(layer, tolerance=DEFAULT_TOLERANCE, row_column="grid_row", col_column="grid_col"):
    """Detect the grid structure of a layer and tag each entity with its grid cell.

    Parameters:
    -----------
    layer : Layer
        Layer to analyze
    tolerance : float
        Clustering distance
    row_column : str
        Column to store the 1-based row cluster of each entity
    col_column : str
        Column to store the 1-based column cluster of each entity

    Returns:
    --------
    structure : dict
        Dictionary with the detected rows, columns and how many cells are occupied
    """
    if layer.objects is None or len(layer.objects) == 0:
        return {"rows": 0, "columns": 0, "occupied_cells": 0, "fill_ratio": 0.0}

    structure = detect_grid_structure(layer.objects, tolerance)

    layer.objects[row_column] = cluster_axis(layer.objects["y"].to_numpy(), tolerance) + 1
    layer.objects[col_column] = cluster_axis(layer.objects["x"].to_numpy(), tolerance) + 1

    occupied = len(layer.objects[[row_column, col_column]].drop_duplicates())

    return {
        "rows": structure.rows,
        "columns": structure.columns,
        "occupied_cells": occupied,
        "fill_ratio": round(occupied / structure.size, 4) if structure.size else 0.0,
    }


def attach_rename_summary(layer):
    """Summarize the rename preview held by a resequence layer.

    Parameters:
    -----------
    layer : Layer
        Layer with old_label, new_label and conflict columns

    Returns:
    --------
    summary : dict
        Dictionary with entity, change and conflict counts and the conflicting labels
    """
    if layer.objects is None or "new_label" not in layer.objects.columns:
        return {}

    objects = layer.objects
    changed = objects["old_label"] != objects["new_label"]
    conflicts = objects["conflict"].astype(bool)

    return {
        "entity_count": len(objects),
        "change_count": int(changed.sum()),
        "unchanged_count": int((~changed).sum()),
        "conflict_count": int(conflicts.sum()),
        "conflicting_labels": objects.loc[conflicts, "new_label"].tolist(),
        "can_commit": not bool(conflicts.any()),
    }


def attach_label_counts(layer, label_column="label"):
    """Count case-insensitive duplicate labels in a layer.

    Parameters:
    -----------
    layer : Layer
        Layer to analyze
    label_column : str
        Column containing labels

    Returns:
    --------
    counts : dict
        Dictionary with the number of labels, distinct labels and the duplicated ones
    """
    if layer.objects is None or label_column not in layer.objects.columns:
        return {}

    keys = layer.objects[label_column].astype(str).str.lower()
    value_counts = keys.value_counts()
    duplicates = value_counts[value_counts > 1]

    return {
        "total": len(keys),
        "distinct": int(keys.nunique()),
        "duplicates": {str(k): int(v) for k, v in duplicates.items()},
    }
