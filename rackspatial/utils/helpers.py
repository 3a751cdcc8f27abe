# -*- coding: utf-8 -*-
"""Helpers for sample layouts and layer summaries."""

import json
import os

import numpy as np

from ..core.entity import SpatialEntity
from ..core.sequencer import DIRECTION_INFO, TraversalDirection


def create_sample_layout(rows=3, columns=4, spacing=50, width=40, height=40, prefix="LOC", jitter=0.0, seed=None):
    """Create a rows x columns block of storage locations for testing.

    Parameters:
    -----------
    rows, columns : int
        Size of the block
    spacing : float
        Distance between the origins of neighbouring locations
    width, height : float
        Footprint of each location
    prefix : str
        Label prefix; labels are "<prefix>-<n>" in row-major order
    jitter : float
        Maximum random offset added to each coordinate, to mimic hand placed locations
    seed : int, optional
        Seed for the jitter

    Returns:
    --------
    entities : list of SpatialEntity
        Locations in row-major order
    """
    rng = np.random.default_rng(seed)
    entities = []

    for r in range(rows):
        for c in range(columns):
            dx, dy = rng.uniform(-jitter, jitter, size=2) if jitter else (0.0, 0.0)
            n = r * columns + c + 1
            x = c * spacing + float(dx)
            y = r * spacing + float(dy)
            entities.append(SpatialEntity(f"loc-{n}", x, y, width, height, f"{prefix}-{n}"))

    return entities


def describe_directions():
    """Display name, description and example grid for each traversal direction, keyed by value."""
    return {direction.value: dict(DIRECTION_INFO[direction]) for direction in TraversalDirection}


def calculate_statistics_summary(layer_manager, output_file=None):
    """Calculate summary statistics for all layers in a layer manager.

    Parameters:
    -----------
    layer_manager : LayerManager
        Layer manager containing layers
    output_file : str, optional
        Path to save the summary to (as JSON)

    Returns:
    --------
    summary : dict
        Dictionary with summary statistics
    """
    summary = {}

    for layer_name in layer_manager.get_layer_names():
        layer = layer_manager.get_layer(layer_name)

        layer_summary = {
            "type": layer.type,
            "created_at": str(layer.created_at),
            "parent": layer.parent.name if layer.parent is not None else None,
            "object_count": len(layer),
        }

        if layer.objects is not None and "conflict" in layer.objects.columns:
            layer_summary["conflict_count"] = int(layer.objects["conflict"].astype(bool).sum())

        if "grid_structure" in layer.metadata:
            layer_summary["grid_structure"] = layer.metadata["grid_structure"]

        if layer.attached_functions:
            layer_summary["functions"] = list(layer.attached_functions.keys())

        summary[layer_name] = layer_summary

    if output_file:
        output_dir = os.path.dirname(output_file)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_file, "w") as f:
            json.dump(summary, f, indent=2)

    return summary
