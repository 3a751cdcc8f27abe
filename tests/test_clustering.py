# -*- coding: utf-8 -*-
"""Tests for axis clustering and grid structure detection."""

import math

from rackspatial import GridStructure, SpatialEntity, cluster_axis, detect_grid_structure


def test_perfect_grid_is_detected(scenario_entities):
    """Two rows of three locations are found with the default tolerance."""
    structure = detect_grid_structure(scenario_entities, tolerance=10)
    assert structure == GridStructure(2, 3)
    assert structure.to_dict() == {"rows": 2, "columns": 3}


def test_larger_grid_with_jitter():
    """Small placement errors below the tolerance do not split rows or columns."""
    entities = []
    for r in range(4):
        for c in range(5):
            offset = 3 if (r + c) % 2 else -3
            entities.append(SpatialEntity(f"{r}-{c}", c * 60 + offset, r * 80 - offset))
    assert detect_grid_structure(entities) == (4, 5)


def test_empty_input():
    """No entities gives a 0 x 0 structure."""
    assert detect_grid_structure([]) == (0, 0)


def test_non_finite_coordinates_are_ignored():
    """Entities without usable coordinates are left out instead of failing."""
    entities = [
        SpatialEntity("a", 0, 0),
        SpatialEntity("b", math.nan, 0),
        SpatialEntity("c", 0, math.inf),
        {"id": "d", "x": None, "y": 5},
    ]
    assert detect_grid_structure(entities) == (1, 1)
    assert detect_grid_structure([SpatialEntity("x", math.nan, math.nan)]) == (0, 0)


def test_anchor_is_first_value_of_cluster():
    """Values that drift by less than the tolerance each step still split once far from the anchor."""
    labels = cluster_axis([0, 8, 16, 24], tolerance=10)
    assert labels.tolist() == [0, 0, 1, 1]


def test_cluster_labels_follow_input_order():
    """Labels are returned for the values as given, numbered by ascending coordinate."""
    assert cluster_axis([100, 0, 52, 3, 98], tolerance=10).tolist() == [2, 0, 1, 0, 2]


def test_boundary_is_inclusive():
    """A value exactly at the tolerance stays in the cluster."""
    assert cluster_axis([0, 10, 21], tolerance=10).tolist() == [0, 0, 1]


def test_dict_records_are_accepted():
    """Layout API records with x_coordinate/y_coordinate keys are understood."""
    records = [
        {"id": 1, "x_coordinate": 0, "y_coordinate": 0, "label": "A"},
        {"id": 2, "x_coordinate": 200, "y_coordinate": 0, "label": "B"},
    ]
    assert detect_grid_structure(records) == (1, 2)
