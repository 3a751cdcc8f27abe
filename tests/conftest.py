# -*- coding: utf-8 -*-
"""Shared fixtures for the rackspatial test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from rackspatial import Layer, SpatialEntity, create_sample_layout  # noqa: E402


@pytest.fixture
def scenario_entities():
    """Six locations in two rows of three, 50 units apart horizontally and 100 vertically."""
    coords = [(0, 0), (50, 0), (100, 0), (0, 100), (50, 100), (100, 100)]
    return [SpatialEntity(f"e{i}", x, y, 40, 40, f"OLD-{i}") for i, (x, y) in enumerate(coords)]


@pytest.fixture
def shuffled_entities(scenario_entities):
    """The scenario locations in an order unrelated to their positions."""
    return [scenario_entities[i] for i in (4, 0, 5, 2, 3, 1)]


@pytest.fixture
def sample_layer():
    """A 2 x 3 block of locations labelled LOC-1 .. LOC-6 in row-major order."""
    return Layer.from_entities(create_sample_layout(rows=2, columns=3), name="Block")
