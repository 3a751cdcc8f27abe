# -*- coding: utf-8 -*-
# rackspatial/__init__.py

"""
RackSpatial: pattern generation and resequencing for warehouse layouts
======================================================================

RackSpatial names storage locations from where they sit on a layout.

Key features:
- Grid structure detection from raw coordinates
- Serpentine, sequential and cross-aisle numbering
- Label patterns such as "A-{ROW}-{##}"
- Conflict checks before a batch rename
- Generation of new rows and grids of locations
"""

__version__ = "0.1.0"

from .config import DEFAULT_PATTERN, DEFAULT_TOLERANCE, GRID_SPACING, PatternConfig
from .errors import InvalidConfigError, RackSpatialError, RenameConflictError
from .logging_config import setup_logging

from .core.clustering import GridStructure, cluster_axis, detect_grid_structure
from .core.conflicts import (
    RenamePreviewEntry,
    ValidationResult,
    entries_from_frame,
    has_conflicts,
    rename_requests,
    validate_labels,
    validate_renames,
)
from .core.entity import SpatialEntity, entities_to_frame
from .core.generator import GeneratedPosition, PatternGenerator, generate_positions
from .core.layer import Layer, LayerManager
from .core.resequence import Resequencer, preview_bulk_rename, preview_resequence
from .core.sequencer import DIRECTION_INFO, TraversalDirection, number_sequence, sequence_at
from .core.sorter import sort_by_position, visiting_order
from .core.template import (
    DetectedPattern,
    detect_naming_pattern,
    expand_label,
    generate_labels,
    number_to_letters,
    substitute_number,
    suggest_bulk_pattern,
)

from .io.vector import layer_to_vector, read_entity_layer, read_vector, write_vector

from .stats.summary import attach_grid_structure, attach_label_counts, attach_rename_summary

from .utils.helpers import calculate_statistics_summary, create_sample_layout, describe_directions
from .viz.maps import plot_comparison, plot_layer, plot_sequence
