# -*- coding: utf-8 -*-
"""Generates a row, column or grid of new entities from a template entity.

Copies of the template are laid out with a fixed gap between footprints, numbered with the chosen traversal
direction and labelled from the pattern. The labels are validated against the labels already in the layout
before anything is handed back to the caller.
"""

import logging
import math

from ..config import GRID_SPACING, PATTERN_TYPES, PatternConfig
from ..errors import InvalidConfigError
from .conflicts import validate_labels
from .entity import SpatialEntity, entities_to_frame
from .layer import Layer
from .sequencer import number_sequence, sequence_at
from .template import generate_labels

logger = logging.getLogger(__name__)


class GeneratedPosition:
    """Position and numbering of one generated entity."""

    __slots__ = ("x", "y", "row", "col", "sequence_number")

    def __init__(self, x, y, row, col, sequence_number):
        """Initialize a generated position (row and col are 1-based)."""
        self.x = x
        self.y = y
        self.row = row
        self.col = col
        self.sequence_number = sequence_number

    def to_dict(self):
        """Return the position as a plain dict."""
        return {name: getattr(self, name) for name in self.__slots__}

    def __repr__(self):
        """String representation of the position."""
        return f"GeneratedPosition(x={self.x}, y={self.y}, row={self.row}, col={self.col}, seq={self.sequence_number})"


def generate_positions(
    template,
    rows,
    columns,
    horizontal_spacing=None,
    vertical_spacing=None,
    direction="serpentine",
    pattern_type="grid",
):
    """Lay out copies of a template entity.

    Parameters:
    -----------
    template : SpatialEntity or dict
        Entity whose position and size the copies start from
    rows : int
        Number of rows (ignored for pattern type "row")
    columns : int
        Number of columns (ignored for pattern type "column")
    horizontal_spacing : float, optional
        Gap between neighbouring footprints along x. Defaults to the gap that aligns copies to the canvas grid.
    vertical_spacing : float, optional
        Gap between neighbouring footprints along y. Defaults like horizontal_spacing.
    direction : TraversalDirection or str
        Numbering convention
    pattern_type : str
        "row", "column" or "grid"

    Returns:
    --------
    positions : list of GeneratedPosition
        Row-major list of positions, empty when the template has non-finite coordinates or spacing
    """
    if pattern_type not in PATTERN_TYPES:
        raise InvalidConfigError(f"Unknown pattern type '{pattern_type}'. Expected one of: {', '.join(PATTERN_TYPES)}")

    if not isinstance(template, SpatialEntity):
        template = SpatialEntity.from_record(template)

    x0, y0 = float(template.x), float(template.y)
    width, height = float(template.width), float(template.height)

    if horizontal_spacing is None:
        horizontal_spacing = GRID_SPACING - width
    if vertical_spacing is None:
        vertical_spacing = GRID_SPACING - height

    if not all(math.isfinite(value) for value in (x0, y0, width, height, horizontal_spacing, vertical_spacing)):
        logger.warning("Template %r has non-finite coordinates, nothing generated", template.id)
        return []

    effective_rows = 1 if pattern_type == "row" else int(rows)
    effective_cols = 1 if pattern_type == "column" else int(columns)
    grid = number_sequence(effective_rows, effective_cols, direction)

    positions = []
    for r in range(effective_rows):
        for c in range(effective_cols):
            positions.append(
                GeneratedPosition(
                    x=x0 + c * (width + horizontal_spacing),
                    y=y0 + r * (height + vertical_spacing),
                    row=r + 1,
                    col=c + 1,
                    sequence_number=sequence_at(grid, r, c, cols=effective_cols),
                )
            )

    return positions


class PatternGenerator:
    """Creates new entities in a regular arrangement from a template entity."""

    def __init__(
        self,
        rows=5,
        columns=5,
        pattern_type="grid",
        horizontal_spacing=None,
        vertical_spacing=None,
        config=None,
        max_elements=None,
        name=None,
        **settings,
    ):
        """Initialize the generator.

        Parameters:
        -----------
        rows, columns : int
            Size of the arrangement
        pattern_type : str
            "row", "column" or "grid"
        horizontal_spacing, vertical_spacing : float, optional
            Gaps between footprints, see generate_positions
        config : PatternConfig or dict, optional
            Direction, pattern and offsets (tolerance is not used here)
        max_elements : int, optional
            Maximum number of entities that may be generated
        name : str, optional
            Name used for result layers
        **settings
            Individual configuration fields overriding ``config``
        """
        self.rows = int(rows)
        self.columns = int(columns)
        self.pattern_type = pattern_type
        self.horizontal_spacing = horizontal_spacing
        self.vertical_spacing = vertical_spacing
        self.config = PatternConfig.coerce(config, **settings)
        self.max_elements = max_elements
        self.name = name if name else "Pattern"

    @property
    def total_elements(self):
        """Number of entities one run generates."""
        effective_rows = 1 if self.pattern_type == "row" else self.rows
        effective_cols = 1 if self.pattern_type == "column" else self.columns
        return max(effective_rows, 0) * max(effective_cols, 0)

    def preview(self, template):
        """Positions and labels for a template without building a layer."""
        positions = generate_positions(
            template,
            self.rows,
            self.columns,
            horizontal_spacing=self.horizontal_spacing,
            vertical_spacing=self.vertical_spacing,
            direction=self.config.direction,
            pattern_type=self.pattern_type,
        )
        labels = generate_labels(
            self.config.pattern,
            positions,
            start_number=self.config.start_number,
            start_row=self.config.start_row,
            start_col=self.config.start_col,
        )
        return positions, labels

    def execute(self, template, existing_labels=(), layer_manager=None, layer_name=None, parent=None):
        """Generate the entities.

        Parameters:
        -----------
        template : SpatialEntity or dict
            Template entity
        existing_labels : iterable of str
            Labels already in the layout
        layer_manager : LayerManager, optional
            Layer manager to add the result layer to
        layer_name : str, optional
            Name for the result layer
        parent : Layer, optional
            Layer the template belongs to

        Returns:
        --------
        result_layer : Layer
            Layer with one entity per generated position and the columns row, col and sequence_number
        validation : ValidationResult
            Clashes between generated and existing labels
        """
        if self.max_elements is not None and self.total_elements > self.max_elements:
            raise ValueError(f"Pattern would create {self.total_elements} elements, limit is {self.max_elements}")

        if not layer_name:
            layer_name = self.name

        if not isinstance(template, SpatialEntity):
            template = SpatialEntity.from_record(template)

        positions, labels = self.preview(template)
        validation = validate_labels(labels, existing_labels)

        records = []
        for index, (pos, label) in enumerate(zip(positions, labels, strict=False)):
            record = SpatialEntity(f"{layer_name}_{index + 1}", pos.x, pos.y, template.width, template.height, label).to_record()
            record.update(row=pos.row, col=pos.col, sequence_number=pos.sequence_number)
            records.append(record)

        objects = entities_to_frame(records)
        for column in ("row", "col", "sequence_number"):
            objects[column] = [records[idx][column] for idx in objects.index]

        result_layer = Layer(name=layer_name, parent=parent, type="pattern")
        result_layer.objects = objects
        result_layer.metadata = {
            "pattern_type": self.pattern_type,
            "rows": self.rows,
            "columns": self.columns,
            "config": self.config.to_dict(),
            "valid": validation.valid,
            "conflicts": validation.conflicts,
        }

        if not validation.valid:
            logger.warning("Generated labels clash with existing labels: %s", ", ".join(validation.conflicts))

        if layer_manager:
            layer_manager.add_layer(result_layer)

        return result_layer, validation
