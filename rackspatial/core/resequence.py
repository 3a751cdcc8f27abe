# -*- coding: utf-8 -*-
"""Builds rename previews for a selection of entities based on their positions.

Resequencing chains the engine together: entities are sorted into visiting order, numbered 1..N, given a
row and column from the detected grid width, run through the label pattern and finally checked for
conflicts. The whole chain is a pure function of the entities and the configuration, so a caller can rebuild
the preview on every settings change and drop stale results.

A bulk rename is the positionless variant: entities keep the order they were selected in.
"""

import logging

from ..config import PatternConfig
from .clustering import detect_grid_structure
from .conflicts import has_conflicts, validate_renames
from .entity import entities_to_frame, iter_records
from .layer import Layer
from .sorter import visiting_order
from .template import expand_label, substitute_number, suggest_bulk_pattern

logger = logging.getLogger(__name__)


def _plan(frame, config):
    """Visiting order, grid structure and per-entity numbering for an entity frame."""
    structure = detect_grid_structure(frame, config.tolerance)
    order = visiting_order(frame, config.direction, config.tolerance)
    columns = max(structure.columns, 1)

    rows = []
    for index, idx in enumerate(order):
        sequence = index + 1
        row = index // columns + 1
        col = index % columns + 1
        new_label = expand_label(
            config.pattern,
            sequence,
            row=row,
            col=col,
            start_number=config.start_number,
            start_row=config.start_row,
            start_col=config.start_col,
        )
        rows.append((idx, sequence, row, col, new_label))

    return structure, rows


def preview_resequence(entities, config=None, frozen_labels=(), **overrides):
    """Propose new labels for entities from their positions.

    Parameters:
    -----------
    entities : iterable of SpatialEntity or dict, pandas.DataFrame, or Layer
        Entities to rename
    config : PatternConfig or dict, optional
        Tolerance, direction, pattern and offsets. Defaults to PatternConfig().
    frozen_labels : iterable of str
        Labels of entities outside the batch; proposals matching them are flagged
    **overrides
        Individual configuration fields overriding ``config``

    Returns:
    --------
    entries : list of RenamePreviewEntry
        One entry per entity in visiting order. Identical inputs always give identical entries.
    """
    config = PatternConfig.coerce(config, **overrides)
    frame = entities_to_frame(entities)
    _, rows = _plan(frame, config)

    proposed = [(frame.at[idx, "entity_id"], frame.at[idx, "label"], new_label) for idx, _, _, _, new_label in rows]
    return validate_renames(proposed, frozen_labels)


def preview_bulk_rename(entities, pattern=None, start_number=None, frozen_labels=()):
    """Propose new labels for entities in the order they were selected.

    Positions are not looked at. The n-th entity gets ``start_number + n`` in place of the first
    ``{#...}`` placeholder of the pattern.

    Parameters:
    -----------
    entities : iterable of SpatialEntity or dict, pandas.DataFrame, or Layer
        Selected entities, in selection order
    pattern : str, optional
        Label pattern. Defaults to the one suggested by the first entity's label.
    start_number : int, optional
        Number of the first entity. Defaults to the suggested start when the pattern is suggested, else 1.
    frozen_labels : iterable of str
        Labels of the entities that are not selected

    Returns:
    --------
    entries : list of RenamePreviewEntry
        One entry per entity in selection order, empty when the pattern is empty
    """
    records = list(iter_records(entities))

    if pattern is None:
        suggested = suggest_bulk_pattern(records[0]["label"] if records else "")
        pattern = suggested.pattern
        if start_number is None:
            start_number = suggested.start_number
    if start_number is None:
        start_number = 1
    if not pattern:
        return []

    proposed = [
        (record["entity_id"], record["label"], substitute_number(pattern, int(start_number) + index))
        for index, record in enumerate(records)
    ]
    return validate_renames(proposed, frozen_labels)


class Resequencer:
    """Renames entities of a layer according to their position."""

    def __init__(self, config=None, name=None, **settings):
        """Initialize a resequencer.

        Parameters:
        -----------
        config : PatternConfig or dict, optional
            Configuration to use
        name : str, optional
            Name used for result layers
        **settings
            Individual configuration fields overriding ``config``
        """
        self.config = PatternConfig.coerce(config, **settings)
        self.name = name if name else "Resequence"

    def preview(self, entities, frozen_labels=()):
        """Rename preview for entities, see preview_resequence."""
        return preview_resequence(entities, self.config, frozen_labels)

    def execute(self, source_layer, layer_manager=None, layer_name=None, selected_ids=None, frozen_labels=None):
        """Resequence the entities of a layer.

        Parameters:
        -----------
        source_layer : Layer
            Layer holding the entities
        layer_manager : LayerManager, optional
            Layer manager to add the result layer to
        layer_name : str, optional
            Name for the result layer
        selected_ids : iterable, optional
            Entity ids to rename. The labels of the remaining entities of the layer become frozen labels.
            If None, every entity of the layer is renamed.
        frozen_labels : iterable of str, optional
            Extra labels the new labels must not clash with

        Returns:
        --------
        result_layer : Layer
            Layer with the renamed entities in visiting order and the columns
            sequence, row, col, old_label, new_label and conflict
        """
        if not layer_name:
            layer_name = f"{source_layer.name}_{self.name}"

        objects = source_layer.objects if source_layer.objects is not None else entities_to_frame([])
        frozen = list(frozen_labels) if frozen_labels is not None else []

        if selected_ids is not None:
            selected = set(selected_ids)
            in_batch = objects["entity_id"].isin(selected)
            batch = objects[in_batch]
            frozen.extend(objects.loc[~in_batch, "label"].tolist())
        else:
            batch = objects

        batch = entities_to_frame(batch, crs=source_layer.crs)
        structure, rows = _plan(batch, self.config)

        result = batch.loc[[idx for idx, _, _, _, _ in rows]].copy()
        result["sequence"] = [sequence for _, sequence, _, _, _ in rows]
        result["row"] = [row for _, _, row, _, _ in rows]
        result["col"] = [col for _, _, _, col, _ in rows]
        result["old_label"] = result["label"]

        proposed = zip(result["entity_id"], result["old_label"], [label for *_, label in rows], strict=False)
        entries = validate_renames(proposed, frozen)
        result["new_label"] = [entry.new_label for entry in entries]
        result["conflict"] = [entry.conflict for entry in entries]

        result_layer = Layer(name=layer_name, parent=source_layer, type="resequence")
        result_layer.crs = source_layer.crs
        result_layer.objects = result.reset_index(drop=True)
        result_layer.metadata = {
            "resequence_name": self.name,
            "config": self.config.to_dict(),
            "grid_structure": structure.to_dict(),
            "frozen_label_count": len(frozen),
            "has_conflicts": has_conflicts(entries),
            "change_count": sum(entry.changed for entry in entries),
        }

        logger.debug(
            "Resequenced %d entities of '%s' (%s, %d conflicts)",
            len(entries),
            source_layer.name,
            structure,
            sum(entry.conflict for entry in entries),
        )

        if layer_manager:
            layer_manager.add_layer(result_layer)

        return result_layer
