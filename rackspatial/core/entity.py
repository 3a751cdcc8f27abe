# -*- coding: utf-8 -*-
"""Spatial entities and their tabular form.

An entity is anything placed on the layout canvas that carries a label: a storage location, a bay, a rack.
The engine reads position and label only and never changes an entity; proposed labels are returned separately.
Collections of entities are handled as GeoDataFrames whose geometry is the entity footprint.
"""

import logging

import geopandas as gpd
import numpy as np
import pandas as pd
from shapely.geometry import box

logger = logging.getLogger(__name__)

ENTITY_COLUMNS = ["entity_id", "label", "x", "y", "width", "height"]


class SpatialEntity:
    """A positioned, labelled element of a layout."""

    __slots__ = ("id", "x", "y", "width", "height", "label")

    def __init__(self, id, x, y, width=0.0, height=0.0, label=""):
        """Initialize an entity.

        Parameters:
        -----------
        id : hashable
            Opaque identifier owned by the calling layout
        x, y : float
            Position of the entity (top-left corner on the canvas)
        width, height : float
            Footprint size
        label : str
            Current label
        """
        self.id = id
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.label = label

    @classmethod
    def from_record(cls, record):
        """Build an entity from a dict or a DataFrame row.

        Accepts both the layout API names (``x_coordinate``, ``currentLabel``) and the short ones.
        """
        get = record.get
        entity_id = get("entity_id", get("id"))
        x = get("x", get("x_coordinate"))
        y = get("y", get("y_coordinate"))
        label = get("label", get("currentLabel", get("current_label", "")))
        if label is None or pd.isna(label):
            label = ""
        return cls(entity_id, x, y, get("width", 0.0), get("height", 0.0), str(label))

    def to_record(self):
        """Return the entity as a dict keyed by ENTITY_COLUMNS."""
        return {
            "entity_id": self.id,
            "label": self.label,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    def __eq__(self, other):
        """Entities are equal when every field matches."""
        if not isinstance(other, SpatialEntity):
            return NotImplemented
        return self.to_record() == other.to_record()

    def __hash__(self):
        """Hash on the identifier."""
        return hash(self.id)

    def __repr__(self):
        """String representation of the entity."""
        return f"SpatialEntity(id={self.id!r}, x={self.x}, y={self.y}, label={self.label!r})"


def iter_records(entities):
    """Yield entity records from the accepted input shapes."""
    objects = getattr(entities, "objects", None)
    if objects is not None:
        entities = objects

    if isinstance(entities, pd.DataFrame):
        for record in entities.to_dict("records"):
            yield SpatialEntity.from_record(record).to_record()
        return

    for entity in entities:
        if isinstance(entity, SpatialEntity):
            yield entity.to_record()
        else:
            yield SpatialEntity.from_record(entity).to_record()


def entities_to_frame(entities, crs=None):
    """Convert entities into a GeoDataFrame of footprints.

    Rows with missing or non-finite coordinates are dropped, so malformed input degrades
    to a smaller (possibly empty) table instead of raising.

    Parameters:
    -----------
    entities : iterable of SpatialEntity or dict, pandas.DataFrame, or Layer
        Entities to convert. Input order is kept.
    crs : optional
        Coordinate reference system for the frame (layouts normally have none)

    Returns:
    --------
    frame : geopandas.GeoDataFrame
        Frame with ENTITY_COLUMNS and a box geometry per entity. The index holds
        each entity's position in the input.
    """
    if entities is None:
        entities = []

    df = pd.DataFrame(list(iter_records(entities)), columns=ENTITY_COLUMNS)

    for column in ("x", "y", "width", "height"):
        df[column] = pd.to_numeric(df[column], errors="coerce").astype(float)
    df[["width", "height"]] = df[["width", "height"]].fillna(0.0)
    df["label"] = df["label"].fillna("").astype(str)

    finite = np.isfinite(df[["x", "y", "width", "height"]].to_numpy(dtype=float)).all(axis=1)
    if not finite.all():
        logger.warning("Ignoring %d entities with non-finite coordinates", int((~finite).sum()))
        df = df[finite]

    footprints = [box(x, y, x + w, y + h) for x, y, w, h in zip(df["x"], df["y"], df["width"], df["height"], strict=False)]
    geometry = gpd.GeoSeries(footprints, index=df.index)

    return gpd.GeoDataFrame(df, geometry=geometry, crs=crs)

