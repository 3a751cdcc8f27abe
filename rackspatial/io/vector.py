# -*- coding: utf-8 -*-
"""Manages vector data I/O for entity layers, supporting Shapefile and GeoJSON.

Entity footprints are written as polygons together with their label and position columns. Files without
x/y columns are read back by taking the footprint bounds.
"""

import os

import geopandas as gpd

from ..core.layer import Layer

SUPPORTED_DRIVERS = {".shp": None, ".geojson": "GeoJSON"}


def read_vector(vector_path):
    """Read a vector file into a GeoDataFrame.

    Parameters:
    -----------
    vector_path : str
        Path to the vector file

    Returns:
    --------
    gdf : geopandas.GeoDataFrame
        GeoDataFrame with vector data
    """
    return gpd.read_file(vector_path)


def write_vector(gdf, output_path):
    """Write a GeoDataFrame to a vector file.

    Parameters:
    -----------
    gdf : geopandas.GeoDataFrame
        GeoDataFrame to write
    output_path : str
        Path to the output vector file
    """
    file_extension = os.path.splitext(output_path)[1].lower()
    if file_extension not in SUPPORTED_DRIVERS:
        raise ValueError(f"Unsupported vector format: {file_extension}")

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    driver = SUPPORTED_DRIVERS[file_extension]
    if driver:
        gdf.to_file(output_path, driver=driver)
    else:
        gdf.to_file(output_path)


def read_entity_layer(vector_path, name=None, label_column="label", id_column="entity_id"):
    """Read a vector file of footprints into an entity layer.

    Parameters:
    -----------
    vector_path : str
        Path to the vector file
    name : str, optional
        Name of the layer. Defaults to the file name without extension.
    label_column : str
        Column holding the labels
    id_column : str
        Column holding the entity ids. If missing, the row number is used.

    Returns:
    --------
    layer : Layer
        Entity layer
    """
    gdf = read_vector(vector_path)
    bounds = gdf.geometry.bounds

    records = []
    for position, (idx, row) in enumerate(gdf.iterrows()):
        minx, miny, maxx, maxy = bounds.loc[idx, ["minx", "miny", "maxx", "maxy"]]
        records.append(
            {
                "entity_id": row[id_column] if id_column in gdf.columns else position,
                "label": row[label_column] if label_column in gdf.columns else "",
                "x": row["x"] if "x" in gdf.columns else minx,
                "y": row["y"] if "y" in gdf.columns else miny,
                "width": row["width"] if "width" in gdf.columns else maxx - minx,
                "height": row["height"] if "height" in gdf.columns else maxy - miny,
            }
        )

    if not name:
        name = os.path.splitext(os.path.basename(vector_path))[0]

    return Layer.from_entities(records, name=name, crs=gdf.crs)


def layer_to_vector(layer, output_path):
    """Save a layer's objects to a vector file.

    Parameters:
    -----------
    layer : Layer
        Layer to save
    output_path : str
        Path to the output vector file
    """
    if layer.objects is None:
        raise ValueError("Layer has no vector objects")

    write_vector(layer.objects, output_path)
