# -*- coding: utf-8 -*-
"""Defines the Layer class and related functionality for organizing layout entities.

A layer is a container for a table of entities (an entity GeoDataFrame) together with metadata describing
how it was produced. Resequencing and pattern generation never modify their source layer; they return a new
layer whose parent is the source, so a chain of previews can be inspected and compared.
This module provides the Layer and LayerManager classes. Functions can be attached to a layer to calculate
additional properties such as grid structure or rename summaries.
"""

import uuid

import pandas as pd

from .entity import entities_to_frame


class Layer:
    """A Layer represents a set of layout entities with associated properties.

    Layers can be loaded from entity lists or files, or derived by resequencing and pattern generation.
    Each layer can have functions attached to calculate additional properties.
    """

    def __init__(self, name=None, parent=None, type="entities"):
        """Initialize a Layer.

        Parameters:
        -----------
        name : str, optional
            Name of the layer. If None, a unique name will be generated.
        parent : Layer, optional
            Parent layer that this layer is derived from.
        type : str
            Type of layer: "entities", "resequence" or "pattern"
        """
        self.id = str(uuid.uuid4())
        self.name = name if name else f"Layer_{self.id[:8]}"
        self.parent = parent
        self.type = type
        self.created_at = pd.Timestamp.now()

        self.objects = None
        self.metadata = {}
        self.crs = None

        self.attached_functions = {}

    @classmethod
    def from_entities(cls, entities, name=None, crs=None):
        """Create an entity layer.

        Parameters:
        -----------
        entities : iterable of SpatialEntity or dict, or pandas.DataFrame
            Entities to hold
        name : str, optional
            Name of the layer
        crs : optional
            Coordinate reference system

        Returns:
        --------
        layer : Layer
            New layer of type "entities"
        """
        layer = cls(name=name, type="entities")
        layer.objects = entities_to_frame(entities, crs=crs)
        layer.crs = crs
        return layer

    @property
    def labels(self):
        """Labels of the entities in this layer."""
        if self.objects is None or "label" not in self.objects.columns:
            return []
        return self.objects["label"].tolist()

    def attach_function(self, function, name=None, **kwargs):
        """Attach a function to this layer and execute it.

        Parameters:
        -----------
        function : callable
            Function to attach and execute
        name : str, optional
            Name for this function. If None, uses function.__name__
        **kwargs : dict
            Arguments to pass to the function

        Returns:
        --------
        self : Layer
            Returns self for chaining
        """
        func_name = name if name else function.__name__

        result = function(self, **kwargs)

        self.attached_functions[func_name] = {
            "function": function,
            "args": kwargs,
            "result": result,
        }

        return self

    def get_function_result(self, function_name):
        """Get the result of an attached function.

        Parameters:
        -----------
        function_name : str
            Name of the attached function

        Returns:
        --------
        result : any
            Result of the function
        """
        if function_name not in self.attached_functions:
            raise ValueError(f"Function '{function_name}' not attached to this layer")

        return self.attached_functions[function_name]["result"]

    def __len__(self):
        """Number of entities in the layer."""
        return 0 if self.objects is None else len(self.objects)

    def __str__(self):
        """String representation of the layer."""
        parent_name = self.parent.name if self.parent is not None else "None"

        return f"Layer '{self.name}' (type: {self.type}, parent: {parent_name}, objects: {len(self)})"


class LayerManager:
    """Manages a collection of layers and their relationships."""

    def __init__(self):
        """Initialize the layer manager."""
        self.layers = {}
        self.active_layer = None

    def add_layer(self, layer, set_active=True):
        """Add a layer to the manager.

        Parameters:
        -----------
        layer : Layer
            Layer to add
        set_active : bool
            Whether to set this layer as the active layer

        Returns:
        --------
        layer : Layer
            The added layer
        """
        self.layers[layer.id] = layer

        if set_active:
            self.active_layer = layer

        return layer

    def get_layer(self, layer_id_or_name):
        """Get a layer by ID or name.

        Parameters:
        -----------
        layer_id_or_name : str
            Layer ID or name

        Returns:
        --------
        layer : Layer
            The requested layer
        """
        if layer_id_or_name in self.layers:
            return self.layers[layer_id_or_name]

        for layer in self.layers.values():
            if layer.name == layer_id_or_name:
                return layer

        raise ValueError(f"Layer '{layer_id_or_name}' not found")

    def get_layer_names(self):
        """Get a list of all layer names.

        Returns:
        --------
        names : list
            List of layer names
        """
        return [layer.name for layer in self.layers.values()]

    def remove_layer(self, layer_id_or_name):
        """Remove a layer from the manager.

        Parameters:
        -----------
        layer_id_or_name : str
            Layer ID or name
        """
        layer = self.get_layer(layer_id_or_name)

        if layer.id in self.layers:
            del self.layers[layer.id]

        if self.active_layer is not None and self.active_layer.id == layer.id:
            if self.layers:
                self.active_layer = list(self.layers.values())[-1]
            else:
                self.active_layer = None
