# -*- coding: utf-8 -*-
"""Functions to draw layouts and rename previews."""

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt

CONFLICT_COLOR = "#de1421"
OK_COLOR = "#3437c2"


def _centers(objects):
    bounds = objects.geometry.bounds
    return (bounds["minx"] + bounds["maxx"]) / 2, (bounds["miny"] + bounds["maxy"]) / 2


def _draw_labels(ax, objects, label_field, fontsize):
    xs, ys = _centers(objects)
    for x, y, text in zip(xs, ys, objects[label_field], strict=False):
        ax.annotate(str(text), xy=(x, y), ha="center", va="center", fontsize=fontsize)


def _finish(ax):
    # canvas coordinates grow downwards
    ax.invert_yaxis()
    ax.set_aspect("equal")
    ax.set_xlabel("X Coordinate")
    ax.set_ylabel("Y Coordinate")
    ax.grid(alpha=0.3)


def plot_layer(layer, attribute=None, title=None, figsize=(12, 10), cmap="viridis", label_field="label", fontsize=8):
    """Plot the footprints of a layer, optionally colored by an attribute."""
    fig, ax = plt.subplots(figsize=figsize)

    if title:
        ax.set_title(title)
    elif attribute:
        ax.set_title(f"{attribute} by Entity")
    else:
        ax.set_title(f"Layer '{layer.name}'")

    if layer.objects is None or len(layer.objects) == 0:
        return fig

    if attribute and attribute in layer.objects.columns:
        layer.objects.plot(column=attribute, cmap=cmap, ax=ax, edgecolor="black", linewidth=0.5, legend=True)
    else:
        layer.objects.plot(ax=ax, facecolor="#dddddd", edgecolor="black", linewidth=0.5)

    if label_field and label_field in layer.objects.columns:
        _draw_labels(ax, layer.objects, label_field, fontsize)

    _finish(ax)
    return fig


def plot_sequence(layer, label_field="new_label", show_path=True, figsize=(12, 10), legend=True, fontsize=8):
    """Plot a resequence layer: conflicts in red, visiting order as a path.

    Parameters:
    -----------
    layer : Layer
        Layer whose objects are in visiting order (as returned by Resequencer.execute)
    label_field : str
        Column to print on each footprint
    show_path : bool
        Whether to connect the footprint centers in visiting order
    figsize : tuple
        Figure size
    legend : bool
        Whether to draw a legend
    fontsize : int
        Label font size

    Returns:
    --------
    fig : matplotlib.figure.Figure
        Figure object
    """
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_title(f"Visiting order of '{layer.name}'")

    if layer.objects is None or len(layer.objects) == 0:
        return fig

    objects = layer.objects
    if "conflict" in objects.columns:
        colors = [CONFLICT_COLOR if flag else OK_COLOR for flag in objects["conflict"]]
    else:
        colors = OK_COLOR

    objects.plot(ax=ax, color=colors, alpha=0.4, edgecolor="black", linewidth=0.5)

    if show_path and len(objects) > 1:
        xs, ys = _centers(objects)
        ax.plot(xs, ys, color="black", linewidth=1, marker="o", markersize=2)

    if label_field in objects.columns:
        _draw_labels(ax, objects, label_field, fontsize)

    if legend:
        patches = [mpatches.Patch(color=OK_COLOR, label="ok"), mpatches.Patch(color=CONFLICT_COLOR, label="conflict")]
        ax.legend(handles=patches, loc="upper right")

    _finish(ax)
    return fig


def plot_comparison(before_layer, after_layer, before_field="label", after_field="new_label", figsize=(16, 8), title=None):
    """Plot labels before and after a rename side by side."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

    if title:
        fig.suptitle(title)

    for ax, layer, field, caption in ((ax1, before_layer, before_field, "Before"), (ax2, after_layer, after_field, "After")):
        ax.set_title(f"{caption}: {field}")
        if layer.objects is None or len(layer.objects) == 0:
            continue
        layer.objects.plot(ax=ax, facecolor="#dddddd", edgecolor="black", linewidth=0.5)
        if field in layer.objects.columns:
            _draw_labels(ax, layer.objects, field, 8)
        _finish(ax)

    return fig
