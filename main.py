# -*- coding: utf-8 -*-
"""Testing Working Document!

Just a workspace document to try the resequencing workflow end to end.
"""

import os
import sys

from rackspatial import (
    Layer,
    LayerManager,
    PatternGenerator,
    Resequencer,
    attach_grid_structure,
    attach_rename_summary,
    calculate_statistics_summary,
    create_sample_layout,
    detect_naming_pattern,
    entries_from_frame,
    layer_to_vector,
    plot_layer,
    plot_sequence,
    preview_bulk_rename,
    read_entity_layer,
    rename_requests,
    setup_logging,
)


def run_example(layout_path=None):
    """Run Example."""
    setup_logging()

    output_dir = "output"
    os.makedirs(output_dir, exist_ok=True)

    manager = LayerManager()

    if layout_path and os.path.exists(layout_path):
        print(f"Reading layout from {layout_path}...")
        layout_layer = read_entity_layer(layout_path)
    elif layout_path:
        raise ValueError(f"Layout file not found at {layout_path}. Please provide a valid vector file.")
    else:
        print("No layout given, using a jittered 4 x 6 sample block...")
        layout_layer = Layer.from_entities(create_sample_layout(rows=4, columns=6, jitter=3, seed=7), name="Sample_Layout")

    manager.add_layer(layout_layer)
    print(layout_layer)

    layout_layer.attach_function(attach_grid_structure, name="grid_structure", tolerance=10)
    grid = layout_layer.get_function_result("grid_structure")
    print(f"Detected grid: {grid['rows']} rows x {grid['columns']} columns ({grid['occupied_cells']} occupied cells)")

    fig1 = plot_layer(layout_layer, title="Current labels")
    fig1.savefig(os.path.join(output_dir, "1_layout.png"))

    detected = detect_naming_pattern(layout_layer.labels[0]) if len(layout_layer) else None
    pattern = detected.pattern if detected else "{##}"
    print(f"\nPattern detected from first label: {pattern}")

    print("\nResequencing with a cross-aisle pattern...")
    resequencer = Resequencer(direction="cross_aisle", pattern="A-{ROW}-{##}", name="CrossAisle")
    resequenced = resequencer.execute(layout_layer, layer_manager=manager)
    resequenced.attach_function(attach_rename_summary, name="rename_summary")
    summary = resequenced.get_function_result("rename_summary")
    print(f"  {summary['change_count']} renames, {summary['conflict_count']} conflicts")

    fig2 = plot_sequence(resequenced)
    fig2.savefig(os.path.join(output_dir, "2_cross_aisle.png"))

    if summary["can_commit"]:
        requests = rename_requests(entries_from_frame(resequenced.objects))
        print(f"  {len(requests)} rename requests ready")

    print("\nBulk renaming the first three locations in selection order...")
    selection = layout_layer.objects.iloc[:3]
    others = layout_layer.objects.iloc[3:]["label"].tolist()
    bulk = preview_bulk_rename(selection, "P{##}", start_number=1, frozen_labels=others)
    print("  " + ", ".join(f"{entry.old_label} -> {entry.new_label}" for entry in bulk))

    print("\nGenerating a new bay next to the block...")
    template = layout_layer.objects.iloc[-1].to_dict() if len(layout_layer) else {"x": 0, "y": 0, "width": 40, "height": 40}
    template["x"] = template["x"] + 400
    generator = PatternGenerator(rows=2, columns=5, pattern="B-{ROW}-{COL##}", direction="sequential_rows")
    generated, validation = generator.execute(template, existing_labels=layout_layer.labels, layer_manager=manager)
    print(f"  {len(generated)} new locations, valid={validation.valid}")

    print("\nExporting results...")
    layer_to_vector(resequenced, os.path.join(output_dir, "resequenced.geojson"))
    layer_to_vector(generated, os.path.join(output_dir, "generated.geojson"))
    calculate_statistics_summary(manager, os.path.join(output_dir, "summary.json"))

    print(f"\nResults saved to {output_dir}")
    print("Available layers:")
    for i, layer_name in enumerate(manager.get_layer_names()):
        print(f"  {i + 1}. {layer_name}")


if __name__ == "__main__":
    run_example(sys.argv[1] if len(sys.argv) > 1 else None)
