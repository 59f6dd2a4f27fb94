"""
Example generating a hex region with features and factions.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from py_hexgen.core import AleaPRNG, AxialCoord, Biome, GridConfig
from py_hexgen.core.hex_geometry import (
    calculate_view_box,
    get_display_coord,
    get_hex_corners,
    hex_to_pixel,
)
from py_hexgen.core.map_generator import MapGenerationOptions, MapGenerator
from py_hexgen.utils.logging import configure_logging

BIOME_COLORS = {
    Biome.GRASSLAND: "#b5d98b",
    Biome.FOREST: "#3f7d3a",
    Biome.HILLS: "#c2a66b",
    Biome.MARSH: "#6b8f80",
    Biome.MOUNTAINS: "#8a8078",
}

FEATURE_MARKERS = {
    "landmark": "^",
    "settlement": "s",
    "lair": "x",
    "dungeon": "D",
}


def main():
    configure_logging(fmt="console")

    seed = "region_demo"
    config = GridConfig(hex_size=24)
    center = AxialCoord(0, 0)

    generator = MapGenerator(AleaPRNG(seed))
    options = MapGenerationOptions(feature_chance=30)

    # Two regions; the second grows from the edge of the first
    results = generator.generate_region(center, options=options, radius=3)
    existing = {r.coord: r.terrain_id for r in results}
    results += generator.generate_region(AxialCoord(5, -2), existing, options, radius=3)

    factions = generator.generate_factions(results)

    print(f"Generated {len(results)} hexes")
    for result in results:
        if result.normalized is None:
            continue
        label = result.normalized.name or result.normalized.type.value
        print(f"  {get_display_coord(result.coord, config)} {result.biome.value:<10} {label}")

    print(f"\n{len(factions)} factions")
    for faction in factions:
        print(f"  {faction.name} ({len(faction.domain_hexes)} hexes)")
        for other_id, status in faction.relationships.items():
            other = next(f for f in factions if f.id == other_id)
            print(f"    {status.value:<13} {other.name}")

    fig, ax = plt.subplots(figsize=(10, 8))
    for result in results:
        center_px = hex_to_pixel(result.coord, config)
        corners = get_hex_corners(center_px, config)
        ax.add_patch(
            Polygon(corners, facecolor=BIOME_COLORS[result.biome], edgecolor="#333333")
        )
        if result.feature_type is not None:
            ax.plot(*center_px, marker=FEATURE_MARKERS[result.feature_type.value], color="black")

    for faction in factions:
        for coord in faction.domain_hexes:
            corners = get_hex_corners(hex_to_pixel(coord, config), config)
            ax.add_patch(Polygon(corners, fill=False, edgecolor=faction.color, linewidth=2))

    box = calculate_view_box([r.coord for r in results], config)
    ax.set_xlim(box.min_x, box.min_x + box.width)
    ax.set_ylim(box.min_y + box.height, box.min_y)
    ax.set_aspect("equal")
    ax.set_title(f"Hex region - seed {seed}")

    plt.tight_layout()
    plt.savefig("region_demo.png", dpi=150)
    print("\nSaved region map to region_demo.png")


if __name__ == "__main__":
    main()
