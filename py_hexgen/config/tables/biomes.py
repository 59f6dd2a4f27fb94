"""Biome tables: starting biome, next-hex biome and per-biome encounters."""

from typing import Dict

from ...core.tables import RollableTable, numbered_entries, ranged_entries

STARTING_HEX_BIOME = RollableTable(
    id="starting-hex-biome",
    name="Starting Hex Biome",
    description="Biome of the first hex in a region",
    category="biomes",
    dice_formula="1d10",
    entries=ranged_entries(
        (1, 4, "grassland"),
        (5, 6, "forest"),
        (7, 8, "hills"),
        (9, 9, "marsh"),
        (10, 10, "mountains"),
    ),
)

# 1-5 copies a neighbor's biome ("same"); handled by the terrain generator
NEXT_HEX_BIOME = RollableTable(
    id="next-hex-biome",
    name="Next Hex Biome",
    description="Biome of a hex adjacent to already generated hexes",
    category="biomes",
    dice_formula="1d10",
    entries=ranged_entries(
        (1, 5, "same"),
        (6, 6, "grassland"),
        (7, 7, "forest"),
        (8, 8, "hills"),
        (9, 9, "marsh"),
        (10, 10, "mountains"),
    ),
)


def _encounters(biome: str, values) -> RollableTable:
    return RollableTable(
        id=f"encounters-{biome}",
        name=f"{biome.capitalize()} Encounters",
        category="encounters",
        dice_formula="2d6",
        entries=numbered_entries(values, start_at=2),
    )


ENCOUNTERS_GRASSLAND = _encounters("grassland", [
    "Dinosaurs", "Ogres", "Gnolls", "Orcs", "Goblins", "Giant rats",
    "Wolves", "Bandits", "Berserkers", "Worgs", "Werewolves",
])

ENCOUNTERS_FOREST = _encounters("forest", [
    "Ents", "Giant spiders", "Ogres", "Bears", "Goblins", "Boars",
    "Wolves", "Bandits", "Elves", "Dryads", "Werewolves",
])

ENCOUNTERS_HILLS = _encounters("hills", [
    "Manticores", "Basilisks", "Ogres", "Orcs", "Goblins", "Giant rats",
    "Wolves", "Bandits", "Beastmen", "Giants", "Wyverns",
])

ENCOUNTERS_MARSH = _encounters("marsh", [
    "Moth-men", "Mushroom-men", "Frog-men", "Trolls", "Skeletons", "Crocodiles",
    "Zombies", "Orcs", "Lizard-men", "Snake-men", "Hydras",
])

ENCOUNTERS_MOUNTAINS = _encounters("mountains", [
    "Giants", "Griffins", "Dwarves", "Kobolds", "Orcs", "Bears",
    "Wolves", "Bandits", "Berserkers", "Smilodons", "Vampires",
])

BIOME_ENCOUNTER_TABLES: Dict[str, RollableTable] = {
    "grassland": ENCOUNTERS_GRASSLAND,
    "forest": ENCOUNTERS_FOREST,
    "hills": ENCOUNTERS_HILLS,
    "marsh": ENCOUNTERS_MARSH,
    "mountains": ENCOUNTERS_MOUNTAINS,
}
