"""Hex feature tables: feature type, settlement type, landmarks, lairs, dungeons, factions."""

from ...core.tables import RollableTable, ranged_entries

HEX_FEATURE = RollableTable(
    id="hex-feature",
    name="Hex Feature",
    description="What type of feature is in this hex",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 3, "landmark"),
        (4, 4, "settlement"),
        (5, 5, "lair"),
        (6, 6, "dungeon"),
    ),
)

SETTLEMENT_TYPE = RollableTable(
    id="settlement-type",
    name="Settlement Type",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 1, "hamlet"),
        (2, 2, "village"),
        (3, 3, "city"),
        (4, 4, "castle"),
        (5, 5, "tower"),
        (6, 6, "abbey"),
    ),
)

LANDMARK_CATEGORY = RollableTable(
    id="landmark-category",
    name="Landmark Category",
    description="Natural, artificial, or magic landmark",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 3, "natural"),
        (4, 5, "artificial"),
        (6, 6, "magic"),
    ),
)

NATURAL_LANDMARK_TYPE = RollableTable(
    id="natural-landmark-type",
    name="Natural Landmark Type",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 1, "fauna"),
        (2, 2, "flora_a"),
        (3, 3, "flora_b"),
        (4, 4, "geology_a"),
        (5, 5, "geology_b"),
        (6, 6, "hydrology"),
    ),
)

ARTIFICIAL_LANDMARK_TYPE = RollableTable(
    id="artificial-landmark-type",
    name="Artificial Landmark Type",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 1, "labor"),
        (2, 2, "mystery"),
        (3, 3, "ruin"),
        (4, 4, "small_structure"),
        (5, 5, "travel"),
        (6, 6, "worship"),
    ),
)

MAGIC_LANDMARK_TYPE = RollableTable(
    id="magic-landmark-type",
    name="Magic Landmark Type",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 1, "area_under_spell"),
        (2, 2, "enchanted_item"),
        (3, 3, "magic_path"),
        (4, 4, "magic_remains"),
        (5, 5, "place_of_power"),
        (6, 6, "strange_phenomenon"),
    ),
)

LANDMARK_SUBCATEGORY_TABLES = {
    "natural": NATURAL_LANDMARK_TYPE,
    "artificial": ARTIFICIAL_LANDMARK_TYPE,
    "magic": MAGIC_LANDMARK_TYPE,
}

LANDMARK_CONTENT = RollableTable(
    id="landmark-content",
    name="Landmark Content",
    description="What can be found at the landmark",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 1, "hazard"),
        (2, 3, "empty"),
        (4, 4, "special"),
        (5, 6, "monsters"),
    ),
)

FACTION_RELATIONSHIP = RollableTable(
    id="faction-relationship",
    name="Faction Relationship",
    description="Relationship between two factions",
    category="factions",
    dice_formula="2d6",
    entries=ranged_entries(
        (2, 2, "open_war"),
        (3, 5, "hostility"),
        (6, 8, "indifference"),
        (9, 11, "peace_trade"),
        (12, 12, "alliance"),
    ),
)

DISPOSITION = RollableTable(
    id="disposition",
    name="Disposition",
    description="Initial disposition towards the party",
    category="features",
    dice_formula="2d6",
    entries=ranged_entries(
        (2, 2, "Attack on sight"),
        (3, 5, "Hostile"),
        (6, 8, "Neutral"),
        (9, 11, "Welcoming"),
        (12, 12, "Enthusiastic"),
    ),
)

LAIR_LAYOUT = RollableTable(
    id="lair-layout",
    name="Lair Layout",
    category="features",
    dice_formula="1d8",
    entries=ranged_entries(
        (1, 1, "Single chamber"),
        (2, 3, "Two connected chambers"),
        (4, 5, "Three chambers in a row"),
        (6, 7, "Central hub with branches"),
        (8, 8, "Complex multi-room"),
    ),
)

DUNGEON_LEVELS = RollableTable(
    id="dungeon-levels",
    name="Dungeon Levels",
    category="features",
    dice_formula="1d6",
    entries=ranged_entries(
        (1, 2, "1"),
        (3, 4, "2"),
        (5, 5, "3"),
        (6, 6, "4+"),
    ),
)
