"""
Static rollable tables.

Tables are configuration: built once at import time and treated as
read-only. ``build_default_registry`` collects every table into an explicit
registry for subtable resolution.
"""

from ...core.tables import TableRegistry
from .biomes import BIOME_ENCOUNTER_TABLES, NEXT_HEX_BIOME, STARTING_HEX_BIOME
from .features import (
    DISPOSITION,
    DUNGEON_LEVELS,
    FACTION_RELATIONSHIP,
    HEX_FEATURE,
    LAIR_LAYOUT,
    LANDMARK_CATEGORY,
    LANDMARK_CONTENT,
    LANDMARK_SUBCATEGORY_TABLES,
    SETTLEMENT_TYPE,
)
from .landmarks import (
    DISPUTES_TABLE,
    EMPTY_INFO_TABLE,
    HAZARD_TABLE,
    LANDMARK_DETAIL_TABLES,
    MYSTERIES_TABLE,
    NPC_PROBLEMS_TABLE,
    SPECIAL_TABLE,
    THREATS_TABLE,
)
from .names import NAME_STRUCTURE
from .settlements import SETTLEMENT_TABLES


def all_tables():
    """Every static table, each listed once."""
    tables = [
        STARTING_HEX_BIOME,
        NEXT_HEX_BIOME,
        HEX_FEATURE,
        SETTLEMENT_TYPE,
        LANDMARK_CATEGORY,
        LANDMARK_CONTENT,
        FACTION_RELATIONSHIP,
        DISPOSITION,
        LAIR_LAYOUT,
        DUNGEON_LEVELS,
        HAZARD_TABLE,
        EMPTY_INFO_TABLE,
        SPECIAL_TABLE,
        DISPUTES_TABLE,
        THREATS_TABLE,
        MYSTERIES_TABLE,
        NPC_PROBLEMS_TABLE,
        NAME_STRUCTURE,
    ]
    tables.extend(BIOME_ENCOUNTER_TABLES.values())
    tables.extend(LANDMARK_SUBCATEGORY_TABLES.values())
    tables.extend(LANDMARK_DETAIL_TABLES.values())
    for subtype_tables in SETTLEMENT_TABLES.values():
        tables.extend(subtype_tables.values())

    unique = {}
    for table in tables:
        unique.setdefault(table.id, table)
    return list(unique.values())


def build_default_registry() -> TableRegistry:
    """A fresh registry holding every static table."""
    return TableRegistry(all_tables())


__all__ = [
    "BIOME_ENCOUNTER_TABLES",
    "DISPOSITION",
    "DUNGEON_LEVELS",
    "FACTION_RELATIONSHIP",
    "HEX_FEATURE",
    "LAIR_LAYOUT",
    "LANDMARK_CATEGORY",
    "LANDMARK_CONTENT",
    "LANDMARK_DETAIL_TABLES",
    "LANDMARK_SUBCATEGORY_TABLES",
    "NAME_STRUCTURE",
    "NEXT_HEX_BIOME",
    "SETTLEMENT_TABLES",
    "SETTLEMENT_TYPE",
    "STARTING_HEX_BIOME",
    "all_tables",
    "build_default_registry",
]
