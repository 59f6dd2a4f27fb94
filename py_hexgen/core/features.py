"""
Hex feature generation.

This module handles:
- Feature category rolls (landmark, settlement, lair, dungeon)
- Landmarks: category -> subcategory -> nature -> content -> content detail
- Lairs from the biome encounter tables
- Dungeons with open-ended level counts
- Settlements, delegated to the settlements module
"""

from enum import Enum
from typing import Annotated, Dict, Literal, Optional, Union

import structlog
from pydantic import BaseModel, Field, TypeAdapter

from ..config.tables.biomes import BIOME_ENCOUNTER_TABLES
from ..config.tables.features import (
    DISPOSITION,
    DUNGEON_LEVELS,
    HEX_FEATURE,
    LAIR_LAYOUT,
    LANDMARK_CATEGORY,
    LANDMARK_CONTENT,
    LANDMARK_SUBCATEGORY_TABLES,
)
from ..config.tables.landmarks import (
    EMPTY_INFO_TABLE,
    HAZARD_TABLE,
    LANDMARK_DETAIL_TABLES,
    SPECIAL_FOLLOW_UPS,
    SPECIAL_TABLE,
)
from .biomes import Biome, terrain_id_to_biome
from .name_generator import SettlementNameGenerator
from .settlements import SettlementData, SettlementType, generate_settlement
from .tables import UNKNOWN_VALUE, TableEngine

logger = structlog.get_logger()

UNKNOWN_LANDMARK = "Unknown landmark"
OPEN_ENDED_LEVELS = "4+"
BIOME_VALUES = {biome.value for biome in Biome}

# Percentage chance of treasure per landmark content; "special" always has some
TREASURE_CHANCES: Dict[str, int] = {
    "hazard": 25,
    "empty": 15,
    "monsters": 50,
}


class FeatureType(str, Enum):
    """Types of hex features."""

    LANDMARK = "landmark"
    SETTLEMENT = "settlement"
    LAIR = "lair"
    DUNGEON = "dungeon"


class LandmarkData(BaseModel):
    """A generated landmark."""

    category: str = Field(description="natural, artificial or magic")
    sub_category: str = Field(description="Subcategory, e.g. flora_a or ruin")
    nature: str = Field(description="What the landmark is")
    content: str = Field(description="hazard, empty, special or monsters")
    has_treasure: bool = Field(default=False)
    hazard: Optional[str] = None
    information: Optional[str] = None
    special: Optional[str] = None
    dispute: Optional[str] = None
    threat: Optional[str] = None
    mystery: Optional[str] = None
    npc_problem: Optional[str] = None


class LairData(BaseModel):
    """A generated monster lair."""

    monster_type: str = Field(description="Monster from the biome encounter table")
    layout: str
    disposition: str
    percent_outside: int = Field(ge=10, le=60, description="Share of monsters outside")


class DungeonData(BaseModel):
    """A generated dungeon."""

    levels: int = Field(ge=1)
    disposition: str


class LandmarkFeature(BaseModel):
    type: Literal["landmark"] = "landmark"
    data: LandmarkData


class SettlementFeature(BaseModel):
    type: Literal["settlement"] = "settlement"
    data: SettlementData


class LairFeature(BaseModel):
    type: Literal["lair"] = "lair"
    data: LairData


class DungeonFeature(BaseModel):
    type: Literal["dungeon"] = "dungeon"
    data: DungeonData


GeneratedFeature = Annotated[
    Union[LandmarkFeature, SettlementFeature, LairFeature, DungeonFeature],
    Field(discriminator="type"),
]

generated_feature_adapter = TypeAdapter(GeneratedFeature)


class FeatureGenerator:
    """Rolls hex features through a single TableEngine."""

    def __init__(
        self,
        engine: TableEngine,
        name_generator: Optional[SettlementNameGenerator] = None,
    ):
        """
        Initialize feature generator.

        Args:
            engine: Table engine holding the PRNG
            name_generator: Settlement name generator sharing the engine
        """
        self.engine = engine
        self.name_generator = name_generator or SettlementNameGenerator(engine)

    def roll_feature_type(self) -> FeatureType:
        value = self.engine.roll_value(HEX_FEATURE)
        try:
            return FeatureType(value)
        except ValueError:
            logger.warning("Feature type roll did not resolve", value=value)
            return FeatureType.LANDMARK

    # Landmarks

    def roll_landmark_sub_category(self, category: str) -> str:
        table = LANDMARK_SUBCATEGORY_TABLES.get(category)
        if table is None:
            logger.warning("No subcategory table for landmark category", category=category)
            return UNKNOWN_VALUE
        return self.engine.roll_value(table)

    def roll_landmark_nature(self, sub_category: str) -> str:
        table = LANDMARK_DETAIL_TABLES.get(sub_category)
        if table is None:
            logger.warning("No detail table for landmark subcategory", sub_category=sub_category)
            return UNKNOWN_LANDMARK
        return self.engine.roll_value(table)

    def check_landmark_treasure(self, content: str) -> bool:
        """Treasure presence derived from the landmark's content type."""
        if content == "special":
            return True
        chance = TREASURE_CHANCES.get(content)
        if chance is None:
            return False
        return self.engine.percentage_check(chance)

    def generate_landmark(self) -> LandmarkData:
        """Generate a complete landmark."""
        category = self.engine.roll_value(LANDMARK_CATEGORY)
        sub_category = self.roll_landmark_sub_category(category)
        nature = self.roll_landmark_nature(sub_category)
        content = self.engine.roll_value(LANDMARK_CONTENT)

        landmark = LandmarkData(
            category=category,
            sub_category=sub_category,
            nature=nature,
            content=content,
            has_treasure=self.check_landmark_treasure(content),
        )

        if content == "hazard":
            landmark.hazard = self.engine.roll_value(HAZARD_TABLE)
        elif content == "empty":
            landmark.information = self.engine.roll_value(EMPTY_INFO_TABLE)
        elif content == "special":
            landmark.special = self.engine.roll_value(SPECIAL_TABLE)
            # "Solve a puzzle/riddle" has no follow-up table
            follow_up = SPECIAL_FOLLOW_UPS.get(landmark.special)
            if follow_up is not None:
                field, table = follow_up
                setattr(landmark, field, self.engine.roll_value(table))

        return landmark

    # Settlements

    def generate_settlement(
        self, settlement_type: Optional[SettlementType] = None
    ) -> SettlementData:
        return generate_settlement(self.engine, settlement_type, self.name_generator)

    # Lairs and dungeons

    def _encounter_biome(self, terrain_id: Optional[str]) -> Biome:
        if terrain_id in BIOME_VALUES:
            return Biome(terrain_id)
        biome = terrain_id_to_biome(terrain_id)
        if biome is not None:
            return biome
        return self.engine.pick(list(Biome))

    def generate_lair(self, terrain_id: Optional[str] = None) -> LairData:
        """
        Generate a lair.

        Args:
            terrain_id: Terrain id or biome of the hex; picks the encounter
                table. Unknown or missing terrain uses a random biome's table.
        """
        biome = self._encounter_biome(terrain_id)
        monster_type = self.engine.roll_value(BIOME_ENCOUNTER_TABLES[biome.value])

        return LairData(
            monster_type=monster_type,
            layout=self.engine.roll_value(LAIR_LAYOUT),
            disposition=self.engine.roll_value(DISPOSITION),
            percent_outside=self.engine.roll_die(6) * 10,
        )

    def generate_dungeon(self) -> DungeonData:
        value = self.engine.roll_value(DUNGEON_LEVELS)
        if value == OPEN_ENDED_LEVELS:
            levels = 3 + self.engine.roll_die(3)
        else:
            try:
                levels = int(value)
            except ValueError:
                logger.warning("Dungeon level roll did not resolve", value=value)
                levels = 1

        return DungeonData(levels=levels, disposition=self.engine.roll_value(DISPOSITION))

    # Full features

    def generate_feature(
        self,
        force_type: Optional[FeatureType] = None,
        force_settlement_type: Optional[SettlementType] = None,
        terrain_id: Optional[str] = None,
    ) -> GeneratedFeature:
        """
        Generate a complete feature for a hex.

        Args:
            force_type: Feature type to generate instead of rolling one
            force_settlement_type: Settlement subtype, used for settlements only
            terrain_id: Terrain id or biome of the hex, used for lairs only

        Returns:
            The generated feature, tagged by type
        """
        feature_type = FeatureType(force_type) if force_type else self.roll_feature_type()

        if feature_type == FeatureType.SETTLEMENT:
            return SettlementFeature(data=self.generate_settlement(force_settlement_type))
        if feature_type == FeatureType.LAIR:
            return LairFeature(data=self.generate_lair(terrain_id))
        if feature_type == FeatureType.DUNGEON:
            return DungeonFeature(data=self.generate_dungeon())
        return LandmarkFeature(data=self.generate_landmark())
