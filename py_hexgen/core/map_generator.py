"""
Region and map generation.

This module ties terrain, features and factions together:
- Region generation: a spiral of hexes around a center, skipping hexes
  that already have terrain
- Full map generation: every hex of a map, visited in spiral order
- Feature-only generation for hexes whose terrain already exists
- Faction generation from the settlements of a generation run

Terrain and features are rolled hex by hex in spiral order, so each hex
sees the biomes of the hexes generated before it.
"""

from typing import Dict, List, Mapping, Optional, Sequence

import structlog
from pydantic import BaseModel, Field

from ..config import settings
from ..utils.random import create_prng
from .biomes import (
    Biome,
    TerrainGenerator,
    biome_to_terrain_id,
    known_biomes,
    neighbor_biomes,
    terrain_id_to_biome,
)
from .factions import Faction, FactionGenerator
from .feature_utils import NormalizedFeature, normalize_feature
from .features import FeatureGenerator, FeatureType, GeneratedFeature, SettlementFeature
from .hex_geometry import AxialCoord, generate_spiral_coords, hex_distance, spiral_order
from .tables import RandomSource, TableEngine

logger = structlog.get_logger()


class MapGenerationOptions(BaseModel):
    """Map generation options."""

    generate_terrain: bool = Field(default=True, description="Roll terrain")
    generate_features: bool = Field(default=True, description="Roll features")
    feature_chance: int = Field(
        default_factory=lambda: settings.feature_chance,
        ge=0,
        le=100,
        description="Percentage chance per hex of a feature",
    )
    include_landmarks: bool = True
    include_settlements: bool = True
    include_lairs: bool = True
    include_dungeons: bool = True
    starting_biome: Optional[Biome] = Field(
        default=None, description="Biome of the first hex instead of a roll"
    )

    def allows(self, feature_type: FeatureType) -> bool:
        """Whether a rolled feature type is kept."""
        return {
            FeatureType.LANDMARK: self.include_landmarks,
            FeatureType.SETTLEMENT: self.include_settlements,
            FeatureType.LAIR: self.include_lairs,
            FeatureType.DUNGEON: self.include_dungeons,
        }[FeatureType(feature_type)]


class HexGenerationResult(BaseModel):
    """Everything generated for one hex."""

    coord: AxialCoord
    terrain_id: Optional[str] = None
    biome: Optional[Biome] = None
    feature_type: Optional[FeatureType] = None
    feature: Optional[GeneratedFeature] = None
    normalized: Optional[NormalizedFeature] = None


def calculate_coverage_radius(coords: Sequence[AxialCoord], center: AxialCoord) -> int:
    """Spiral radius around ``center`` that reaches every coordinate."""
    if not coords:
        return 0
    return max(hex_distance(center, AxialCoord(*c)) for c in coords) + 1


class MapGenerator:
    """Generates regions and maps from a single PRNG."""

    def __init__(self, prng: Optional[RandomSource] = None):
        """
        Initialize map generator.

        Args:
            prng: Randomness source; a seeded AleaPRNG from settings when omitted
        """
        self.prng = prng or create_prng()
        self.engine = TableEngine(self.prng)
        self.terrain = TerrainGenerator(self.engine)
        self.features = FeatureGenerator(self.engine)
        self.factions = FactionGenerator(self.engine)

    def _roll_biome(
        self,
        coord: AxialCoord,
        known: Dict[AxialCoord, Biome],
        options: MapGenerationOptions,
        is_first: bool,
    ) -> Biome:
        if is_first:
            if options.starting_biome is not None:
                return Biome(options.starting_biome)
            return self.terrain.generate_starting_biome()
        return self.terrain.generate_next_biome(neighbor_biomes(coord, known))

    def _roll_feature(
        self, result: HexGenerationResult, options: MapGenerationOptions
    ) -> None:
        if not self.engine.percentage_check(options.feature_chance):
            return
        feature_type = self.features.roll_feature_type()
        if not options.allows(feature_type):
            return

        feature = self.features.generate_feature(feature_type, terrain_id=result.terrain_id)
        result.feature_type = feature_type
        result.feature = feature
        result.normalized = normalize_feature(feature)

    def _generate_hex(
        self,
        coord: AxialCoord,
        known: Dict[AxialCoord, Biome],
        options: MapGenerationOptions,
        is_first: bool,
    ) -> HexGenerationResult:
        result = HexGenerationResult(coord=coord)

        if options.generate_terrain:
            biome = self._roll_biome(coord, known, options, is_first)
            known[coord] = biome
            result.biome = biome
            result.terrain_id = biome_to_terrain_id(biome)
        elif coord in known:
            result.biome = known[coord]

        if options.generate_features:
            self._roll_feature(result, options)

        return result

    def generate_region(
        self,
        center: AxialCoord,
        existing_terrain: Optional[Mapping[AxialCoord, str]] = None,
        options: Optional[MapGenerationOptions] = None,
        radius: Optional[int] = None,
    ) -> List[HexGenerationResult]:
        """
        Generate a region around ``center``.

        Args:
            center: Region center
            existing_terrain: Terrain ids already on the map; these hexes are
                skipped and influence their neighbors
            options: Generation options
            radius: Spiral radius; defaults to HEXGEN_REGION_RADIUS (19 hexes)

        Returns:
            One result per generated hex, in spiral order
        """
        options = options or MapGenerationOptions()
        radius = settings.region_radius if radius is None else radius
        existing_terrain = {AxialCoord(*c): t for c, t in (existing_terrain or {}).items()}
        known = known_biomes(existing_terrain)

        center = AxialCoord(*center)
        targets = [
            c for c in generate_spiral_coords(center, radius) if c not in existing_terrain
        ]
        logger.info("Generating region", center=center, radius=radius, hexes=len(targets))

        results = []
        for i, coord in enumerate(targets):
            is_first = i == 0 and not neighbor_biomes(coord, known)
            results.append(self._generate_hex(coord, known, options, is_first))

        logger.info("Region generated", hexes=len(results), features=_count_features(results))
        return results

    def generate_full_map(
        self,
        all_coords: Sequence[AxialCoord],
        center: AxialCoord,
        options: Optional[MapGenerationOptions] = None,
    ) -> List[HexGenerationResult]:
        """Generate every hex of a map, spiralling out from ``center``."""
        options = options or MapGenerationOptions()
        center = AxialCoord(*center)
        valid = {AxialCoord(*c) for c in all_coords}
        radius = calculate_coverage_radius(list(valid), center)
        ordered = spiral_order(center, valid)
        logger.info("Generating full map", center=center, radius=radius, hexes=len(ordered))

        known: Dict[AxialCoord, Biome] = {}
        results = [
            self._generate_hex(coord, known, options, is_first=(i == 0))
            for i, coord in enumerate(ordered)
        ]

        logger.info("Full map generated", hexes=len(results), features=_count_features(results))
        return results

    def generate_features_only(
        self,
        coords: Sequence[AxialCoord],
        options: Optional[MapGenerationOptions] = None,
        existing_terrain: Optional[Mapping[AxialCoord, str]] = None,
    ) -> List[HexGenerationResult]:
        """
        Generate features for hexes that already have terrain.

        Only hexes that received a feature are returned. Terrain ids are
        passed through for lair monster selection.
        """
        options = (options or MapGenerationOptions()).model_copy(
            update={"generate_terrain": False}
        )
        existing_terrain = {AxialCoord(*c): t for c, t in (existing_terrain or {}).items()}

        results = []
        for coord in coords:
            coord = AxialCoord(*coord)
            terrain_id = existing_terrain.get(coord)
            result = HexGenerationResult(
                coord=coord,
                terrain_id=terrain_id,
                biome=terrain_id_to_biome(terrain_id),
            )
            self._roll_feature(result, options)
            if result.feature is not None:
                results.append(result)

        logger.info("Features generated", hexes=len(coords), features=len(results))
        return results

    def generate_factions(
        self,
        results: Sequence[HexGenerationResult],
        existing_factions: Optional[Sequence[Faction]] = None,
        neighbors_only: Optional[bool] = None,
    ) -> List[Faction]:
        """
        Found factions for the eligible settlements in ``results``.

        Args:
            results: Generation results to scan for settlements
            existing_factions: Factions already on the map; not modified
            neighbors_only: Only relate touching domains; defaults to
                HEXGEN_FACTION_RELATIONSHIP_SCOPE

        Returns:
            The full updated faction set: existing factions first, then the
            new ones in result order
        """
        if neighbors_only is None:
            neighbors_only = settings.faction_relationship_scope == "neighbors"

        factions = [f.model_copy(deep=True) for f in existing_factions or []]
        for result in results:
            if not isinstance(result.feature, SettlementFeature):
                continue
            settlement = result.feature.data
            faction = self.factions.create_faction_from_settlement(
                settlement.name, settlement.type, result.coord
            )
            if faction is None:
                continue
            faction, factions = self.factions.generate_faction_relationships(
                faction, factions, neighbors_only=neighbors_only
            )
            factions.append(faction)

        logger.info("Factions generated", factions=len(factions))
        return factions


def _count_features(results: Sequence[HexGenerationResult]) -> int:
    return sum(1 for r in results if r.feature is not None)
