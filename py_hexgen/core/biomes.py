"""
Biome propagation over hex cells.

This module implements:
- Biome enumeration and the biome <-> terrain id mapping
- Starting and neighbor-influenced ("next hex") biome rolls
- Terrain generation over caller-ordered or spiral-ordered cells

Neighbor influence only works when a cell's closer neighbors are resolved
before it, so callers that care should use generate_terrain_spiral.
"""

import structlog
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence

from ..config.tables.biomes import NEXT_HEX_BIOME, STARTING_HEX_BIOME
from .hex_geometry import AxialCoord, get_neighbors, spiral_order
from .tables import RollableTable, TableEngine

logger = structlog.get_logger()

SAME_AS_NEIGHBOR = "same"


class Biome(str, Enum):
    """Biomes rolled by the region tables."""

    GRASSLAND = "grassland"
    FOREST = "forest"
    HILLS = "hills"
    MARSH = "marsh"
    MOUNTAINS = "mountains"


BIOME_TO_TERRAIN: Dict[Biome, str] = {
    Biome.GRASSLAND: "plains",
    Biome.FOREST: "forest",
    Biome.HILLS: "hills",
    Biome.MARSH: "swamp",
    Biome.MOUNTAINS: "mountain",
}

# Terrain ids painted by hand can be richer than the rolled biomes
TERRAIN_TO_BIOME: Dict[str, Biome] = {
    "plains": Biome.GRASSLAND,
    "forest": Biome.FOREST,
    "deciduous_forest": Biome.FOREST,
    "dense_forest": Biome.FOREST,
    "hills": Biome.HILLS,
    "swamp": Biome.MARSH,
    "marsh": Biome.MARSH,
    "mountain": Biome.MOUNTAINS,
}


def biome_to_terrain_id(biome: Biome) -> str:
    """Terrain id used on the map for a biome."""
    return BIOME_TO_TERRAIN[Biome(biome)]


def terrain_id_to_biome(terrain_id: Optional[str]) -> Optional[Biome]:
    """Biome for a terrain id, or None if the id is unknown."""
    if not terrain_id:
        return None
    return TERRAIN_TO_BIOME.get(terrain_id)


def known_biomes(
    existing_terrain: Optional[Mapping[AxialCoord, str]],
) -> Dict[AxialCoord, Biome]:
    """Biomes of the cells whose terrain id is known; other ids are dropped."""
    known: Dict[AxialCoord, Biome] = {}
    for coord, terrain_id in (existing_terrain or {}).items():
        biome = terrain_id_to_biome(terrain_id)
        if biome is not None:
            known[AxialCoord(*coord)] = biome
    return known


def neighbor_biomes(coord: AxialCoord, known: Mapping[AxialCoord, Biome]) -> List[Biome]:
    """Biomes of the resolved neighbors of ``coord``, in neighbor order."""
    return [known[n] for n in get_neighbors(coord) if n in known]


@dataclass
class TerrainOptions:
    """Terrain generation options."""

    use_neighbor_influence: bool = True
    force_biome: Optional[Biome] = None  # Skips all rolls when set


@dataclass
class TerrainResult:
    """Terrain assigned to one cell."""

    coord: AxialCoord
    biome: Biome
    terrain_id: str


class TerrainGenerator:
    """Assigns biomes to cells using the starting and next-hex tables."""

    def __init__(
        self,
        engine: TableEngine,
        starting_table: RollableTable = STARTING_HEX_BIOME,
        next_table: RollableTable = NEXT_HEX_BIOME,
    ):
        """
        Initialize terrain generator.

        Args:
            engine: Table engine holding the PRNG
            starting_table: Table for independent biome rolls
            next_table: Table for neighbor-influenced rolls
        """
        self.engine = engine
        self.starting_table = starting_table
        self.next_table = next_table

    def _to_biome(self, value: str, table: RollableTable) -> Biome:
        try:
            return Biome(value)
        except ValueError:
            logger.warning(
                "Biome roll did not resolve to a biome",
                table_id=table.id,
                value=value,
            )
            return Biome.GRASSLAND

    def generate_starting_biome(self) -> Biome:
        """Roll a biome independently of any neighbor."""
        result = self.engine.roll_on_table(self.starting_table)
        return self._to_biome(result.value, self.starting_table)

    def generate_next_biome(self, neighbor_biomes: Sequence[Biome]) -> Biome:
        """
        Roll a biome for a cell next to already generated cells.

        "same" copies a uniformly chosen neighbor biome. With no resolved
        neighbors the roll falls back to the starting table.
        """
        if not neighbor_biomes:
            return self.generate_starting_biome()

        result = self.engine.roll_on_table(self.next_table)
        if result.value == SAME_AS_NEIGHBOR:
            return self.engine.pick(neighbor_biomes)
        return self._to_biome(result.value, self.next_table)

    def generate_terrain(
        self,
        target_coords: Sequence[AxialCoord],
        existing_terrain: Optional[Mapping[AxialCoord, str]] = None,
        options: Optional[TerrainOptions] = None,
    ) -> List[TerrainResult]:
        """
        Generate terrain for cells in the order given.

        Args:
            target_coords: Cells to generate
            existing_terrain: Terrain ids of cells outside the target set
            options: Terrain options

        Returns:
            One TerrainResult per target cell, in input order
        """
        options = options or TerrainOptions()

        if options.force_biome is not None:
            biome = Biome(options.force_biome)
            terrain_id = biome_to_terrain_id(biome)
            return [TerrainResult(AxialCoord(*c), biome, terrain_id) for c in target_coords]

        known = known_biomes(existing_terrain)

        results = []
        for coord in target_coords:
            coord = AxialCoord(*coord)
            if options.use_neighbor_influence:
                biome = self.generate_next_biome(neighbor_biomes(coord, known))
            else:
                biome = self.generate_starting_biome()

            # Later cells in this call must see it
            known[coord] = biome
            results.append(TerrainResult(coord, biome, biome_to_terrain_id(biome)))

        logger.debug("Generated terrain", cells=len(results))
        return results

    def generate_terrain_spiral(
        self,
        center: AxialCoord,
        coords: Sequence[AxialCoord],
        existing_terrain: Optional[Mapping[AxialCoord, str]] = None,
        options: Optional[TerrainOptions] = None,
    ) -> List[TerrainResult]:
        """Generate terrain for ``coords`` visited in spiral order from ``center``."""
        ordered = spiral_order(center, coords)
        return self.generate_terrain(ordered, existing_terrain, options)
