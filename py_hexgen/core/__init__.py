"""
Core hex map generation functionality.
"""

from .alea_prng import AleaPRNG
from .hex_geometry import (
    AxialCoord,
    GridConfig,
    OffsetCoord,
    OffsetParity,
    Orientation,
    PixelPoint,
    axial_to_offset,
    generate_spiral_coords,
    get_neighbors,
    hex_distance,
    hex_to_pixel,
    offset_to_axial,
    pixel_to_hex,
)
from .tables import (
    DiceFormulaError,
    RollableTable,
    RollResult,
    TableEngine,
    TableEntry,
    TableRegistry,
)
from .biomes import Biome, TerrainGenerator, TerrainOptions, TerrainResult
from .settlements import SettlementType, generate_settlement
from .features import FeatureGenerator, FeatureType, GeneratedFeature
from .feature_utils import NormalizedFeature, normalize_feature
from .factions import Faction, FactionGenerator, RelationshipStatus

__all__ = ['AleaPRNG', 'AxialCoord', 'GridConfig', 'OffsetCoord', 'OffsetParity',
           'Orientation', 'PixelPoint', 'axial_to_offset', 'generate_spiral_coords',
           'get_neighbors', 'hex_distance', 'hex_to_pixel', 'offset_to_axial',
           'pixel_to_hex', 'DiceFormulaError', 'RollableTable', 'RollResult',
           'TableEngine', 'TableEntry', 'TableRegistry', 'Biome', 'TerrainGenerator',
           'TerrainOptions', 'TerrainResult', 'SettlementType', 'generate_settlement',
           'FeatureGenerator', 'FeatureType', 'GeneratedFeature', 'NormalizedFeature',
           'normalize_feature', 'Faction', 'FactionGenerator', 'RelationshipStatus']
