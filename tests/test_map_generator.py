"""
Tests for region and map generation.
"""

import pytest

from py_hexgen.config.tables.biomes import ENCOUNTERS_FOREST
from py_hexgen.core.alea_prng import AleaPRNG
from py_hexgen.core.biomes import Biome
from py_hexgen.core.factions import FactionGenerator
from py_hexgen.core.features import FeatureType, SettlementFeature
from py_hexgen.core.hex_geometry import (
    AxialCoord,
    GridConfig,
    generate_grid_coords,
    generate_spiral_coords,
    hex_distance,
)
from py_hexgen.core.map_generator import (
    HexGenerationResult,
    MapGenerationOptions,
    MapGenerator,
    calculate_coverage_radius,
)
from py_hexgen.core.settlements import SettlementData, SettlementType
from py_hexgen.core.tables import TableEngine

CENTER = AxialCoord(0, 0)


def settlement_result(coord, settlement_type, name):
    return HexGenerationResult(
        coord=coord,
        feature_type=FeatureType.SETTLEMENT,
        feature=SettlementFeature(data=SettlementData(type=settlement_type, name=name)),
    )


class TestOptions:
    """Test generation options."""

    def test_defaults(self):
        """Test the default feature chance comes from settings."""
        options = MapGenerationOptions()
        assert options.feature_chance == 15
        assert options.generate_terrain and options.generate_features
        assert all(options.allows(feature_type) for feature_type in FeatureType)

    def test_filters(self):
        """Test per-type feature filters."""
        options = MapGenerationOptions(include_lairs=False, include_dungeons=False)
        assert options.allows(FeatureType.LANDMARK)
        assert not options.allows(FeatureType.LAIR)
        assert not options.allows("dungeon")

    def test_coverage_radius(self):
        """Test the spiral radius needed to reach every coordinate."""
        assert calculate_coverage_radius([], CENTER) == 0
        assert calculate_coverage_radius([CENTER], CENTER) == 1
        assert calculate_coverage_radius([AxialCoord(3, -1), AxialCoord(0, 1)], CENTER) == 4


class TestGenerateRegion:
    """Test region generation."""

    def test_region_cells(self):
        """Test a region covers the spiral around its center, in order."""
        generator = MapGenerator(AleaPRNG("region"))
        results = generator.generate_region(CENTER, radius=2)

        assert [r.coord for r in results] == generate_spiral_coords(CENTER, 2)
        assert all(r.biome is not None and r.terrain_id for r in results)

    def test_default_radius(self):
        """Test the default radius gives 19 hexes."""
        results = MapGenerator(AleaPRNG("radius")).generate_region(CENTER)
        assert len(results) == 19

    def test_skips_existing(self):
        """Test hexes with terrain are not regenerated."""
        existing = {CENTER: "forest", AxialCoord(1, 0): "mountain"}
        results = MapGenerator(AleaPRNG("skip")).generate_region(
            CENTER, existing_terrain=existing, radius=1
        )
        coords = [r.coord for r in results]
        assert len(coords) == 5
        assert CENTER not in coords and AxialCoord(1, 0) not in coords

    def test_starting_biome(self):
        """Test the first hex takes the requested biome."""
        options = MapGenerationOptions(starting_biome=Biome.MOUNTAINS, generate_features=False)
        results = MapGenerator(AleaPRNG("start")).generate_region(CENTER, options=options, radius=1)
        assert results[0].coord == CENTER
        assert results[0].biome == Biome.MOUNTAINS
        assert results[0].terrain_id == "mountain"

    def test_starting_biome_ignored_next_to_terrain(self):
        """Test a region touching existing terrain propagates from it instead."""
        options = MapGenerationOptions(starting_biome=Biome.MARSH, generate_features=False)
        generator = MapGenerator(AleaPRNG("touching"))
        generator.terrain.next_table = generator.terrain.next_table.model_copy(
            update={"dice_formula": "1d5"}
        )  # always "same"

        results = generator.generate_region(
            CENTER, existing_terrain={AxialCoord(-1, 0): "hills"}, options=options, radius=1
        )

        assert {r.biome for r in results} == {Biome.HILLS}

    def test_no_features(self):
        """Test a zero feature chance yields bare terrain."""
        options = MapGenerationOptions(feature_chance=0)
        results = MapGenerator(AleaPRNG("bare")).generate_region(CENTER, options=options, radius=3)
        assert all(r.feature is None and r.feature_type is None for r in results)

    def test_every_hex_featured(self):
        """Test a 100% feature chance fills every hex."""
        options = MapGenerationOptions(feature_chance=100)
        results = MapGenerator(AleaPRNG("busy")).generate_region(CENTER, options=options, radius=2)
        for result in results:
            assert result.feature is not None
            assert result.feature.type == result.feature_type.value
            assert result.normalized.type == result.feature_type

    def test_feature_filters(self):
        """Test filtered feature types never appear."""
        options = MapGenerationOptions(
            feature_chance=100,
            include_landmarks=False,
            include_settlements=False,
            include_lairs=False,
        )
        results = MapGenerator(AleaPRNG("filtered")).generate_region(
            CENTER, options=options, radius=3
        )
        types = {r.feature_type for r in results}
        assert types <= {FeatureType.DUNGEON, None}
        assert FeatureType.DUNGEON in types

    def test_lairs_use_hex_terrain(self):
        """Test lairs roll on the encounter table of their hex biome."""
        options = MapGenerationOptions(
            feature_chance=100,
            include_landmarks=False,
            include_settlements=False,
            include_dungeons=False,
            starting_biome=Biome.FOREST,
        )
        generator = MapGenerator(AleaPRNG("lairs"))
        generator.terrain.next_table = generator.terrain.next_table.model_copy(
            update={"dice_formula": "1d5"}
        )
        results = generator.generate_region(CENTER, options=options, radius=2)

        forest_monsters = {e.value for e in ENCOUNTERS_FOREST.entries}
        lairs = [r for r in results if r.feature is not None]
        assert lairs
        assert all(r.feature.data.monster_type in forest_monsters for r in lairs)

    def test_deterministic(self):
        """Test the same seed gives the same region."""
        options = MapGenerationOptions(feature_chance=50)
        first = MapGenerator(AleaPRNG("same")).generate_region(CENTER, options=options, radius=3)
        second = MapGenerator(AleaPRNG("same")).generate_region(CENTER, options=options, radius=3)
        assert first == second

    def test_default_prng(self):
        """Test a generator without an explicit PRNG still works."""
        generator = MapGenerator()
        assert len(generator.generate_region(CENTER, radius=0)) == 1


class TestGenerateFullMap:
    """Test whole map generation."""

    def test_covers_grid_in_spiral_order(self):
        """Test every grid hex is generated once, closest to the center first."""
        coords = generate_grid_coords(GridConfig(cols=6, rows=5))
        center = coords[14]
        results = MapGenerator(AleaPRNG("full")).generate_full_map(coords, center)

        assert sorted(r.coord for r in results) == sorted(coords)
        assert results[0].coord == center
        distances = [hex_distance(center, r.coord) for r in results]
        assert distances == sorted(distances)

    def test_center_outside_grid(self):
        """Test a center outside the grid still covers every hex."""
        coords = generate_grid_coords(GridConfig(cols=3, rows=3))
        results = MapGenerator(AleaPRNG("outside")).generate_full_map(coords, AxialCoord(-5, -5))
        assert len(results) == 9
        assert all(r.biome is not None for r in results)

    def test_empty_map(self):
        """Test no coordinates gives no results."""
        assert MapGenerator(AleaPRNG("empty")).generate_full_map([], CENTER) == []


class TestGenerateFeaturesOnly:
    """Test feature generation over existing terrain."""

    def test_only_featured_hexes(self):
        """Test only hexes that received a feature are returned."""
        coords = generate_spiral_coords(CENTER, 4)
        terrain = {c: "swamp" for c in coords}
        options = MapGenerationOptions(feature_chance=30)

        results = MapGenerator(AleaPRNG("features")).generate_features_only(
            coords, options, existing_terrain=terrain
        )

        assert 0 < len(results) < len(coords)
        for result in results:
            assert result.feature is not None
            assert result.terrain_id == "swamp"
            assert result.biome == Biome.MARSH

    def test_every_hex(self):
        """Test a 100% chance returns every hex, even without terrain."""
        coords = generate_spiral_coords(CENTER, 1)
        options = MapGenerationOptions(feature_chance=100, generate_terrain=True)
        results = MapGenerator(AleaPRNG("all")).generate_features_only(coords, options)
        assert [r.coord for r in results] == coords
        assert all(r.biome is None and r.terrain_id is None for r in results)


class TestGenerateFactions:
    """Test faction generation from results."""

    def test_factions_from_settlements(self):
        """Test only cities, castles, towers and abbeys found factions."""
        results = [
            settlement_result(AxialCoord(0, 0), SettlementType.CITY, "Avery"),
            settlement_result(AxialCoord(3, 0), SettlementType.HAMLET, "Dun"),
            settlement_result(AxialCoord(6, 0), SettlementType.TOWER, "Bad Tower"),
            HexGenerationResult(coord=AxialCoord(9, 0)),
            settlement_result(AxialCoord(12, 0), SettlementType.ABBEY, "Saint-Paul"),
        ]
        factions = MapGenerator(AleaPRNG("factions")).generate_factions(
            results, neighbors_only=False
        )

        assert [f.name for f in factions] == ["Avery", "Bad Tower", "Saint-Paul"]
        for faction in factions:
            assert len(faction.relationships) == 2
            for other_id, status in faction.relationships.items():
                other = next(f for f in factions if f.id == other_id)
                assert other.relationships[faction.id] == status

    def test_existing_factions_untouched(self):
        """Test existing factions are copied, not modified."""
        engine = TableEngine(AleaPRNG("old"))
        old = FactionGenerator(engine).create_faction_from_settlement(
            "Old Keep", SettlementType.CASTLE, AxialCoord(1, 1)
        )
        results = [settlement_result(AxialCoord(2, 1), SettlementType.CITY, "New Town")]

        factions = MapGenerator(AleaPRNG("new")).generate_factions(results, [old])

        assert old.relationships == {}
        assert factions[0].id == old.id
        assert list(factions[0].relationships) == [factions[1].id]

    def test_neighbors_only(self):
        """Test distant domains are left unrelated when limited to neighbors."""
        results = [
            settlement_result(AxialCoord(0, 0), SettlementType.CITY, "Near"),
            settlement_result(AxialCoord(2, 0), SettlementType.CASTLE, "Nearer"),
            settlement_result(AxialCoord(20, 0), SettlementType.CITY, "Far"),
        ]
        factions = MapGenerator(AleaPRNG("scope")).generate_factions(results, neighbors_only=True)

        by_name = {f.name: f for f in factions}
        assert list(by_name["Near"].relationships) == [by_name["Nearer"].id]
        assert by_name["Far"].relationships == {}

    @pytest.mark.parametrize("seed", ["one", "two"])
    def test_generated_region_factions(self, seed):
        """Test factions found from a generated region point at settlement hexes."""
        options = MapGenerationOptions(feature_chance=100)
        generator = MapGenerator(AleaPRNG(seed))
        results = generator.generate_region(CENTER, options=options, radius=3)
        factions = generator.generate_factions(results)

        settlement_coords = {
            r.coord
            for r in results
            if isinstance(r.feature, SettlementFeature)
            and r.feature.data.type not in (SettlementType.HAMLET, SettlementType.VILLAGE)
        }
        assert {f.source_coord for f in factions} == settlement_coords
