"""
Tests for biome propagation.
"""

import pytest
from structlog.testing import capture_logs

from py_hexgen.core.alea_prng import AleaPRNG
from py_hexgen.core.biomes import (
    Biome,
    TerrainGenerator,
    TerrainOptions,
    TerrainResult,
    biome_to_terrain_id,
    known_biomes,
    neighbor_biomes,
    terrain_id_to_biome,
)
from py_hexgen.core.hex_geometry import AxialCoord, generate_spiral_coords, get_neighbors
from py_hexgen.core.tables import RollableTable, TableEngine, numbered_entries

A = AxialCoord(0, 0)
B = AxialCoord(1, 0)


def always(value, table_id="always"):
    return RollableTable(id=table_id, dice_formula="1d1", entries=numbered_entries([value]))


class TestBiomeMapping:
    """Test biome <-> terrain id mapping."""

    def test_round_trip(self):
        """Test every biome maps to a terrain id and back."""
        for biome in Biome:
            assert terrain_id_to_biome(biome_to_terrain_id(biome)) == biome

    def test_known_ids(self):
        """Test the terrain ids used on the map."""
        assert biome_to_terrain_id(Biome.GRASSLAND) == "plains"
        assert biome_to_terrain_id(Biome.MARSH) == "swamp"
        assert biome_to_terrain_id(Biome.MOUNTAINS) == "mountain"
        assert terrain_id_to_biome("dense_forest") == Biome.FOREST

    @pytest.mark.parametrize(
        "terrain_id", [None, "", "lava", "void", "water", "desert", "wasteland", "tundra"]
    )
    def test_unknown_ids(self, terrain_id):
        """Test unknown terrain ids have no biome."""
        assert terrain_id_to_biome(terrain_id) is None

    def test_known_biomes_drops_unknown_ids(self):
        """Test only mapped terrain ids become known biomes."""
        known = known_biomes({(0, 0): "swamp", (1, 0): "water", (2, 0): "dense_forest"})
        assert known == {A: Biome.MARSH, AxialCoord(2, 0): Biome.FOREST}
        assert known_biomes(None) == {}

    def test_neighbor_biomes(self):
        """Test neighbor biomes follow neighbor order and skip unknown cells."""
        known = {B: Biome.HILLS, AxialCoord(0, 1): Biome.MARSH, AxialCoord(5, 5): Biome.FOREST}
        assert neighbor_biomes(A, known) == [Biome.HILLS, Biome.MARSH]
        assert neighbor_biomes(AxialCoord(9, 9), known) == []


class TestBiomeRolls:
    """Test starting and next biome rolls."""

    def test_starting_biome(self, scripted):
        """Test a 7 on the starting table gives hills."""
        generator = TerrainGenerator(TableEngine(scripted.from_faces((7, 10))))
        assert generator.generate_starting_biome() == Biome.HILLS

    def test_next_biome_same_copies_neighbor(self, scripted):
        """Test "same" picks one of the neighbor biomes."""
        prng = scripted.from_faces((2, 10), (2, 2))
        generator = TerrainGenerator(TableEngine(prng))
        assert generator.generate_next_biome([Biome.FOREST, Biome.MARSH]) == Biome.MARSH
        assert prng.calls == 2

    def test_next_biome_explicit(self, scripted):
        """Test a non-"same" result ignores the neighbors."""
        generator = TerrainGenerator(TableEngine(scripted.from_faces((10, 10))))
        assert generator.generate_next_biome([Biome.FOREST]) == Biome.MOUNTAINS

    def test_next_biome_without_neighbors(self, scripted):
        """Test no neighbors falls back to a single starting roll."""
        prng = scripted.from_faces((9, 10))
        generator = TerrainGenerator(TableEngine(prng))
        assert generator.generate_next_biome([]) == Biome.MARSH
        assert prng.calls == 1

    def test_unresolved_biome_degrades(self, scripted):
        """Test a value that is not a biome becomes grassland with a warning."""
        generator = TerrainGenerator(
            TableEngine(scripted()), starting_table=always("volcano")
        )
        with capture_logs() as logs:
            assert generator.generate_starting_biome() == Biome.GRASSLAND
        assert any(log["event"] == "Biome roll did not resolve to a biome" for log in logs)


class TestGenerateTerrain:
    """Test terrain generation over cells."""

    def test_two_cell_same(self, scripted):
        """Test a second cell rolling "same" copies the first cell's biome."""
        prng = scripted.from_faces((7, 10), (3, 10), (1, 1))
        generator = TerrainGenerator(TableEngine(prng))

        results = generator.generate_terrain([A, B])

        assert results == [
            TerrainResult(A, Biome.HILLS, "hills"),
            TerrainResult(B, Biome.HILLS, "hills"),
        ]
        assert prng.calls == 3

    def test_always_same_floods_region(self):
        """Test an always-"same" next table copies the first biome everywhere."""
        engine = TableEngine(AleaPRNG("flood"))
        generator = TerrainGenerator(
            engine, starting_table=always("forest", "start"), next_table=always("same", "next")
        )
        coords = generate_spiral_coords(AxialCoord(3, -2), 3)

        results = generator.generate_terrain(coords)

        assert len(results) == len(coords)
        assert {r.biome for r in results} == {Biome.FOREST}
        assert [r.coord for r in results] == coords

    def test_force_biome_draws_nothing(self, scripted):
        """Test a forced biome assigns every cell without using the PRNG."""
        prng = scripted()
        generator = TerrainGenerator(TableEngine(prng))
        coords = generate_spiral_coords(A, 2)

        results = generator.generate_terrain(coords, options=TerrainOptions(force_biome=Biome.MARSH))

        assert all(r.biome == Biome.MARSH and r.terrain_id == "swamp" for r in results)
        assert len(results) == len(coords)
        assert prng.calls == 0

    def test_existing_terrain_influences(self, scripted):
        """Test terrain outside the target set counts as a neighbor."""
        prng = scripted.from_faces((1, 10), (1, 1))
        generator = TerrainGenerator(TableEngine(prng))

        results = generator.generate_terrain([B], existing_terrain={A: "mountain"})

        assert results == [TerrainResult(B, Biome.MOUNTAINS, "mountain")]

    def test_unknown_existing_terrain_ignored(self, scripted):
        """Test unknown terrain ids are not treated as neighbors."""
        prng = scripted.from_faces((5, 10))
        generator = TerrainGenerator(TableEngine(prng))

        results = generator.generate_terrain([B], existing_terrain={A: "lava"})

        # No usable neighbor: one starting roll, 5 -> forest
        assert results[0].biome == Biome.FOREST
        assert prng.calls == 1

    def test_water_neighbor_ignored(self, scripted):
        """Test a water hex does not count as a grassland neighbor."""
        prng = scripted.from_faces((3, 10))
        generator = TerrainGenerator(TableEngine(prng))

        results = generator.generate_terrain([B], existing_terrain={A: "water"})

        # Starting table: 3 -> grassland, with no "same" roll or neighbor pick
        assert results == [TerrainResult(B, Biome.GRASSLAND, "plains")]
        assert prng.calls == 1

    def test_without_neighbor_influence(self, scripted):
        """Test every cell rolls the starting table when influence is off."""
        prng = scripted.from_faces((1, 10), (10, 10))
        generator = TerrainGenerator(TableEngine(prng))

        results = generator.generate_terrain(
            [A, B], options=TerrainOptions(use_neighbor_influence=False)
        )

        assert [r.biome for r in results] == [Biome.GRASSLAND, Biome.MOUNTAINS]

    def test_spiral_order(self):
        """Test spiral generation visits the center first."""
        generator = TerrainGenerator(TableEngine(AleaPRNG("spiral")))
        coords = list(reversed(generate_spiral_coords(A, 2)))

        results = generator.generate_terrain_spiral(A, coords)

        assert results[0].coord == A
        assert [r.coord for r in results] == generate_spiral_coords(A, 2)

    def test_spiral_cells_have_resolved_neighbors(self):
        """Test every cell after the first sees at least one earlier neighbor."""
        coords = generate_spiral_coords(A, 3)
        seen = {coords[0]}
        for coord in coords[1:]:
            assert any(n in seen for n in get_neighbors(coord))
            seen.add(coord)

    def test_deterministic(self):
        """Test the same seed yields the same terrain."""
        coords = generate_spiral_coords(A, 3)
        first = TerrainGenerator(TableEngine(AleaPRNG("again"))).generate_terrain(coords)
        second = TerrainGenerator(TableEngine(AleaPRNG("again"))).generate_terrain(coords)
        assert first == second
