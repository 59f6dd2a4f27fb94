"""
Tests for settlement generation.
"""

import pytest
from pydantic import ValidationError

from py_hexgen.core.alea_prng import AleaPRNG
from py_hexgen.core.settlements import (
    SETTLEMENT_PLANS,
    FieldRule,
    Gate,
    SettlementType,
    generate_settlement,
    generate_settlement_details,
    plan_fields,
    roll_settlement_type,
)
from py_hexgen.core.tables import TableEngine

# Fields rolled unconditionally for each subtype
ALWAYS_FIELDS = {
    SettlementType.HAMLET: {"building", "layout", "disposition"},
    SettlementType.VILLAGE: {
        "size", "layout", "disposition", "ruler", "special_location", "defense", "notable_npc",
    },
    SettlementType.CITY: {
        "size", "disposition", "ruler", "appearance", "occupation", "special_location",
        "notable_npc",
    },
    SettlementType.CASTLE: {"condition", "keep_shape", "disposition", "keep_levels", "defense"},
    SettlementType.TOWER: {"levels", "material", "shape", "top_level", "disposition"},
    SettlementType.ABBEY: {"size", "disposition", "garden", "farming"},
}


class TestFieldRule:
    """Test plan rule validation."""

    def test_needs_table_or_formula(self):
        """Test a rule needs exactly one value source."""
        with pytest.raises(ValidationError):
            FieldRule(field="x")
        with pytest.raises(ValidationError):
            FieldRule(field="x", table="t", formula="1d6")

    def test_when_needs_condition(self):
        """Test conditional rules need a field and a value."""
        with pytest.raises(ValidationError):
            FieldRule(field="x", table="t", gate=Gate.WHEN, when_field="size")

    def test_plan_fields(self):
        """Test plan field order for a hamlet."""
        assert plan_fields(SettlementType.HAMLET) == ["building", "layout", "disposition", "secret"]
        assert plan_fields("tower") == ["levels", "material", "shape", "top_level", "disposition"]


class TestSettlementDetails:
    """Test plan interpretation."""

    def test_hamlet(self, scripted):
        """Test a hamlet whose secret gate passes."""
        engine = TableEngine(scripted())
        settlement = generate_settlement(engine, SettlementType.HAMLET)

        assert settlement.type == SettlementType.HAMLET
        assert settlement.name == "Acorn Abbey"
        assert settlement.size is None
        assert settlement.details == {
            "building": "Brewery/Vineyard",
            "layout": "Linear along road",
            "disposition": "Attack on sight",
            "secret": "Cannibals",
        }

    def test_castle_with_stone_walls(self, scripted):
        """Test stone walls unlock the wall shape roll."""
        prng = scripted.from_faces(
            (1, 30), (1, 24),  # name
            (2, 6),  # condition
            (4, 6),  # keep shape
            (3, 6), (4, 6),  # disposition
            (2, 3),  # keep levels
            (2, 4), (1, 6), (6, 6),  # two defensive structures
            (4, 8),  # wall shape
            (5, 6),  # no event
        )
        settlement = generate_settlement(TableEngine(prng), SettlementType.CASTLE)

        assert settlement.name == "AppleBane"
        assert settlement.details == {
            "condition": "Worn",
            "keep_shape": "Round",
            "disposition": "Neutral",
            "keep_levels": "3",
            "defense": "Stone walls and towers, Wooden palisade",
            "wall_shape": "Hexagon (6 towers)",
        }

    def test_castle_without_stone_walls(self, scripted):
        """Test no wall shape without stone walls."""
        prng = scripted.from_faces(
            (1, 6), (1, 6), (6, 6), (6, 6), (1, 3),
            (1, 4), (4, 6),  # one defensive structure: moat
            (6, 6),  # no event
        )
        details = generate_settlement_details(SettlementType.CASTLE, TableEngine(prng))

        assert details["defense"] == "Moat (trench)"
        assert details["keep_levels"] == "2"
        assert details["disposition"] == "Enthusiastic"
        assert "wall_shape" not in details
        assert "event" not in details

    def test_repeated_defense_deduplicated(self, scripted):
        """Test repeated structure rolls are listed once."""
        prng = scripted.from_faces(
            (1, 6), (1, 6), (1, 6), (1, 6), (1, 3),
            (3, 4), (4, 6), (4, 6), (4, 6),
            (6, 6),
        )
        details = generate_settlement_details(SettlementType.CASTLE, TableEngine(prng))
        assert details["defense"] == "Moat (trench)"

    @pytest.mark.parametrize(
        "faces,expected",
        [
            (((1, 20), (3, 20)), None),
            (((6, 20), (6, 20)), "Corrupt"),
            (((6, 20), (2, 20)), "Corrupt"),
            (((6, 20), (7, 20)), "Corrupt, Crowded"),
        ],
    )
    def test_city_characteristics(self, scripted, faces, expected):
        """Test "Nothing special" is dropped and duplicates are merged."""
        plans = {SettlementType.CITY: [SETTLEMENT_PLANS[SettlementType.CITY][5]]}
        engine = TableEngine(scripted.from_faces(*faces))

        details = generate_settlement_details(SettlementType.CITY, engine, plans=plans)

        assert details.get("characteristic") == expected

    def test_major_abbey_fame(self, scripted):
        """Test a major abbey rolls its fame."""
        prng = scripted.from_faces(
            (6, 6),  # major
            (1, 6), (1, 6),
            (1, 4),
            (1, 12), (2, 12),
            (12, 20),
            (6, 6),
        )
        details = generate_settlement_details(SettlementType.ABBEY, TableEngine(prng))

        assert details == {
            "size": "major",
            "disposition": "Attack on sight",
            "garden": "Flower garden",
            "farming": "Barley (beer), Chickens (meat, eggs)",
            "fame": "Religious artifact",
        }

    def test_small_abbey_no_fame(self, scripted):
        """Test a small abbey skips fame."""
        prng = scripted.from_faces((1, 6), (1, 6), (1, 6), (1, 4), (3, 12), (3, 12), (6, 6))
        details = generate_settlement_details(SettlementType.ABBEY, TableEngine(prng))
        assert details["size"] == "small"
        assert details["farming"] == "Cotton"
        assert "fame" not in details

    @pytest.mark.parametrize("settlement_type", list(SettlementType))
    def test_field_sets(self, settlement_type):
        """Test generated fields always include the required ones and nothing else."""
        allowed = set(plan_fields(settlement_type))
        for i in range(40):
            engine = TableEngine(AleaPRNG(f"{settlement_type.value}-{i}"))
            details = generate_settlement_details(settlement_type, engine)
            assert ALWAYS_FIELDS[settlement_type] <= set(details) <= allowed
            assert all(value for value in details.values())


class TestGenerateSettlement:
    """Test full settlement generation."""

    def test_roll_type(self, scripted):
        """Test a 3 on the settlement type table gives a city."""
        engine = TableEngine(scripted.from_faces((3, 6)))
        assert roll_settlement_type(engine) == SettlementType.CITY

    def test_size_copied(self):
        """Test the size detail is also exposed as the settlement size."""
        settlement = generate_settlement(TableEngine(AleaPRNG("size")), SettlementType.VILLAGE)
        assert settlement.size in {"small", "medium", "big"}
        assert settlement.size == settlement.details["size"]

    def test_rolled_type(self):
        """Test a rolled subtype is consistent with its fields."""
        for i in range(20):
            settlement = generate_settlement(TableEngine(AleaPRNG(f"any-{i}")))
            assert set(settlement.details) <= set(plan_fields(settlement.type))
            assert settlement.name

    def test_deterministic(self):
        """Test the same seed gives the same settlement."""
        first = generate_settlement(TableEngine(AleaPRNG("repeat")))
        second = generate_settlement(TableEngine(AleaPRNG("repeat")))
        assert first == second
