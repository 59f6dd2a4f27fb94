"""
Settlement generation.

Every settlement subtype has a declarative generation plan: an ordered list
of FieldRule entries saying which table fills which detail field and under
which gate (always, a 1-in-6 chance, or only when an earlier field holds a
given value). One routine, generate_settlement_details, interprets any plan.

Process:
1. Roll (or take) the settlement subtype
2. Generate a name with the subtype's naming rules
3. Walk the subtype's plan, rolling each gated field in order
"""

from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config.tables.features import SETTLEMENT_TYPE
from ..config.tables.settlements import SETTLEMENT_TABLES
from .name_generator import SettlementNameGenerator
from .tables import RollableTable, TableEngine

logger = structlog.get_logger()

MULTI_VALUE_SEPARATOR = ", "


class SettlementType(str, Enum):
    """Settlement subtypes."""

    HAMLET = "hamlet"
    VILLAGE = "village"
    CITY = "city"
    CASTLE = "castle"
    TOWER = "tower"
    ABBEY = "abbey"


class Gate(str, Enum):
    """When a field is rolled."""

    ALWAYS = "always"
    ONE_IN_SIX = "one_in_six"
    WHEN = "when"  # Only if an earlier field holds when_value


class FieldRule(BaseModel):
    """One detail field of a settlement generation plan."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Detail key written by this rule")
    table: Optional[str] = Field(
        default=None, description="Subtype table rolled for the value"
    )
    formula: Optional[str] = Field(
        default=None, description="Dice formula rolled for the value instead of a table"
    )
    gate: Gate = Field(default=Gate.ALWAYS)
    rolls: int = Field(default=1, ge=1, description="Fixed number of table rolls")
    dice: Optional[str] = Field(
        default=None, description="Dice formula for the number of table rolls"
    )
    discard: Tuple[str, ...] = Field(
        default=(), description="Rolled values dropped from the result"
    )
    when_field: Optional[str] = Field(default=None)
    when_value: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def _check_rule(self) -> "FieldRule":
        if (self.table is None) == (self.formula is None):
            raise ValueError(f"Field {self.field!r} needs exactly one of table or formula")
        if self.gate == Gate.WHEN and not (self.when_field and self.when_value):
            raise ValueError(f"Field {self.field!r} is gated on WHEN without a condition")
        return self


STONE_WALLS = "Stone walls and towers"

SETTLEMENT_PLANS: Dict[SettlementType, List[FieldRule]] = {
    SettlementType.HAMLET: [
        FieldRule(field="building", table="building"),
        FieldRule(field="layout", table="layout"),
        FieldRule(field="disposition", table="disposition"),
        FieldRule(field="secret", table="secret", gate=Gate.ONE_IN_SIX),
    ],
    SettlementType.VILLAGE: [
        FieldRule(field="size", table="size"),
        FieldRule(field="layout", table="layout"),
        FieldRule(field="disposition", table="disposition"),
        FieldRule(field="ruler", table="ruler"),
        FieldRule(field="occupation", table="occupation", gate=Gate.ONE_IN_SIX),
        FieldRule(field="special_location", table="special_location"),
        FieldRule(field="defense", table="defense"),
        FieldRule(field="notable_npc", table="notable_npc"),
        FieldRule(field="secret", table="secret", gate=Gate.ONE_IN_SIX),
        FieldRule(field="event", table="event", gate=Gate.ONE_IN_SIX),
    ],
    SettlementType.CITY: [
        FieldRule(field="size", table="size"),
        FieldRule(field="disposition", table="disposition"),
        FieldRule(field="ruler", table="ruler"),
        FieldRule(field="appearance", table="appearance"),
        FieldRule(field="occupation", table="occupation"),
        FieldRule(
            field="characteristic",
            table="characteristic",
            rolls=2,
            discard=("Nothing special",),
        ),
        FieldRule(field="special_location", table="special_location"),
        FieldRule(field="notable_npc", table="notable_npc"),
        FieldRule(field="event", table="event", gate=Gate.ONE_IN_SIX),
    ],
    SettlementType.CASTLE: [
        FieldRule(field="condition", table="condition"),
        FieldRule(field="keep_shape", table="keep_shape"),
        FieldRule(field="disposition", table="disposition"),
        FieldRule(field="keep_levels", formula="1d3+1"),
        FieldRule(field="defense", table="defensive_structure", dice="1d4"),
        FieldRule(
            field="wall_shape",
            table="wall_shape",
            gate=Gate.WHEN,
            when_field="defense",
            when_value=STONE_WALLS,
        ),
        FieldRule(field="event", table="event", gate=Gate.ONE_IN_SIX),
    ],
    SettlementType.TOWER: [
        FieldRule(field="levels", table="levels"),
        FieldRule(field="material", table="material"),
        FieldRule(field="shape", table="shape"),
        FieldRule(field="top_level", table="top_level"),
        FieldRule(field="disposition", table="disposition"),
    ],
    SettlementType.ABBEY: [
        FieldRule(field="size", table="size"),
        FieldRule(field="disposition", table="disposition"),
        FieldRule(field="garden", table="garden"),
        FieldRule(field="farming", table="farming", rolls=2),
        FieldRule(
            field="fame",
            table="fame",
            gate=Gate.WHEN,
            when_field="size",
            when_value="major",
        ),
        FieldRule(field="event", table="event", gate=Gate.ONE_IN_SIX),
    ],
}


class SettlementData(BaseModel):
    """A generated settlement."""

    type: SettlementType = Field(description="Settlement subtype")
    name: str = Field(description="Generated name")
    size: Optional[str] = Field(default=None, description="Size, when the subtype rolls one")
    details: Dict[str, str] = Field(default_factory=dict, description="Rolled fields")


def plan_fields(settlement_type: SettlementType) -> List[str]:
    """Detail fields a subtype can produce, in generation order."""
    return [rule.field for rule in SETTLEMENT_PLANS[SettlementType(settlement_type)]]


def _gate_passes(
    rule: FieldRule, engine: TableEngine, rolled: Mapping[str, List[str]]
) -> bool:
    if rule.gate == Gate.ONE_IN_SIX:
        return engine.one_in_six()
    if rule.gate == Gate.WHEN:
        return rule.when_value in rolled.get(rule.when_field, [])
    return True


def _roll_rule(
    rule: FieldRule, engine: TableEngine, tables: Mapping[str, RollableTable]
) -> List[str]:
    if rule.formula is not None:
        return [str(engine.roll_dice(rule.formula))]

    table = tables[rule.table]
    count = engine.roll_dice(rule.dice) if rule.dice else rule.rolls
    values: List[str] = []
    for _ in range(count):
        value = engine.roll_value(table)
        if value not in values and value not in rule.discard:
            values.append(value)
    return values


def generate_settlement_details(
    settlement_type: SettlementType,
    engine: TableEngine,
    plans: Mapping[SettlementType, List[FieldRule]] = SETTLEMENT_PLANS,
    tables: Mapping[str, Mapping[str, RollableTable]] = SETTLEMENT_TABLES,
) -> Dict[str, str]:
    """
    Roll the detail fields of one settlement.

    Args:
        settlement_type: Subtype whose plan is interpreted
        engine: Table engine holding the PRNG
        plans: Subtype -> ordered field rules
        tables: Subtype -> table name -> table

    Returns:
        Flat field -> value map. Multi-roll fields are de-duplicated and
        joined with ", "; a field left with no values is omitted.
    """
    settlement_type = SettlementType(settlement_type)
    subtype_tables = tables[settlement_type.value]
    rolled: Dict[str, List[str]] = {}
    details: Dict[str, str] = {}

    for rule in plans[settlement_type]:
        if not _gate_passes(rule, engine, rolled):
            continue
        values = _roll_rule(rule, engine, subtype_tables)
        rolled[rule.field] = values
        if values:
            details[rule.field] = MULTI_VALUE_SEPARATOR.join(values)

    return details


def roll_settlement_type(engine: TableEngine) -> SettlementType:
    value = engine.roll_value(SETTLEMENT_TYPE)
    try:
        return SettlementType(value)
    except ValueError:
        logger.warning("Settlement type roll did not resolve", value=value)
        return SettlementType.HAMLET


def generate_settlement(
    engine: TableEngine,
    settlement_type: Optional[SettlementType] = None,
    name_generator: Optional[SettlementNameGenerator] = None,
) -> SettlementData:
    """Generate a complete settlement: subtype, name and detail fields."""
    settlement_type = (
        SettlementType(settlement_type) if settlement_type else roll_settlement_type(engine)
    )
    name_generator = name_generator or SettlementNameGenerator(engine)

    name = name_generator.generate_name_for_settlement(settlement_type)
    details = generate_settlement_details(settlement_type, engine)

    return SettlementData(
        type=settlement_type,
        name=name,
        size=details.get("size"),
        details=details,
    )
