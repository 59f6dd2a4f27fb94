"""
Dice rolling and rollable table resolution.

This module provides:
- Dice formula parsing ("NdS+M")
- TableEngine: all dice, checks and picks drawn from one injected PRNG
- Weighted range lookup with optional recursive subtable resolution
- TableRegistry: an explicit table lookup passed to subtable resolution

Malformed dice formulas are configuration defects and raise
DiceFormulaError. Rolls that land outside every entry, and dangling
subtable references, are authoring gaps: they produce a sentinel
RollResult (resolved=False, value="Unknown") and a warning, never an
exception.
"""

from __future__ import annotations

import re
from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

import structlog
from pydantic import BaseModel, Field, model_validator

logger = structlog.get_logger()

T = TypeVar("T")

UNKNOWN_VALUE = "Unknown"

_DICE_PATTERN = re.compile(r"^(\d+)d(\d+)([+-]\d+)?$", re.IGNORECASE)


class RandomSource(Protocol):
    """Anything exposing ``random() -> float`` in [0, 1)."""

    def random(self) -> float: ...


class DiceFormulaError(ValueError):
    """Raised when a dice formula does not match the NdS+M grammar."""


class DiceFormula(NamedTuple):
    count: int
    sides: int
    modifier: int

    @property
    def minimum(self) -> int:
        return self.count + self.modifier

    @property
    def maximum(self) -> int:
        return self.count * self.sides + self.modifier


def parse_dice_formula(formula: str) -> DiceFormula:
    """Parse a dice formula like "1d6", "2d10" or "1d3+1"."""
    match = _DICE_PATTERN.match(formula)
    if not match:
        raise DiceFormulaError(f"Invalid dice formula: {formula!r}")

    count = int(match.group(1))
    sides = int(match.group(2))
    modifier = int(match.group(3)) if match.group(3) else 0

    if count < 1 or sides < 1:
        raise DiceFormulaError(
            f"Dice formula needs at least one die with one side: {formula!r}"
        )
    return DiceFormula(count, sides, modifier)


class TableEntry(BaseModel):
    """A single inclusive roll range in a rollable table."""

    min: int = Field(description="Lowest roll matching this entry")
    max: int = Field(description="Highest roll matching this entry")
    value: str = Field(description="Outcome value")
    sub_table: Optional[str] = Field(
        default=None, description="Id of a table rolled for nested results"
    )
    sub_table_count: int = Field(
        default=1, ge=1, description="How many times to roll on the subtable"
    )

    @model_validator(mode="after")
    def _check_range(self) -> "TableEntry":
        if self.min > self.max:
            raise ValueError(f"Entry range is inverted: {self.min} > {self.max}")
        return self

    def matches(self, roll: int) -> bool:
        return self.min <= roll <= self.max


class RollableTable(BaseModel):
    """A dice-formula keyed set of ranges mapped to outcome values."""

    id: str = Field(description="Unique table identifier")
    name: str = Field(default="", description="Display name")
    category: str = Field(default="", description="Table group")
    description: Optional[str] = Field(default=None)
    dice_formula: str = Field(description="Dice formula, e.g. 1d6 or 2d6")
    entries: List[TableEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_formula(self) -> "RollableTable":
        parse_dice_formula(self.dice_formula)
        return self

    @property
    def formula(self) -> DiceFormula:
        return parse_dice_formula(self.dice_formula)


class RollResult(BaseModel):
    """Result of a table roll; a tree when subtables are involved."""

    table_id: str
    roll: int
    value: str
    resolved: bool = True
    sub_results: Optional[List["RollResult"]] = None

    def has_gaps(self) -> bool:
        """True if this roll or any nested roll was unresolved."""
        if not self.resolved:
            return True
        return any(sub.has_gaps() for sub in self.sub_results or [])


def numbered_entries(values: Sequence[str], start_at: int = 1) -> List[TableEntry]:
    """One single-number entry per value, counting up from ``start_at``."""
    return [
        TableEntry(min=start_at + i, max=start_at + i, value=value)
        for i, value in enumerate(values)
    ]


def ranged_entries(*ranges: tuple) -> List[TableEntry]:
    """Entries from ``(min, max, value)`` tuples."""
    return [TableEntry(min=lo, max=hi, value=value) for lo, hi, value in ranges]


def find_entry(table: RollableTable, roll: int) -> Optional[TableEntry]:
    """Find the entry whose range contains ``roll``."""
    for entry in table.entries:
        if entry.matches(roll):
            return entry
    return None


def find_coverage_gaps(table: RollableTable) -> List[int]:
    """Roll totals the table's formula can produce that no entry covers."""
    formula = table.formula
    return [
        roll
        for roll in range(formula.minimum, formula.maximum + 1)
        if find_entry(table, roll) is None
    ]


class TableRegistry(Mapping[str, RollableTable]):
    """Explicit id -> table lookup used for subtable resolution."""

    def __init__(self, tables: Optional[Iterable[RollableTable]] = None):
        self._tables: Dict[str, RollableTable] = {}
        for table in tables or []:
            self.register(table)

    @classmethod
    def from_tables(cls, *tables: RollableTable) -> "TableRegistry":
        return cls(tables)

    def register(self, table: RollableTable) -> None:
        self._tables[table.id] = table

    def __getitem__(self, table_id: str) -> RollableTable:
        return self._tables[table_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)


class TableEngine:
    """Dice and table resolution over a single injected PRNG."""

    def __init__(self, prng: RandomSource):
        self.prng = prng

    # Dice

    def roll_die(self, sides: int) -> int:
        """Uniform integer in [1, sides]."""
        return int(self.prng.random() * sides) + 1

    def roll_dice(self, formula: str) -> int:
        """Roll a formula such as "2d6+1"."""
        count, sides, modifier = parse_dice_formula(formula)
        total = modifier
        for _ in range(count):
            total += self.roll_die(sides)
        return total

    def percentage_check(self, threshold: int) -> bool:
        """1d100 <= threshold."""
        return self.roll_die(100) <= threshold

    def chance_in(self, n: int, successes: int = 1) -> bool:
        """An X-in-N check: 1dN <= successes."""
        return self.roll_die(n) <= successes

    def one_in_six(self) -> bool:
        return self.chance_in(6)

    def pick(self, items: Sequence[T]) -> T:
        """Uniformly pick one item from a non-empty sequence."""
        if not items:
            raise IndexError("Cannot pick from an empty sequence")
        return items[self.roll_die(len(items)) - 1]

    def pick_n(self, items: Sequence[T], n: int) -> List[T]:
        """Pick up to ``n`` distinct items (without replacement)."""
        pool = list(items)
        picked: List[T] = []
        while pool and len(picked) < n:
            picked.append(pool.pop(self.roll_die(len(pool)) - 1))
        return picked

    # Tables

    def roll_on_table(self, table: RollableTable) -> RollResult:
        """Roll the table's formula and return the matching entry's value."""
        roll = self.roll_dice(table.dice_formula)
        entry = find_entry(table, roll)

        if entry is None:
            logger.warning("Unresolved table roll", table_id=table.id, roll=roll)
            return RollResult(
                table_id=table.id, roll=roll, value=UNKNOWN_VALUE, resolved=False
            )

        return RollResult(table_id=table.id, roll=roll, value=entry.value)

    def roll_value(self, table: RollableTable) -> str:
        return self.roll_on_table(table).value

    def roll_on_table_with_subtables(
        self, table: RollableTable, registry: Mapping[str, RollableTable]
    ) -> RollResult:
        """
        Roll on a table, resolving subtable references recursively.

        Args:
            table: The table to roll on
            registry: Tables available for subtable lookups

        Returns:
            RollResult whose sub_results hold the nested rolls
        """
        result = self.roll_on_table(table)
        if not result.resolved:
            return result

        entry = find_entry(table, result.roll)
        if entry is None or not entry.sub_table:
            return result

        sub_table = registry.get(entry.sub_table)
        if sub_table is None:
            logger.warning(
                "Subtable not found", table_id=table.id, sub_table=entry.sub_table
            )
            result.sub_results = [
                RollResult(
                    table_id=entry.sub_table,
                    roll=0,
                    value=UNKNOWN_VALUE,
                    resolved=False,
                )
            ]
            return result

        result.sub_results = [
            self.roll_on_table_with_subtables(sub_table, registry)
            for _ in range(entry.sub_table_count)
        ]
        return result


def flatten_roll_result(result: RollResult) -> str:
    """Flatten a roll tree into one string ("[sub]" placeholder or "value: a, b")."""
    output = result.value
    if result.sub_results:
        sub_values = ", ".join(flatten_roll_result(sub) for sub in result.sub_results)
        if "[sub]" in output:
            output = output.replace("[sub]", sub_values, 1)
        else:
            output = f"{output}: {sub_values}"
    return output
