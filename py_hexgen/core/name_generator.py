"""
Name generation for settlements and factions.

Ordinary settlements (hamlet, village, city) are named from a rolled name
structure such as "BA" (noun + building) or "Dington" (city name + suffix).
Castles, abbeys and towers have their own naming rules. All picks go through
the injected TableEngine.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional

import structlog

from ..config.tables.names import (
    ABBEY_NAME_PREFIXES,
    CASTLE_NAME_FIRST,
    CASTLE_NAME_SECOND,
    FACTION_NAME_PATTERNS,
    FACTION_PREFIXES,
    FACTION_TYPES,
    NAME_COMPONENTS,
    NAME_STRUCTURE,
    SAINTS,
    TOWER_NAME_PATTERNS,
)
from .tables import TableEngine

logger = structlog.get_logger()

_COMPONENT_LETTER = re.compile(r"[A-H]")
_PLACEHOLDER = re.compile(r"\{(\w+)\}")

# d30 at or below this gives a "Saint-" abbey name
SAINT_NAME_THRESHOLD = 24


class SettlementNameGenerator:
    """Generates settlement, castle, abbey, tower and faction names."""

    def __init__(self, engine: TableEngine):
        self.engine = engine

    def pick_component(self, letter: str) -> str:
        """Pick one word from a name component list ("A" to "H")."""
        components = NAME_COMPONENTS.get(letter)
        if not components:
            logger.warning("Unknown name component", letter=letter)
            return ""
        return self.engine.pick(components)

    def build_name_from_structure(self, structure: str) -> str:
        """
        Build a name from a structure pattern.

        Structures made only of component letters ("BA", "BHF") become
        space separated words. Anything else ("D-by-sea", "Dington",
        "Val-D") keeps its literal text with each component letter replaced.
        """
        if structure and all(letter in NAME_COMPONENTS for letter in structure):
            return " ".join(self.pick_component(letter) for letter in structure)

        return _COMPONENT_LETTER.sub(
            lambda match: self.pick_component(match.group(0)), structure
        )

    def generate_settlement_name(self) -> str:
        """Name for a hamlet, village or city."""
        structure = self.engine.roll_value(NAME_STRUCTURE)
        return self.build_name_from_structure(structure)

    def generate_castle_name(self) -> str:
        first = self.engine.pick(CASTLE_NAME_FIRST)
        second = self.engine.pick(CASTLE_NAME_SECOND)
        return f"{first}{second}"

    def generate_abbey_name(self) -> str:
        if self.engine.roll_die(30) <= SAINT_NAME_THRESHOLD:
            return f"Saint-{self.engine.pick(SAINTS)}"
        return self.engine.pick(ABBEY_NAME_PREFIXES)

    def generate_tower_name(self) -> str:
        return self._fill_pattern(self.engine.pick(TOWER_NAME_PATTERNS))

    def generate_name_for_settlement(self, settlement_type: str) -> str:
        """Name following the rules of a settlement type."""
        generators = {
            "castle": self.generate_castle_name,
            "abbey": self.generate_abbey_name,
            "tower": self.generate_tower_name,
        }
        # Enum members hash by name, so look up by value
        key = getattr(settlement_type, "value", settlement_type)
        generate = generators.get(key)
        return generate() if generate else self.generate_settlement_name()

    def generate_name_options(self, settlement_type: str, count: int = 5) -> List[str]:
        """Up to ``count`` distinct names for a settlement type."""
        return self._unique_names(
            lambda: self.generate_name_for_settlement(settlement_type), count
        )

    def generate_faction_name(self) -> str:
        return self._fill_pattern(self.engine.pick(FACTION_NAME_PATTERNS))

    def generate_faction_name_options(self, count: int = 5) -> List[str]:
        return self._unique_names(self.generate_faction_name, count)

    def _fill_pattern(self, pattern: str) -> str:
        def replace(match: re.Match) -> str:
            key = match.group(1)
            if key == "prefix":
                return self.engine.pick(FACTION_PREFIXES)
            if key == "type":
                return self.engine.pick(FACTION_TYPES)
            return self.pick_component(key)

        return _PLACEHOLDER.sub(replace, pattern)

    def _unique_names(
        self, generate: Callable[[], str], count: int, max_attempts: Optional[int] = None
    ) -> List[str]:
        max_attempts = max_attempts or max(count * 20, 20)
        names: List[str] = []
        attempts = 0
        while len(names) < count and attempts < max_attempts:
            attempts += 1
            name = generate()
            if name not in names:
                names.append(name)

        if len(names) < count:
            logger.warning(
                "Could not generate enough distinct names",
                requested=count,
                generated=len(names),
            )
        return names
