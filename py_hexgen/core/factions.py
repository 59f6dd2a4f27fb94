"""
Faction generation from settlements.

Cities and castles control a large domain (their hex and its six
neighbors), towers and abbeys only their own hex. Hamlets and villages form
no faction. Relationships between factions are rolled on a 2d6 table and
stored on both factions with the same status.
"""

import uuid
from collections import defaultdict
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import structlog
from pydantic import BaseModel, Field

from ..config.tables.features import FACTION_RELATIONSHIP
from .hex_geometry import AxialCoord, get_neighbors
from .settlements import SettlementType
from .tables import TableEngine

logger = structlog.get_logger()

FACTION_COLORS = [
    "#e94560", "#4ade80", "#60a5fa", "#fbbf24", "#a78bfa",
    "#f472b6", "#34d399", "#38bdf8", "#fb923c", "#c084fc",
    "#f87171", "#22d3d3", "#818cf8", "#facc15", "#f97316",
]


class RelationshipStatus(str, Enum):
    """Relationship between two factions, from worst to best."""

    OPEN_WAR = "open_war"
    HOSTILITY = "hostility"
    INDIFFERENCE = "indifference"
    PEACE_TRADE = "peace_trade"
    ALLIANCE = "alliance"

    @property
    def rank(self) -> int:
        return RELATIONSHIP_SCALE.index(self)


RELATIONSHIP_SCALE = list(RelationshipStatus)


class DomainSize(str, Enum):
    LARGE = "large"
    SMALL = "small"
    NONE = "none"


class DomainInfo(BaseModel):
    """Hexes controlled from a settlement."""

    center: AxialCoord = Field(description="Settlement hex")
    hexes: List[AxialCoord] = Field(description="Controlled hexes, center first")
    size: DomainSize
    settlement_type: Optional[SettlementType] = None


class Faction(BaseModel):
    """A political faction founded by a settlement."""

    id: str = Field(description="Unique faction identifier")
    name: str = Field(description="Faction name")
    color: str = Field(description="Display color")
    source_coord: AxialCoord = Field(description="Hex of the founding settlement")
    domain_hexes: List[AxialCoord] = Field(default_factory=list)
    relationships: Dict[str, RelationshipStatus] = Field(
        default_factory=dict, description="Other faction id -> relationship"
    )

    @property
    def domain(self) -> DomainInfo:
        return DomainInfo(
            center=self.source_coord,
            hexes=self.domain_hexes,
            size=DomainSize.LARGE if len(self.domain_hexes) > 1 else DomainSize.SMALL,
        )


# Domains


def get_domain_size(settlement_type: SettlementType) -> DomainSize:
    settlement_type = SettlementType(settlement_type)
    if settlement_type in (SettlementType.CITY, SettlementType.CASTLE):
        return DomainSize.LARGE
    if settlement_type in (SettlementType.TOWER, SettlementType.ABBEY):
        return DomainSize.SMALL
    return DomainSize.NONE


def generate_domain_hexes(
    center: AxialCoord, settlement_type: SettlementType
) -> List[AxialCoord]:
    """Hexes of a settlement's domain; empty for hamlets and villages."""
    center = AxialCoord(*center)
    size = get_domain_size(settlement_type)
    if size == DomainSize.NONE:
        return []
    if size == DomainSize.SMALL:
        return [center]
    return [center] + get_neighbors(center)


def create_domain(
    center: AxialCoord, settlement_type: SettlementType
) -> Optional[DomainInfo]:
    size = get_domain_size(settlement_type)
    if size == DomainSize.NONE:
        return None
    return DomainInfo(
        center=AxialCoord(*center),
        hexes=generate_domain_hexes(center, settlement_type),
        size=size,
        settlement_type=SettlementType(settlement_type),
    )


def find_contested_hexes(domain_a: DomainInfo, domain_b: DomainInfo) -> List[AxialCoord]:
    """Hexes claimed by both domains, in domain_b order."""
    claimed = set(domain_a.hexes)
    return [coord for coord in domain_b.hexes if coord in claimed]


def domains_are_neighbors(domain_a: DomainInfo, domain_b: DomainInfo) -> bool:
    """True if the domains overlap or any of their hexes touch."""
    if find_contested_hexes(domain_a, domain_b):
        return True
    other = set(domain_b.hexes)
    return any(
        neighbor in other
        for coord in domain_a.hexes
        for neighbor in get_neighbors(coord)
    )


def analyze_contested_hexes(factions: Sequence[Faction]) -> Dict[AxialCoord, List[str]]:
    """Hexes claimed by more than one faction -> ids of the claiming factions."""
    claims: Dict[AxialCoord, List[str]] = defaultdict(list)
    for faction in factions:
        for coord in faction.domain_hexes:
            claims[coord].append(faction.id)
    return {coord: ids for coord, ids in claims.items() if len(ids) > 1}


# Generation


class FactionGenerator:
    """Creates factions and rolls their relationships through a TableEngine."""

    def __init__(self, engine: TableEngine):
        self.engine = engine

    def roll_relationship(self) -> RelationshipStatus:
        value = self.engine.roll_value(FACTION_RELATIONSHIP)
        try:
            return RelationshipStatus(value)
        except ValueError:
            logger.warning("Relationship roll did not resolve", value=value)
            return RelationshipStatus.INDIFFERENCE

    def check_same_faction(self) -> bool:
        """3-in-6 chance that overlapping domains belong to the same faction."""
        return self.engine.chance_in(6, successes=3)

    def generate_faction_id(self) -> str:
        """Faction id drawn from the engine's PRNG, so seeded runs repeat."""
        bits = 0
        for _ in range(4):
            bits = (bits << 32) | int(self.engine.prng.random() * 0x100000000)
        return f"faction-{uuid.UUID(int=bits, version=4)}"

    def pick_color(self) -> str:
        return self.engine.pick(FACTION_COLORS)

    def create_faction_from_settlement(
        self,
        name: str,
        settlement_type: SettlementType,
        coord: AxialCoord,
        color: Optional[str] = None,
    ) -> Optional[Faction]:
        """
        Create a faction from a settlement.

        Args:
            name: Settlement name, used as the faction name
            settlement_type: Settlement subtype; decides the domain
            coord: Settlement hex
            color: Display color; picked from the palette when omitted

        Returns:
            The new faction, or None for hamlets and villages
        """
        domain = create_domain(coord, settlement_type)
        if domain is None:
            return None

        return Faction(
            id=self.generate_faction_id(),
            name=name,
            color=color or self.pick_color(),
            source_coord=domain.center,
            domain_hexes=domain.hexes,
        )

    def generate_faction_relationships(
        self,
        new_faction: Faction,
        existing_factions: Sequence[Faction],
        neighbors_only: bool = False,
    ) -> Tuple[Faction, List[Faction]]:
        """
        Roll relationships between a new faction and existing ones.

        Inputs are not modified. Each rolled status is written into both
        the new faction and the existing faction.

        Args:
            new_faction: The faction being added
            existing_factions: Factions already on the map
            neighbors_only: Only link factions whose domains touch or overlap

        Returns:
            Tuple of (updated new faction, updated existing factions in input order)
        """
        updated_new = new_faction.model_copy(deep=True)
        updated_existing = []

        for existing in existing_factions:
            updated = existing.model_copy(deep=True)
            updated_existing.append(updated)

            if existing.id == new_faction.id:
                continue
            if neighbors_only and not domains_are_neighbors(
                new_faction.domain, existing.domain
            ):
                continue

            status = self.roll_relationship()
            updated_new.relationships[existing.id] = status
            updated.relationships[new_faction.id] = status

        logger.debug(
            "Generated faction relationships",
            faction_id=new_faction.id,
            relationships=len(updated_new.relationships),
        )
        return updated_new, updated_existing
