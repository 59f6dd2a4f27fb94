"""
Feature normalization and display formatting.

The normalized record (flat details plus formatted notes), not the raw roll
tree, is what callers persist for a hex.
"""

import re
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from .features import FeatureType, GeneratedFeature, SettlementFeature

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_LETTER_SUFFIX = re.compile(r"_([a-z])$")

# Keys kept out of feature notes
_HIDDEN_NOTE_KEYS = {"name", "details"}


class NormalizedFeature(BaseModel):
    """A feature flattened for storage and display."""

    type: FeatureType = Field(description="Feature type")
    name: Optional[str] = Field(default=None, description="Display name (settlements)")
    details: Dict[str, Any] = Field(default_factory=dict, description="Flat raw fields")
    notes: Dict[str, str] = Field(
        default_factory=dict, description="Formatted label -> value pairs"
    )


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def format_label(key: str) -> str:
    """
    Format a key or enumeration value for display.

    snake_case and camelCase become title-cased words, a trailing single
    letter becomes a parenthesized suffix and "npc" becomes "NPC":
    ``small_structure`` -> ``Small Structure``, ``flora_a`` -> ``Flora (A)``,
    ``notable_npc`` -> ``Notable NPC``. Text that already contains spaces
    only gets its first letter capitalized.
    """
    if " " in key:
        return _capitalize(key)

    suffix = ""
    match = _LETTER_SUFFIX.search(key)
    if match:
        suffix = f" ({match.group(1).upper()})"
        key = key[: match.start()]

    words = _CAMEL_BOUNDARY.sub("_", key).split("_")
    formatted = [
        "NPC" if word.lower() == "npc" else _capitalize(word) for word in words if word
    ]
    return " ".join(formatted) + suffix


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, str):
        return format_label(value)
    return str(value)


def _is_displayable(value: Any) -> bool:
    if value is None or value == "":
        return False
    return not isinstance(value, (dict, list, tuple, set, BaseModel))


def normalize_feature_data(feature: GeneratedFeature) -> Tuple[Dict[str, Any], Optional[str]]:
    """
    Flatten a feature's data into a details map.

    Settlements merge type and name into their details and return the name
    separately; other features use their data fields directly.

    Returns:
        Tuple of (details, feature name or None)
    """
    if isinstance(feature, SettlementFeature):
        settlement = feature.data
        details: Dict[str, Any] = {"type": settlement.type.value, "name": settlement.name}
        details.update(settlement.details)
        return details, settlement.name

    return feature.data.model_dump(mode="json", exclude_none=True), None


def details_to_feature_notes(details: Mapping[str, Any]) -> Dict[str, str]:
    """Formatted notes for every displayable detail except the name."""
    return {
        format_label(key): format_value(value)
        for key, value in details.items()
        if key not in _HIDDEN_NOTE_KEYS and _is_displayable(value)
    }


def format_generated_details(details: Mapping[str, Any]) -> str:
    """One ``Label: Value`` line per displayable detail."""
    return "\n".join(
        f"{format_label(key)}: {format_value(value)}"
        for key, value in details.items()
        if key != "details" and _is_displayable(value)
    )


def normalize_feature(feature: GeneratedFeature) -> NormalizedFeature:
    """Normalize a generated feature into its stored form."""
    details, name = normalize_feature_data(feature)
    return NormalizedFeature(
        type=FeatureType(feature.type),
        name=name,
        details=details,
        notes=details_to_feature_notes(details),
    )
