"""
STIX Entity Type Mapping

Resolves STIX type names to TypeDB entity types.

The lookup is total: a STIX type with no schema equivalent resolves to
CustomType and is stored as a generic custom-object that keeps its
original type name as an attribute.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

# STIX type -> TypeDB entity type
STIX_ENTITY_TYPES: dict[str, str] = {
    "attack-pattern": "attack-pattern",
    "campaign": "campaign",
    "course-of-action": "course-of-action",
    "grouping": "grouping",
    "identity": "identity",
    "incident": "incident",
    "indicator": "indicator",
    "infrastructure": "infrastructure",
    "intrusion-set": "intrusion-set",
    "location": "location",
    "malware": "malware",
    "malware-analysis": "malware-analysis",
    "note": "note",
    "observed-data": "observed-data",
    "opinion": "opinion",
    "report": "report",
    "threat-actor": "threat-actor",
    "tool": "tool",
    "vulnerability": "vulnerability",
    "marking-definition": "marking-definition",
}


class KnownType(BaseModel):
    """A STIX type with a direct schema equivalent."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["known"] = "known"
    target_type: str


class CustomType(BaseModel):
    """A STIX type stored generically, keeping its original name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    original_type: str


EntityMapping = KnownType | CustomType


def stix_entity_to_typedb(stix_type: str) -> EntityMapping:
    """
    Map a STIX type name to its TypeDB entity type.

    Args:
        stix_type: STIX type discriminator (e.g. "malware", "x-mitre-tactic")

    Returns:
        KnownType when the schema has the type, CustomType otherwise
    """
    target = STIX_ENTITY_TYPES.get(stix_type)
    if target is None:
        return CustomType(original_type=stix_type)
    return KnownType(target_type=target)
