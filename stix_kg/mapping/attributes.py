"""
STIX Attribute Mapping

Maps STIX property names to TypeDB attribute types and value kinds.
Properties missing from the table are not serialized.

Table order is the order attribute clauses appear in statements.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class AttributeKind(str, Enum):
    """How a STIX value is rendered in an attribute clause."""

    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"


class AttributeMapping(BaseModel):
    """Target attribute type and value kind for one STIX property."""

    model_config = ConfigDict(frozen=True)

    target: str
    kind: AttributeKind


def _string(target: str) -> AttributeMapping:
    return AttributeMapping(target=target, kind=AttributeKind.STRING)


def _boolean(target: str) -> AttributeMapping:
    return AttributeMapping(target=target, kind=AttributeKind.BOOLEAN)


def _list(target: str) -> AttributeMapping:
    return AttributeMapping(target=target, kind=AttributeKind.LIST)


_STIX_ATTRIBUTES: dict[str, AttributeMapping] = {
    # Common properties
    "id": _string("stix-id"),
    "spec_version": _string("spec-version"),
    "created": _string("created"),
    "modified": _string("modified"),
    "revoked": _boolean("revoked"),
    "labels": _list("label"),
    "lang": _string("langs"),
    # Descriptive properties
    "name": _string("name"),
    "description": _string("description"),
    "aliases": _list("alias"),
    "first_seen": _string("first-seen"),
    "last_seen": _string("last-seen"),
    "objective": _string("objective"),
    "goals": _list("goals"),
    "roles": _list("roles"),
    "sectors": _list("sector"),
    "contact_information": _string("contact-information"),
    "sophistication": _string("sophistication"),
    "resource_level": _string("resource-level"),
    "primary_motivation": _string("primary-motivation"),
    "secondary_motivations": _list("secondary-motivations"),
    # Indicators
    "pattern": _string("pattern"),
    "pattern_type": _string("pattern-type"),
    "pattern_version": _string("pattern-version"),
    "valid_from": _string("valid-from"),
    "valid_until": _string("valid-until"),
    "indicator_types": _list("indicator-type"),
    # Malware and tools
    "malware_types": _list("malware-types"),
    "is_family": _boolean("is-family"),
    "architecture_execution_envs": _list("architecture-execution-envs"),
    "implementation_languages": _list("implementation-languages"),
    "tool_types": _list("tool-types"),
    "tool_version": _string("tool-version"),
    # Actors and infrastructure
    "threat_actor_types": _list("threat-actor-types"),
    "infrastructure_types": _list("infrastructure-types"),
    # Locations
    "region": _string("region"),
    "country": _string("country"),
    "administrative_area": _string("administrative-area"),
    "city": _string("city"),
    "street_address": _string("street-address"),
    "postal_code": _string("postal-code"),
    # Reports, notes and opinions
    "published": _string("published"),
    "report_types": _list("report-types"),
    "context": _string("context"),
    "abstract": _string("abstract"),
    "content": _string("content"),
    "authors": _list("authors"),
    "explanation": _string("explanation"),
    "opinion": _string("opinion"),
    # MITRE ATT&CK extensions
    "x_mitre_version": _string("x-mitre-version"),
    "x_mitre_platforms": _list("x-mitre-platforms"),
    "x_mitre_domains": _list("x-mitre-domains"),
    "x_mitre_is_subtechnique": _boolean("x-mitre-is-subtechnique"),
    "x_mitre_detection": _string("x-mitre-detection"),
    "x_mitre_shortname": _string("x-mitre-shortname"),
}

STIX_ATTRIBUTES: Mapping[str, AttributeMapping] = MappingProxyType(_STIX_ATTRIBUTES)


def stix_attributes_to_typedb() -> Mapping[str, AttributeMapping]:
    """Return the read-only STIX property -> TypeDB attribute table."""
    return STIX_ATTRIBUTES
