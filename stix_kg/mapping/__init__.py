"""
Type Mapping Tables

Lookups that translate STIX names to the TypeDB schema.

Modules:
    entities: STIX type -> entity type (KnownType | CustomType)
    attributes: STIX property -> attribute type and value kind
"""

from stix_kg.mapping.attributes import (
    STIX_ATTRIBUTES,
    AttributeKind,
    AttributeMapping,
    stix_attributes_to_typedb,
)
from stix_kg.mapping.entities import (
    STIX_ENTITY_TYPES,
    CustomType,
    EntityMapping,
    KnownType,
    stix_entity_to_typedb,
)

__all__ = [
    "STIX_ATTRIBUTES",
    "AttributeKind",
    "AttributeMapping",
    "stix_attributes_to_typedb",
    "STIX_ENTITY_TYPES",
    "CustomType",
    "EntityMapping",
    "KnownType",
    "stix_entity_to_typedb",
]
