"""
Entity & Relation Materialization

Main batch pass: one entity insert per remaining STIX object, wrapped in
a match-then-insert with a creation relation when the object names its
creator, plus one object-marking relation per marked object.

Objects handled by the reference and statement-marking passes must be
passed in ``excluded_ids``; the creators matched here are expected to
exist in the database before these statements run.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping

from stix_kg.ingestion.generation.attributes import serialize_attributes
from stix_kg.ingestion.generation.markings import materialize_marking_relations
from stix_kg.ingestion.generation.statements import (
    QuerySet,
    StatementBuilder,
    has,
    isa,
    quote,
)
from stix_kg.mapping import AttributeMapping, CustomType, stix_entity_to_typedb
from stix_kg.types.objects import StixObject
from stix_kg.types.results import MainResult, Query

logger = logging.getLogger(__name__)

CUSTOM_ENTITY_TYPE = "custom-object"
IDENTITY_TYPE = "identity"
RELATIONSHIP_TYPE = "relationship"


def _identity_type(stix_object: StixObject, default: str) -> str:
    # identity objects are stored as their concrete class (organization, individual, ...)
    return stix_object.identity_class or default


def entity_pattern(
    variable: str,
    stix_object: StixObject,
    *,
    use_target_type: bool = False,
    attributes: Mapping[str, AttributeMapping] | None = None,
) -> str:
    """
    Build the ``$var isa <type>, <attributes>`` pattern for an object.

    Custom (unmapped) types become a generic custom-object carrying the
    original STIX type name. Identities use their identity_class.

    Args:
        variable: TypeQL variable name, including the ``$``
        stix_object: Object to insert
        use_target_type: Use the mapped schema type name instead of the
            STIX type for known, non-identity types
        attributes: Attribute table (defaults to the built-in STIX table)
    """
    mapping = stix_entity_to_typedb(stix_object.type)
    attribute_clause = serialize_attributes(stix_object, attributes)

    if isinstance(mapping, CustomType):
        logger.debug(f"Storing {stix_object.id} as {CUSTOM_ENTITY_TYPE} ({mapping.original_type})")
        return isa(
            variable,
            CUSTOM_ENTITY_TYPE,
            has("stix-type", quote(mapping.original_type)),
            attribute_clause,
        )

    if mapping.target_type == IDENTITY_TYPE:
        entity_type = _identity_type(stix_object, mapping.target_type)
    elif use_target_type:
        entity_type = mapping.target_type
    else:
        entity_type = stix_object.type

    return isa(variable, entity_type, attribute_clause)


def generate_entity_query(
    stix_object: StixObject,
    attributes: Mapping[str, AttributeMapping] | None = None,
) -> Query:
    """
    Insert statement for one object of the main pass.

    When the object has a creator, the creator is matched by stix-id
    (typed as ``thing`` to accept any entity) and a creation relation is
    inserted alongside the entity.
    """
    builder = StatementBuilder()

    if stix_object.created_by_ref:
        builder.match(isa("$creator", "thing", has("stix-id", quote(stix_object.created_by_ref))))
        builder.insert(entity_pattern("$stix", stix_object, attributes=attributes))
        builder.insert("(created: $stix, creator: $creator) isa creation")
    else:
        builder.insert(entity_pattern("$stix", stix_object, attributes=attributes))

    return builder.build()


def materialize_main(
    objects: Iterable[StixObject],
    excluded_ids: Collection[str] = (),
    *,
    ignore_deprecated: bool = False,
    attributes: Mapping[str, AttributeMapping] | None = None,
) -> MainResult:
    """
    Generate entity and marking-relation inserts for the main batch.

    Args:
        objects: Full batch of STIX objects
        excluded_ids: Ids already inserted by the reference/marking passes
        ignore_deprecated: Skip objects with a truthy x_mitre_deprecated
        attributes: Attribute table (defaults to the built-in STIX table)

    Returns:
        MainResult with deduplicated statements and skip counts
    """
    excluded = set(excluded_ids)
    entity_queries = QuerySet()
    marked_objects: list[StixObject] = []
    result = MainResult()

    for stix_object in objects:
        if ignore_deprecated and stix_object.is_deprecated:
            result.skipped_deprecated += 1
            continue

        if stix_object.type == RELATIONSHIP_TYPE:
            result.skipped_relationships += 1
            continue

        if stix_object.id in excluded:
            result.skipped_excluded += 1
            continue

        if stix_object.object_marking_refs:
            marked_objects.append(stix_object)

        entity_queries.add(generate_entity_query(stix_object, attributes))

    result.entity_queries = entity_queries.to_list()
    result.marking_relation_queries = materialize_marking_relations(marked_objects)

    logger.info(f"Skipped {result.skipped_deprecated} deprecated objects")
    logger.info(f"Generated {len(result.entity_queries)} insert queries for STIXObjects")
    logger.info(
        f"Generated {len(result.marking_relation_queries)} insert queries for marking relations"
    )
    return result
