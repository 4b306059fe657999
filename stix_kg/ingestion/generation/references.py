"""
Reference Resolution

Finds the objects other objects name as their creator (created_by_ref)
and inserts them ahead of the main batch. Only this one hop is resolved;
a creator that itself has a creator is not ordered any further.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from stix_kg.ingestion.generation.entities import entity_pattern
from stix_kg.ingestion.generation.statements import QuerySet, StatementBuilder
from stix_kg.mapping import AttributeMapping
from stix_kg.types.objects import StixObject
from stix_kg.types.results import Query, ReferenceResult

logger = logging.getLogger(__name__)


def resolve_references(objects: Iterable[StixObject]) -> set[str]:
    """Distinct ids that appear as some object's created_by_ref."""
    referenced_ids = {o.created_by_ref for o in objects if o.created_by_ref}
    logger.info(f"Found {len(referenced_ids)} referenced STIX object ids")
    return referenced_ids


def referenced_entity_query(
    stix_object: StixObject,
    attributes: Mapping[str, AttributeMapping] | None = None,
) -> Query:
    """Standalone insert (no relations) for a referenced object."""
    pattern = entity_pattern("$x", stix_object, use_target_type=True, attributes=attributes)
    return StatementBuilder().insert(pattern).build()


def materialize_references(
    objects: Sequence[StixObject],
    referenced_ids: set[str],
    attributes: Mapping[str, AttributeMapping] | None = None,
) -> ReferenceResult:
    """
    Generate inserts for every object whose id is referenced.

    Args:
        objects: Full batch of STIX objects
        referenced_ids: Output of resolve_references()
        attributes: Attribute table (defaults to the built-in STIX table)

    Returns:
        ReferenceResult; processed_ids echoes referenced_ids so the caller
        can exclude them from the main pass
    """
    queries = QuerySet()
    found: set[str] = set()

    for stix_object in objects:
        if stix_object.id in referenced_ids:
            found.add(stix_object.id)
            queries.add(referenced_entity_query(stix_object, attributes))

    if missing := referenced_ids - found:
        # Dependents will only match if these were inserted by an earlier batch
        logger.warning(
            f"{len(missing)} referenced STIX objects are not in this batch: "
            f"{', '.join(sorted(missing))}"
        )

    logger.info(f"Generated {len(queries)} insert queries for referenced STIX entities")
    return ReferenceResult(queries=queries.to_list(), processed_ids=set(referenced_ids))
