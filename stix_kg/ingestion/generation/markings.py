"""
Marking Materialization

Statement-type marking definitions get their own pass with a fixed
statement-marking shape; their schema differs from other marking
definitions, so the attribute table is not consulted. They are inserted
before the main batch so that object-marking relations can match them.

Object-marking relations link a marked object to the first of its
object_marking_refs. Further refs are not materialized.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from stix_kg.ingestion.generation.statements import (
    QuerySet,
    StatementBuilder,
    has,
    isa,
    quote,
    quote_verbatim,
)
from stix_kg.types.objects import StixObject
from stix_kg.types.results import MarkingResult, Query

logger = logging.getLogger(__name__)

MARKING_DEFINITION_TYPE = "marking-definition"
STATEMENT_DEFINITION_TYPE = "statement"
STATEMENT_MARKING_TYPE = "statement-marking"


def is_statement_marking(stix_object: StixObject) -> bool:
    return (
        stix_object.type == MARKING_DEFINITION_TYPE
        and stix_object.definition_type == STATEMENT_DEFINITION_TYPE
    )


def statement_marking_query(stix_object: StixObject) -> Query:
    """
    Insert statement for a statement-type marking definition.

    Values are copied verbatim. A missing statement, created or
    spec_version property drops that clause.
    """
    definition = stix_object.definition if isinstance(stix_object.definition, dict) else {}
    statement = definition.get("statement")
    values = [
        ("stix-id", stix_object.id),
        ("statement", statement),
        ("created", stix_object.created),
        ("spec-version", stix_object.spec_version),
    ]
    clauses = [has(name, quote_verbatim(value)) for name, value in values if value is not None]
    return StatementBuilder().insert(isa("$x", STATEMENT_MARKING_TYPE, *clauses)).build()


def materialize_statement_markings(objects: Iterable[StixObject]) -> MarkingResult:
    """
    Generate inserts for every statement-type marking definition.

    Returns:
        MarkingResult with the statements and the ids they cover
    """
    queries = QuerySet()
    processed_ids: set[str] = set()

    for stix_object in objects:
        if is_statement_marking(stix_object):
            processed_ids.add(stix_object.id)
            queries.add(statement_marking_query(stix_object))

    logger.info(f"Generated {len(queries)} insert queries for markings")
    return MarkingResult(queries=queries.to_list(), processed_ids=processed_ids)


def marking_relation_query(stix_object: StixObject) -> Query | None:
    """Object-marking relation for the first marking ref, if any."""
    refs = stix_object.object_marking_refs
    if isinstance(refs, str):
        refs = [refs]
    if not refs or not isinstance(refs, (list, tuple)):
        return None

    marking_ref = refs[0]
    return (
        StatementBuilder()
        .match(isa("$x", "thing", has("stix-id", quote(stix_object.id))))
        .match(isa("$marking", MARKING_DEFINITION_TYPE, has("stix-id", quote(marking_ref))))
        .insert("(marked: $x, marking: $marking) isa object-marking")
        .build()
    )


def materialize_marking_relations(objects: Iterable[StixObject]) -> list[Query]:
    """Deduplicated object-marking relations for marked objects."""
    queries = QuerySet()
    for stix_object in objects:
        query = marking_relation_query(stix_object)
        if query is not None:
            queries.add(query)
    return queries.to_list()
