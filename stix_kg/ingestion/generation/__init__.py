"""
TypeQL Query Generation

Converts a batch of STIX objects into ordered TypeQL insert statements.

Modules:
    statements: Clause and statement builders, dedup collection
    attributes: STIX property -> ``has`` clause serialization
    references: created_by_ref resolution and creator inserts
    markings: statement-marking inserts and object-marking relations
    entities: Main batch entity inserts (with creation relations)
    generator: Pass orchestration (StixInsertGenerator)

Passes:
    1. References - creators inserted first, standalone
    2. Statement markings - inserted before anything marked by them
    3. Main batch - remaining objects, then marking relations
"""

from stix_kg.ingestion.generation.attributes import attribute_clauses, serialize_attributes
from stix_kg.ingestion.generation.entities import generate_entity_query, materialize_main
from stix_kg.ingestion.generation.generator import StixInsertGenerator, generate_insert_queries
from stix_kg.ingestion.generation.markings import (
    materialize_marking_relations,
    materialize_statement_markings,
)
from stix_kg.ingestion.generation.references import materialize_references, resolve_references

__all__ = [
    "attribute_clauses",
    "serialize_attributes",
    "generate_entity_query",
    "materialize_main",
    "StixInsertGenerator",
    "generate_insert_queries",
    "materialize_marking_relations",
    "materialize_statement_markings",
    "materialize_references",
    "resolve_references",
]
