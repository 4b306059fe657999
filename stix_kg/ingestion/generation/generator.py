"""
STIX Insert Generator

Orchestrates the generation passes over one batch of STIX objects.

Pass order (each later pass depends on ids reported by the earlier ones):
    1. References - creators named by created_by_ref, inserted standalone
    2. Statement markings - statement-type marking definitions
    3. Main batch - everything else, excluding ids from passes 1 and 2,
       followed by object-marking relations

Statements must be executed in the same order; see
GeneratedBatch.ordered_queries().
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from typing import Any

from stix_kg.config import GeneratorConfig
from stix_kg.ingestion.generation.entities import materialize_main
from stix_kg.ingestion.generation.markings import materialize_statement_markings
from stix_kg.ingestion.generation.references import materialize_references, resolve_references
from stix_kg.mapping import AttributeMapping
from stix_kg.types.objects import StixObject
from stix_kg.types.results import GeneratedBatch, MainResult, MarkingResult, ReferenceResult

logger = logging.getLogger(__name__)


def _coerce_objects(objects: Iterable[StixObject | Mapping[str, Any]]) -> list[StixObject]:
    return [
        o if isinstance(o, StixObject) else StixObject.model_validate(o)
        for o in objects
    ]


class StixInsertGenerator:
    """
    Generates TypeQL insert statements for a batch of STIX objects.

    Usage:
        generator = StixInsertGenerator(objects, config=GeneratorConfig.from_env())
        batch = generator.generate()
        for query in batch.ordered_queries():
            transaction.query().insert(query)
    """

    def __init__(
        self,
        objects: Iterable[StixObject | Mapping[str, Any]],
        config: GeneratorConfig | None = None,
        attributes: Mapping[str, AttributeMapping] | None = None,
    ):
        self.objects = _coerce_objects(objects)
        # Built-in defaults only; reading the environment is up to the caller
        self.config = config or GeneratorConfig.defaults()
        self.attributes = attributes

    def referenced_stix_objects(self) -> ReferenceResult:
        """Pass 1: inserts for objects named as a creator."""
        referenced_ids = resolve_references(self.objects)
        return materialize_references(self.objects, referenced_ids, self.attributes)

    def statement_markings(self) -> MarkingResult:
        """Pass 2: inserts for statement-type marking definitions."""
        return materialize_statement_markings(self.objects)

    def stix_objects_and_marking_relations(self, exclude_ids: Collection[str]) -> MainResult:
        """Pass 3: main entity inserts and object-marking relations."""
        return materialize_main(
            self.objects,
            exclude_ids,
            ignore_deprecated=self.config.ignore_deprecated,
            attributes=self.attributes,
        )

    def generate(self) -> GeneratedBatch:
        """Run all passes, threading the exclusion set into the main pass."""
        references = self.referenced_stix_objects()
        markings = self.statement_markings()
        main = self.stix_objects_and_marking_relations(
            references.processed_ids | markings.processed_ids
        )

        batch = GeneratedBatch(
            referenced_queries=references.queries,
            marking_queries=markings.queries,
            entity_queries=main.entity_queries,
            marking_relation_queries=main.marking_relation_queries,
            referenced_ids=references.processed_ids,
            marking_ids=markings.processed_ids,
        )
        logger.info(
            f"Generated {batch.total_queries} queries for {len(self.objects)} STIX objects"
        )
        return batch


def generate_insert_queries(
    objects: Iterable[StixObject | Mapping[str, Any]],
    *,
    config: GeneratorConfig | None = None,
    attributes: Mapping[str, AttributeMapping] | None = None,
) -> GeneratedBatch:
    """
    Generate all insert statements for a batch of STIX objects.

    Args:
        objects: StixObject instances or raw STIX dicts
        config: Generation settings (built-in defaults when omitted)
        attributes: Attribute table (defaults to the built-in STIX table)

    Returns:
        GeneratedBatch; execute ``batch.ordered_queries()`` in order
    """
    return StixInsertGenerator(objects, config=config, attributes=attributes).generate()
