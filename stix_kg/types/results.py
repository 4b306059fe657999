"""
Result Types

Typed results of the query generation passes.

Stage Results:
    - ReferenceResult: Inserts for objects named by some created_by_ref
    - MarkingResult: Inserts for statement-type marking definitions
    - MainResult: Main entity inserts and object-marking relations

Pipeline Result:
    - GeneratedBatch: All stage outputs combined, in execution order
"""

from pydantic import BaseModel, Field

# A TypeQL statement. Only concatenated and compared, never parsed.
Query = str


class ReferenceResult(BaseModel):
    """
    Output of the reference pass.

    Attributes:
        queries: Entity inserts for referenced objects (deduplicated)
        processed_ids: Referenced ids, to be excluded from the main pass
    """

    queries: list[Query] = Field(default_factory=list)
    processed_ids: set[str] = Field(default_factory=set)


class MarkingResult(BaseModel):
    """
    Output of the statement-marking pass.

    Attributes:
        queries: statement-marking inserts (deduplicated)
        processed_ids: Marking ids, to be excluded from the main pass
    """

    queries: list[Query] = Field(default_factory=list)
    processed_ids: set[str] = Field(default_factory=set)


class MainResult(BaseModel):
    """
    Output of the main entity pass.

    Attributes:
        entity_queries: Entity inserts, wrapped in match-then-insert when
            the object has a creator
        marking_relation_queries: One object-marking relation per marked object
        skipped_deprecated: Objects dropped by the deprecation filter
        skipped_relationships: STIX relationship objects ignored
        skipped_excluded: Objects already handled by an earlier pass
    """

    entity_queries: list[Query] = Field(default_factory=list)
    marking_relation_queries: list[Query] = Field(default_factory=list)
    skipped_deprecated: int = 0
    skipped_relationships: int = 0
    skipped_excluded: int = 0


class GeneratedBatch(BaseModel):
    """
    All statements generated for one batch of STIX objects.

    Statements must be executed in the order returned by
    ``ordered_queries()``: match-then-insert statements in the main pass
    rely on creators and markings inserted by the earlier passes.
    """

    referenced_queries: list[Query] = Field(default_factory=list)
    marking_queries: list[Query] = Field(default_factory=list)
    entity_queries: list[Query] = Field(default_factory=list)
    marking_relation_queries: list[Query] = Field(default_factory=list)
    referenced_ids: set[str] = Field(default_factory=set)
    marking_ids: set[str] = Field(default_factory=set)

    @property
    def excluded_ids(self) -> set[str]:
        """Ids handled before the main pass."""
        return self.referenced_ids | self.marking_ids

    @property
    def total_queries(self) -> int:
        """Number of statements across all categories."""
        return (
            len(self.referenced_queries)
            + len(self.marking_queries)
            + len(self.entity_queries)
            + len(self.marking_relation_queries)
        )

    def ordered_queries(self) -> list[Query]:
        """
        Statements in execution order.

        Referenced entities, then statement markings, then main entities
        (with embedded creation relations), then marking relations.
        """
        return [
            *self.referenced_queries,
            *self.marking_queries,
            *self.entity_queries,
            *self.marking_relation_queries,
        ]
