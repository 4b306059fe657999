"""Tests for statement markings and object-marking relations."""

import logging

from stix_kg.ingestion.generation.markings import (
    is_statement_marking,
    marking_relation_query,
    materialize_marking_relations,
    materialize_statement_markings,
    statement_marking_query,
)
from stix_kg.types import StixObject

STATEMENT = StixObject(
    id="marking-definition--s1",
    type="marking-definition",
    definition_type="statement",
    definition={"statement": "Copyright 2024, ACME"},
    created="2024-01-01T00:00:00.000Z",
    spec_version="2.1",
)
TLP_WHITE = StixObject(
    id="marking-definition--tlp",
    type="marking-definition",
    definition_type="tlp",
    definition={"tlp": "white"},
)


class TestStatementMarkingQuery:
    """Tests for the fixed statement-marking shape."""

    def test_fixed_shape(self):
        """All four attributes are copied verbatim."""
        assert statement_marking_query(STATEMENT) == (
            "insert $x isa statement-marking, "
            "has stix-id 'marking-definition--s1', "
            "has statement 'Copyright 2024, ACME', "
            "has created '2024-01-01T00:00:00.000Z', "
            "has spec-version '2.1';"
        )

    def test_does_not_use_attribute_table(self):
        """Mapped properties such as name are not added."""
        obj = STATEMENT.model_copy(update={"created": None})
        query = statement_marking_query(obj)
        assert "has created" not in query
        assert "has name" not in query

    def test_missing_definition_drops_statement_clause(self):
        """A statement marking without a definition still renders."""
        obj = StixObject(id="marking-definition--s2", type="marking-definition", definition_type="statement")
        assert statement_marking_query(obj) == (
            "insert $x isa statement-marking, has stix-id 'marking-definition--s2';"
        )


class TestMaterializeStatementMarkings:
    """Tests for the statement-marking pass."""

    def test_only_statement_markings_are_handled(self):
        """TLP markings and other objects are left for the main pass."""
        malware = StixObject(id="malware--1", type="malware")
        result = materialize_statement_markings([STATEMENT, TLP_WHITE, malware])
        assert result.processed_ids == {STATEMENT.id}
        assert result.queries == [statement_marking_query(STATEMENT)]

    def test_duplicates_collapse(self):
        """The same marking twice yields one statement."""
        result = materialize_statement_markings([STATEMENT, STATEMENT])
        assert len(result.queries) == 1

    def test_logs_count(self, caplog):
        """The number of marking queries is logged."""
        with caplog.at_level(logging.INFO):
            materialize_statement_markings([STATEMENT])
        assert "Generated 1 insert queries for markings" in caplog.text

    def test_predicate(self):
        """is_statement_marking needs both type and definition_type."""
        assert is_statement_marking(STATEMENT)
        assert not is_statement_marking(TLP_WHITE)
        assert not is_statement_marking(
            StixObject(id="note--1", type="note", definition_type="statement")
        )


class TestMarkingRelations:
    """Tests for object-marking relations."""

    def test_relation_shape(self):
        """The object and its marking are matched by stix-id."""
        obj = StixObject(id="malware--1", type="malware", object_marking_refs=[STATEMENT.id])
        assert marking_relation_query(obj) == (
            "match $x isa thing, has stix-id 'malware--1'; "
            "$marking isa marking-definition, has stix-id 'marking-definition--s1'; "
            "insert (marked: $x, marking: $marking) isa object-marking;"
        )

    def test_only_first_marking_is_used(self):
        """Objects with several markings get one relation, for the first."""
        obj = StixObject(
            id="malware--1",
            type="malware",
            object_marking_refs=["marking-definition--a", "marking-definition--b", "marking-definition--c"],
        )
        queries = materialize_marking_relations([obj])
        assert len(queries) == 1
        assert "marking-definition--a" in queries[0]
        assert "marking-definition--b" not in queries[0]
        assert "marking-definition--c" not in queries[0]

    def test_unmarked_objects_produce_nothing(self):
        """Objects without (or with empty) marking refs are skipped."""
        objects = [
            StixObject(id="malware--1", type="malware"),
            StixObject(id="malware--2", type="malware", object_marking_refs=[]),
        ]
        assert materialize_marking_relations(objects) == []
        assert marking_relation_query(objects[0]) is None
