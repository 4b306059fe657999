"""Tests for StixObject and result types."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from stix_kg.types import GeneratedBatch, StixObject


class TestStixObject:
    """Tests for StixObject."""

    def test_requires_id_and_type(self):
        """id and type are mandatory."""
        with pytest.raises(ValidationError):
            StixObject(type="malware")
        with pytest.raises(ValidationError):
            StixObject(id="malware--1")

    def test_extra_properties_are_kept(self):
        """Undeclared STIX properties are reachable via get() and in."""
        obj = StixObject(id="malware--1", type="malware", name="Emotet")
        assert "name" in obj
        assert obj.get("name") == "Emotet"

    def test_presence_reflects_source_record(self):
        """Declared optional fields count as present only when supplied."""
        obj = StixObject(id="malware--1", type="malware")
        assert "id" in obj
        assert "created" not in obj
        assert obj.get("created", "n/a") == "n/a"

        dated = StixObject(id="malware--1", type="malware", created="2020-01-01T00:00:00Z")
        assert "created" in dated
        assert dated.get("created") == "2020-01-01T00:00:00Z"

    def test_is_frozen(self):
        """Inputs are immutable."""
        obj = StixObject(id="malware--1", type="malware")
        with pytest.raises(ValidationError):
            obj.type = "tool"

    def test_deprecation_marker_is_truthy_check(self):
        """Only truthy markers count as deprecated."""
        assert StixObject(id="a--1", type="a", x_mitre_deprecated=True).is_deprecated
        assert not StixObject(id="a--1", type="a", x_mitre_deprecated=False).is_deprecated
        assert not StixObject(id="a--1", type="a").is_deprecated

    def test_wrong_shaped_optional_properties_are_coerced(self):
        """Odd optional values are coerced or dropped instead of rejected."""
        obj = StixObject(
            id="identity--1",
            type="identity",
            identity_class=5,
            created=datetime(2020, 1, 1),
            object_marking_refs="marking-definition--m",
            definition="free text",
            created_by_ref=["identity--2"],
        )
        assert obj.identity_class == "5"
        assert obj.created == "2020-01-01 00:00:00"
        assert obj.object_marking_refs == ["marking-definition--m"]
        assert obj.definition is None
        assert obj.created_by_ref is None

    def test_marking_refs_drop_unusable_entries(self):
        """Non-list marking refs are dropped and null entries skipped."""
        assert StixObject(id="a--1", type="a", object_marking_refs=7).object_marking_refs is None
        refs = StixObject(id="a--1", type="a", object_marking_refs=[None, "marking-definition--m"])
        assert refs.object_marking_refs == ["marking-definition--m"]


class TestGeneratedBatch:
    """Tests for GeneratedBatch helpers."""

    def test_excluded_ids_union(self):
        """excluded_ids unions reference and marking ids."""
        batch = GeneratedBatch(referenced_ids={"a"}, marking_ids={"b"})
        assert batch.excluded_ids == {"a", "b"}

    def test_ordered_queries(self):
        """Categories are concatenated in execution order."""
        batch = GeneratedBatch(
            referenced_queries=["r"],
            marking_queries=["m"],
            entity_queries=["e"],
            marking_relation_queries=["mr"],
        )
        assert batch.ordered_queries() == ["r", "m", "e", "mr"]
        assert batch.total_queries == 4
