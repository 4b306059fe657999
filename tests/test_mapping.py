"""Tests for the STIX -> TypeDB mapping tables."""

import pytest

from stix_kg.mapping import (
    AttributeKind,
    CustomType,
    KnownType,
    stix_attributes_to_typedb,
    stix_entity_to_typedb,
)


class TestEntityMapping:
    """Tests for the entity type lookup."""

    def test_known_type(self):
        """Mapped STIX types resolve to KnownType."""
        mapping = stix_entity_to_typedb("malware")
        assert mapping == KnownType(target_type="malware")
        assert mapping.kind == "known"

    def test_identity_is_known(self):
        """identity maps to the identity type."""
        assert stix_entity_to_typedb("identity") == KnownType(target_type="identity")

    def test_unmapped_type_is_custom(self):
        """Unknown STIX types fall back to CustomType with their name."""
        mapping = stix_entity_to_typedb("x-mitre-tactic")
        assert mapping == CustomType(original_type="x-mitre-tactic")
        assert mapping.kind == "custom"

    @pytest.mark.parametrize("stix_type", ["", "bundle", "x-acme-widget"])
    def test_lookup_is_total(self, stix_type):
        """Every input maps to something."""
        assert stix_entity_to_typedb(stix_type) is not None


class TestAttributeMapping:
    """Tests for the attribute table."""

    def test_core_properties_present(self):
        """Common STIX properties are mapped."""
        table = stix_attributes_to_typedb()
        assert table["id"].target == "stix-id"
        assert table["spec_version"].target == "spec-version"
        assert table["revoked"].kind == AttributeKind.BOOLEAN
        assert table["aliases"].kind == AttributeKind.LIST
        assert table["name"].kind == AttributeKind.STRING

    def test_table_is_read_only(self):
        """Callers cannot mutate the shared table."""
        table = stix_attributes_to_typedb()
        with pytest.raises(TypeError):
            table["new"] = table["name"]  # type: ignore[index]
