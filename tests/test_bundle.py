"""Tests for STIX bundle loading."""

import json

import pytest
from pydantic import ValidationError

from stix_kg.ingestion.bundle import load_bundle

OBJECTS = [
    {"type": "identity", "id": "identity--1", "identity_class": "organization"},
    {"type": "malware", "id": "malware--1", "created_by_ref": "identity--1"},
]


class TestLoadBundle:
    """Tests for load_bundle."""

    def test_loads_bundle_file(self, tmp_path):
        """A bundle file on disk is parsed in order."""
        path = tmp_path / "bundle.json"
        path.write_text(json.dumps({"type": "bundle", "id": "bundle--1", "objects": OBJECTS}))
        objects = load_bundle(path)
        assert [o.id for o in objects] == ["identity--1", "malware--1"]
        assert objects[1].created_by_ref == "identity--1"

    def test_loads_parsed_bundle(self):
        """An already-parsed bundle dict is accepted."""
        assert len(load_bundle({"type": "bundle", "objects": OBJECTS})) == 2

    def test_loads_object_list(self):
        """A plain list of objects is accepted."""
        assert len(load_bundle(OBJECTS)) == 2

    def test_missing_file(self, tmp_path):
        """A missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_bundle(tmp_path / "missing.json")

    def test_rejects_non_bundle_document(self):
        """A dict that isn't a bundle is rejected."""
        with pytest.raises(ValueError, match="STIX bundle"):
            load_bundle({"type": "malware", "id": "malware--1"})

    def test_object_without_id_is_invalid(self):
        """Records must carry id and type."""
        with pytest.raises(ValidationError):
            load_bundle([{"type": "malware"}])
