"""Shared fixtures for the stix-kg test suite."""

import pytest


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep host environment settings out of GeneratorConfig defaults."""
    monkeypatch.delenv("IGNORE_DEPRECATED", raising=False)
    monkeypatch.delenv("STIX_KG_IGNORE_DEPRECATED", raising=False)
