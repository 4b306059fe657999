"""
STIX Bundle Loading

Reads STIX objects from a bundle file or already-parsed JSON.

Example:
    >>> from stix_kg.ingestion import load_bundle
    >>> objects = load_bundle("enterprise-attack.json")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from stix_kg.types.objects import StixObject

logger = logging.getLogger(__name__)


def _extract_objects(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and data.get("type") == "bundle":
        return list(data.get("objects", []))
    raise ValueError("Expected a STIX bundle or a list of STIX objects")


def load_bundle(source: str | Path | dict[str, Any] | list[dict[str, Any]]) -> list[StixObject]:
    """
    Load STIX objects.

    Args:
        source: Path to a JSON file, a parsed bundle dict, or a list of
            object dicts

    Returns:
        Parsed StixObjects in source order

    Raises:
        FileNotFoundError: If a path is given and doesn't exist
        ValueError: If the document is neither a bundle nor a list
        pydantic.ValidationError: If an object lacks id or type
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"STIX bundle not found: {path}")
        data = json.loads(path.read_text(encoding="utf-8"))
    else:
        data = source

    objects = [StixObject.model_validate(o) for o in _extract_objects(data)]
    logger.info(f"Loaded {len(objects)} STIX objects")
    return objects
