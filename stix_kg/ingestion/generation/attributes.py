"""
Attribute Serialization

Turns the mapped properties of a STIX object into TypeQL ``has`` clauses.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stix_kg.ingestion.generation.statements import has, quote
from stix_kg.mapping import AttributeKind, AttributeMapping, stix_attributes_to_typedb
from stix_kg.types.objects import StixObject


def _boolean_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).lower()


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def attribute_clauses(
    stix_object: StixObject,
    mapping: Mapping[str, AttributeMapping] | None = None,
) -> list[str]:
    """
    Build one clause per mapped property value.

    Walks the attribute table in order. Properties absent from the table
    or from the object, or explicitly null, are skipped.

    List elements are quoted like strings, apostrophes included. Earlier
    output left list elements unescaped, so statements for list values
    containing an apostrophe differ from it.

    Args:
        stix_object: Object to serialize
        mapping: Attribute table (defaults to the built-in STIX table)

    Returns:
        Clauses such as ``has name 'Emotet'``, in table order
    """
    if mapping is None:
        mapping = stix_attributes_to_typedb()

    clauses: list[str] = []
    for stix_key, definition in mapping.items():
        if stix_key not in stix_object:
            continue

        value = stix_object.get(stix_key)
        if value is None:
            continue

        if definition.kind == AttributeKind.STRING:
            clauses.append(has(definition.target, quote(value)))
        elif definition.kind == AttributeKind.BOOLEAN:
            clauses.append(has(definition.target, _boolean_literal(value)))
        elif definition.kind == AttributeKind.LIST:
            for item in _as_list(value):
                clauses.append(has(definition.target, quote(item)))

    return clauses


def serialize_attributes(
    stix_object: StixObject,
    mapping: Mapping[str, AttributeMapping] | None = None,
) -> str:
    """
    Comma-joined attribute clause for a STIX object.

    Returns an empty string when no mapped property is present.
    """
    return ", ".join(attribute_clauses(stix_object, mapping))
