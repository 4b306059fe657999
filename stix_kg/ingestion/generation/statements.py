"""
TypeQL Statement Builder

Small helpers that assemble TypeQL text from clause lists so that
separators and whitespace are handled in one place.

Example:
    >>> pattern = isa("$stix", "malware", has("name", quote("Emotet")))
    >>> StatementBuilder().insert(pattern).build()
    "insert $stix isa malware, has name 'Emotet';"
"""

from __future__ import annotations

from typing import Any

from stix_kg.types.results import Query


def quote(value: Any) -> str:
    """
    Quote a value as a TypeQL string literal.

    Embedded single quotes are replaced with double quotes. This is lossy
    and is kept for compatibility with data already in the database.
    """
    return "'" + str(value).replace("'", '"') + "'"


def quote_verbatim(value: Any) -> str:
    """Quote a value without touching its content."""
    return f"'{value}'"


def has(attribute: str, literal: str) -> str:
    """Attribute clause: ``has <attribute> <literal>``."""
    return f"has {attribute} {literal}"


def isa(variable: str, type_name: str, *clauses: str) -> str:
    """
    Typed variable pattern with optional attribute clauses.

    Empty clauses are dropped, so an object with no mapped attributes
    yields ``$x isa type`` rather than a dangling separator.
    """
    return ", ".join([f"{variable} isa {type_name}", *(c for c in clauses if c)])


class StatementBuilder:
    """
    Accumulates match and insert patterns and renders one statement.

    Usage:
        query = (
            StatementBuilder()
            .match(isa("$creator", "thing", has("stix-id", quote(ref))))
            .insert(isa("$stix", "malware"))
            .build()
        )
    """

    def __init__(self) -> None:
        self._match: list[str] = []
        self._insert: list[str] = []

    def match(self, pattern: str) -> StatementBuilder:
        self._match.append(pattern)
        return self

    def insert(self, pattern: str) -> StatementBuilder:
        self._insert.append(pattern)
        return self

    def build(self) -> Query:
        """
        Render the statement.

        Raises:
            ValueError: If no insert pattern was added
        """
        if not self._insert:
            raise ValueError("Statement has no insert pattern")

        parts: list[str] = []
        if self._match:
            parts.append("match " + " ".join(f"{p};" for p in self._match))
        parts.append("insert " + " ".join(f"{p};" for p in self._insert))
        return " ".join(parts)


class QuerySet:
    """Deduplicating, insertion-ordered collection of statements."""

    def __init__(self) -> None:
        self._queries: dict[Query, None] = {}

    def add(self, query: Query) -> None:
        self._queries[query] = None

    def __contains__(self, query: object) -> bool:
        return query in self._queries

    def __len__(self) -> int:
        return len(self._queries)

    def to_list(self) -> list[Query]:
        return list(self._queries)
