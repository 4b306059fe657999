"""
Type Definitions

Pydantic models for all data structures.

Input Models:
    - StixObject - A parsed STIX object

Result Models:
    - ReferenceResult, MarkingResult, MainResult - Per-pass outputs
    - GeneratedBatch - Combined output handed to the execution layer
    - Query - Alias for a TypeQL statement string
"""

from stix_kg.types.objects import StixObject
from stix_kg.types.results import (
    GeneratedBatch,
    MainResult,
    MarkingResult,
    Query,
    ReferenceResult,
)

__all__ = [
    "StixObject",
    "GeneratedBatch",
    "MainResult",
    "MarkingResult",
    "Query",
    "ReferenceResult",
]
