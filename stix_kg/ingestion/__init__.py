"""
Ingestion Pipeline

Turns STIX bundles into TypeQL statements for the graph database.

Phases:
    Loading:
        - Bundle JSON -> StixObject records

    Generation (pure, in-memory):
        - Reference pass: creators named by created_by_ref
        - Statement-marking pass: statement-type marking definitions
        - Main pass: remaining entities + creation and marking relations

Executing the statements against TypeDB is left to the caller, in the
order given by GeneratedBatch.ordered_queries().

Modules:
    bundle: Bundle loading
    generation/: Query generation passes
"""

from stix_kg.ingestion.bundle import load_bundle
from stix_kg.ingestion.generation import StixInsertGenerator, generate_insert_queries

__all__ = ["load_bundle", "StixInsertGenerator", "generate_insert_queries"]
