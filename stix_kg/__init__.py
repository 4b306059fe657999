"""
stix-kg - STIX to TypeDB Query Generation

Converts batches of STIX threat-intelligence objects into ordered TypeQL
insert statements, so that creators and markings exist before the
objects that reference them.

Example:
    >>> from stix_kg import load_bundle, generate_insert_queries
    >>> objects = load_bundle("enterprise-attack.json")
    >>> batch = generate_insert_queries(objects)
    >>> for query in batch.ordered_queries():
    ...     tx.query().insert(query)

Main Classes:
    StixInsertGenerator: Runs the generation passes over one batch
    GeneratorConfig: Configuration management
"""

__version__ = "0.1.0"

# Public API - lazy imports
def __getattr__(name: str):
    """Lazy import public API components."""

    if name in ("StixInsertGenerator", "generate_insert_queries"):
        from stix_kg.ingestion import generation
        return getattr(generation, name)

    if name == "load_bundle":
        from stix_kg.ingestion.bundle import load_bundle
        return load_bundle

    if name in ("GeneratorConfig", "ConfigurationError"):
        from stix_kg import config
        return getattr(config, name)

    # Types
    if name in ("StixObject", "GeneratedBatch"):
        from stix_kg import types
        return getattr(types, name)

    raise AttributeError(f"module 'stix_kg' has no attribute {name!r}")


__all__ = [
    # Main classes
    "StixInsertGenerator",
    "GeneratorConfig",
    "ConfigurationError",

    # Convenience functions
    "generate_insert_queries",
    "load_bundle",

    # Types
    "StixObject",
    "GeneratedBatch",

    # Version
    "__version__",
]
