"""
Configuration System

Manages configuration for stix-kg with a layered approach.

Configuration Priority (highest to lowest):
    1. Programmatic (passed to GeneratorConfig())
    2. Environment variables (STIX_KG_* prefix, then bare IGNORE_DEPRECATED)
    3. Config file (GeneratorConfig.from_file)
    4. Built-in defaults

Modules:
    settings: GeneratorConfig class and ConfigurationError
"""

from stix_kg.config.settings import ConfigurationError, GeneratorConfig, parse_bool

__all__ = ["ConfigurationError", "GeneratorConfig", "parse_bool"]
