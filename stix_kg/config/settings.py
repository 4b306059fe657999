"""
GeneratorConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use built-in defaults (environment is not read)
    >>> generator = StixInsertGenerator(objects)

    >>> # Environment settings, as the CLI script does
    >>> config = GeneratorConfig.from_env()

    >>> # Explicit configuration
    >>> config = GeneratorConfig(ignore_deprecated=True)
    >>> generator = StixInsertGenerator(objects, config=config)

    >>> # From config file
    >>> config = GeneratorConfig.from_file("./stix_kg.toml")

Environment Variables:
    IGNORE_DEPRECATED - Skip objects flagged x_mitre_deprecated ("true"/"false")
    STIX_KG_IGNORE_DEPRECATED - Same as above, takes precedence when both are set
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, cast

_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")


class ConfigurationError(ValueError):
    """Raised when a configuration value cannot be parsed."""


def parse_bool(value: str | bool, *, name: str) -> bool:
    """
    Parse a strict boolean setting.

    Accepts true/false/1/0 (case-insensitive). Anything else is a
    configuration error rather than a silent default.

    Args:
        value: Raw value from the environment or a config file
        name: Setting name, used in the error message

    Raises:
        ConfigurationError: If the value is not a valid boolean
    """
    if isinstance(value, bool):
        return value

    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {value!r} (expected true/false/1/0)"
    )


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return cast(dict[str, Any], tomllib.load(f))


class GeneratorConfig:
    """Configuration for STIX insert query generation."""

    # === Generation Configuration ===

    ignore_deprecated: bool = False
    """Skip objects with a truthy x_mitre_deprecated marker in the main pass"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option

        Raises:
            ValueError: If an unknown option is passed
            ConfigurationError: If an environment value is malformed
        """
        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if not hasattr(self, key) or key.startswith("_"):
                raise ValueError(f"Unknown configuration option: {key}")
            if key == "ignore_deprecated":
                value = parse_bool(value, name=key)
            setattr(self, key, value)

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        if (raw := os.getenv("IGNORE_DEPRECATED")) is not None:
            self.ignore_deprecated = parse_bool(raw, name="IGNORE_DEPRECATED")

        # STIX_KG_* prefixed settings win over the bare names
        if (raw := os.getenv("STIX_KG_IGNORE_DEPRECATED")) is not None:
            self.ignore_deprecated = parse_bool(raw, name="STIX_KG_IGNORE_DEPRECATED")

    @classmethod
    def from_file(cls, path: str | Path) -> "GeneratorConfig":
        """
        Load configuration from TOML file.

        Example TOML:
            [generation]
            ignore_deprecated = true

        Flat top-level keys are accepted as well.

        Args:
            path: Path to TOML configuration file

        Returns:
            GeneratorConfig instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)

        flat_config: dict[str, Any] = {}
        for key, value in data.get("generation", {}).items():
            flat_config[key] = value

        # Also support flat top-level keys
        for key, value in data.items():
            if not isinstance(value, dict):
                flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Load configuration from environment variables only."""
        return cls()

    @classmethod
    def defaults(cls) -> "GeneratorConfig":
        """Built-in defaults, ignoring the environment."""
        return cls.__new__(cls)

    def to_file(self, path: str | Path) -> None:
        """
        Save configuration to TOML file.

        Args:
            path: Path to write TOML configuration file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        lines = [
            "# stix-kg Configuration",
            "",
            "[generation]",
            f"ignore_deprecated = {str(self.ignore_deprecated).lower()}",
            "",
        ]
        path.write_text("\n".join(lines))

    def with_overrides(self, **kwargs: Any) -> "GeneratorConfig":
        """Return new config with specified overrides."""
        new_config = GeneratorConfig.__new__(GeneratorConfig)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_config, key, getattr(self, key))
        for key, value in kwargs.items():
            if not hasattr(new_config, key) or key.startswith("_"):
                raise ValueError(f"Unknown configuration option: {key}")
            if key == "ignore_deprecated":
                value = parse_bool(value, name=key)
            setattr(new_config, key, value)
        return new_config

    def __repr__(self) -> str:
        return f"GeneratorConfig(ignore_deprecated={self.ignore_deprecated})"
