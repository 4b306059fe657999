"""
STIX Object Types

Input records consumed by the query generation core.

Models:
    - StixObject: A parsed STIX domain object (semi-structured, read-only)

Only id and type are validated. Optional properties of the wrong shape
are coerced (scalars to text, a single marking ref to a list) or dropped,
so one odd record never aborts a batch.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, (list, tuple, set, dict)):
        return None
    return value if isinstance(value, str) else str(value)


class StixObject(BaseModel):
    """
    A STIX object as parsed from a bundle.

    Only the fields the generator branches on are declared. Every other
    STIX property is kept as an extra field and is reachable through
    ``get()`` and ``in``, which is how attribute serialization discovers
    mapped properties.

    Attributes:
        id: Globally unique STIX identifier (unique within a batch)
        type: STIX type discriminator (e.g. "malware", "identity")
        created_by_ref: Id of the identity that created this object
        object_marking_refs: Marking-definition ids (only the first is used)
        identity_class: Concrete identity kind when type == "identity"
        definition_type: Marking kind when type == "marking-definition"
        definition: Marking body (holds "statement" for statement markings)
        created: Creation timestamp
        spec_version: STIX spec version
        x_mitre_deprecated: MITRE ATT&CK deprecation flag
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    type: str
    created_by_ref: str | None = None
    object_marking_refs: list[str] | None = None
    identity_class: str | None = None
    definition_type: str | None = None
    definition: dict[str, Any] | None = None
    created: str | None = None
    spec_version: str | None = None
    x_mitre_deprecated: Any = None

    @field_validator(
        "created_by_ref",
        "identity_class",
        "definition_type",
        "created",
        "spec_version",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _as_text(value)

    @field_validator("object_marking_refs", mode="before")
    @classmethod
    def _coerce_marking_refs(cls, value: Any) -> list[str] | None:
        if isinstance(value, str):
            return [value]
        if not isinstance(value, (list, tuple)):
            return None
        return [ref for ref in (_as_text(v) for v in value) if ref is not None]

    @field_validator("definition", mode="before")
    @classmethod
    def _coerce_definition(cls, value: Any) -> dict[str, Any] | None:
        return value if isinstance(value, dict) else None

    def __contains__(self, key: object) -> bool:
        """True when the property was supplied in the source record."""
        if not isinstance(key, str):
            return False
        if self.model_extra and key in self.model_extra:
            return True
        return key in type(self).model_fields and key in self.model_fields_set

    def get(self, key: str, default: Any = None) -> Any:
        """Return a property value, or default when it was not supplied."""
        if key not in self:
            return default
        if self.model_extra and key in self.model_extra:
            return self.model_extra[key]
        return getattr(self, key)

    @property
    def is_deprecated(self) -> bool:
        """Whether the object carries a truthy deprecation marker."""
        return bool(self.x_mitre_deprecated)
