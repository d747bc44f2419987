"""
Composer Resources — Resource and Relationship
=================================================
A Resource is a typed record: asset, participant, transaction,
event, or concept. Fields are read and written as attributes.

A Relationship is a typed pointer (namespace, type, identifier)
to an asset or participant held in a registry. Relationships are
stored as-is and replaced by the target resource on resolution.

Rules:
- Reading an unset field raises AttributeError; use .get() for
  optional fields.
- Identifiable resources compare equal by fully-qualified identifier.
- Concepts compare equal by type and field values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.resources.model import REGISTRY_KINDS, TypeDeclaration

RESOURCE_URI_PREFIX = "resource:"


# ══════════════════════════════════════════════════════════════
# RELATIONSHIP
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Relationship:
    """
    Typed reference to a registry entry.

    Example:
        rel = Relationship("org.acme.trading", "Trader", "dan")
        rel.to_uri()   # 'resource:org.acme.trading.Trader#dan'
    """

    namespace: str
    type_name: str
    identifier: str

    def __post_init__(self):
        if not self.namespace or not isinstance(self.namespace, str):
            raise ValueError("namespace must be a non-empty string.")

        if not self.type_name or not isinstance(self.type_name, str):
            raise ValueError("type_name must be a non-empty string.")

        if self.identifier is None or str(self.identifier) == "":
            raise ValueError("identifier must be non-empty.")

    @classmethod
    def from_uri(cls, uri: str) -> "Relationship":
        """'resource:ns.Type#id' (or 'ns.Type#id') → Relationship."""
        body = uri[len(RESOURCE_URI_PREFIX):] if uri.startswith(RESOURCE_URI_PREFIX) else uri
        fqt, sep, identifier = body.partition("#")
        if not sep:
            raise ValueError(f"'{uri}' is not a resource identifier (ns.Type#id).")
        namespace, _, type_name = fqt.rpartition(".")
        return cls(namespace=namespace, type_name=type_name, identifier=identifier)

    def get_identifier(self) -> str:
        return self.identifier

    def get_type(self) -> str:
        return self.type_name

    def get_namespace(self) -> str:
        return self.namespace

    def get_fully_qualified_type(self) -> str:
        return f"{self.namespace}.{self.type_name}"

    def get_fully_qualified_identifier(self) -> str:
        return f"{self.get_fully_qualified_type()}#{self.identifier}"

    def to_uri(self) -> str:
        return RESOURCE_URI_PREFIX + self.get_fully_qualified_identifier()

    def is_relationship(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.to_uri()


# ══════════════════════════════════════════════════════════════
# RESOURCE
# ══════════════════════════════════════════════════════════════

class Resource:
    """
    Instance of a declared type.

    Usage:
        asset = factory.new_resource("org.acme.sample", "SampleAsset", "A1")
        asset.value = "10"
        asset.get("owner")              # None until set
        asset.get_fully_qualified_identifier()
        # 'org.acme.sample.SampleAsset#A1'
    """

    def __init__(self, declaration: TypeDeclaration, fields: Optional[Dict[str, Any]] = None):
        object.__setattr__(self, "_declaration", declaration)
        object.__setattr__(self, "_fields", dict(fields or {}))

    # ── field access ─────────────────────────────────────────

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        fields = self.__dict__.get("_fields", {})
        if name in fields:
            return fields[name]
        raise AttributeError(
            f"{self.get_fully_qualified_type()} has no value for field '{name}'."
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self._fields[name] = value

    def __delattr__(self, name: str) -> None:
        self._fields.pop(name, None)

    def get(self, name: str, default: Any = None) -> Any:
        return self._fields.get(name, default)

    def to_fields(self) -> Dict[str, Any]:
        """Shallow copy of the field values."""
        return dict(self._fields)

    # ── type information ─────────────────────────────────────

    @property
    def declaration(self) -> TypeDeclaration:
        return self._declaration

    @property
    def kind(self) -> str:
        return self._declaration.kind

    def get_type(self) -> str:
        return self._declaration.name

    def get_namespace(self) -> str:
        return self._declaration.namespace

    def get_fully_qualified_type(self) -> str:
        return self._declaration.fqt

    def is_instance_of(self, fqt: str) -> bool:
        return self._declaration.fqt == fqt

    def is_relationship(self) -> bool:
        return False

    # ── identity ─────────────────────────────────────────────

    def get_identifier(self) -> Optional[str]:
        field_name = self._declaration.identifier_field
        if field_name is None:
            return None
        return self._fields.get(field_name)

    def set_identifier(self, identifier: str) -> None:
        field_name = self._declaration.identifier_field
        if field_name is None:
            raise TypeError(f"{self.get_fully_qualified_type()} is not identifiable.")
        self._fields[field_name] = identifier

    def get_fully_qualified_identifier(self) -> str:
        return f"{self.get_fully_qualified_type()}#{self.get_identifier()}"

    def to_relationship(self) -> Relationship:
        if self.kind not in REGISTRY_KINDS:
            raise TypeError(
                f"Cannot reference {self.kind.lower()} "
                f"'{self.get_fully_qualified_type()}' by relationship."
            )
        return Relationship(
            namespace=self.get_namespace(),
            type_name=self.get_type(),
            identifier=self.get_identifier(),
        )

    def to_uri(self) -> str:
        return self.to_relationship().to_uri()

    # ── comparison ───────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        if self._declaration.identifier_field is not None:
            return (
                self.get_fully_qualified_type() == other.get_fully_qualified_type()
                and self.get_identifier() == other.get_identifier()
            )
        return (
            self.get_fully_qualified_type() == other.get_fully_qualified_type()
            and self._fields == other._fields
        )

    __hash__ = None

    def __repr__(self) -> str:
        if self._declaration.identifier_field is not None:
            return f"Resource({self.get_fully_qualified_identifier()})"
        return f"Resource({self.get_fully_qualified_type()})"


def same_target(left: Any, right: Any) -> bool:
    """
    True when two values point at the same registry entry, whether
    either side is a Relationship or a resolved Resource.
    """
    if left is None or right is None:
        return False
    return (
        left.get_fully_qualified_identifier()
        == right.get_fully_qualified_identifier()
    )
