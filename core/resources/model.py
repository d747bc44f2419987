"""
Composer Resources — Model Declarations
==========================================
A business network model declares every type the runtime may
create, store, or emit.

Each declaration names:
- its namespace and short name (fully-qualified type = namespace.name)
- its kind (ASSET, PARTICIPANT, TRANSACTION, EVENT, CONCEPT)
- the field that identifies instances (assets and participants)
- which fields hold datetimes (for JSON round-trips)
- which fields are required on add/update

Field types beyond that are not modelled: values are plain Python
data, Relationships, or nested resources.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from core.errors import UnknownTypeError


# ══════════════════════════════════════════════════════════════
# KINDS
# ══════════════════════════════════════════════════════════════

KIND_ASSET = "ASSET"
KIND_PARTICIPANT = "PARTICIPANT"
KIND_TRANSACTION = "TRANSACTION"
KIND_EVENT = "EVENT"
KIND_CONCEPT = "CONCEPT"

VALID_KINDS = frozenset({
    KIND_ASSET,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    KIND_EVENT,
    KIND_CONCEPT,
})

# Kinds that live in a registry and are referenced by relationship.
REGISTRY_KINDS = frozenset({KIND_ASSET, KIND_PARTICIPANT})

TRANSACTION_ID_FIELD = "transaction_id"
EVENT_ID_FIELD = "event_id"
TIMESTAMP_FIELD = "timestamp"

SYSTEM_NAMESPACE = "org.hyperledger.composer.system"


def split_fqt(fqt: str) -> Tuple[str, str]:
    """'org.acme.sample.SampleAsset' → ('org.acme.sample', 'SampleAsset')"""
    if not fqt or "." not in fqt:
        raise ValueError(
            f"'{fqt}' is not a fully-qualified type (namespace.Type)."
        )
    namespace, _, name = fqt.rpartition(".")
    return namespace, name


# ══════════════════════════════════════════════════════════════
# TYPE DECLARATION
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TypeDeclaration:
    """
    Declaration of one modelled type.

    Example:
        TypeDeclaration(
            namespace="org.acme.sample",
            name="SampleAsset",
            kind=KIND_ASSET,
            identified_by="asset_id",
            required=("owner", "value"),
        )
    """

    namespace: str
    name: str
    kind: str
    identified_by: Optional[str] = None
    datetime_fields: Tuple[str, ...] = ()
    required: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.namespace or not isinstance(self.namespace, str):
            raise ValueError("namespace must be a non-empty string.")

        if not self.name or not self.name[0].isupper():
            raise ValueError(
                f"Type name '{self.name}' must start with an uppercase letter."
            )

        if self.kind not in VALID_KINDS:
            raise ValueError(
                f"kind '{self.kind}' not valid. "
                f"Must be one of: {sorted(VALID_KINDS)}"
            )

        if self.kind in REGISTRY_KINDS and not self.identified_by:
            raise ValueError(
                f"{self.kind.lower()} '{self.fqt}' must declare identified_by."
            )

        if self.kind == KIND_CONCEPT and self.identified_by:
            raise ValueError(f"concept '{self.fqt}' cannot be identified.")

    @property
    def fqt(self) -> str:
        return f"{self.namespace}.{self.name}"

    @property
    def identifier_field(self) -> Optional[str]:
        if self.kind == KIND_TRANSACTION:
            return TRANSACTION_ID_FIELD
        if self.kind == KIND_EVENT:
            return EVENT_ID_FIELD
        return self.identified_by

    @property
    def is_registry_kind(self) -> bool:
        return self.kind in REGISTRY_KINDS

    @property
    def timestamped(self) -> bool:
        return self.kind in (KIND_TRANSACTION, KIND_EVENT)

    def all_datetime_fields(self) -> Tuple[str, ...]:
        if self.timestamped:
            return (TIMESTAMP_FIELD,) + self.datetime_fields
        return self.datetime_fields


# ══════════════════════════════════════════════════════════════
# MODEL MANAGER
# ══════════════════════════════════════════════════════════════

class ModelManager:
    """
    Registry of type declarations for one business network.

    Usage:
        model = ModelManager()
        model.declare("org.acme.sample", "SampleAsset",
                      KIND_ASSET, identified_by="asset_id")
        model.get("org.acme.sample.SampleAsset").kind  # 'ASSET'
    """

    def __init__(self, declarations: Iterable[TypeDeclaration] = ()):
        self._declarations: Dict[str, TypeDeclaration] = {}
        self.add(_NETWORK_ADMIN)
        for declaration in declarations:
            self.add(declaration)

    def add(self, declaration: TypeDeclaration) -> TypeDeclaration:
        if not isinstance(declaration, TypeDeclaration):
            raise TypeError(
                f"Expected TypeDeclaration, got {type(declaration).__name__}."
            )
        existing = self._declarations.get(declaration.fqt)
        if existing is not None and existing != declaration:
            raise ValueError(f"Type '{declaration.fqt}' is already declared.")
        self._declarations[declaration.fqt] = declaration
        return declaration

    def declare(self, namespace: str, name: str, kind: str, **options) -> TypeDeclaration:
        return self.add(TypeDeclaration(namespace=namespace, name=name, kind=kind, **options))

    def get(self, fqt: str) -> TypeDeclaration:
        declaration = self._declarations.get(fqt)
        if declaration is None:
            raise UnknownTypeError(fqt)
        return declaration

    def is_declared(self, fqt: str) -> bool:
        return fqt in self._declarations

    def declarations(self, kind: Optional[str] = None) -> List[TypeDeclaration]:
        return [
            declaration
            for declaration in self._declarations.values()
            if kind is None or declaration.kind == kind
        ]

    def namespaces(self) -> List[str]:
        return sorted({d.namespace for d in self._declarations.values()})


# The network administrator participant exists in every network.
NETWORK_ADMIN_FQT = f"{SYSTEM_NAMESPACE}.NetworkAdmin"

_NETWORK_ADMIN = TypeDeclaration(
    namespace=SYSTEM_NAMESPACE,
    name="NetworkAdmin",
    kind=KIND_PARTICIPANT,
    identified_by="participant_id",
)
