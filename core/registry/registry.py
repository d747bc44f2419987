"""
Composer Registry — Asset and Participant Registries
=======================================================
A registry is the typed, ACL-aware view over one collection of the
world-state store.

Rules:
- A registry holds exactly one fully-qualified type.
- Writes store relationships, never embedded assets/participants.
- Reads hide entries the caller may not READ: get() reports them
  as missing, get_all() omits them.
- Writes require CREATE / UPDATE / DELETE access. update() and
  remove() check the stored entry as well, so an entry the caller
  cannot read is reported as missing and cannot be overwritten.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from core.errors import ValidationError
from core.permissions.constants import OP_CREATE, OP_DELETE, OP_READ, OP_UPDATE
from core.permissions.evaluator import UNRESTRICTED, AccessController
from core.registry.errors import (
    ResourceAlreadyExists,
    ResourceNotFound,
    ResourceTypeMismatch,
)
from core.registry.store import WorldStateStore
from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, TypeDeclaration
from core.resources.resolver import RelationshipLookup, Resolver
from core.resources.resource import Resource
from core.resources.serializer import Serializer, dehydrate_fields

logger = logging.getLogger("composer.registry")

ASSET_REGISTRY = "Asset"
PARTICIPANT_REGISTRY = "Participant"

_REGISTRY_TYPE_BY_KIND = {
    KIND_ASSET: ASSET_REGISTRY,
    KIND_PARTICIPANT: PARTICIPANT_REGISTRY,
}


def collection_id_for(declaration: TypeDeclaration) -> str:
    """'Asset:org.acme.sample.SampleAsset'"""
    registry_type = _REGISTRY_TYPE_BY_KIND.get(declaration.kind)
    if registry_type is None:
        raise ValueError(
            f"{declaration.kind.lower()} '{declaration.fqt}' has no registry."
        )
    return f"{registry_type}:{declaration.fqt}"


class Registry:
    """
    Usage:
        registry = runtime_connection.get_asset_registry("org.acme.trading.Commodity")
        registry.add(commodity)
        commodity = registry.get("EMA")
        commodity.quantity = 10
        registry.update(commodity)
    """

    registry_type: Optional[str] = None

    def __init__(
        self,
        declaration: TypeDeclaration,
        store: WorldStateStore,
        serializer: Serializer,
        access: AccessController = UNRESTRICTED,
        lookup: Optional[RelationshipLookup] = None,
    ):
        expected = _REGISTRY_TYPE_BY_KIND.get(declaration.kind)
        if self.registry_type is not None and expected != self.registry_type:
            raise ValueError(
                f"'{declaration.fqt}' is a {declaration.kind.lower()}, "
                f"not usable in a {self.registry_type} registry."
            )
        self._declaration = declaration
        self._store = store
        self._serializer = serializer
        self._access = access
        self._lookup = lookup
        self.id = collection_id_for(declaration)

    @property
    def fqt(self) -> str:
        return self._declaration.fqt

    # ══════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════

    def _check_type(self, resource: Resource) -> None:
        if not isinstance(resource, Resource) or resource.get_fully_qualified_type() != self.fqt:
            fqt = resource.get_fully_qualified_type() if isinstance(resource, Resource) else type(resource).__name__
            raise ResourceTypeMismatch(self.id, fqt)

    def _validate(self, resource: Resource) -> None:
        if not resource.get_identifier():
            raise ValidationError(
                f"Instance of {self.fqt} has no value for identifying field "
                f"'{self._declaration.identified_by}'"
            )
        for field_name in self._declaration.required:
            if resource.get(field_name) is None:
                raise ValidationError(
                    f"Instance {resource.get_fully_qualified_identifier()} "
                    f"missing required field {field_name}"
                )

    def _load(self, identifier: str) -> Optional[Resource]:
        document = self._store.get(self.id, str(identifier))
        if document is None:
            return None
        return self._serializer.from_json(document)

    def _write(self, resource: Resource) -> None:
        stored = dehydrate_fields(resource)
        self._store.put(self.id, str(resource.get_identifier()), self._serializer.to_json(stored))

    @staticmethod
    def _identifier_of(resource_or_id: Union[Resource, str]) -> str:
        if isinstance(resource_or_id, Resource):
            return str(resource_or_id.get_identifier())
        return str(resource_or_id)

    # ══════════════════════════════════════════════════════════
    # READ
    # ══════════════════════════════════════════════════════════

    def get(self, identifier: str) -> Resource:
        resource = self._load(identifier)
        if resource is None or not self._access.can(OP_READ, resource):
            raise ResourceNotFound(self.id, str(identifier))
        return resource

    def get_all(self) -> List[Resource]:
        resources = [self._serializer.from_json(doc) for doc in self._store.list(self.id)]
        return [r for r in resources if self._access.can(OP_READ, r)]

    def exists(self, identifier: str) -> bool:
        resource = self._load(identifier)
        return resource is not None and self._access.can(OP_READ, resource)

    def resolve(self, identifier: str) -> Resource:
        """get() with every relationship replaced by its target."""
        return Resolver(self._require_lookup()).resolve(self.get(identifier))

    def resolve_all(self) -> List[Resource]:
        resolver = Resolver(self._require_lookup())
        return [resolver.resolve(r) for r in self.get_all()]

    def _require_lookup(self) -> RelationshipLookup:
        if self._lookup is None:
            raise RuntimeError(f"Registry {self.id} was built without a relationship lookup.")
        return self._lookup

    # ══════════════════════════════════════════════════════════
    # WRITE
    # ══════════════════════════════════════════════════════════

    def add(self, resource: Resource) -> None:
        self._check_type(resource)
        self._validate(resource)
        self._access.check(OP_CREATE, resource)
        if self._store.get(self.id, str(resource.get_identifier())) is not None:
            raise ResourceAlreadyExists(self.id, str(resource.get_identifier()))
        self._write(resource)
        logger.debug(f"Added {resource.get_fully_qualified_identifier()}")

    def add_all(self, resources: Iterable[Resource]) -> None:
        for resource in resources:
            self.add(resource)

    def update(self, resource: Resource) -> None:
        self._check_type(resource)
        self._validate(resource)
        existing = self.get(resource.get_identifier())
        self._access.check(OP_UPDATE, existing)
        self._access.check(OP_UPDATE, resource)
        self._write(resource)
        logger.debug(f"Updated {resource.get_fully_qualified_identifier()}")

    def update_all(self, resources: Iterable[Resource]) -> None:
        for resource in resources:
            self.update(resource)

    def remove(self, resource_or_id: Union[Resource, str]) -> None:
        identifier = self._identifier_of(resource_or_id)
        existing = self.get(identifier)
        self._access.check(OP_DELETE, existing)
        self._store.delete(self.id, identifier)
        logger.debug(f"Removed {existing.get_fully_qualified_identifier()}")

    def remove_all(self, resources: Iterable[Union[Resource, str]]) -> None:
        for resource in list(resources):
            self.remove(resource)


class AssetRegistry(Registry):
    registry_type = ASSET_REGISTRY


class ParticipantRegistry(Registry):
    registry_type = PARTICIPANT_REGISTRY
