"""
Composer Runtime — Registry Provider
======================================
Builds registries, relationship lookups and query results for one
caller. Every registry it hands out checks the caller's ACL.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from core.permissions.constants import OP_READ
from core.permissions.evaluator import AccessController
from core.registry.errors import ResourceNotFound
from core.registry.registry import AssetRegistry, ParticipantRegistry, Registry, collection_id_for
from core.registry.store import WorldStateStore
from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, ModelManager
from core.resources.resource import Relationship, Resource
from core.resources.serializer import Serializer
from core.runtime.query import Query

_REGISTRY_CLASSES = {
    KIND_ASSET: AssetRegistry,
    KIND_PARTICIPANT: ParticipantRegistry,
}


class RegistryProvider:

    def __init__(
        self,
        model: ModelManager,
        store: WorldStateStore,
        serializer: Serializer,
        access: AccessController,
    ):
        self._model = model
        self._store = store
        self._serializer = serializer
        self._access = access

    @property
    def access(self) -> AccessController:
        return self._access

    @property
    def model(self) -> ModelManager:
        return self._model

    def registry(self, fqt: str) -> Registry:
        declaration = self._model.get(fqt)
        registry_class = _REGISTRY_CLASSES.get(declaration.kind)
        if registry_class is None:
            raise ValueError(f"'{fqt}' is a {declaration.kind.lower()} and has no registry.")
        return registry_class(
            declaration,
            self._store,
            self._serializer,
            access=self._access,
            lookup=self.lookup,
        )

    def asset_registry(self, fqt: str) -> AssetRegistry:
        registry = self.registry(fqt)
        if not isinstance(registry, AssetRegistry):
            raise ValueError(f"'{fqt}' is not an asset type.")
        return registry

    def participant_registry(self, fqt: str) -> ParticipantRegistry:
        registry = self.registry(fqt)
        if not isinstance(registry, ParticipantRegistry):
            raise ValueError(f"'{fqt}' is not a participant type.")
        return registry

    def lookup(self, relationship: Relationship) -> Optional[Resource]:
        """Stored target of a relationship, None if missing or unreadable."""
        fqt = relationship.get_fully_qualified_type()
        if not self._model.is_declared(fqt):
            return None
        declaration = self._model.get(fqt)
        if not declaration.is_registry_kind:
            return None
        document = self._store.get(collection_id_for(declaration), str(relationship.get_identifier()))
        if document is None:
            return None
        resource = self._serializer.from_json(document)
        if not self._access.can(OP_READ, resource):
            return None
        return resource

    def require(self, relationship: Relationship) -> Resource:
        """lookup() that raises ResourceNotFound instead of returning None."""
        declaration = self._model.get(relationship.get_fully_qualified_type())
        resource = self.lookup(relationship)
        if resource is None:
            raise ResourceNotFound(collection_id_for(declaration), str(relationship.get_identifier()))
        return resource

    def run_query(self, query: Query, params: Mapping[str, Any]) -> List[Resource]:
        query.check_parameters(params)
        return [
            resource
            for resource in self.registry(query.resource_type).get_all()
            if query.matches(resource, params)
        ]
