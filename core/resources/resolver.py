"""
Composer Resources — Relationship Resolver
=============================================
Walks a resource graph and replaces relationships with the
resources they point at.

Rules:
- Resolution returns copies; stored documents are never aliased.
- Within one Resolver, the same fully-qualified identifier always
  resolves to the same object (so a participant reached through two
  paths is updated once, consistently).
- Cycles terminate: an entry is cached before its fields are walked.
- A relationship whose target is missing, or hidden from the caller
  by ACL, is left as a Relationship.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from core.resources.resource import Relationship, Resource

logger = logging.getLogger("composer.registry")

# (Relationship) → stored Resource, or None when missing/unreadable.
RelationshipLookup = Callable[[Relationship], Optional[Resource]]


class Resolver:
    """
    Usage:
        resolver = Resolver(lookup=runtime_lookup)
        tx = resolver.resolve(submitted_tx)
        tx.listing.vehicle.owner.balance
    """

    def __init__(self, lookup: RelationshipLookup):
        self._lookup = lookup
        self._cache: Dict[str, Resource] = {}

    def resolve(self, resource: Resource) -> Resource:
        return self._resolve_resource(resource)

    def resolve_relationship(self, relationship: Relationship) -> Any:
        return self._resolve_value(relationship)

    def _resolve_resource(self, resource: Resource) -> Resource:
        key = None
        if resource.declaration.is_registry_kind:
            key = resource.get_fully_qualified_identifier()
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        resolved = Resource(resource.declaration)
        if key is not None:
            self._cache[key] = resolved

        for name, value in resource.to_fields().items():
            setattr(resolved, name, self._resolve_value(value))
        return resolved

    def _resolve_value(self, value: Any) -> Any:
        if isinstance(value, Relationship):
            key = value.get_fully_qualified_identifier()
            cached = self._cache.get(key)
            if cached is not None:
                return cached
            target = self._lookup(value)
            if target is None:
                logger.debug(f"Relationship {key} left unresolved")
                return value
            return self._resolve_resource(target)
        if isinstance(value, Resource):
            return self._resolve_resource(value)
        if isinstance(value, list):
            return [self._resolve_value(item) for item in value]
        if isinstance(value, dict):
            return {key: self._resolve_value(item) for key, item in value.items()}
        return value
