"""
Composer Resources — Factory
===============================
Creates typed resources, relationships, concepts, transactions and
events against a network's ModelManager.

Transactions receive a fresh transaction_id and the clock's current
timestamp. Events receive their id and timestamp when emitted.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from core.resources.model import (
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_TRANSACTION,
    REGISTRY_KINDS,
    TIMESTAMP_FIELD,
    TRANSACTION_ID_FIELD,
    ModelManager,
    TypeDeclaration,
)
from core.resources.resource import Relationship, Resource
from core.time.clock import Clock, get_default_clock


class Factory:
    """
    Usage:
        factory = Factory(model, clock=FixedClock(NOW))
        trader = factory.new_resource(NS, "Trader", "dan", first_name="Dan")
        tx = factory.new_transaction(NS, "Trade",
                                     commodity=factory.new_relationship(NS, "Commodity", "EMA"))
    """

    def __init__(self, model: ModelManager, clock: Optional[Clock] = None):
        self._model = model
        self._clock = clock

    @property
    def model(self) -> ModelManager:
        return self._model

    def _now(self):
        return (self._clock or get_default_clock()).now_utc()

    def _declaration(self, namespace: str, type_name: str, kinds) -> TypeDeclaration:
        declaration = self._model.get(f"{namespace}.{type_name}")
        if declaration.kind not in kinds:
            raise ValueError(
                f"{declaration.fqt} is a {declaration.kind.lower()}, "
                f"expected one of: {sorted(kinds)}"
            )
        return declaration

    def new_resource(self, namespace: str, type_name: str, identifier: str, **fields: Any) -> Resource:
        if identifier is None or str(identifier) == "":
            raise ValueError("identifier must be non-empty.")
        declaration = self._declaration(namespace, type_name, REGISTRY_KINDS)
        resource = Resource(declaration, fields)
        resource.set_identifier(identifier)
        return resource

    def new_relationship(self, namespace: str, type_name: str, identifier: str) -> Relationship:
        self._declaration(namespace, type_name, REGISTRY_KINDS)
        return Relationship(namespace=namespace, type_name=type_name, identifier=identifier)

    def new_concept(self, namespace: str, type_name: str, **fields: Any) -> Resource:
        declaration = self._declaration(namespace, type_name, {KIND_CONCEPT})
        return Resource(declaration, fields)

    def new_transaction(self, namespace: str, type_name: str, **fields: Any) -> Resource:
        declaration = self._declaration(namespace, type_name, {KIND_TRANSACTION})
        fields.setdefault(TRANSACTION_ID_FIELD, str(uuid.uuid4()))
        fields.setdefault(TIMESTAMP_FIELD, self._now())
        return Resource(declaration, fields)

    def new_event(self, namespace: str, type_name: str, **fields: Any) -> Resource:
        declaration = self._declaration(namespace, type_name, {KIND_EVENT})
        return Resource(declaration, fields)
