"""
Composer Runtime — Transaction Context
=========================================
What a processor can reach while its transaction runs.

    def ship_product(tx, ctx):
        letter = tx.loc
        ...
        ctx.asset_registry(LETTER_OF_CREDIT).update(letter)
        ctx.emit(ctx.factory.new_event(NS, "ShipProductEvent",
                                       transaction=tx, loc=letter))

Every registry and query reached through the context checks the
submitting participant's ACL. Events are collected, not published.
"""

from __future__ import annotations

import logging
from typing import Any, List

from core.events.emitter import EventEmitter
from core.permissions.evaluator import AccessController
from core.resources.factory import Factory
from core.resources.resolver import Resolver
from core.resources.resource import Relationship, Resource
from core.runtime.registries import RegistryProvider
from core.transactions.base import TransactionSubmission

runtime_logger = logging.getLogger("composer.runtime")


class TransactionContext:

    def __init__(
        self,
        transaction: Resource,
        current_participant: Any,
        factory: Factory,
        registries: RegistryProvider,
        emitter: EventEmitter,
        network: Any,
        logger: logging.Logger,
    ):
        self._transaction = transaction
        self._current_participant = current_participant
        self._factory = factory
        self._registries = registries
        self._emitter = emitter
        self._network = network
        self._logger = logger

    @property
    def transaction(self) -> Resource:
        return self._transaction

    @property
    def current_participant(self) -> Any:
        """Participant bound to the submitting identity."""
        return self._current_participant

    @property
    def factory(self) -> Factory:
        return self._factory

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def asset_registry(self, fqt: str):
        return self._registries.asset_registry(fqt)

    def participant_registry(self, fqt: str):
        return self._registries.participant_registry(fqt)

    def emit(self, event: Resource) -> Resource:
        return self._emitter.emit(event)

    def query(self, name: str, **params: Any) -> List[Resource]:
        return self._registries.run_query(self._network.get_query(name), params)

    @property
    def events(self) -> List[Resource]:
        return self._emitter.events


def _require_targets(transaction: Resource, registries: RegistryProvider) -> None:
    """
    Every asset or participant the transaction itself points at must
    exist and be readable by the caller. Relationships nested inside
    concepts, or inside the targets, are resolved leniently.
    """
    for value in transaction.to_fields().values():
        items = value if isinstance(value, list) else [value]
        for item in items:
            if isinstance(item, Relationship) and _points_at_registry(item, registries):
                registries.require(item)


def _points_at_registry(relationship: Relationship, registries: RegistryProvider) -> bool:
    fqt = relationship.get_fully_qualified_type()
    return registries.model.is_declared(fqt) and registries.model.get(fqt).is_registry_kind


class ProcessorHandler:
    """
    Bus handler for one transaction type: resolves the submitted
    transaction under the caller's ACL, builds the context and calls
    the processor. Returns the collected events.
    """

    def __init__(self, network: Any, processor):
        self._network = network
        self._processor = processor

    def execute(self, submission: TransactionSubmission) -> List[Resource]:
        network = self._network
        access = AccessController(
            network.acl,
            participant=submission.participant,
            transaction=submission.transaction,
        )
        registries = RegistryProvider(network.model, network.store, network.serializer, access)
        _require_targets(submission.transaction, registries)
        transaction = Resolver(registries.lookup).resolve(submission.transaction)
        emitter = EventEmitter(submission.transaction_id, submission.timestamp)

        context = TransactionContext(
            transaction=transaction,
            current_participant=submission.participant,
            factory=network.factory,
            registries=registries,
            emitter=emitter,
            network=network.definition,
            logger=network.logger,
        )

        level = logging.INFO if network.settings.log_processors else logging.DEBUG
        runtime_logger.log(
            level,
            f"Invoking processor {getattr(self._processor, '__qualname__', self._processor)} "
            f"for {submission.transaction_type} ({submission.transaction_id})",
        )
        self._processor(transaction, context)
        return emitter.events
