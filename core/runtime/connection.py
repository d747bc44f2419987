"""
Composer Runtime — Network Connection
========================================
A caller's handle on one deployed network, bound to one identity.

Registries handed out by a connection check the identity's ACL.
submit_transaction raises TransactionRejected when the transaction
does not commit.
"""

from __future__ import annotations

import functools
import logging
import uuid
from typing import Any, Callable, Dict, List, Tuple

from core.events.errors import DuplicateSubscriberError
from core.identity.models import Identity
from core.identity.service import IdentityError
from core.permissions.evaluator import UNRESTRICTED, AccessController
from core.resources.model import KIND_TRANSACTION, NETWORK_ADMIN_FQT
from core.resources.resource import Resource
from core.resources.serializer import dehydrate
from core.runtime.historian import HistorianRecord
from core.runtime.registries import RegistryProvider
from core.time.clock import get_default_clock
from core.transactions.base import TransactionSubmission
from core.transactions.bus import TransactionRejected, TransactionResult

logger = logging.getLogger("composer.runtime")


class NetworkConnection:

    def __init__(self, network: Any, identity: Identity):
        self._network = network
        self._identity = identity
        self._handlers: List[Tuple[str, Callable, Callable]] = []

    # ══════════════════════════════════════════════════════════
    # PROPERTIES
    # ══════════════════════════════════════════════════════════

    @property
    def business_network(self):
        return self._network.definition

    @property
    def identity(self) -> Identity:
        return self._identity

    @property
    def factory(self):
        return self._network.factory

    @property
    def is_admin(self) -> bool:
        return self._identity.name == self._network.identities.admin.name

    # ══════════════════════════════════════════════════════════
    # CALLER
    # ══════════════════════════════════════════════════════════

    def _current_participant(self) -> Resource:
        """Participant bound to this connection's identity, re-checked per call."""
        identities = self._network.identities
        relationship = identities.participant_for(self._identity.name)
        if relationship.get_fully_qualified_type() == NETWORK_ADMIN_FQT:
            return Resource(
                self._network.model.get(NETWORK_ADMIN_FQT),
                {"participant_id": relationship.get_identifier()},
            )

        unrestricted = RegistryProvider(
            self._network.model,
            self._network.store,
            self._network.serializer,
            UNRESTRICTED,
        )
        participant = unrestricted.lookup(relationship)
        if participant is None:
            raise IdentityError(
                f"The current identity, with the name '{self._identity.name}' and the "
                f"identifier '{self._identity.identity_id}', is bound to a participant "
                f"'{relationship.get_fully_qualified_identifier()}' that does not exist"
            )
        return participant

    def _registries(self) -> RegistryProvider:
        access = AccessController(self._network.acl, participant=self._current_participant())
        return RegistryProvider(
            self._network.model, self._network.store, self._network.serializer, access
        )

    # ══════════════════════════════════════════════════════════
    # REGISTRIES / QUERIES
    # ══════════════════════════════════════════════════════════

    def get_asset_registry(self, fqt: str):
        return self._registries().asset_registry(fqt)

    def get_participant_registry(self, fqt: str):
        return self._registries().participant_registry(fqt)

    def query(self, name: str, **params: Any) -> List[Resource]:
        query = self._network.definition.get_query(name)
        return self._registries().run_query(query, params)

    # ══════════════════════════════════════════════════════════
    # TRANSACTIONS
    # ══════════════════════════════════════════════════════════

    def submit_transaction(self, transaction: Resource) -> TransactionResult:
        """
        Submit and wait for the transaction to commit.

        Raises:
            TransactionRejected: validation, ACL or processor refused it.
        """
        if not isinstance(transaction, Resource) or transaction.kind != KIND_TRANSACTION:
            raise TypeError(f"Expected a transaction resource, got {transaction!r}.")

        submission = TransactionSubmission(
            submission_id=uuid.uuid4(),
            transaction=dehydrate(transaction),
            identity=self._identity.name,
            participant=self._current_participant(),
            network=self._network.identifier,
            submitted_at=(self._network.clock or get_default_clock()).now_utc(),
        )
        result = self._network.bus.handle(submission)
        if result.is_rejected:
            raise TransactionRejected(result.reason)
        return result

    # ══════════════════════════════════════════════════════════
    # EVENTS
    # ══════════════════════════════════════════════════════════

    def on(self, event_type: str, handler: Callable) -> None:
        """
        Call handler with every committed event of event_type ('*' for all).

        Subscriptions belong to this connection: another connection may
        register the same handler, and disconnect() removes only ours.
        """
        for registered_type, registered, _ in self._handlers:
            if registered_type == event_type and registered is handler:
                raise DuplicateSubscriberError(
                    event_type, getattr(handler, "__qualname__", str(handler))
                )

        @functools.wraps(handler)
        def deliver(event):
            return handler(event)

        self._network.subscribers.register_subscriber(
            event_type, deliver, subscriber=self._identity.name
        )
        self._handlers.append((event_type, handler, deliver))

    def disconnect(self) -> None:
        for event_type, _, deliver in self._handlers:
            self._network.subscribers.unregister_subscriber(event_type, deliver)
        self._handlers.clear()

    # ══════════════════════════════════════════════════════════
    # IDENTITIES / HISTORIAN
    # ══════════════════════════════════════════════════════════

    def _require_admin(self, action: str) -> None:
        if not self.is_admin:
            raise IdentityError(
                f"Identity '{self._identity.name}' is not allowed to {action}"
            )

    def issue_identity(self, participant: Any, user_id: str) -> Identity:
        self._require_admin("issue identities")
        return self._network.identities.issue_identity(participant, user_id)

    def revoke_identity(self, user_id: str) -> Identity:
        self._require_admin("revoke identities")
        return self._network.identities.revoke_identity(user_id)

    def ping(self) -> Dict[str, Any]:
        participant = self._current_participant()
        return {
            "network": self._network.identifier,
            "version": self._network.definition.version,
            "identity": self._identity.name,
            "participant": participant.get_fully_qualified_identifier(),
        }

    def get_historian(self) -> List[HistorianRecord]:
        return self._network.historian.get_all()
