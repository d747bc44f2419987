"""
Composer Identity — Identity Service
=======================================
Issues and revokes identities for the participants of one network
and resolves an identity name to its participant at connect time.

Identities live in the world state collection 'Identity:<network>'.
The administrator identity is built in and never stored.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, List

from core.errors import NetworkError
from core.identity.models import Identity
from core.registry.registry import collection_id_for
from core.registry.store import WorldStateStore
from core.resources.model import KIND_PARTICIPANT, NETWORK_ADMIN_FQT, ModelManager
from core.resources.resource import Relationship

logger = logging.getLogger("composer.runtime")

IDENTITY_COLLECTION = "Identity"
ADMIN_PARTICIPANT_ID = "admin"


class IdentityError(NetworkError):
    """Identity cannot be issued, found, or used."""
    pass


class IdentityService:
    """
    Usage:
        service = IdentityService(store, model, network_name="trade-network")
        service.issue_identity(alice.to_relationship(), "alice1")
        service.participant_for("alice1")
        # Relationship(org.acme.trading.Trader#alice)
    """

    def __init__(
        self,
        store: WorldStateStore,
        model: ModelManager,
        network_name: str,
        admin_identity: str = "admin",
    ):
        self._store = store
        self._model = model
        self._collection_id = f"{IDENTITY_COLLECTION}:{network_name}"
        self._admin = Identity(
            name=admin_identity,
            identity_id=admin_identity,
            participant=f"{NETWORK_ADMIN_FQT}#{ADMIN_PARTICIPANT_ID}",
        )

    @property
    def admin(self) -> Identity:
        return self._admin

    @property
    def collection_id(self) -> str:
        return self._collection_id

    # ══════════════════════════════════════════════════════════
    # ISSUE / REVOKE
    # ══════════════════════════════════════════════════════════

    def issue_identity(self, participant: Any, user_id: str) -> Identity:
        """
        Bind a new identity named user_id to an existing participant.

        Raises:
            IdentityError: unknown participant, or user_id already taken.
        """
        if not user_id or not isinstance(user_id, str):
            raise IdentityError("user_id must be a non-empty string.")

        if user_id == self._admin.name or self._store.get(self._collection_id, user_id) is not None:
            raise IdentityError(f"Identity with name '{user_id}' has already been issued")

        fqt = participant.get_fully_qualified_type()
        declaration = self._model.get(fqt)
        if declaration.kind != KIND_PARTICIPANT:
            raise IdentityError(f"'{fqt}' is not a participant type")

        if self._store.get(collection_id_for(declaration), str(participant.get_identifier())) is None:
            raise IdentityError(
                f"Participant '{participant.get_fully_qualified_identifier()}' does not exist"
            )

        identity = Identity(
            name=user_id,
            identity_id=uuid.uuid4().hex,
            participant=participant.get_fully_qualified_identifier(),
        )
        self._store.put(self._collection_id, user_id, identity.to_dict())
        logger.info(f"Identity '{user_id}' issued for {identity.participant}")
        return identity

    def revoke_identity(self, user_id: str) -> Identity:
        identity = self.get(user_id)
        if identity is self._admin:
            raise IdentityError("The administrator identity cannot be revoked")
        if identity.is_revoked:
            raise IdentityError(f"Identity '{user_id}' has already been revoked")
        revoked = identity.revoked()
        self._store.put(self._collection_id, user_id, revoked.to_dict())
        logger.info(f"Identity '{user_id}' revoked")
        return revoked

    # ══════════════════════════════════════════════════════════
    # LOOKUP
    # ══════════════════════════════════════════════════════════

    def get(self, user_id: str) -> Identity:
        if user_id == self._admin.name:
            return self._admin
        document = self._store.get(self._collection_id, user_id)
        if document is None:
            raise IdentityError(f"The identity '{user_id}' has not been issued")
        return Identity.from_dict(document)

    def get_all(self) -> List[Identity]:
        return [Identity.from_dict(doc) for doc in self._store.list(self._collection_id)]

    def validate(self, user_id: str) -> Identity:
        """get(), refusing revoked identities."""
        identity = self.get(user_id)
        if identity.is_revoked:
            raise IdentityError(
                f"The current identity, with the name '{identity.name}' and the "
                f"identifier '{identity.identity_id}', has been revoked"
            )
        return identity

    def participant_for(self, user_id: str) -> Relationship:
        """Relationship to the participant bound to an active identity."""
        return Relationship.from_uri(self.validate(user_id).participant)
