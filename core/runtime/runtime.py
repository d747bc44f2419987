"""
Composer Runtime — Embedded Runtime
======================================
In-process, single-node runtime for deploying sample networks and
driving them from tests.

    runtime = EmbeddedRuntime(clock=FixedClock(NOW))
    runtime.deploy(build_network())
    admin = runtime.connect()
    admin.get_participant_registry(TRADER).add(dan)
    admin.issue_identity(dan.to_relationship(), "dan1")
    dan_connection = runtime.connect("dan1")

The store comes from settings.BUSINESS_NETWORKS["STORE_BACKEND"]
when not given explicitly.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from core.config.runtime import (
    STORE_BACKEND_DJANGO,
    RuntimeSettings,
    get_runtime_settings,
)
from core.errors import NetworkError
from core.events.registry import SubscriberRegistry
from core.identity.service import IdentityService
from core.permissions.evaluator import AclEvaluator
from core.registry.store import InMemoryWorldStateStore, WorldStateStore
from core.resources.factory import Factory
from core.resources.serializer import Serializer
from core.runtime.connection import NetworkConnection
from core.runtime.context import ProcessorHandler
from core.runtime.historian import Historian
from core.runtime.network import BusinessNetworkDefinition
from core.time.clock import Clock
from core.transactions.bus import TransactionBus
from core.transactions.dispatcher import DEFAULT_POLICIES, TransactionDispatcher

logger = logging.getLogger("composer.runtime")


def build_store(settings: RuntimeSettings) -> WorldStateStore:
    if settings.store_backend == STORE_BACKEND_DJANGO:
        # Needs the Django app registry; imported only when selected.
        from core.world_state.store import DjangoWorldStateStore
        return DjangoWorldStateStore()
    return InMemoryWorldStateStore()


class DeployedNetwork:
    """
    A definition bound to a store: the context the dispatcher
    validates against and the bus that runs its processors.
    """

    def __init__(
        self,
        definition: BusinessNetworkDefinition,
        store: WorldStateStore,
        settings: RuntimeSettings,
        clock: Optional[Clock] = None,
    ):
        self.definition = definition
        self.identifier = definition.identifier
        self.model = definition.model
        self.processors = dict(definition.processors)
        self.acl = AclEvaluator(definition.acl)
        self.store = store
        self.settings = settings
        self.clock = clock
        self.serializer = Serializer(self.model)
        self.factory = Factory(self.model, clock=clock)
        self.logger = logging.getLogger(definition.logger_name or f"networks.{definition.name}")
        self.identities = IdentityService(
            store, self.model, definition.name, admin_identity=settings.admin_identity
        )
        self.historian = Historian(store, self.serializer, definition.name)
        self.subscribers = SubscriberRegistry()

        dispatcher = TransactionDispatcher(context=self, clock=clock)
        for policy in DEFAULT_POLICIES:
            dispatcher.register_policy(policy)

        self.bus = TransactionBus(
            dispatcher=dispatcher,
            store=store,
            subscribers=self.subscribers,
            historian=self.historian,
            clock=clock,
        )
        for transaction_type, processor in self.processors.items():
            self.bus.register_handler(transaction_type, ProcessorHandler(self, processor))

    @property
    def name(self) -> str:
        return self.definition.name


class EmbeddedRuntime:

    def __init__(
        self,
        store: Optional[WorldStateStore] = None,
        clock: Optional[Clock] = None,
        settings: Optional[RuntimeSettings] = None,
    ):
        self._settings = settings or get_runtime_settings()
        self._store = store if store is not None else build_store(self._settings)
        self._clock = clock
        self._networks: Dict[str, DeployedNetwork] = {}

    @property
    def store(self) -> WorldStateStore:
        return self._store

    @property
    def settings(self) -> RuntimeSettings:
        return self._settings

    # ══════════════════════════════════════════════════════════
    # DEPLOYMENT
    # ══════════════════════════════════════════════════════════

    def deploy(self, definition: BusinessNetworkDefinition) -> DeployedNetwork:
        if definition.name in self._networks:
            raise NetworkError(f"Business network '{definition.name}' is already deployed")
        deployed = DeployedNetwork(definition, self._store, self._settings, self._clock)
        self._networks[definition.name] = deployed
        logger.info(
            f"Deployed {definition.identifier} with "
            f"{len(deployed.processors)} processor(s), {len(definition.acl)} ACL rule(s)"
        )
        return deployed

    def undeploy(self, network_name: str) -> None:
        if self._networks.pop(network_name, None) is None:
            raise NetworkError(f"Business network '{network_name}' is not deployed")
        logger.info(f"Undeployed {network_name}")

    def get_network(self, network_name: Optional[str] = None) -> DeployedNetwork:
        if network_name is not None:
            deployed = self._networks.get(network_name)
            if deployed is None:
                raise NetworkError(f"Business network '{network_name}' is not deployed")
            return deployed
        if len(self._networks) != 1:
            raise NetworkError(
                f"{len(self._networks)} business networks deployed; name the one to use"
            )
        return next(iter(self._networks.values()))

    # ══════════════════════════════════════════════════════════
    # CONNECTIONS
    # ══════════════════════════════════════════════════════════

    def connect(self, identity_name: Optional[str] = None, network: Optional[str] = None) -> NetworkConnection:
        """
        Connect to a deployed network as identity_name (default: the
        administrator identity).

        Raises:
            IdentityError: identity not issued, or revoked.
        """
        deployed = self.get_network(network)
        identity = deployed.identities.validate(identity_name or self._settings.admin_identity)
        logger.debug(f"Identity '{identity.name}' connected to {deployed.identifier}")
        return NetworkConnection(deployed, identity)

    def query(self, name: str, network: Optional[str] = None, **params):
        """Run a named query as the administrator."""
        return self.connect(network=network).query(name, **params)
