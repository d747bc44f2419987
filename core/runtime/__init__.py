"""
Composer Runtime — Public API
===============================
Embedded runtime, network definitions and connections.
"""

from core.runtime.connection import NetworkConnection
from core.runtime.context import ProcessorHandler, TransactionContext
from core.runtime.historian import Historian, HistorianRecord
from core.runtime.network import BusinessNetworkDefinition, Processor
from core.runtime.query import Query, QueryError
from core.runtime.registries import RegistryProvider
from core.runtime.runtime import DeployedNetwork, EmbeddedRuntime, build_store

__all__ = [
    "BusinessNetworkDefinition",
    "DeployedNetwork",
    "EmbeddedRuntime",
    "Historian",
    "HistorianRecord",
    "NetworkConnection",
    "Processor",
    "ProcessorHandler",
    "Query",
    "QueryError",
    "RegistryProvider",
    "TransactionContext",
    "build_store",
]
