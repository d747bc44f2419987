"""
Commodity Trading Network
===========================
Traders exchange commodities; high-quantity holdings can be purged
in bulk through a named query.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.trade.models import build_model
from networks.trade.processors import PROCESSORS
from networks.trade.queries import QUERIES

NETWORK_NAME = "trade-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Commodity trading network",
        model=build_model(),
        processors=PROCESSORS,
        queries=QUERIES,
        logger_name=__name__,
    )
