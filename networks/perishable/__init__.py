"""
Perishable Goods Network
==========================
Temperature-monitored shipments paid out according to their
contract.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.perishable.models import build_model
from networks.perishable.processors import PROCESSORS

NETWORK_NAME = "perishable-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Shipping perishable goods business network",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
