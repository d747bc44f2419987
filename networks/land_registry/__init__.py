"""
Land Registry Network
=======================
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.land_registry.models import build_model
from networks.land_registry.processors import PROCESSORS

NETWORK_NAME = "land-registry-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Real estate purchases with loans and insurances",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
