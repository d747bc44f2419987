"""
Marbles Network
=================
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.marbles.models import build_model
from networks.marbles.processors import PROCESSORS

NETWORK_NAME = "marbles-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Players trading marbles",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
