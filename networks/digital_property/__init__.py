"""
Digital Property Network
==========================
Land titles owned by people, offered for sale through sales
agreements.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.digital_property.models import build_model
from networks.digital_property.processors import PROCESSORS

NETWORK_NAME = "digitalproperty-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Digital property management network",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
