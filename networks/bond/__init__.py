"""
Bond Network
==============
Issuers publish bonds as assets.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.bond.models import build_model
from networks.bond.processors import PROCESSORS

NETWORK_NAME = "bond-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Bond publishing network",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
