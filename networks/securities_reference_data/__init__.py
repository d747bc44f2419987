"""
Securities Reference Data Network
===================================
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.securities_reference_data.models import build_model
from networks.securities_reference_data.processors import PROCESSORS

NETWORK_NAME = "securities-reference-data-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Reference data for corporate bonds",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
