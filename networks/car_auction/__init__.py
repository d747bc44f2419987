"""
Car Auction Network
=====================
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.car_auction.models import build_model
from networks.car_auction.processors import PROCESSORS

NETWORK_NAME = "carauction-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Car auction network",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
