"""
Vehicle Manufacture Network
=============================
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.vehicle_manufacture.models import build_model
from networks.vehicle_manufacture.processors import PROCESSORS

NETWORK_NAME = "vehicle-manufacture-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Vehicle manufacture network",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
