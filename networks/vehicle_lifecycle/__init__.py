"""
Vehicle Lifecycle Network
===========================
Manufacture, registration, transfer and scrapping of vehicles
across the manufacturer, owners and the licensing authority.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.vehicle_lifecycle.models import build_model
from networks.vehicle_lifecycle.processors import PROCESSORS
from networks.vehicle_lifecycle.queries import QUERIES

NETWORK_NAME = "vehicle-lifecycle-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Vehicle lifecycle network",
        model=build_model(),
        processors=PROCESSORS,
        queries=QUERIES,
        logger_name=__name__,
    )
