"""
Animal Tracking Network
=========================
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.animal_tracking.models import build_model
from networks.animal_tracking.processors import PROCESSORS

NETWORK_NAME = "animaltracking-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Animal tracking network",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
