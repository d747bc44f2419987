"""
Letters of Credit Network
===========================
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.letters_of_credit.models import build_model
from networks.letters_of_credit.processors import PROCESSORS

NETWORK_NAME = "letters-of-credit-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Letters of credit between importers, exporters and their banks",
        model=build_model(),
        processors=PROCESSORS,
        logger_name=__name__,
    )
