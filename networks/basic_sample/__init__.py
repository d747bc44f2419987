"""
Basic Sample Network
======================
The smallest useful business network: participants own assets and
change their value.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.basic_sample.acl import RULES
from networks.basic_sample.models import build_model
from networks.basic_sample.processors import PROCESSORS

NETWORK_NAME = "basic-sample-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="The Hello World of Hyperledger Composer samples",
        model=build_model(),
        processors=PROCESSORS,
        acl=RULES,
        logger_name=__name__,
    )
