"""
PII Network
=============
Members control who may read their personal information.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.pii.acl import RULES
from networks.pii.models import build_model
from networks.pii.processors import PROCESSORS
from networks.pii.queries import QUERIES

NETWORK_NAME = "pii-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Personally identifiable information network",
        model=build_model(),
        processors=PROCESSORS,
        queries=QUERIES,
        acl=RULES,
        logger_name=__name__,
    )
