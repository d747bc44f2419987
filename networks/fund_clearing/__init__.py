"""
Fund Clearing Network
=======================
Inter-bank transfer netting and settlement.
"""

from core.runtime.network import BusinessNetworkDefinition
from networks.fund_clearing.acl import RULES
from networks.fund_clearing.models import build_model
from networks.fund_clearing.processors import PROCESSORS
from networks.fund_clearing.queries import QUERIES

NETWORK_NAME = "fund-clearing-network"
VERSION = "0.1.0"


def build_network() -> BusinessNetworkDefinition:
    return BusinessNetworkDefinition(
        name=NETWORK_NAME,
        version=VERSION,
        description="Fund clearing between banks",
        model=build_model(),
        processors=PROCESSORS,
        queries=QUERIES,
        acl=RULES,
        logger_name=__name__,
    )
