"""
Basic Sample Network — Access Control
=======================================
Participants read everything in the namespace and submit sample
transactions; only an asset's owner may write it.
"""

from core.permissions import ACTION_ALLOW, OP_ALL, OP_CREATE, OP_READ, AclRule
from networks.basic_sample.models import (
    NAMESPACE,
    SAMPLE_ASSET,
    SAMPLE_PARTICIPANT,
    SAMPLE_TRANSACTION,
)


def _owns(participant, asset, tx) -> bool:
    owner = asset.get("owner")
    return owner is not None and owner.get_identifier() == participant.get_identifier()


RULES = (
    AclRule(
        name="EverybodyCanReadEverything",
        description="Allow all participants read access to all resources",
        participant=SAMPLE_PARTICIPANT,
        operations=frozenset({OP_READ}),
        resource=f"{NAMESPACE}.*",
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="EverybodyCanSubmitTransactions",
        description="Allow all participants to submit transactions",
        participant=SAMPLE_PARTICIPANT,
        operations=frozenset({OP_CREATE}),
        resource=SAMPLE_TRANSACTION,
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="OwnerHasFullAccessToTheirAssets",
        description="Allow all participants full access to their assets",
        participant=SAMPLE_PARTICIPANT,
        operations=frozenset({OP_ALL}),
        resource=SAMPLE_ASSET,
        condition=_owns,
        action=ACTION_ALLOW,
    ),
)
