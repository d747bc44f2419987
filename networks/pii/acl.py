"""
PII Network — Access Control
==============================
Members have full access to their own record and read access to
the records of members who authorized them.
"""

from core.permissions import ACTION_ALLOW, ANY, OP_ALL, OP_READ, AclRule
from networks.pii.models import AUTHORIZE_ACCESS, MEMBER, REVOKE_ACCESS


def _is_self(participant, member, tx) -> bool:
    return member.get_identifier() == participant.get_identifier()


def _has_authorized(participant, member, tx) -> bool:
    return participant.get_identifier() in (member.get("authorized") or [])


RULES = (
    AclRule(
        name="AuthorizeAccessTransaction",
        description="Allow all participants to submit AuthorizeAccess transactions",
        participant=ANY,
        operations=frozenset({OP_ALL}),
        resource=AUTHORIZE_ACCESS,
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="RevokeAccessTransaction",
        description="Allow all participants to submit RevokeAccess transactions",
        participant=ANY,
        operations=frozenset({OP_ALL}),
        resource=REVOKE_ACCESS,
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="OwnRecordFullAccess",
        description="Allow all participants full access to their own record",
        participant=MEMBER,
        operations=frozenset({OP_ALL}),
        resource=MEMBER,
        condition=_is_self,
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="ForeignRecordConditionalAccess",
        description="Allow participants access to other people's records if granted",
        participant=MEMBER,
        operations=frozenset({OP_READ}),
        resource=MEMBER,
        condition=_has_authorized,
        action=ACTION_ALLOW,
    ),
)
