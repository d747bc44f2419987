"""
PII Network — Model
=====================
Members keep personal records and decide which other members may
read them.
"""

from core.resources.model import (
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.acme.pii"

MEMBER = f"{NAMESPACE}.Member"
AUTHORIZE_ACCESS = f"{NAMESPACE}.AuthorizeAccess"
REVOKE_ACCESS = f"{NAMESPACE}.RevokeAccess"
MEMBER_EVENT = f"{NAMESPACE}.MemberEvent"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Address", KIND_CONCEPT)
    model.declare(NAMESPACE, "Member", KIND_PARTICIPANT,
                  identified_by="email", datetime_fields=("dob",),
                  required=("first_name", "last_name"))
    model.declare(NAMESPACE, "AuthorizeAccess", KIND_TRANSACTION, required=("member_id",))
    model.declare(NAMESPACE, "RevokeAccess", KIND_TRANSACTION, required=("member_id",))
    model.declare(NAMESPACE, "MemberEvent", KIND_EVENT, required=("member_transaction",))
    return model
