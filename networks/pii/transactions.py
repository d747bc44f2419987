"""
PII Network — Transaction Requests
====================================
Both requests name the member whose access changes; the granting
member is whoever submits the transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.pii.models import NAMESPACE


@dataclass(frozen=True)
class AuthorizeAccessRequest:
    member_id: str

    def __post_init__(self):
        if not self.member_id:
            raise ValueError("member_id must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "AuthorizeAccess", member_id=self.member_id)


@dataclass(frozen=True)
class RevokeAccessRequest:
    member_id: str

    def __post_init__(self):
        if not self.member_id:
            raise ValueError("member_id must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "RevokeAccess", member_id=self.member_id)
