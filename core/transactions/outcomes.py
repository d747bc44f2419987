"""
Composer Transactions — Outcome Contract
==========================================
Every submission produces exactly one outcome.

ACCEPTED → the processor ran and its writes committed.
REJECTED → nothing was written; reason is mandatory.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from core.transactions.rejection import RejectionReason


class TransactionStatus(Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class TransactionOutcome:
    """
    Invariants:
        - REJECTED + reason is None → ValueError
        - ACCEPTED + reason is not None → ValueError
    """

    transaction_id: str
    status: TransactionStatus
    reason: Optional[RejectionReason]
    occurred_at: datetime

    def __post_init__(self):
        if not self.transaction_id or not isinstance(self.transaction_id, str):
            raise ValueError("transaction_id must be a non-empty string.")

        if not isinstance(self.status, TransactionStatus):
            raise ValueError(
                f"status must be TransactionStatus, got {type(self.status).__name__}."
            )

        if self.status == TransactionStatus.REJECTED and self.reason is None:
            raise ValueError("REJECTED outcome must include a RejectionReason.")

        if self.status == TransactionStatus.ACCEPTED and self.reason is not None:
            raise ValueError("ACCEPTED outcome must NOT include a RejectionReason.")

        if not isinstance(self.occurred_at, datetime):
            raise ValueError("occurred_at must be a datetime.")

    @property
    def is_accepted(self) -> bool:
        return self.status == TransactionStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status == TransactionStatus.REJECTED

    @classmethod
    def accepted(cls, transaction_id: str, occurred_at: datetime) -> "TransactionOutcome":
        return cls(transaction_id, TransactionStatus.ACCEPTED, None, occurred_at)

    @classmethod
    def rejected(cls, transaction_id: str, reason: RejectionReason, occurred_at: datetime) -> "TransactionOutcome":
        return cls(transaction_id, TransactionStatus.REJECTED, reason, occurred_at)
