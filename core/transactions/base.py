"""
Composer Transactions — Submission Contract
==============================================
Every state change in a business network begins as a submitted
transaction.

A TransactionSubmission is a frozen record of who submitted which
transaction resource, and when. It carries identity and the
transaction; the transaction carries the business intent.

Rules:
- Immutable once created (frozen dataclass)
- The transaction is a declared TRANSACTION resource
- transaction_id non-empty, timestamp timezone-aware
- identity names the identity used to connect

A submission is NOT a result. It is intent awaiting judgment.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from core.resources.model import KIND_TRANSACTION
from core.resources.resource import Resource


@dataclass(frozen=True)
class TransactionSubmission:
    """
    Fields:
        submission_id:  Unique identifier (UUID) of this submission.
        transaction:    The TRANSACTION resource (relationships unresolved).
        identity:       Name of the identity that submitted it.
        participant:    Participant bound to that identity (None if the
                        participant no longer exists).
        network:        Identifier of the target network ('name@version').
        submitted_at:   When the connection accepted the call.
    """

    submission_id: uuid.UUID
    transaction: Resource
    identity: str
    participant: Optional[Any]
    network: str
    submitted_at: datetime

    def __post_init__(self):
        if not isinstance(self.submission_id, uuid.UUID):
            raise ValueError(
                f"submission_id must be UUID, got {type(self.submission_id).__name__}"
            )

        if not isinstance(self.transaction, Resource):
            raise TypeError("transaction must be a Resource.")

        if self.transaction.kind != KIND_TRANSACTION:
            raise ValueError(
                f"'{self.transaction.get_fully_qualified_type()}' is a "
                f"{self.transaction.kind.lower()}, not a transaction."
            )

        if not self.transaction.get_identifier():
            raise ValueError("transaction_id must be a non-empty string.")

        timestamp = self.transaction.get("timestamp")
        if not isinstance(timestamp, datetime) or timestamp.tzinfo is None:
            raise ValueError("transaction timestamp must be a timezone-aware datetime.")

        if not self.identity or not isinstance(self.identity, str):
            raise ValueError("identity must be a non-empty string.")

        if not self.network or not isinstance(self.network, str):
            raise ValueError("network must be a non-empty string.")

    @property
    def transaction_id(self) -> str:
        return self.transaction.get_identifier()

    @property
    def transaction_type(self) -> str:
        return self.transaction.get_fully_qualified_type()

    @property
    def timestamp(self) -> datetime:
        return self.transaction.timestamp
