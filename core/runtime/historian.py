"""
Composer Runtime — Historian
===============================
Append-only record of every committed transaction.

One HistorianRecord per committed transaction, written inside the
same unit of work as the transaction's own writes. Rolled back
transactions leave no record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from core.registry.store import WorldStateStore
from core.resources.serializer import Serializer
from core.transactions.base import TransactionSubmission

HISTORIAN_COLLECTION = "Historian"


@dataclass(frozen=True)
class HistorianRecord:
    """
    Fields:
        transaction_id:    Id of the committed transaction.
        transaction_type:  Its fully-qualified type.
        timestamp:         Transaction timestamp.
        participant:       Fully-qualified identifier of the submitter.
        identity:          Identity name used to submit.
        event_ids:         Ids of the events the transaction emitted.
        transaction:       Serialized transaction as submitted.
    """

    transaction_id: str
    transaction_type: str
    timestamp: datetime
    participant: Optional[str]
    identity: str
    event_ids: Tuple[str, ...] = ()
    transaction: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transaction_id": self.transaction_id,
            "transaction_type": self.transaction_type,
            "timestamp": self.timestamp.isoformat(),
            "participant": self.participant,
            "identity": self.identity,
            "event_ids": list(self.event_ids),
            "transaction": self.transaction,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistorianRecord":
        return cls(
            transaction_id=data["transaction_id"],
            transaction_type=data["transaction_type"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            participant=data.get("participant"),
            identity=data["identity"],
            event_ids=tuple(data.get("event_ids", ())),
            transaction=data.get("transaction"),
        )


class Historian:
    """
    Usage:
        historian = Historian(store, serializer, network_name="trade-network")
        historian.get_all()   # oldest first
    """

    def __init__(self, store: WorldStateStore, serializer: Serializer, network_name: str):
        self._store = store
        self._serializer = serializer
        self._collection_id = f"{HISTORIAN_COLLECTION}:{network_name}"

    def record(self, submission: TransactionSubmission, events: List[Any]) -> HistorianRecord:
        participant = submission.participant
        record = HistorianRecord(
            transaction_id=submission.transaction_id,
            transaction_type=submission.transaction_type,
            timestamp=submission.timestamp,
            participant=participant.get_fully_qualified_identifier() if participant is not None else None,
            identity=submission.identity,
            event_ids=tuple(str(event.get_identifier()) for event in events),
            transaction=self._serializer.to_json(submission.transaction),
        )
        self._store.put(self._collection_id, record.transaction_id, record.to_dict())
        return record

    def get(self, transaction_id: str) -> Optional[HistorianRecord]:
        document = self._store.get(self._collection_id, transaction_id)
        return None if document is None else HistorianRecord.from_dict(document)

    def get_all(self) -> List[HistorianRecord]:
        records = [HistorianRecord.from_dict(doc) for doc in self._store.list(self._collection_id)]
        return sorted(records, key=lambda record: record.timestamp)
