"""
Composer Events — Transaction Emitter
=======================================
Collects the events a processor emits during one transaction.

Each event gets id '<transaction_id>#<n>' (n counts from 0 in
emission order) and the transaction's timestamp. The bus publishes
the collected events only after the unit of work commits.
"""

from __future__ import annotations

from typing import Any, List

from core.events.errors import EmitError
from core.resources.model import EVENT_ID_FIELD, KIND_EVENT, TIMESTAMP_FIELD
from core.resources.resource import Resource
from core.resources.serializer import dehydrate


class EventEmitter:

    def __init__(self, transaction_id: str, timestamp: Any):
        self._transaction_id = transaction_id
        self._timestamp = timestamp
        self._events: List[Resource] = []

    def emit(self, event: Resource) -> Resource:
        if not isinstance(event, Resource) or event.kind != KIND_EVENT:
            raise EmitError(f"Only declared events can be emitted, got {event!r}.")
        emitted = dehydrate(event)
        setattr(emitted, EVENT_ID_FIELD, f"{self._transaction_id}#{len(self._events)}")
        setattr(emitted, TIMESTAMP_FIELD, self._timestamp)
        self._events.append(emitted)
        return emitted

    @property
    def events(self) -> List[Resource]:
        return list(self._events)
