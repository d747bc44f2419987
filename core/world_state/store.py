"""
Composer World State — Django Store
=====================================
WorldStateStore backed by the StateRecord table.

unit_of_work() is transaction.atomic(): a processor failure rolls
back every document written during that transaction.
"""

from __future__ import annotations

from typing import List, Optional

from django.db import transaction

from core.world_state.models import StateRecord


class DjangoWorldStateStore:
    """
    Usage:
        runtime = EmbeddedRuntime(store=DjangoWorldStateStore())
    """

    def get(self, collection_id: str, identifier: str) -> Optional[dict]:
        record = (
            StateRecord.objects
            .filter(collection_id=collection_id, identifier=identifier)
            .only("document")
            .first()
        )
        return None if record is None else record.document

    def list(self, collection_id: str) -> List[dict]:
        return list(
            StateRecord.objects
            .filter(collection_id=collection_id)
            .order_by("id")
            .values_list("document", flat=True)
        )

    def put(self, collection_id: str, identifier: str, document: dict) -> None:
        StateRecord.objects.update_or_create(
            collection_id=collection_id,
            identifier=identifier,
            defaults={"document": document},
        )

    def delete(self, collection_id: str, identifier: str) -> bool:
        deleted, _ = StateRecord.objects.filter(
            collection_id=collection_id,
            identifier=identifier,
        ).delete()
        return deleted > 0

    def unit_of_work(self):
        return transaction.atomic()
