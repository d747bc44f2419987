"""
Composer Registry — World-State Store
========================================
Key/value storage of JSON documents, grouped in collections.

A collection id is '<Asset|Participant>:<fqt>' for registries, or a
system collection name ('Identity', 'Historian').

Every store offers unit_of_work(): a context manager inside which
all writes commit together, or none do.
"""

from __future__ import annotations

import copy
import logging
from contextlib import contextmanager
from threading import RLock
from typing import Dict, Iterator, List, Optional, Protocol

logger = logging.getLogger("composer.registry")


# ══════════════════════════════════════════════════════════════
# STORE PROTOCOL
# ══════════════════════════════════════════════════════════════

class WorldStateStore(Protocol):
    """Document storage used by registries, identities and the historian."""

    def get(self, collection_id: str, identifier: str) -> Optional[dict]:
        ...

    def list(self, collection_id: str) -> List[dict]:
        ...

    def put(self, collection_id: str, identifier: str, document: dict) -> None:
        ...

    def delete(self, collection_id: str, identifier: str) -> bool:
        ...

    def unit_of_work(self):
        ...


# ══════════════════════════════════════════════════════════════
# IN-MEMORY STORE
# ══════════════════════════════════════════════════════════════

class InMemoryWorldStateStore:
    """
    Process-local store.

    Documents are deep-copied on the way in and out so callers never
    share mutable state with the store. A unit of work holds the lock
    for its whole duration, so transactions apply one at a time, and
    restores the pre-transaction snapshot if the body raises.
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, dict]] = {}
        self._lock = RLock()
        self._depth = 0

    def get(self, collection_id: str, identifier: str) -> Optional[dict]:
        with self._lock:
            document = self._collections.get(collection_id, {}).get(identifier)
            return copy.deepcopy(document)

    def list(self, collection_id: str) -> List[dict]:
        with self._lock:
            return copy.deepcopy(list(self._collections.get(collection_id, {}).values()))

    def put(self, collection_id: str, identifier: str, document: dict) -> None:
        with self._lock:
            collection = self._collections.setdefault(collection_id, {})
            collection[identifier] = copy.deepcopy(document)

    def delete(self, collection_id: str, identifier: str) -> bool:
        with self._lock:
            collection = self._collections.get(collection_id, {})
            return collection.pop(identifier, None) is not None

    def collection_ids(self) -> List[str]:
        with self._lock:
            return sorted(self._collections)

    @contextmanager
    def unit_of_work(self) -> Iterator[None]:
        with self._lock:
            if self._depth:
                self._depth += 1
                try:
                    yield
                finally:
                    self._depth -= 1
                return

            snapshot = copy.deepcopy(self._collections)
            self._depth = 1
            try:
                yield
            except BaseException:
                self._collections = snapshot
                logger.info("Unit of work rolled back")
                raise
            finally:
                self._depth = 0
