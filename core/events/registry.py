"""
Composer Events — Subscriber Registry
=======================================
Controls which handlers receive which committed events.

Rules:
- Event types are fully qualified (org.acme.trading.TradeNotification)
- '*' subscribes to every event of the network
- Multiple subscribers per event type allowed
- Duplicate handler for the same event type forbidden
- In-memory only, thread-safe
"""

import logging
from threading import Lock
from typing import Callable

from core.events.errors import (
    DuplicateSubscriberError,
    EventBusError,
    InvalidEventTypeFormat,
)

logger = logging.getLogger("composer.events")

ALL_EVENTS = "*"


class SubscriberRegistry:
    """
    In-memory registry of event subscribers.

    Each entry maps an event type to a list of (handler, subscriber) tuples.
    """

    def __init__(self):
        self._subscribers: dict[str, list[tuple[Callable, str]]] = {}
        self._lock = Lock()

    @staticmethod
    def _validate_event_type_format(event_type: str) -> None:
        if event_type == ALL_EVENTS:
            return
        if not event_type or not isinstance(event_type, str):
            raise InvalidEventTypeFormat(event_type or "")

        namespace, _, name = event_type.strip().rpartition(".")
        if not namespace or not name:
            raise InvalidEventTypeFormat(event_type)

    def register_subscriber(
        self,
        event_type: str,
        handler: Callable,
        subscriber: str = "connection",
    ) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type:  e.g. 'org.acme.trading.TradeNotification', or '*'
            handler:     Callable invoked with the committed event
            subscriber:  Name of the listener, for logs and failure reports

        Raises:
            InvalidEventTypeFormat:   Bad event type format
            DuplicateSubscriberError: Handler already registered
        """
        self._validate_event_type_format(event_type)

        if not callable(handler):
            raise EventBusError(
                f"Handler must be callable, got {type(handler)}."
            )

        handler_name = getattr(handler, "__qualname__", str(handler))

        with self._lock:
            entries = self._subscribers.setdefault(event_type, [])
            for existing_handler, _ in entries:
                if existing_handler is handler:
                    raise DuplicateSubscriberError(event_type, handler_name)
            entries.append((handler, subscriber))

        logger.info(
            f"Subscriber registered: {handler_name} → {event_type} "
            f"(subscriber: {subscriber})"
        )

    def unregister_subscriber(self, event_type: str, handler: Callable) -> bool:
        with self._lock:
            entries = self._subscribers.get(event_type, [])
            remaining = [entry for entry in entries if entry[0] is not handler]
            self._subscribers[event_type] = remaining
            return len(remaining) != len(entries)

    def get_subscribers(self, event_type: str) -> list[tuple[Callable, str]]:
        """
        Subscribers for an event type, wildcard subscribers last.
        Returns empty list if none (not an error).
        """
        with self._lock:
            return (
                list(self._subscribers.get(event_type, []))
                + list(self._subscribers.get(ALL_EVENTS, []))
            )

    def has_subscribers(self, event_type: str) -> bool:
        return bool(self.get_subscribers(event_type))

    def subscriber_count(self, event_type: str) -> int:
        return len(self.get_subscribers(event_type))
