"""
Composer Events — Errors
==========================
Errors for event emission and subscription.
"""

from core.errors import NetworkError


class EventBusError(Exception):
    """Base error for subscription wiring."""
    pass


class InvalidEventTypeFormat(EventBusError):
    """Event type is neither fully qualified (namespace.Type) nor '*'."""

    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(
            f"Event type '{event_type}' must be fully qualified "
            f"(namespace.Type) or '*'."
        )


class DuplicateSubscriberError(EventBusError):
    """Same handler already registered for this event type."""

    def __init__(self, event_type: str, handler_name: str):
        self.event_type = event_type
        self.handler_name = handler_name
        super().__init__(
            f"Handler '{handler_name}' already registered "
            f"for event type '{event_type}'."
        )


class EmitError(NetworkError):
    """A processor emitted something that is not a declared event."""
    pass
