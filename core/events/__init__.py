"""
Composer Events — Public API
==============================
Events are collected while a transaction runs and heard only
after it commits.
"""

from core.events.dispatcher import dispatch
from core.events.emitter import EventEmitter
from core.events.errors import (
    DuplicateSubscriberError,
    EmitError,
    EventBusError,
    InvalidEventTypeFormat,
)
from core.events.registry import ALL_EVENTS, SubscriberRegistry

__all__ = [
    "ALL_EVENTS",
    "dispatch",
    "EventEmitter",
    "SubscriberRegistry",
    "EventBusError",
    "EmitError",
    "InvalidEventTypeFormat",
    "DuplicateSubscriberError",
]
