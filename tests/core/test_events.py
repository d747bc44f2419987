"""
Tests for core.events — transaction emitter, subscriber registry
and post-commit dispatch.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.events import (
    ALL_EVENTS,
    DuplicateSubscriberError,
    EmitError,
    EventBusError,
    EventEmitter,
    InvalidEventTypeFormat,
    SubscriberRegistry,
    dispatch,
)
from core.resources import KIND_ASSET, KIND_EVENT, Factory, ModelManager, Relationship

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)
NS = "org.acme.trading"
TRADE_NOTIFICATION = f"{NS}.TradeNotification"


@pytest.fixture
def factory():
    model = ModelManager()
    model.declare(NS, "Commodity", KIND_ASSET, identified_by="trading_symbol")
    model.declare(NS, "TradeNotification", KIND_EVENT)
    model.declare(NS, "RemoveNotification", KIND_EVENT)
    return Factory(model)


def _notification(factory, **fields):
    return factory.new_event(NS, "TradeNotification", **fields)


class TestEventEmitter:
    def test_ids_follow_emission_order(self, factory):
        emitter = EventEmitter("tx-1", NOW)
        first = emitter.emit(_notification(factory))
        second = emitter.emit(_notification(factory))
        assert first.event_id == "tx-1#0"
        assert second.event_id == "tx-1#1"
        assert first.timestamp == NOW
        assert emitter.events == [first, second]

    def test_embedded_assets_become_relationships(self, factory):
        commodity = factory.new_resource(NS, "Commodity", "EMA", quantity=10)
        emitted = EventEmitter("tx-1", NOW).emit(_notification(factory, commodity=commodity))
        assert emitted.commodity == Relationship(NS, "Commodity", "EMA")

    def test_only_events_can_be_emitted(self, factory):
        with pytest.raises(EmitError):
            EventEmitter("tx-1", NOW).emit(factory.new_resource(NS, "Commodity", "EMA"))


class TestSubscriberRegistry:
    def test_register_and_lookup(self):
        registry = SubscriberRegistry()

        def handler(event):
            return None

        registry.register_subscriber(TRADE_NOTIFICATION, handler, subscriber="dan")
        assert registry.get_subscribers(TRADE_NOTIFICATION) == [(handler, "dan")]
        assert registry.has_subscribers(TRADE_NOTIFICATION)

    def test_wildcard_subscribers_listed_last(self):
        registry = SubscriberRegistry()

        def specific(event):
            return None

        def everything(event):
            return None

        registry.register_subscriber(ALL_EVENTS, everything)
        registry.register_subscriber(TRADE_NOTIFICATION, specific)
        handlers = [h for h, _ in registry.get_subscribers(TRADE_NOTIFICATION)]
        assert handlers == [specific, everything]
        assert registry.subscriber_count(f"{NS}.RemoveNotification") == 1

    def test_invalid_event_type(self):
        with pytest.raises(InvalidEventTypeFormat):
            SubscriberRegistry().register_subscriber("TradeNotification", lambda e: None)

    def test_duplicate_handler_rejected(self):
        registry = SubscriberRegistry()

        def handler(event):
            return None

        registry.register_subscriber(TRADE_NOTIFICATION, handler)
        with pytest.raises(DuplicateSubscriberError):
            registry.register_subscriber(TRADE_NOTIFICATION, handler)

    def test_handler_must_be_callable(self):
        with pytest.raises(EventBusError, match="callable"):
            SubscriberRegistry().register_subscriber(TRADE_NOTIFICATION, "nope")

    def test_unregister(self):
        registry = SubscriberRegistry()

        def handler(event):
            return None

        registry.register_subscriber(TRADE_NOTIFICATION, handler)
        assert registry.unregister_subscriber(TRADE_NOTIFICATION, handler) is True
        assert registry.unregister_subscriber(TRADE_NOTIFICATION, handler) is False
        assert not registry.has_subscribers(TRADE_NOTIFICATION)


class TestDispatch:
    def test_delivers_to_every_subscriber(self, factory):
        registry = SubscriberRegistry()
        received = []
        registry.register_subscriber(TRADE_NOTIFICATION, received.append)
        event = EventEmitter("tx-1", NOW).emit(_notification(factory))

        result = dispatch(event, registry)

        assert received == [event]
        assert result["subscribers_notified"] == 1
        assert result["event_id"] == "tx-1#0"

    def test_failing_subscriber_does_not_raise(self, factory):
        registry = SubscriberRegistry()
        received = []

        def broken(event):
            raise RuntimeError("listener down")

        registry.register_subscriber(TRADE_NOTIFICATION, broken)
        registry.register_subscriber(TRADE_NOTIFICATION, received.append)
        event = EventEmitter("tx-1", NOW).emit(_notification(factory))

        result = dispatch(event, registry)

        assert len(received) == 1
        assert result["subscribers_failed"] == 1
        assert result["failures"][0]["error"] == "listener down"

    def test_no_subscribers(self, factory):
        event = EventEmitter("tx-1", NOW).emit(_notification(factory))
        assert dispatch(event, SubscriberRegistry())["subscribers_notified"] == 0
