"""
Commodity Trading Network — Scenario Tests
============================================
Dan and Simon trade commodities; RemoveHighQuantityCommodities purges
holdings above 60 units.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.registry import InMemoryWorldStateStore
from core.runtime import EmbeddedRuntime, QueryError
from core.time.clock import FixedClock
from core.transactions import ReasonCode, TransactionRejected
from networks.trade import build_network
from networks.trade.models import (
    COMMODITY,
    NAMESPACE,
    REMOVE_NOTIFICATION,
    TRADE_NOTIFICATION,
    TRADER,
)
from networks.trade.transactions import RemoveHighQuantityCommoditiesRequest, TradeRequest

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)


def _commodity(factory, symbol, owner, quantity, exchange="Euronext"):
    return factory.new_resource(
        NAMESPACE, "Commodity", symbol,
        description=f"{symbol} commodity",
        main_exchange=exchange,
        quantity=quantity,
        owner=factory.new_relationship(NAMESPACE, "Trader", owner),
    )


@pytest.fixture
def runtime():
    runtime = EmbeddedRuntime(store=InMemoryWorldStateStore(), clock=FixedClock(NOW))
    runtime.deploy(build_network())

    admin = runtime.connect()
    factory = admin.factory
    admin.get_participant_registry(TRADER).add_all([
        factory.new_resource(NAMESPACE, "Trader", "dan", first_name="Dan", last_name="Selman"),
        factory.new_resource(NAMESPACE, "Trader", "simon", first_name="Simon", last_name="Stone"),
    ])
    admin.get_asset_registry(COMMODITY).add_all([
        _commodity(factory, "EMA", "dan", 100),
        _commodity(factory, "XYZ", "dan", 50, exchange="NYSE"),
        _commodity(factory, "ABC", "simon", 61),
    ])
    admin.issue_identity(factory.new_relationship(NAMESPACE, "Trader", "dan"), "dan1")
    return runtime


@pytest.fixture
def dan(runtime):
    return runtime.connect("dan1")


class TestTrade:
    def test_trade_moves_ownership(self, dan):
        heard = []
        dan.on(TRADE_NOTIFICATION, heard.append)

        dan.submit_transaction(TradeRequest("EMA", "simon").to_transaction(dan.factory))

        commodity = dan.get_asset_registry(COMMODITY).get("EMA")
        assert commodity.owner.get_fully_qualified_identifier() == "org.acme.trading.Trader#simon"
        [event] = heard
        assert event.commodity.get_identifier() == "EMA"

    def test_trade_without_new_owner_rejected(self, dan):
        tx = dan.factory.new_transaction(
            NAMESPACE, "Trade", commodity=dan.factory.new_relationship(NAMESPACE, "Commodity", "EMA")
        )
        with pytest.raises(TransactionRejected) as exc:
            dan.submit_transaction(tx)
        assert exc.value.code == ReasonCode.INVALID_TRANSACTION_STRUCTURE

    def test_request_validation(self):
        with pytest.raises(ValueError, match="new_owner_id"):
            TradeRequest("EMA", "")


class TestRemoveHighQuantityCommodities:
    def test_removes_only_high_quantity(self, dan):
        heard = []
        dan.on(REMOVE_NOTIFICATION, heard.append)

        dan.submit_transaction(RemoveHighQuantityCommoditiesRequest().to_transaction(dan.factory))

        remaining = dan.get_asset_registry(COMMODITY).get_all()
        assert [c.get_identifier() for c in remaining] == ["XYZ"]
        assert sorted(e.commodity.get_identifier() for e in heard) == ["ABC", "EMA"]

    def test_nothing_to_remove(self, dan):
        dan.submit_transaction(RemoveHighQuantityCommoditiesRequest().to_transaction(dan.factory))
        result = dan.submit_transaction(RemoveHighQuantityCommoditiesRequest().to_transaction(dan.factory))
        assert result.events == []


class TestQueries:
    def test_select_commodities(self, runtime):
        assert len(runtime.query("selectCommodities")) == 3

    def test_by_exchange(self, runtime):
        [commodity] = runtime.query("selectCommoditiesByExchange", exchange="NYSE")
        assert commodity.get_identifier() == "XYZ"

    def test_by_owner_accepts_uri_or_relationship(self, runtime, dan):
        by_uri = runtime.query("selectCommoditiesByOwner", owner="resource:org.acme.trading.Trader#dan")
        by_rel = dan.query(
            "selectCommoditiesByOwner", owner=dan.factory.new_relationship(NAMESPACE, "Trader", "dan")
        )
        assert sorted(c.get_identifier() for c in by_uri) == ["EMA", "XYZ"]
        assert by_rel == by_uri

    def test_high_quantity(self, runtime):
        symbols = sorted(c.get_identifier() for c in runtime.query("selectCommoditiesWithHighQuantity"))
        assert symbols == ["ABC", "EMA"]

    def test_missing_parameter(self, runtime):
        with pytest.raises(QueryError):
            runtime.query("selectCommoditiesByExchange")
