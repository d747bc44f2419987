"""
Perishable Goods Network — Scenario Tests
===========================================
SetupDemo creates contract CON_001 (unit price 0.5, 2–10°C, due one
day after setup) and shipment SHIP_001 of 5000 bananas.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from core.registry import InMemoryWorldStateStore
from core.runtime import EmbeddedRuntime
from core.time.clock import FixedClock
from networks.perishable import build_network
from networks.perishable.models import (
    CONTRACT,
    GROWER,
    IMPORTER,
    SHIPMENT,
    SHIPMENT_ARRIVED,
    SHIPMENT_IN_TRANSIT,
    TEMPERATURE_THRESHOLD_EVENT,
)
from networks.perishable.processors import calculate_payout
from networks.perishable.transactions import (
    SetupDemoRequest,
    ShipmentReceivedRequest,
    TemperatureReadingRequest,
)

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)
GROWER_ID = "farmer@email.com"
IMPORTER_ID = "supermarket@email.com"


@pytest.fixture
def admin():
    runtime = EmbeddedRuntime(store=InMemoryWorldStateStore(), clock=FixedClock(NOW))
    runtime.deploy(build_network())
    admin = runtime.connect()
    admin.submit_transaction(SetupDemoRequest().to_transaction(admin.factory))
    return admin


def _read(admin, centigrade):
    return admin.submit_transaction(
        TemperatureReadingRequest("SHIP_001", centigrade).to_transaction(admin.factory)
    )


def _receive(admin, received_at=None):
    admin.submit_transaction(
        ShipmentReceivedRequest("SHIP_001", received_at).to_transaction(admin.factory)
    )


def _balances(admin):
    grower = admin.get_participant_registry(GROWER).get(GROWER_ID)
    importer = admin.get_participant_registry(IMPORTER).get(IMPORTER_ID)
    return grower.account_balance, importer.account_balance


class TestSetupDemo:
    def test_creates_demo_state(self, admin):
        contract = admin.get_asset_registry(CONTRACT).get("CON_001")
        shipment = admin.get_asset_registry(SHIPMENT).get("SHIP_001")
        assert contract.arrival_date_time == NOW + timedelta(days=1)
        assert contract.unit_price == 0.5
        assert shipment.status == SHIPMENT_IN_TRANSIT
        assert shipment.unit_count == 5000
        assert _balances(admin) == (0, 0)


class TestTemperatureReading:
    def test_reading_appended(self, admin):
        _read(admin, 4.5)
        shipment = admin.get_asset_registry(SHIPMENT).get("SHIP_001")
        [reading] = shipment.temperature_readings
        assert reading.centigrade == 4.5
        assert reading.shipment.get_identifier() == "SHIP_001"

    def test_in_range_reading_emits_nothing(self, admin):
        assert _read(admin, 4.5).events == []

    def test_out_of_range_reading_emits_event(self, admin):
        heard = []
        admin.on(TEMPERATURE_THRESHOLD_EVENT, heard.append)
        _read(admin, 11)
        [event] = heard
        assert event.temperature == 11
        assert event.message == (
            "Temperature threshold violated! Emitting TemperatureEvent for shipment: SHIP_001"
        )


class TestShipmentReceived:
    def test_base_price_within_range(self, admin):
        _read(admin, 4.5)
        _receive(admin)
        assert _balances(admin) == (2500, -2500)
        assert admin.get_asset_registry(SHIPMENT).get("SHIP_001").status == SHIPMENT_ARRIVED

    def test_nothing_for_late_shipment(self, admin):
        _read(admin, 4.5)
        _receive(admin, NOW + timedelta(days=2))
        assert _balances(admin) == (0, 0)

    def test_min_temperature_penalty(self, admin):
        _read(admin, 1)
        _receive(admin)
        grower, importer = _balances(admin)
        assert grower == pytest.approx(1500)
        assert importer == pytest.approx(-1500)

    def test_payouts_accumulate_across_deliveries(self, admin):
        _read(admin, 4.5)
        _receive(admin)
        assert _balances(admin) == (2500, -2500)

        _read(admin, 4.5)
        _receive(admin, NOW + timedelta(days=2))
        assert _balances(admin) == (2500, -2500)

        _read(admin, 1)
        _receive(admin)
        assert _balances(admin)[0] == pytest.approx(4000)

        _read(admin, 11)
        _receive(admin)
        grower, importer = _balances(admin)
        assert grower == pytest.approx(5000)
        assert importer == pytest.approx(-5000)


class TestCalculatePayout:
    """calculate_payout only reads attributes, so plain stand-ins do."""

    class _Obj:
        def __init__(self, **fields):
            self.__dict__.update(fields)

        def get(self, name, default=None):
            return self.__dict__.get(name, default)

    def _contract(self):
        return self._Obj(
            unit_price=0.5, arrival_date_time=NOW, min_temperature=2, max_temperature=10,
            min_penalty_factor=0.2, max_penalty_factor=0.1,
        )

    def test_floor_at_zero(self):
        readings = [self._Obj(centigrade=-40)]
        shipment = self._Obj(unit_count=100, temperature_readings=readings)
        assert calculate_payout(self._contract(), shipment, NOW) == 0

    def test_no_readings_full_price(self):
        shipment = self._Obj(unit_count=100)
        assert calculate_payout(self._contract(), shipment, NOW) == 50
