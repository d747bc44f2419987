"""
Car Auction Network — Scenario Tests
======================================
Seller lists a vehicle with reserve 100; buyer (balance 1000) bids
200, buyer2 (balance 100) bids 50.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.registry import InMemoryWorldStateStore
from core.runtime import EmbeddedRuntime
from core.time.clock import FixedClock
from core.transactions import ReasonCode, TransactionRejected
from networks.car_auction import build_network
from networks.car_auction.models import (
    FOR_SALE,
    MEMBER,
    NAMESPACE,
    RESERVE_NOT_MET,
    SOLD,
    VEHICLE,
    VEHICLE_LISTING,
)
from networks.car_auction.transactions import CloseBiddingRequest, OfferRequest

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)
SELLER = "dan@email.com"
BUYER = "sstone1@email.com"
BUYER2 = "dogcat@email.com"


@pytest.fixture
def admin():
    runtime = EmbeddedRuntime(store=InMemoryWorldStateStore(), clock=FixedClock(NOW))
    runtime.deploy(build_network())
    admin = runtime.connect()
    factory = admin.factory

    def member(email, first_name, balance):
        return factory.new_resource(
            NAMESPACE, "Member", email, first_name=first_name, last_name="Member", balance=balance
        )

    admin.get_participant_registry(MEMBER).add_all([
        member(SELLER, "Dan", 0),
        member(BUYER, "Simon", 1000),
        member(BUYER2, "Dog", 100),
    ])
    admin.get_asset_registry(VEHICLE).add(
        factory.new_resource(
            NAMESPACE, "Vehicle", "VIN_01",
            owner=factory.new_relationship(NAMESPACE, "Member", SELLER),
        )
    )
    admin.get_asset_registry(VEHICLE_LISTING).add(
        factory.new_resource(
            NAMESPACE, "VehicleListing", "LISTING_01",
            reserve_price=100,
            description="My nice car",
            state=FOR_SALE,
            vehicle=factory.new_relationship(NAMESPACE, "Vehicle", "VIN_01"),
        )
    )
    return admin


def _offer(admin, member, bid_price):
    admin.submit_transaction(OfferRequest("LISTING_01", member, bid_price).to_transaction(admin.factory))


def _close(admin):
    admin.submit_transaction(CloseBiddingRequest("LISTING_01").to_transaction(admin.factory))


def _balance(admin, email):
    return admin.get_participant_registry(MEMBER).get(email).balance


class TestOffer:
    def test_offers_appended(self, admin):
        _offer(admin, BUYER, 200)
        _offer(admin, BUYER2, 50)

        listing = admin.get_asset_registry(VEHICLE_LISTING).get("LISTING_01")
        assert [o.bid_price for o in listing.offers] == [200, 50]
        assert listing.offers[0].member.get_identifier() == BUYER

    def test_offer_on_closed_listing(self, admin):
        _close(admin)
        with pytest.raises(TransactionRejected, match="Listing is not FOR SALE") as exc:
            _offer(admin, BUYER, 200)
        assert exc.value.code == ReasonCode.PROCESSOR_ERROR

    def test_negative_bid_refused(self):
        with pytest.raises(ValueError, match="bid_price"):
            OfferRequest("LISTING_01", BUYER, -1)


class TestCloseBidding:
    def test_highest_offer_wins(self, admin):
        _offer(admin, BUYER, 200)
        _offer(admin, BUYER2, 50)
        _close(admin)

        listing = admin.get_asset_registry(VEHICLE_LISTING).get("LISTING_01")
        assert listing.state == SOLD
        assert listing.get("offers") is None
        assert _balance(admin, BUYER) == 800
        assert _balance(admin, SELLER) == 200
        assert _balance(admin, BUYER2) == 100
        vehicle = admin.get_asset_registry(VEHICLE).get("VIN_01")
        assert vehicle.owner.get_identifier() == BUYER

    def test_no_bids_reserve_not_met(self, admin):
        _close(admin)
        listing = admin.get_asset_registry(VEHICLE_LISTING).get("LISTING_01")
        assert listing.state == RESERVE_NOT_MET
        assert _balance(admin, SELLER) == 0

    def test_bids_below_reserve(self, admin):
        _offer(admin, BUYER2, 50)
        _close(admin)

        listing = admin.get_asset_registry(VEHICLE_LISTING).get("LISTING_01")
        assert listing.state == RESERVE_NOT_MET
        assert [o.bid_price for o in listing.offers] == [50]
        assert admin.get_asset_registry(VEHICLE).get("VIN_01").owner.get_identifier() == SELLER

    def test_cannot_close_twice(self, admin):
        _close(admin)
        with pytest.raises(TransactionRejected, match="Listing is not FOR SALE"):
            _close(admin)
