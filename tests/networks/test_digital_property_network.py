"""
Digital Property Network — Scenario Tests
===========================================
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.registry import InMemoryWorldStateStore
from core.runtime import EmbeddedRuntime
from core.time.clock import FixedClock
from core.transactions import ReasonCode, TransactionRejected
from networks.digital_property import build_network
from networks.digital_property.models import LAND_TITLE, NAMESPACE, PERSON, SALES_AGREEMENT
from networks.digital_property.transactions import RegisterPropertyForSaleRequest

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def admin():
    runtime = EmbeddedRuntime(store=InMemoryWorldStateStore(), clock=FixedClock(NOW))
    runtime.deploy(build_network())
    admin = runtime.connect()
    factory = admin.factory
    admin.get_participant_registry(PERSON).add(
        factory.new_resource(NAMESPACE, "Person", "P1", first_name="Mark", last_name="Smith")
    )
    admin.get_asset_registry(LAND_TITLE).add_all([
        factory.new_resource(
            NAMESPACE, "LandTitle", "TITLE_1",
            owner=factory.new_relationship(NAMESPACE, "Person", "P1"),
            information="A nice house in the country",
            for_sale=False,
        ),
        factory.new_resource(
            NAMESPACE, "LandTitle", "TITLE_2",
            owner=factory.new_relationship(NAMESPACE, "Person", "P1"),
            information="A small flat in the city",
        ),
    ])
    return admin


def test_register_property_for_sale(admin):
    admin.submit_transaction(RegisterPropertyForSaleRequest("P1", "TITLE_1").to_transaction(admin.factory))

    assert admin.get_asset_registry(LAND_TITLE).get("TITLE_1").for_sale is True
    agreement = admin.get_asset_registry(SALES_AGREEMENT).get("P1TITLE_1")
    assert agreement.seller.get_identifier() == "P1"
    assert agreement.title.get_identifier() == "TITLE_1"


def test_other_titles_untouched(admin):
    admin.submit_transaction(RegisterPropertyForSaleRequest("P1", "TITLE_1").to_transaction(admin.factory))
    assert admin.get_asset_registry(LAND_TITLE).get("TITLE_2").get("for_sale") is None


def test_register_twice_rejected(admin):
    admin.submit_transaction(RegisterPropertyForSaleRequest("P1", "TITLE_1").to_transaction(admin.factory))
    with pytest.raises(TransactionRejected, match="as the object already exists") as exc:
        admin.submit_transaction(RegisterPropertyForSaleRequest("P1", "TITLE_1").to_transaction(admin.factory))
    assert exc.value.code == ReasonCode.RESOURCE_EXISTS


def test_request_validation():
    with pytest.raises(ValueError, match="title_id"):
        RegisterPropertyForSaleRequest("P1", "")
