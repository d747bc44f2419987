"""
Basic Sample Network — Scenario Tests
=======================================
Alice and Bob each own one asset. Everybody reads everything;
only the owner writes an asset.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.permissions import AccessDenied
from core.registry import InMemoryWorldStateStore
from core.runtime import EmbeddedRuntime
from core.time.clock import FixedClock
from core.transactions import ReasonCode, TransactionRejected
from networks.basic_sample import build_network
from networks.basic_sample.models import (
    NAMESPACE,
    SAMPLE_ASSET,
    SAMPLE_EVENT,
    SAMPLE_PARTICIPANT,
)
from networks.basic_sample.transactions import SampleTransactionRequest

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def runtime():
    runtime = EmbeddedRuntime(store=InMemoryWorldStateStore(), clock=FixedClock(NOW))
    runtime.deploy(build_network())

    admin = runtime.connect()
    factory = admin.factory
    admin.get_participant_registry(SAMPLE_PARTICIPANT).add_all([
        factory.new_resource(NAMESPACE, "SampleParticipant", "alice@email.com",
                             first_name="Alice", last_name="A"),
        factory.new_resource(NAMESPACE, "SampleParticipant", "bob@email.com",
                             first_name="Bob", last_name="B"),
    ])
    admin.get_asset_registry(SAMPLE_ASSET).add_all([
        _asset(factory, "1", "alice@email.com", "10"),
        _asset(factory, "2", "bob@email.com", "20"),
    ])
    admin.issue_identity(factory.new_relationship(NAMESPACE, "SampleParticipant", "alice@email.com"), "alice1")
    admin.issue_identity(factory.new_relationship(NAMESPACE, "SampleParticipant", "bob@email.com"), "bob1")
    return runtime


@pytest.fixture
def alice(runtime):
    return runtime.connect("alice1")


@pytest.fixture
def bob(runtime):
    return runtime.connect("bob1")


def _asset(factory, asset_id, owner, value):
    return factory.new_resource(
        NAMESPACE, "SampleAsset", asset_id,
        owner=factory.new_relationship(NAMESPACE, "SampleParticipant", owner),
        value=value,
    )


class TestSampleParticipant:
    def test_alice_reads_all_assets(self, alice):
        assets = alice.get_asset_registry(SAMPLE_ASSET).get_all()
        assert sorted(a.get_identifier() for a in assets) == ["1", "2"]

    def test_bob_reads_all_participants(self, bob):
        participants = bob.get_participant_registry(SAMPLE_PARTICIPANT).get_all()
        assert len(participants) == 2

    def test_alice_adds_own_asset(self, alice):
        registry = alice.get_asset_registry(SAMPLE_ASSET)
        registry.add(_asset(alice.factory, "3", "alice@email.com", "30"))
        assert registry.get("3").value == "30"

    def test_alice_cannot_add_asset_for_bob(self, alice):
        with pytest.raises(AccessDenied, match="does not have 'CREATE' access"):
            alice.get_asset_registry(SAMPLE_ASSET).add(_asset(alice.factory, "3", "bob@email.com", "30"))

    def test_alice_updates_own_asset(self, alice):
        registry = alice.get_asset_registry(SAMPLE_ASSET)
        asset = registry.get("1")
        asset.value = "50"
        registry.update(asset)
        assert registry.get("1").value == "50"

    def test_alice_cannot_update_bobs_asset(self, alice):
        registry = alice.get_asset_registry(SAMPLE_ASSET)
        asset = registry.get("2")
        asset.value = "50"
        with pytest.raises(AccessDenied, match="does not have 'UPDATE' access"):
            registry.update(asset)

    def test_alice_removes_own_asset(self, alice):
        registry = alice.get_asset_registry(SAMPLE_ASSET)
        registry.remove("1")
        assert not registry.exists("1")

    def test_alice_cannot_remove_bobs_asset(self, alice):
        with pytest.raises(AccessDenied, match="does not have 'DELETE' access"):
            alice.get_asset_registry(SAMPLE_ASSET).remove("2")


class TestSampleTransaction:
    def test_alice_changes_own_asset_value(self, runtime, alice):
        heard = []
        alice.on(SAMPLE_EVENT, heard.append)

        alice.submit_transaction(SampleTransactionRequest("1", "50").to_transaction(alice.factory))

        assert alice.get_asset_registry(SAMPLE_ASSET).get("1").value == "50"
        [event] = heard
        assert event.asset.get_identifier() == "1"
        assert event.old_value == "10"
        assert event.new_value == "50"

    def test_alice_cannot_change_bobs_asset(self, alice, bob):
        with pytest.raises(TransactionRejected, match="does not have 'UPDATE' access") as exc:
            alice.submit_transaction(SampleTransactionRequest("2", "50").to_transaction(alice.factory))
        assert exc.value.code == ReasonCode.ACCESS_DENIED
        assert bob.get_asset_registry(SAMPLE_ASSET).get("2").value == "20"

    def test_request_validation(self):
        with pytest.raises(ValueError, match="asset_id"):
            SampleTransactionRequest("", "50")
