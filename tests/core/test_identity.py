"""
Tests for core.identity — issuing, revoking and resolving identities.
"""

from __future__ import annotations

import pytest

from core.identity import IDENTITY_REVOKED, Identity, IdentityError, IdentityService
from core.registry import InMemoryWorldStateStore, ParticipantRegistry
from core.resources import (
    KIND_ASSET,
    KIND_PARTICIPANT,
    NETWORK_ADMIN_FQT,
    Factory,
    ModelManager,
    Relationship,
    Serializer,
)

NS = "org.acme.sample"
PARTICIPANT = f"{NS}.SampleParticipant"


@pytest.fixture
def model():
    model = ModelManager()
    model.declare(NS, "SampleParticipant", KIND_PARTICIPANT, identified_by="participant_id")
    model.declare(NS, "SampleAsset", KIND_ASSET, identified_by="asset_id")
    return model


@pytest.fixture
def store():
    return InMemoryWorldStateStore()


@pytest.fixture
def alice(model, store):
    alice = Factory(model).new_resource(NS, "SampleParticipant", "alice", first_name="Alice")
    ParticipantRegistry(model.get(PARTICIPANT), store, Serializer(model)).add(alice)
    return alice


@pytest.fixture
def service(model, store):
    return IdentityService(store, model, network_name="basic-sample-network")


class TestIdentityModel:
    def test_participant_must_be_fully_qualified(self):
        with pytest.raises(ValueError, match="fully-qualified"):
            Identity(name="alice1", identity_id="abc", participant="alice")

    def test_unknown_state(self):
        with pytest.raises(ValueError, match="not valid"):
            Identity(name="alice1", identity_id="abc", participant=f"{PARTICIPANT}#alice", state="LOST")

    def test_revoked_copy(self):
        identity = Identity(name="alice1", identity_id="abc", participant=f"{PARTICIPANT}#alice")
        revoked = identity.revoked()
        assert revoked.state == IDENTITY_REVOKED
        assert not identity.is_revoked


class TestIdentityService:
    def test_collection_per_network(self, service):
        assert service.collection_id == "Identity:basic-sample-network"

    def test_admin_identity_built_in(self, service):
        admin = service.get("admin")
        assert admin.participant == f"{NETWORK_ADMIN_FQT}#admin"
        assert service.participant_for("admin").get_fully_qualified_type() == NETWORK_ADMIN_FQT

    def test_issue_and_resolve(self, service, alice):
        identity = service.issue_identity(alice.to_relationship(), "alice1")
        assert identity.participant == "org.acme.sample.SampleParticipant#alice"
        assert service.participant_for("alice1") == Relationship(NS, "SampleParticipant", "alice")
        assert [i.name for i in service.get_all()] == ["alice1"]

    def test_issue_accepts_resource(self, service, alice):
        assert service.issue_identity(alice, "alice1").name == "alice1"

    def test_issue_twice_rejected(self, service, alice):
        service.issue_identity(alice.to_relationship(), "alice1")
        with pytest.raises(IdentityError, match="already been issued"):
            service.issue_identity(alice.to_relationship(), "alice1")

    def test_admin_name_reserved(self, service, alice):
        with pytest.raises(IdentityError, match="already been issued"):
            service.issue_identity(alice.to_relationship(), "admin")

    def test_unknown_participant(self, service):
        with pytest.raises(IdentityError, match="does not exist"):
            service.issue_identity(Relationship(NS, "SampleParticipant", "ghost"), "ghost1")

    def test_non_participant_type(self, service):
        with pytest.raises(IdentityError, match="not a participant type"):
            service.issue_identity(Relationship(NS, "SampleAsset", "A1"), "asset1")

    def test_not_issued(self, service):
        with pytest.raises(IdentityError, match="The identity 'bob1' has not been issued"):
            service.get("bob1")

    def test_revoke(self, service, alice):
        service.issue_identity(alice.to_relationship(), "alice1")
        assert service.revoke_identity("alice1").is_revoked
        with pytest.raises(IdentityError, match="has been revoked"):
            service.validate("alice1")
        with pytest.raises(IdentityError, match="already been revoked"):
            service.revoke_identity("alice1")

    def test_admin_cannot_be_revoked(self, service):
        with pytest.raises(IdentityError, match="cannot be revoked"):
            service.revoke_identity("admin")
