"""
Tests for core.registry — asset/participant registries over the
in-memory world-state store.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.errors import ValidationError
from core.permissions import (
    ACTION_ALLOW,
    OP_ALL,
    OP_READ,
    AccessController,
    AccessDenied,
    AclEvaluator,
    AclRule,
)
from core.registry import (
    AssetRegistry,
    InMemoryWorldStateStore,
    ParticipantRegistry,
    ResourceAlreadyExists,
    ResourceNotFound,
    ResourceTypeMismatch,
    collection_id_for,
)
from core.resources import (
    KIND_ASSET,
    KIND_PARTICIPANT,
    Factory,
    ModelManager,
    Relationship,
    Serializer,
)
from core.time.clock import FixedClock

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)
NS = "org.acme.test"
WIDGET = f"{NS}.Widget"
OWNER = f"{NS}.Owner"


@pytest.fixture
def model():
    model = ModelManager()
    model.declare(NS, "Owner", KIND_PARTICIPANT, identified_by="owner_id")
    model.declare(NS, "Widget", KIND_ASSET, identified_by="widget_id", required=("owner",))
    return model


@pytest.fixture
def factory(model):
    return Factory(model, clock=FixedClock(NOW))


@pytest.fixture
def store():
    return InMemoryWorldStateStore()


@pytest.fixture
def widgets(model, store):
    return AssetRegistry(model.get(WIDGET), store, Serializer(model))


def _widget(factory, widget_id, owner="bob", **fields):
    return factory.new_resource(
        NS, "Widget", widget_id, owner=factory.new_relationship(NS, "Owner", owner), **fields
    )


class TestCollectionIds:
    def test_registry_ids(self, model):
        assert collection_id_for(model.get(WIDGET)) == "Asset:org.acme.test.Widget"
        assert collection_id_for(model.get(OWNER)) == "Participant:org.acme.test.Owner"

    def test_kind_mismatch_rejected(self, model, store):
        with pytest.raises(ValueError, match="not usable"):
            ParticipantRegistry(model.get(WIDGET), store, Serializer(model))


class TestRegistryCrud:
    def test_add_and_get(self, factory, widgets):
        widgets.add(_widget(factory, "W1", colour="red"))
        widget = widgets.get("W1")
        assert widget.colour == "red"
        assert widget.owner == Relationship(NS, "Owner", "bob")

    def test_add_duplicate(self, factory, widgets):
        widgets.add(_widget(factory, "W1"))
        with pytest.raises(ResourceAlreadyExists) as exc:
            widgets.add(_widget(factory, "W1"))
        assert str(exc.value) == (
            "Failed to add object with ID 'W1' in collection with ID "
            "'Asset:org.acme.test.Widget' as the object already exists"
        )

    def test_get_missing(self, widgets):
        with pytest.raises(ResourceNotFound) as exc:
            widgets.get("nope")
        assert str(exc.value) == (
            "Object with ID 'nope' in collection with ID "
            "'Asset:org.acme.test.Widget' does not exist"
        )

    def test_update_missing(self, factory, widgets):
        with pytest.raises(ResourceNotFound):
            widgets.update(_widget(factory, "W1"))

    def test_update(self, factory, widgets):
        widgets.add(_widget(factory, "W1", colour="red"))
        widget = widgets.get("W1")
        widget.colour = "blue"
        widgets.update(widget)
        assert widgets.get("W1").colour == "blue"

    def test_required_field_enforced(self, factory, widgets):
        with pytest.raises(ValidationError, match="missing required field owner"):
            widgets.add(factory.new_resource(NS, "Widget", "W1"))

    def test_wrong_type_rejected(self, factory, widgets):
        with pytest.raises(ResourceTypeMismatch):
            widgets.add(factory.new_resource(NS, "Owner", "bob"))

    def test_remove_and_exists(self, factory, widgets):
        widgets.add_all([_widget(factory, "W1"), _widget(factory, "W2")])
        assert widgets.exists("W1")
        widgets.remove("W1")
        assert not widgets.exists("W1")
        widgets.remove_all(widgets.get_all())
        assert widgets.get_all() == []

    def test_embedded_participant_stored_as_relationship(self, factory, widgets):
        owner = factory.new_resource(NS, "Owner", "bob", name="Bob")
        widget = factory.new_resource(NS, "Widget", "W1", owner=owner)
        widgets.add(widget)
        assert widgets.get("W1").owner == Relationship(NS, "Owner", "bob")
        assert widget.owner is owner

    def test_stored_copy_not_aliased(self, factory, widgets):
        widget = _widget(factory, "W1", tags=["a"])
        widgets.add(widget)
        widget.tags.append("b")
        assert widgets.get("W1").tags == ["a"]

    def test_resolve(self, model, store, factory):
        serializer = Serializer(model)
        owners = ParticipantRegistry(model.get(OWNER), store, serializer)
        owners.add(factory.new_resource(NS, "Owner", "bob", name="Bob"))

        def lookup(rel):
            return owners.get(rel.get_identifier())

        widgets = AssetRegistry(model.get(WIDGET), store, serializer, lookup=lookup)
        widgets.add(_widget(factory, "W1"))
        assert widgets.resolve("W1").owner.name == "Bob"
        assert widgets.resolve_all()[0].owner.name == "Bob"


class TestRegistryAccess:
    @pytest.fixture
    def bob(self, factory):
        return factory.new_resource(NS, "Owner", "bob")

    @pytest.fixture
    def own_widgets_only(self):
        return AclEvaluator([
            AclRule(
                name="OwnWidgets",
                description="Owners read their own widgets",
                participant=OWNER,
                operations=frozenset({OP_READ}),
                resource=WIDGET,
                condition=lambda p, r, tx: r.owner.get_identifier() == p.get_identifier(),
                action=ACTION_ALLOW,
            ),
        ])

    def test_hidden_entries_look_missing(self, model, store, factory, bob, own_widgets_only):
        AssetRegistry(model.get(WIDGET), store, Serializer(model)).add_all([
            _widget(factory, "W1", owner="bob"),
            _widget(factory, "W2", owner="alice"),
        ])
        registry = AssetRegistry(
            model.get(WIDGET), store, Serializer(model),
            access=AccessController(own_widgets_only, participant=bob),
        )
        assert [w.get_identifier() for w in registry.get_all()] == ["W1"]
        assert not registry.exists("W2")
        with pytest.raises(ResourceNotFound):
            registry.get("W2")

    def test_write_without_grant_denied(self, model, store, factory, bob, own_widgets_only):
        registry = AssetRegistry(
            model.get(WIDGET), store, Serializer(model),
            access=AccessController(own_widgets_only, participant=bob),
        )
        with pytest.raises(AccessDenied, match="does not have 'CREATE' access"):
            registry.add(_widget(factory, "W1"))

    @pytest.fixture
    def read_all_write_own(self):
        return AclEvaluator([
            AclRule(
                name="ReadAllWidgets",
                description="Owners read every widget",
                participant=OWNER,
                operations=frozenset({OP_READ}),
                resource=WIDGET,
                action=ACTION_ALLOW,
            ),
            AclRule(
                name="WriteOwnWidgets",
                description="Owners change their own widgets",
                participant=OWNER,
                operations=frozenset({OP_ALL}),
                resource=WIDGET,
                condition=lambda p, r, tx: r.owner.get_identifier() == p.get_identifier(),
                action=ACTION_ALLOW,
            ),
        ])

    def _seed(self, model, store, factory):
        AssetRegistry(model.get(WIDGET), store, Serializer(model)).add_all([
            _widget(factory, "W1", owner="bob"),
            _widget(factory, "W2", owner="alice", colour="red"),
        ])

    def test_hidden_entry_cannot_be_overwritten(self, model, store, factory, bob, own_widgets_only):
        self._seed(model, store, factory)
        registry = AssetRegistry(
            model.get(WIDGET), store, Serializer(model),
            access=AccessController(own_widgets_only, participant=bob),
        )
        with pytest.raises(ResourceNotFound, match="Object with ID 'W2'"):
            registry.update(_widget(factory, "W2", owner="bob", colour="blue"))
        with pytest.raises(ResourceNotFound):
            registry.remove("W2")

        stored = AssetRegistry(model.get(WIDGET), store, Serializer(model)).get("W2")
        assert stored.owner.get_identifier() == "alice"
        assert stored.colour == "red"

    def test_update_checked_against_stored_entry(self, model, store, factory, bob, read_all_write_own):
        self._seed(model, store, factory)
        registry = AssetRegistry(
            model.get(WIDGET), store, Serializer(model),
            access=AccessController(read_all_write_own, participant=bob),
        )
        forged = registry.get("W2")
        forged.owner = Relationship(NS, "Owner", "bob")
        with pytest.raises(AccessDenied, match="does not have 'UPDATE' access"):
            registry.update(forged)
        with pytest.raises(AccessDenied, match="does not have 'DELETE' access"):
            registry.remove("W2")
        assert registry.get("W2").owner.get_identifier() == "alice"

    def test_owner_updates_own_entry(self, model, store, factory, bob, read_all_write_own):
        self._seed(model, store, factory)
        registry = AssetRegistry(
            model.get(WIDGET), store, Serializer(model),
            access=AccessController(read_all_write_own, participant=bob),
        )
        widget = registry.get("W1")
        widget.colour = "green"
        registry.update(widget)
        assert registry.get("W1").colour == "green"


class TestInMemoryStore:
    def test_unit_of_work_rolls_back(self, store):
        store.put("c", "1", {"v": 1})
        with pytest.raises(RuntimeError):
            with store.unit_of_work():
                store.put("c", "1", {"v": 2})
                store.put("c", "2", {"v": 3})
                raise RuntimeError("boom")
        assert store.get("c", "1") == {"v": 1}
        assert store.get("c", "2") is None

    def test_nested_unit_of_work_commits_with_outer(self, store):
        with store.unit_of_work():
            with store.unit_of_work():
                store.put("c", "1", {"v": 1})
        assert store.get("c", "1") == {"v": 1}

    def test_delete(self, store):
        store.put("c", "1", {"v": 1})
        assert store.delete("c", "1") is True
        assert store.delete("c", "1") is False
        assert store.collection_ids() == ["c"]
