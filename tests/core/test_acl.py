"""
Tests for core.permissions — ACL rule patterns and ordered evaluation.
"""

from __future__ import annotations

import pytest

from core.permissions import (
    ACTION_ALLOW,
    ACTION_DENY,
    ANY,
    OP_ALL,
    OP_CREATE,
    OP_DELETE,
    OP_READ,
    OP_UPDATE,
    UNRESTRICTED,
    AccessController,
    AccessDenied,
    AclEvaluator,
    AclRule,
    pattern_matches,
)
from core.resources import (
    KIND_ASSET,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    NETWORK_ADMIN_FQT,
    Factory,
    ModelManager,
    Relationship,
)

NS = "org.acme.pii"


@pytest.fixture
def factory():
    model = ModelManager()
    model.declare(NS, "Member", KIND_PARTICIPANT, identified_by="email")
    model.declare(NS, "Record", KIND_ASSET, identified_by="record_id")
    model.declare(f"{NS}.audit", "Entry", KIND_ASSET, identified_by="entry_id")
    model.declare(NS, "Share", KIND_TRANSACTION)
    model.declare("org.other", "Thing", KIND_ASSET, identified_by="thing_id")
    return Factory(model)


@pytest.fixture
def alice(factory):
    return factory.new_resource(NS, "Member", "alice@acme.org")


@pytest.fixture
def bob(factory):
    return factory.new_resource(NS, "Member", "bob@acme.org")


def _rule(name, **overrides):
    fields = dict(
        name=name,
        description=name,
        participant=f"{NS}.Member",
        operations=frozenset({OP_READ}),
        resource=f"{NS}.Record",
        action=ACTION_ALLOW,
    )
    fields.update(overrides)
    return AclRule(**fields)


class TestPatternMatching:
    def test_any(self, factory):
        assert pattern_matches(ANY, factory.new_resource("org.other", "Thing", "t"))
        assert pattern_matches(ANY, None)

    def test_exact_type(self, alice):
        assert pattern_matches("org.acme.pii.Member", alice)
        assert not pattern_matches("org.acme.pii.Record", alice)

    def test_instance(self, alice):
        assert pattern_matches("org.acme.pii.Member#alice@acme.org", alice)
        assert not pattern_matches("org.acme.pii.Member#bob@acme.org", alice)

    def test_namespace(self, factory):
        entry = factory.new_resource(f"{NS}.audit", "Entry", "e1")
        assert pattern_matches("org.acme.pii.*", factory.new_resource(NS, "Record", "r"))
        assert not pattern_matches("org.acme.pii.*", entry)

    def test_recursive_namespace(self, factory):
        entry = factory.new_resource(f"{NS}.audit", "Entry", "e1")
        assert pattern_matches("org.acme.pii.**", entry)
        assert not pattern_matches("org.acme.pii.**", factory.new_resource("org.other", "Thing", "t"))

    def test_relationships_match_like_resources(self):
        assert pattern_matches("org.acme.pii.Member", Relationship(NS, "Member", "x"))

    def test_none_target_only_matches_any(self):
        assert not pattern_matches("org.acme.pii.Member", None)


class TestAclRule:
    def test_needs_operations(self):
        with pytest.raises(ValueError, match="at least one"):
            _rule("Empty", operations=frozenset())

    def test_unknown_operation(self):
        with pytest.raises(ValueError, match="operation 'WRITE' not valid"):
            _rule("Bad", operations=frozenset({"WRITE"}))

    def test_unknown_action(self):
        with pytest.raises(ValueError, match="action 'MAYBE' not valid"):
            _rule("Bad", action="MAYBE")

    def test_condition_must_be_callable(self):
        with pytest.raises(TypeError):
            _rule("Bad", condition="yes")

    def test_all_covers_every_operation(self):
        rule = _rule("All", operations=frozenset({OP_ALL}))
        assert all(rule.covers(op) for op in (OP_CREATE, OP_READ, OP_UPDATE, OP_DELETE))


class TestAclEvaluator:
    def test_no_rules_allows_everything(self, alice, factory):
        result = AclEvaluator().evaluate(OP_DELETE, alice, factory.new_resource(NS, "Record", "r"))
        assert result.allowed

    def test_no_participant_denied_when_rules_exist(self, factory):
        evaluator = AclEvaluator([_rule("Read")])
        assert not evaluator.evaluate(OP_READ, None, factory.new_resource(NS, "Record", "r")).allowed

    def test_admin_bypasses_rules(self, factory):
        admin = factory.new_resource("org.hyperledger.composer.system", "NetworkAdmin", "admin")
        assert admin.get_fully_qualified_type() == NETWORK_ADMIN_FQT
        evaluator = AclEvaluator([_rule("Read")])
        assert evaluator.evaluate(OP_DELETE, admin, factory.new_resource(NS, "Record", "r")).allowed

    def test_first_matching_rule_wins(self, alice, factory):
        evaluator = AclEvaluator([
            _rule("DenyAlice", participant="org.acme.pii.Member#alice@acme.org", action=ACTION_DENY),
            _rule("AllowMembers"),
        ])
        record = factory.new_resource(NS, "Record", "r")
        result = evaluator.evaluate(OP_READ, alice, record)
        assert not result.allowed
        assert result.rule_name == "DenyAlice"

    def test_no_matching_rule_denies(self, alice, factory):
        evaluator = AclEvaluator([_rule("Read")])
        result = evaluator.evaluate(OP_UPDATE, alice, factory.new_resource(NS, "Record", "r"))
        assert not result.allowed
        assert result.message == (
            "Participant 'org.acme.pii.Member#alice@acme.org' does not have "
            "'UPDATE' access to resource 'org.acme.pii.Record#r'"
        )

    def test_condition_sees_participant_and_resource(self, alice, bob, factory):
        evaluator = AclEvaluator([
            _rule(
                "OwnRecord",
                condition=lambda p, r, tx: r.get("owner") == p.get_identifier(),
            ),
        ])
        record = factory.new_resource(NS, "Record", "r", owner="alice@acme.org")
        assert evaluator.evaluate(OP_READ, alice, record).allowed
        assert not evaluator.evaluate(OP_READ, bob, record).allowed

    def test_transaction_scoped_rule(self, alice, factory):
        evaluator = AclEvaluator([_rule("DuringShare", transaction=f"{NS}.Share")])
        record = factory.new_resource(NS, "Record", "r")
        share = factory.new_transaction(NS, "Share")
        assert evaluator.evaluate(OP_READ, alice, record, share).allowed
        assert not evaluator.evaluate(OP_READ, alice, record).allowed


class TestAccessController:
    def test_check_raises_access_denied(self, alice, factory):
        controller = AccessController(AclEvaluator([_rule("Read")]), participant=alice)
        with pytest.raises(AccessDenied) as exc:
            controller.check(OP_DELETE, factory.new_resource(NS, "Record", "r"))
        assert exc.value.operation == OP_DELETE
        assert exc.value.resource_fqi == "org.acme.pii.Record#r"

    def test_for_transaction_keeps_participant(self, alice, factory):
        controller = AccessController(
            AclEvaluator([_rule("DuringShare", transaction=f"{NS}.Share")]), participant=alice
        )
        record = factory.new_resource(NS, "Record", "r")
        assert not controller.can(OP_READ, record)
        scoped = controller.for_transaction(factory.new_transaction(NS, "Share"))
        assert scoped.participant is alice
        assert scoped.can(OP_READ, record)

    def test_unrestricted(self, factory):
        assert UNRESTRICTED.can(OP_DELETE, factory.new_resource(NS, "Record", "r"))
