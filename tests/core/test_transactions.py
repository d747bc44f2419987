"""
Composer Transaction Layer — Tests
=====================================
Submission → Dispatcher → Bus → unit of work → events.

Scenarios:
1. Valid submission → ACCEPTED, events published after commit
2. Unknown type / wrong network / missing field → REJECTED before running
3. No processor, or ACL denies CREATE → REJECTED by policy
4. Processor raises NetworkError → rollback, REJECTED with its message
5. Processor raises anything else → rollback, propagates
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, List

import pytest

from core.errors import TransactionError
from core.events import SubscriberRegistry
from core.permissions import ACTION_ALLOW, OP_CREATE, AclEvaluator, AclRule
from core.registry import InMemoryWorldStateStore
from core.resources import (
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    Factory,
    ModelManager,
)
from core.time.clock import FixedClock
from core.transactions import (
    DEFAULT_POLICIES,
    NoProcessorRegistered,
    ReasonCode,
    RejectionReason,
    TransactionBus,
    TransactionDispatcher,
    TransactionOutcome,
    TransactionStatus,
    TransactionSubmission,
)

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)
NS = "org.acme.test"
PING = f"{NS}.Ping"
PONG = f"{NS}.Pong"
NETWORK = "test-network@0.1.0"


# ══════════════════════════════════════════════════════════════
# TEST INFRASTRUCTURE — STUBS
# ══════════════════════════════════════════════════════════════

def _model() -> ModelManager:
    model = ModelManager()
    model.declare(NS, "Player", KIND_PARTICIPANT, identified_by="player_id")
    model.declare(NS, "Ping", KIND_TRANSACTION, required=("message",))
    model.declare(NS, "Pong", KIND_TRANSACTION)
    model.declare(NS, "Ponged", KIND_EVENT)
    return model


class StubNetwork:
    """Matches NetworkContextProtocol."""

    def __init__(self, processors=None, rules=()):
        self.identifier = NETWORK
        self.model = _model()
        self.processors = dict(processors or {PING: object()})
        self.acl = AclEvaluator(rules)


class StubHandler:
    """Writes one document, emits one event, optionally fails afterwards."""

    def __init__(self, store, factory, error: Exception = None):
        self._store = store
        self._factory = factory
        self._error = error
        self.calls: List[Any] = []

    def execute(self, submission):
        self.calls.append(submission)
        self._store.put("Asset:x", submission.transaction_id, {"seen": True})
        if self._error is not None:
            raise self._error
        event = self._factory.new_event(NS, "Ponged")
        event.event_id = f"{submission.transaction_id}#0"
        return [event]


class StubHistorian:
    def __init__(self):
        self.records = []

    def record(self, submission, events):
        self.records.append((submission.transaction_id, len(events)))
        return self.records[-1]


@pytest.fixture
def factory():
    return Factory(_model(), clock=FixedClock(NOW))


@pytest.fixture
def store():
    return InMemoryWorldStateStore()


def _submission(factory, transaction=None, participant=None, network=NETWORK):
    return TransactionSubmission(
        submission_id=uuid.uuid4(),
        transaction=transaction if transaction is not None else factory.new_transaction(NS, "Ping", message="hi"),
        identity="player1",
        participant=participant,
        network=network,
        submitted_at=NOW,
    )


def _bus(network, store, handler=None, subscribers=None, historian=None):
    dispatcher = TransactionDispatcher(context=network, clock=FixedClock(NOW))
    for policy in DEFAULT_POLICIES:
        dispatcher.register_policy(policy)
    bus = TransactionBus(
        dispatcher=dispatcher,
        store=store,
        subscribers=subscribers or SubscriberRegistry(),
        historian=historian,
        clock=FixedClock(NOW),
    )
    if handler is not None:
        bus.register_handler(PING, handler)
    return bus


# ══════════════════════════════════════════════════════════════
# CONTRACTS
# ══════════════════════════════════════════════════════════════

class TestSubmission:
    def test_frozen(self, factory):
        submission = _submission(factory)
        with pytest.raises(Exception):
            submission.identity = "other"

    def test_exposes_transaction_details(self, factory):
        submission = _submission(factory)
        assert submission.transaction_type == PING
        assert submission.timestamp == NOW
        assert submission.transaction_id == submission.transaction.transaction_id

    def test_requires_transaction_kind(self, factory):
        participant = factory.new_resource(NS, "Player", "p1")
        with pytest.raises(ValueError, match="not a transaction"):
            _submission(factory, transaction=participant)

    def test_requires_uuid(self, factory):
        with pytest.raises(ValueError, match="UUID"):
            TransactionSubmission(
                submission_id="abc",
                transaction=factory.new_transaction(NS, "Ping", message="hi"),
                identity="player1",
                participant=None,
                network=NETWORK,
                submitted_at=NOW,
            )


class TestOutcome:
    def test_rejected_needs_reason(self):
        with pytest.raises(ValueError):
            TransactionOutcome("tx", TransactionStatus.REJECTED, None, NOW)

    def test_accepted_refuses_reason(self):
        reason = RejectionReason(code="X", message="m", policy_name="p")
        with pytest.raises(ValueError):
            TransactionOutcome("tx", TransactionStatus.ACCEPTED, reason, NOW)

    def test_reason_fields_required(self):
        with pytest.raises(ValueError, match="message"):
            RejectionReason(code="X", message="", policy_name="p")


# ══════════════════════════════════════════════════════════════
# DISPATCHER
# ══════════════════════════════════════════════════════════════

class TestDispatcher:
    def _dispatcher(self, network):
        dispatcher = TransactionDispatcher(context=network, clock=FixedClock(NOW))
        for policy in DEFAULT_POLICIES:
            dispatcher.register_policy(policy)
        return dispatcher

    def test_accepts_valid_submission(self, factory):
        outcome = self._dispatcher(StubNetwork()).dispatch(_submission(factory))
        assert outcome.is_accepted

    def test_wrong_network(self, factory):
        outcome = self._dispatcher(StubNetwork()).dispatch(_submission(factory, network="other@1"))
        assert outcome.reason.code == ReasonCode.INVALID_TRANSACTION_STRUCTURE

    def test_missing_required_field(self, factory):
        tx = factory.new_transaction(NS, "Ping")
        outcome = self._dispatcher(StubNetwork()).dispatch(_submission(factory, transaction=tx))
        assert outcome.is_rejected
        assert "missing required field message" in outcome.reason.message

    def test_unknown_type(self, factory):
        network = StubNetwork()
        network.model = ModelManager()
        outcome = self._dispatcher(network).dispatch(_submission(factory))
        assert outcome.reason.code == ReasonCode.UNKNOWN_TRANSACTION_TYPE

    def test_no_processor(self, factory):
        tx = factory.new_transaction(NS, "Pong")
        outcome = self._dispatcher(StubNetwork()).dispatch(_submission(factory, transaction=tx))
        assert outcome.reason.code == ReasonCode.NO_PROCESSOR
        assert outcome.reason.message.startswith("Could not find any functions to execute")

    def test_acl_create_guard(self, factory):
        rule = AclRule(
            name="OnlyPong",
            description="Players may only submit Pong",
            participant=f"{NS}.Player",
            operations=frozenset({OP_CREATE}),
            resource=PONG,
            action=ACTION_ALLOW,
        )
        player = factory.new_resource(NS, "Player", "p1")
        outcome = self._dispatcher(StubNetwork(rules=[rule])).dispatch(
            _submission(factory, participant=player)
        )
        assert outcome.reason.code == ReasonCode.ACCESS_DENIED
        assert outcome.reason.policy_name == "acl_submission_guard"

    def test_policy_must_return_reason_or_none(self, factory):
        dispatcher = TransactionDispatcher(context=StubNetwork(), clock=FixedClock(NOW))
        dispatcher.register_policy(lambda submission, context: "nope")
        with pytest.raises(TypeError):
            dispatcher.dispatch(_submission(factory))

    def test_register_policy_requires_callable(self):
        with pytest.raises(TypeError):
            TransactionDispatcher(context=StubNetwork()).register_policy("nope")


# ══════════════════════════════════════════════════════════════
# BUS
# ══════════════════════════════════════════════════════════════

class TestTransactionBus:
    def test_accepted_commits_and_publishes(self, factory, store):
        subscribers = SubscriberRegistry()
        heard = []
        subscribers.register_subscriber("*", heard.append)
        historian = StubHistorian()
        handler = StubHandler(store, factory)
        bus = _bus(StubNetwork(), store, handler, subscribers, historian)
        submission = _submission(factory)

        result = bus.handle(submission)

        assert result.is_accepted
        assert store.get("Asset:x", submission.transaction_id) == {"seen": True}
        assert len(result.events) == 1
        assert heard == result.events
        assert historian.records == [(submission.transaction_id, 1)]
        assert result.historian_record == (submission.transaction_id, 1)

    def test_processor_error_rolls_back(self, factory, store):
        heard = []
        subscribers = SubscriberRegistry()
        subscribers.register_subscriber("*", heard.append)
        handler = StubHandler(store, factory, error=TransactionError("Animal is already IN_TRANSIT"))
        bus = _bus(StubNetwork(), store, handler, subscribers)
        submission = _submission(factory)

        result = bus.handle(submission)

        assert result.is_rejected
        assert result.reason.message == "Animal is already IN_TRANSIT"
        assert result.reason.code == ReasonCode.PROCESSOR_ERROR
        assert result.reason.policy_name == PING
        assert store.get("Asset:x", submission.transaction_id) is None
        assert heard == []

    def test_unexpected_error_propagates_after_rollback(self, factory, store):
        handler = StubHandler(store, factory, error=KeyError("bug"))
        bus = _bus(StubNetwork(), store, handler)
        submission = _submission(factory)

        with pytest.raises(KeyError):
            bus.handle(submission)
        assert store.get("Asset:x", submission.transaction_id) is None

    def test_rejected_never_runs_handler(self, factory, store):
        handler = StubHandler(store, factory)
        bus = _bus(StubNetwork(), store, handler)

        result = bus.handle(_submission(factory, network="other@1"))

        assert result.is_rejected
        assert handler.calls == []

    def test_accepted_without_handler(self, factory, store):
        bus = _bus(StubNetwork(), store)
        with pytest.raises(NoProcessorRegistered):
            bus.handle(_submission(factory))

    def test_register_handler_validation(self, factory, store):
        bus = _bus(StubNetwork(), store)
        with pytest.raises(ValueError):
            bus.register_handler("Ping", StubHandler(store, factory))
        with pytest.raises(TypeError):
            bus.register_handler(PING, object())
