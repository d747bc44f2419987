"""
Composer Transactions — Transaction Bus
==========================================
High-level orchestration of the transaction lifecycle.

Flow:
    1. Dispatch submission → get Outcome
    2. If REJECTED → return the rejection, nothing runs
    3. If ACCEPTED → open a unit of work, run the processor handler,
       write the historian record
    4. NetworkError inside the unit of work → rollback → REJECTED
    5. Commit → publish the emitted events to subscribers

The TransactionBus:
- Orchestrates, does not decide
- Publishes events only after commit
- Lets unexpected exceptions (programming errors) propagate after
  rolling back

The TransactionBus does NOT:
- Know any network's business rules
- Read or write registries itself
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

from core.errors import NetworkError, TransactionError, ValidationError
from core.events.dispatcher import dispatch
from core.events.registry import SubscriberRegistry
from core.permissions.evaluator import AccessDenied
from core.registry.errors import ResourceAlreadyExists, ResourceNotFound
from core.registry.store import WorldStateStore
from core.time.clock import get_default_clock
from core.transactions.base import TransactionSubmission
from core.transactions.dispatcher import TransactionDispatcher
from core.transactions.outcomes import TransactionOutcome
from core.transactions.rejection import ReasonCode, RejectionReason

logger = logging.getLogger("composer.transactions")


# ══════════════════════════════════════════════════════════════
# HANDLER / HISTORIAN PROTOCOLS
# ══════════════════════════════════════════════════════════════

class ProcessorHandlerProtocol(Protocol):
    """
    Runs one accepted transaction inside the bus's unit of work and
    returns the events it emitted (not yet published).
    """

    def execute(self, submission: TransactionSubmission) -> List[Any]:
        ...


class HistorianProtocol(Protocol):

    def record(self, submission: TransactionSubmission, events: List[Any]) -> Any:
        ...


# ══════════════════════════════════════════════════════════════
# TRANSACTION BUS ERRORS
# ══════════════════════════════════════════════════════════════

class NoProcessorRegistered(Exception):
    """An accepted transaction type has no handler on the bus."""

    def __init__(self, transaction_type: str):
        self.transaction_type = transaction_type
        super().__init__(
            f"No processor handler registered for "
            f"transaction type '{transaction_type}'."
        )


class TransactionRejected(NetworkError):
    """Raised to callers of a connection when a submission is REJECTED."""

    def __init__(self, reason: RejectionReason):
        self.reason = reason
        super().__init__(reason.message)

    @property
    def code(self) -> str:
        return self.reason.code


# Most specific first.
_REASON_CODES = (
    (AccessDenied, ReasonCode.ACCESS_DENIED),
    (ResourceNotFound, ReasonCode.RESOURCE_NOT_FOUND),
    (ResourceAlreadyExists, ReasonCode.RESOURCE_EXISTS),
    (ValidationError, ReasonCode.VALIDATION_FAILED),
    (TransactionError, ReasonCode.PROCESSOR_ERROR),
)


def reason_code_for(exc: NetworkError) -> str:
    for error_type, code in _REASON_CODES:
        if isinstance(exc, error_type):
            return code
    return ReasonCode.NETWORK_ERROR


# ══════════════════════════════════════════════════════════════
# TRANSACTION RESULT
# ══════════════════════════════════════════════════════════════

class TransactionResult:
    """
    Result of TransactionBus.handle() — outcome plus what the
    transaction produced when it committed.
    """

    def __init__(
        self,
        outcome: TransactionOutcome,
        events: Optional[List[Any]] = None,
        historian_record: Any = None,
    ):
        self.outcome = outcome
        self.events = list(events or [])
        self.historian_record = historian_record

    @property
    def is_accepted(self) -> bool:
        return self.outcome.is_accepted

    @property
    def is_rejected(self) -> bool:
        return self.outcome.is_rejected

    @property
    def reason(self) -> Optional[RejectionReason]:
        return self.outcome.reason


# ══════════════════════════════════════════════════════════════
# TRANSACTION BUS
# ══════════════════════════════════════════════════════════════

class TransactionBus:
    """
    Usage:
        bus = TransactionBus(
            dispatcher=dispatcher,
            store=store,
            subscribers=subscriber_registry,
            historian=historian,
        )
        bus.register_handler("org.acme.trading.Trade", processor_handler)
        result = bus.handle(submission)
    """

    def __init__(
        self,
        dispatcher: TransactionDispatcher,
        store: WorldStateStore,
        subscribers: SubscriberRegistry,
        historian: Optional[HistorianProtocol] = None,
        clock=None,
    ):
        self._dispatcher = dispatcher
        self._store = store
        self._subscribers = subscribers
        self._historian = historian
        self._clock = clock
        self._handlers: Dict[str, ProcessorHandlerProtocol] = {}

    # ══════════════════════════════════════════════════════════
    # HANDLER REGISTRATION
    # ══════════════════════════════════════════════════════════

    def register_handler(self, transaction_type: str, handler: ProcessorHandlerProtocol) -> None:
        """
        Register the handler that executes a transaction type.

        Handler must implement ProcessorHandlerProtocol (have .execute()).
        """
        if not transaction_type or "." not in transaction_type:
            raise ValueError(
                f"transaction_type '{transaction_type}' must be fully qualified."
            )

        if not hasattr(handler, "execute") or not callable(handler.execute):
            raise TypeError("Handler must have callable .execute() method.")

        self._handlers[transaction_type] = handler
        logger.debug(f"Handler registered: {transaction_type}")

    # ══════════════════════════════════════════════════════════
    # HANDLE (main orchestration)
    # ══════════════════════════════════════════════════════════

    def handle(self, submission: TransactionSubmission) -> TransactionResult:
        """
        Full transaction lifecycle:

        1. Dispatch → get Outcome (ACCEPTED/REJECTED)
        2. ACCEPTED → execute inside a unit of work
        3. REJECTED → return the reason, nothing written

        Args:
            submission: Submission to process.

        Returns:
            TransactionResult with outcome, events and historian record.
        """

        # ── Step 1: Dispatch (validate + policies) ────────────
        outcome = self._dispatcher.dispatch(submission)

        # ── Step 2: Route based on outcome ────────────────────
        if outcome.is_accepted:
            return self._handle_accepted(submission, outcome)
        return self._handle_rejected(submission, outcome)

    # ══════════════════════════════════════════════════════════
    # ACCEPTED PATH
    # ══════════════════════════════════════════════════════════

    def _handle_accepted(
        self, submission: TransactionSubmission, outcome: TransactionOutcome
    ) -> TransactionResult:
        handler = self._handlers.get(submission.transaction_type)
        if handler is None:
            raise NoProcessorRegistered(submission.transaction_type)

        logger.info(
            f"Executing transaction {submission.transaction_id} "
            f"({submission.transaction_type}) for identity '{submission.identity}'"
        )

        try:
            with self._store.unit_of_work():
                events = handler.execute(submission)
                record = None
                if self._historian is not None:
                    record = self._historian.record(submission, events)
        except NetworkError as exc:
            reason = RejectionReason(
                code=reason_code_for(exc),
                message=str(exc) or type(exc).__name__,
                policy_name=submission.transaction_type,
            )
            logger.info(
                f"Transaction {submission.transaction_id} rolled back: "
                f"[{reason.code}] {reason.message}"
            )
            rejected = TransactionOutcome.rejected(
                submission.transaction_id, reason, self._now()
            )
            return TransactionResult(outcome=rejected)

        # ── Committed: publish events ─────────────────────────
        for event in events:
            dispatch(event, self._subscribers)

        logger.info(
            f"Transaction {submission.transaction_id} committed, "
            f"{len(events)} event(s) emitted"
        )
        return TransactionResult(outcome=outcome, events=events, historian_record=record)

    # ══════════════════════════════════════════════════════════
    # REJECTED PATH
    # ══════════════════════════════════════════════════════════

    def _handle_rejected(
        self, submission: TransactionSubmission, outcome: TransactionOutcome
    ) -> TransactionResult:
        logger.info(
            f"Transaction {submission.transaction_id} REJECTED: "
            f"[{outcome.reason.code}] {outcome.reason.message}"
        )
        return TransactionResult(outcome=outcome)

    def _now(self):
        return (self._clock or get_default_clock()).now_utc()
