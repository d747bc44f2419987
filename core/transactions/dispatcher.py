"""
Composer Transactions — Dispatcher
=====================================
Accept Submission → Validate → Evaluate Policies → Produce Outcome.

The Dispatcher decides ACCEPTED or REJECTED before any processor
runs. It does not touch the world state and does not emit events.

Policies are callables returning Optional[RejectionReason]. They run
in registration order; the first rejection wins.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from core.permissions.constants import OP_CREATE
from core.time.clock import Clock, get_default_clock
from core.transactions.base import TransactionSubmission
from core.transactions.outcomes import TransactionOutcome
from core.transactions.rejection import ReasonCode, RejectionReason
from core.transactions.validator import (
    NetworkContextProtocol,
    TransactionValidationError,
    validate_submission,
)

logger = logging.getLogger("composer.transactions")


# (TransactionSubmission, context) → Optional[RejectionReason]
TransactionPolicy = Callable[
    [TransactionSubmission, NetworkContextProtocol],
    Optional[RejectionReason],
]


# ══════════════════════════════════════════════════════════════
# BUILT-IN POLICIES
# ══════════════════════════════════════════════════════════════

def processor_registered_guard(
    submission: TransactionSubmission, context: NetworkContextProtocol
) -> Optional[RejectionReason]:
    """A transaction type with no processor cannot be submitted."""
    if submission.transaction_type not in context.processors:
        return RejectionReason(
            code=ReasonCode.NO_PROCESSOR,
            message=(
                f"Could not find any functions to execute for transaction "
                f"{submission.transaction.get_fully_qualified_identifier()}"
            ),
            policy_name="processor_registered_guard",
        )
    return None


def acl_submission_guard(
    submission: TransactionSubmission, context: NetworkContextProtocol
) -> Optional[RejectionReason]:
    """The submitting participant needs CREATE access to the transaction."""
    result = context.acl.evaluate(
        OP_CREATE, submission.participant, submission.transaction, submission.transaction
    )
    if not result.allowed:
        return RejectionReason(
            code=ReasonCode.ACCESS_DENIED,
            message=result.message,
            policy_name="acl_submission_guard",
        )
    return None


DEFAULT_POLICIES = (processor_registered_guard, acl_submission_guard)


# ══════════════════════════════════════════════════════════════
# TRANSACTION DISPATCHER
# ══════════════════════════════════════════════════════════════

class TransactionDispatcher:
    """
    Usage:
        dispatcher = TransactionDispatcher(context=deployed_network)
        dispatcher.register_policy(processor_registered_guard)
        outcome = dispatcher.dispatch(submission)
    """

    def __init__(self, context: NetworkContextProtocol, clock: Optional[Clock] = None):
        self._context = context
        self._clock = clock
        self._policies: List[TransactionPolicy] = []

    def register_policy(self, policy: TransactionPolicy) -> None:
        if not callable(policy):
            raise TypeError(
                f"Policy must be callable, got {type(policy).__name__}."
            )
        self._policies.append(policy)

        policy_name = getattr(policy, "__qualname__", str(policy))
        logger.debug(f"Policy registered: {policy_name}")

    def _now(self):
        return (self._clock or get_default_clock()).now_utc()

    def dispatch(self, submission: TransactionSubmission) -> TransactionOutcome:
        """
        1. Validate against the deployed network → if fails, REJECTED
        2. Evaluate policies → if any rejects, REJECTED
        3. All clear → ACCEPTED
        """
        now = self._now()

        try:
            validate_submission(submission, self._context)
        except TransactionValidationError as exc:
            logger.info(
                f"Transaction {submission.transaction_id} validation failed: "
                f"[{exc.code}] {exc.message}"
            )
            return TransactionOutcome.rejected(
                submission.transaction_id,
                RejectionReason(
                    code=exc.code,
                    message=exc.message,
                    policy_name="submission_validator",
                ),
                now,
            )

        for policy in self._policies:
            rejection = policy(submission, self._context)
            if rejection is None:
                continue
            if not isinstance(rejection, RejectionReason):
                raise TypeError(
                    f"Policy must return RejectionReason or None, "
                    f"got {type(rejection).__name__}."
                )
            logger.info(
                f"Transaction {submission.transaction_id} rejected by "
                f"policy '{rejection.policy_name}': "
                f"[{rejection.code}] {rejection.message}"
            )
            return TransactionOutcome.rejected(submission.transaction_id, rejection, now)

        logger.debug(f"Transaction {submission.transaction_id} ACCEPTED")
        return TransactionOutcome.accepted(submission.transaction_id, now)
