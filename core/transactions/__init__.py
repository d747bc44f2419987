"""
Composer Transactions — Public API
=====================================
Submission, dispatch and execution of business network transactions.
"""

from core.transactions.base import TransactionSubmission
from core.transactions.bus import (
    NoProcessorRegistered,
    TransactionBus,
    TransactionRejected,
    TransactionResult,
)
from core.transactions.dispatcher import (
    DEFAULT_POLICIES,
    TransactionDispatcher,
    acl_submission_guard,
    processor_registered_guard,
)
from core.transactions.outcomes import TransactionOutcome, TransactionStatus
from core.transactions.rejection import ReasonCode, RejectionReason

__all__ = [
    "TransactionSubmission",
    "TransactionBus",
    "TransactionResult",
    "TransactionRejected",
    "NoProcessorRegistered",
    "TransactionDispatcher",
    "DEFAULT_POLICIES",
    "processor_registered_guard",
    "acl_submission_guard",
    "TransactionOutcome",
    "TransactionStatus",
    "ReasonCode",
    "RejectionReason",
]
