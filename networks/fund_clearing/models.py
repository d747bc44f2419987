"""
Fund Clearing Network — Model
===============================
Banks submit transfer requests to one another. A bank periodically
nets its pending requests with each counterparty into a batch and
settles the net amount in the creditor's currency.

Batch lifecycle:

    PENDING_PRE_PROCESS ──▶ READY_TO_SETTLE ──▶ PENDING_POST_PROCESS ──▶ COMPLETE
      (both banks mark       (CompleteSettlement)   (both banks mark
       pre-process done)                              post-process done)
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.clearing"

BANKING_PARTICIPANT = f"{NAMESPACE}.BankingParticipant"
TRANSFER_REQUEST = f"{NAMESPACE}.TransferRequest"
BATCH_TRANSFER_REQUEST = f"{NAMESPACE}.BatchTransferRequest"

SUBMIT_TRANSFER_REQUEST = f"{NAMESPACE}.SubmitTransferRequest"
CREATE_BATCH = f"{NAMESPACE}.CreateBatch"
MARK_PRE_PROCESS_COMPLETE = f"{NAMESPACE}.MarkPreProcessComplete"
COMPLETE_SETTLEMENT = f"{NAMESPACE}.CompleteSettlement"
MARK_POST_PROCESS_COMPLETE = f"{NAMESPACE}.MarkPostProcessComplete"

BATCH_CREATED_EVENT = f"{NAMESPACE}.BatchCreatedEvent"

# ── Currency ──────────────────────────────────────────────────
USD = "USD"
EURO = "EURO"
STERLING = "STERLING"
YEN = "YEN"
CHF = "CHF"
CAD = "CAD"

VALID_CURRENCIES = frozenset({USD, EURO, STERLING, YEN, CHF, CAD})

# ── TransferRequestState ──────────────────────────────────────
PENDING = "PENDING"
PROCESSING = "PROCESSING"
PRE_PROCESS_COMPLETE = "PRE_PROCESS_COMPLETE"
COMPLETE = "COMPLETE"
ERROR = "ERROR"

VALID_TRANSFER_STATES = frozenset({PENDING, PROCESSING, PRE_PROCESS_COMPLETE, COMPLETE, ERROR})

# ── BatchState ────────────────────────────────────────────────
PENDING_PRE_PROCESS = "PENDING_PRE_PROCESS"
READY_TO_SETTLE = "READY_TO_SETTLE"
PENDING_POST_PROCESS = "PENDING_POST_PROCESS"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "BankingParticipant", KIND_PARTICIPANT,
                  identified_by="banking_id", required=("banking_name", "working_currency"))

    model.declare(NAMESPACE, "Transfer", KIND_CONCEPT,
                  required=("currency", "amount", "from_account", "to_account"))
    model.declare(NAMESPACE, "TransferRequest", KIND_ASSET,
                  identified_by="request_id",
                  required=("details", "from_bank_state", "to_bank_state", "state",
                            "from_bank", "to_bank"))

    model.declare(NAMESPACE, "Settlement", KIND_CONCEPT,
                  required=("amount", "currency", "creditor_bank", "debtor_bank"))
    model.declare(NAMESPACE, "BatchTransferRequest", KIND_ASSET,
                  identified_by="batch_id",
                  required=("settlement", "state", "parties", "transfer_requests"))

    model.declare(NAMESPACE, "UsdExchangeRate", KIND_CONCEPT, required=("to", "rate"))

    model.declare(NAMESPACE, "SubmitTransferRequest", KIND_TRANSACTION,
                  required=("transfer_id", "to_bank", "state", "details"))
    model.declare(NAMESPACE, "CreateBatch", KIND_TRANSACTION, required=("batch_id", "usd_rates"))
    model.declare(NAMESPACE, "MarkPreProcessComplete", KIND_TRANSACTION, required=("batch_id",))
    model.declare(NAMESPACE, "CompleteSettlement", KIND_TRANSACTION,
                  required=("batch_id", "usd_rates"))
    model.declare(NAMESPACE, "MarkPostProcessComplete", KIND_TRANSACTION, required=("batch_id",))

    model.declare(NAMESPACE, "BatchCreatedEvent", KIND_EVENT, required=("batch_id",))
    return model
