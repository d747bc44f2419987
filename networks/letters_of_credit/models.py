"""
Letters of Credit Network — Model
===================================
An applicant and a beneficiary, each backed by a bank, agree a
letter of credit for a shipment of goods.

Status lifecycle:

    AWAITING_APPROVAL ──(4 approvals)──▶ APPROVED ──▶ SHIPPED ──▶ RECEIVED
          │    ▲                                                    │
          │    └── SuggestChanges                                   ▼
          └──▶ REJECTED                      CLOSED ◀── READY_FOR_PAYMENT
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.example.loc"

BANK = f"{NAMESPACE}.Bank"
BANK_EMPLOYEE = f"{NAMESPACE}.BankEmployee"
CUSTOMER = f"{NAMESPACE}.Customer"
LETTER_OF_CREDIT = f"{NAMESPACE}.LetterOfCredit"

INITIAL_APPLICATION = f"{NAMESPACE}.InitialApplication"
APPROVE = f"{NAMESPACE}.Approve"
REJECT = f"{NAMESPACE}.Reject"
SUGGEST_CHANGES = f"{NAMESPACE}.SuggestChanges"
SHIP_PRODUCT = f"{NAMESPACE}.ShipProduct"
RECEIVE_PRODUCT = f"{NAMESPACE}.ReceiveProduct"
READY_FOR_PAYMENT = f"{NAMESPACE}.ReadyForPayment"
CLOSE = f"{NAMESPACE}.Close"
CREATE_DEMO_PARTICIPANTS = f"{NAMESPACE}.CreateDemoParticipants"

# ── LetterStatus ──────────────────────────────────────────────
AWAITING_APPROVAL = "AWAITING_APPROVAL"
APPROVED = "APPROVED"
SHIPPED = "SHIPPED"
RECEIVED = "RECEIVED"
READY_FOR_PAYMENT_STATUS = "READY_FOR_PAYMENT"
CLOSED = "CLOSED"
REJECTED = "REJECTED"

# applicant, beneficiary and one employee of each bank
REQUIRED_APPROVALS = 4

EVENT_NAMES = (
    "InitialApplicationEvent",
    "ApproveEvent",
    "RejectEvent",
    "SuggestChangesEvent",
    "ShipProductEvent",
    "ReceiveProductEvent",
    "ReadyForPaymentEvent",
    "CloseEvent",
)


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Bank", KIND_PARTICIPANT, identified_by="bank_id", required=("name",))
    model.declare(NAMESPACE, "BankEmployee", KIND_PARTICIPANT,
                  identified_by="person_id", required=("name", "bank"))
    model.declare(NAMESPACE, "Customer", KIND_PARTICIPANT,
                  identified_by="person_id", required=("name", "bank", "company_name"))
    model.declare(NAMESPACE, "Rule", KIND_CONCEPT, required=("rule_id", "rule_text"))
    model.declare(NAMESPACE, "ProductDetails", KIND_CONCEPT,
                  required=("product_type", "quantity", "price_per_unit"))
    model.declare(NAMESPACE, "LetterOfCredit", KIND_ASSET,
                  identified_by="letter_id",
                  required=("applicant", "beneficiary", "issuing_bank", "exporting_bank",
                            "rules", "product_details", "evidence", "approval", "status"))

    model.declare(NAMESPACE, "InitialApplication", KIND_TRANSACTION,
                  required=("letter_id", "applicant", "beneficiary", "rules", "product_details"))
    model.declare(NAMESPACE, "Approve", KIND_TRANSACTION, required=("loc", "approving_party"))
    model.declare(NAMESPACE, "Reject", KIND_TRANSACTION, required=("loc", "close_reason"))
    model.declare(NAMESPACE, "SuggestChanges", KIND_TRANSACTION,
                  required=("loc", "rules", "suggesting_party"))
    model.declare(NAMESPACE, "ShipProduct", KIND_TRANSACTION, required=("loc", "evidence"))
    model.declare(NAMESPACE, "ReceiveProduct", KIND_TRANSACTION, required=("loc",))
    model.declare(NAMESPACE, "ReadyForPayment", KIND_TRANSACTION, required=("loc",))
    model.declare(NAMESPACE, "Close", KIND_TRANSACTION, required=("loc", "close_reason"))
    model.declare(NAMESPACE, "CreateDemoParticipants", KIND_TRANSACTION)

    for name in EVENT_NAMES:
        model.declare(NAMESPACE, name, KIND_EVENT, required=("loc",))
    return model
