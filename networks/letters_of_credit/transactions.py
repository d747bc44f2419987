"""
Letters of Credit Network — Transaction Requests
==================================================
Parties are (type, id) pairs: a Customer or a BankEmployee may
approve or suggest changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from networks.letters_of_credit.models import NAMESPACE

PARTY_TYPES = frozenset({"Customer", "BankEmployee"})


@dataclass(frozen=True)
class Rule:
    rule_id: str
    rule_text: str

    def to_concept(self, factory):
        return factory.new_concept(NAMESPACE, "Rule", rule_id=self.rule_id, rule_text=self.rule_text)


@dataclass(frozen=True)
class ProductDetails:
    product_type: str
    quantity: int
    price_per_unit: float

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError("quantity must be > 0.")
        if self.price_per_unit < 0:
            raise ValueError("price_per_unit must be >= 0.")

    def to_concept(self, factory):
        return factory.new_concept(
            NAMESPACE, "ProductDetails",
            product_type=self.product_type,
            quantity=self.quantity,
            price_per_unit=self.price_per_unit,
        )


@dataclass(frozen=True)
class Party:
    party_type: str
    person_id: str

    def __post_init__(self):
        if self.party_type not in PARTY_TYPES:
            raise ValueError(
                f"party_type '{self.party_type}' not valid. "
                f"Must be one of: {sorted(PARTY_TYPES)}"
            )

    def to_relationship(self, factory):
        return factory.new_relationship(NAMESPACE, self.party_type, self.person_id)


def _loc(factory, letter_id):
    return factory.new_relationship(NAMESPACE, "LetterOfCredit", letter_id)


@dataclass(frozen=True)
class InitialApplicationRequest:
    letter_id: str
    applicant_id: str
    beneficiary_id: str
    rules: Tuple[Rule, ...]
    product_details: ProductDetails

    def __post_init__(self):
        if not self.letter_id:
            raise ValueError("letter_id must be non-empty.")
        if self.applicant_id == self.beneficiary_id:
            raise ValueError("applicant and beneficiary must differ.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "InitialApplication",
            letter_id=self.letter_id,
            applicant=factory.new_relationship(NAMESPACE, "Customer", self.applicant_id),
            beneficiary=factory.new_relationship(NAMESPACE, "Customer", self.beneficiary_id),
            rules=[rule.to_concept(factory) for rule in self.rules],
            product_details=self.product_details.to_concept(factory),
        )


@dataclass(frozen=True)
class ApproveRequest:
    letter_id: str
    approving_party: Party

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "Approve",
            loc=_loc(factory, self.letter_id),
            approving_party=self.approving_party.to_relationship(factory),
        )


@dataclass(frozen=True)
class RejectRequest:
    letter_id: str
    close_reason: str

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "Reject", loc=_loc(factory, self.letter_id), close_reason=self.close_reason,
        )


@dataclass(frozen=True)
class SuggestChangesRequest:
    letter_id: str
    rules: Tuple[Rule, ...]
    suggesting_party: Party

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "SuggestChanges",
            loc=_loc(factory, self.letter_id),
            rules=[rule.to_concept(factory) for rule in self.rules],
            suggesting_party=self.suggesting_party.to_relationship(factory),
        )


@dataclass(frozen=True)
class ShipProductRequest:
    letter_id: str
    evidence: str

    def __post_init__(self):
        if not self.evidence:
            raise ValueError("evidence must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "ShipProduct", loc=_loc(factory, self.letter_id), evidence=self.evidence,
        )


@dataclass(frozen=True)
class ReceiveProductRequest:
    letter_id: str

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "ReceiveProduct", loc=_loc(factory, self.letter_id))


@dataclass(frozen=True)
class ReadyForPaymentRequest:
    letter_id: str

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "ReadyForPayment", loc=_loc(factory, self.letter_id))


@dataclass(frozen=True)
class CloseRequest:
    letter_id: str
    close_reason: str

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "Close", loc=_loc(factory, self.letter_id), close_reason=self.close_reason,
        )


@dataclass(frozen=True)
class CreateDemoParticipantsRequest:
    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "CreateDemoParticipants")
