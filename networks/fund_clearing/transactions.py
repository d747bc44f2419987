"""
Fund Clearing Network — Transaction Requests
==============================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from networks.fund_clearing.models import (
    NAMESPACE,
    PENDING,
    VALID_CURRENCIES,
    VALID_TRANSFER_STATES,
)


def _check_currency(currency: str) -> None:
    if currency not in VALID_CURRENCIES:
        raise ValueError(
            f"currency '{currency}' not valid. "
            f"Must be one of: {sorted(VALID_CURRENCIES)}"
        )


@dataclass(frozen=True)
class Transfer:
    currency: str
    amount: float
    from_account: int
    to_account: int

    def __post_init__(self):
        _check_currency(self.currency)
        if self.amount <= 0:
            raise ValueError("amount must be > 0.")

    def to_concept(self, factory):
        return factory.new_concept(
            NAMESPACE, "Transfer",
            currency=self.currency,
            amount=self.amount,
            from_account=self.from_account,
            to_account=self.to_account,
        )


@dataclass(frozen=True)
class UsdExchangeRate:
    """Units of `to` bought by one US dollar."""

    to: str
    rate: float

    def __post_init__(self):
        _check_currency(self.to)
        if self.rate <= 0:
            raise ValueError("rate must be > 0.")

    def to_concept(self, factory):
        return factory.new_concept(NAMESPACE, "UsdExchangeRate", to=self.to, rate=self.rate)


@dataclass(frozen=True)
class SubmitTransferRequest:
    transfer_id: str
    to_bank: str
    details: Transfer
    state: str = PENDING

    def __post_init__(self):
        if not self.transfer_id:
            raise ValueError("transfer_id must be non-empty.")
        if not self.to_bank:
            raise ValueError("to_bank must be non-empty.")
        if self.state not in VALID_TRANSFER_STATES:
            raise ValueError(
                f"state '{self.state}' not valid. "
                f"Must be one of: {sorted(VALID_TRANSFER_STATES)}"
            )

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "SubmitTransferRequest",
            transfer_id=self.transfer_id,
            to_bank=self.to_bank,
            state=self.state,
            details=self.details.to_concept(factory),
        )


@dataclass(frozen=True)
class CreateBatchRequest:
    batch_id: str
    usd_rates: Tuple[UsdExchangeRate, ...] = ()

    def __post_init__(self):
        if not self.batch_id:
            raise ValueError("batch_id must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "CreateBatch",
            batch_id=self.batch_id,
            usd_rates=[rate.to_concept(factory) for rate in self.usd_rates],
        )


@dataclass(frozen=True)
class MarkPreProcessCompleteRequest:
    batch_id: str

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "MarkPreProcessComplete", batch_id=self.batch_id)


@dataclass(frozen=True)
class CompleteSettlementRequest:
    batch_id: str
    usd_rates: Tuple[UsdExchangeRate, ...] = ()

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "CompleteSettlement",
            batch_id=self.batch_id,
            usd_rates=[rate.to_concept(factory) for rate in self.usd_rates],
        )


@dataclass(frozen=True)
class MarkPostProcessCompleteRequest:
    batch_id: str

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "MarkPostProcessComplete", batch_id=self.batch_id)
