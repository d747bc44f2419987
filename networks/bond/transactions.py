"""
Bond Network — Transaction Requests
=====================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from networks.bond.models import NAMESPACE, VALID_PERIODS


@dataclass(frozen=True)
class BondTerms:
    """Fields of the Bond concept."""
    instrument_id: Tuple[str, ...]
    exchange_id: Tuple[str, ...]
    maturity: datetime
    par_value: float
    face_amount: float
    period_multiplier: int
    period: str
    day_count_fraction: str
    issuer_id: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self):
        if not self.instrument_id:
            raise ValueError("instrument_id must contain at least one value.")
        if not isinstance(self.maturity, datetime) or self.maturity.tzinfo is None:
            raise ValueError("maturity must be a timezone-aware datetime.")
        if self.period not in VALID_PERIODS:
            raise ValueError(f"Invalid period: {self.period}")
        if self.period_multiplier <= 0:
            raise ValueError("period_multiplier must be > 0.")

    def to_concept(self, factory, namespace: str = NAMESPACE):
        frequency = factory.new_concept(
            namespace, "PaymentFrequency",
            period_multiplier=self.period_multiplier,
            period=self.period,
        )
        bond = factory.new_concept(
            namespace, "Bond",
            instrument_id=list(self.instrument_id),
            exchange_id=list(self.exchange_id),
            maturity=self.maturity,
            par_value=self.par_value,
            face_amount=self.face_amount,
            payment_frequency=frequency,
            day_count_fraction=self.day_count_fraction,
            description=self.description,
        )
        if self.issuer_id is not None:
            bond.issuer = factory.new_relationship(namespace, "Issuer", self.issuer_id)
        return bond


@dataclass(frozen=True)
class PublishBondRequest:
    """Publish a bond under its ISIN code."""
    isin_code: str
    terms: BondTerms

    def __post_init__(self):
        if not self.isin_code:
            raise ValueError("isin_code must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "PublishBond",
            isin_code=self.isin_code,
            bond=self.terms.to_concept(factory),
        )
