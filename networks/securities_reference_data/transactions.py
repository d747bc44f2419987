"""
Securities Reference Data Network — Transaction Requests
==========================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.bond.transactions import BondTerms
from networks.securities_reference_data.models import NAMESPACE


@dataclass(frozen=True)
class PublishDataItemRequest:
    """Publish reference data for one corporate bond."""
    isin_code: str
    terms: BondTerms

    def __post_init__(self):
        if not self.isin_code:
            raise ValueError("isin_code must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "PublishDataItem",
            isin_code=self.isin_code,
            data=self.terms.to_concept(factory, NAMESPACE),
        )
