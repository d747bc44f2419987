"""
Digital Property Network — Transaction Requests
=================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.digital_property.models import NAMESPACE


@dataclass(frozen=True)
class RegisterPropertyForSaleRequest:
    """Offer a land title for sale on behalf of its seller."""
    seller_id: str
    title_id: str

    def __post_init__(self):
        if not self.seller_id:
            raise ValueError("seller_id must be non-empty.")
        if not self.title_id:
            raise ValueError("title_id must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "RegisterPropertyForSale",
            seller=factory.new_relationship(NAMESPACE, "Person", self.seller_id),
            title=factory.new_relationship(NAMESPACE, "LandTitle", self.title_id),
        )
