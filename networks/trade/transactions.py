"""
Commodity Trading Network — Transaction Requests
==================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.trade.models import NAMESPACE


@dataclass(frozen=True)
class TradeRequest:
    """Move a commodity to a new owner."""
    trading_symbol: str
    new_owner_id: str

    def __post_init__(self):
        if not self.trading_symbol:
            raise ValueError("trading_symbol must be non-empty.")
        if not self.new_owner_id:
            raise ValueError("new_owner_id must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "Trade",
            commodity=factory.new_relationship(NAMESPACE, "Commodity", self.trading_symbol),
            new_owner=factory.new_relationship(NAMESPACE, "Trader", self.new_owner_id),
        )


@dataclass(frozen=True)
class RemoveHighQuantityCommoditiesRequest:
    """Remove every commodity held in high quantity."""

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "RemoveHighQuantityCommodities")
