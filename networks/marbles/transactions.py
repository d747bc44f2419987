"""
Marbles Network — Transaction Requests
========================================
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.marbles.models import NAMESPACE


@dataclass(frozen=True)
class TradeMarbleRequest:
    """Hand a marble to another player."""
    marble_id: str
    new_owner_email: str

    def __post_init__(self):
        if not self.marble_id:
            raise ValueError("marble_id must be non-empty.")
        if not self.new_owner_email:
            raise ValueError("new_owner_email must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "TradeMarble",
            marble=factory.new_relationship(NAMESPACE, "Marble", self.marble_id),
            new_owner=factory.new_relationship(NAMESPACE, "Player", self.new_owner_email),
        )
