"""
Basic Sample Network — Transaction Requests
=============================================
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.basic_sample.models import NAMESPACE


@dataclass(frozen=True)
class SampleTransactionRequest:
    """Replace the value of a sample asset."""
    asset_id: str
    new_value: str

    def __post_init__(self):
        if not self.asset_id:
            raise ValueError("asset_id must be non-empty.")
        if not isinstance(self.new_value, str):
            raise ValueError("new_value must be a string.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "SampleTransaction",
            asset=factory.new_relationship(NAMESPACE, "SampleAsset", self.asset_id),
            new_value=self.new_value,
        )
