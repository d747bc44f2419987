"""
Perishable Goods Network — Transaction Requests
=================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from networks.perishable.models import NAMESPACE


@dataclass(frozen=True)
class TemperatureReadingRequest:
    """A temperature sensor reading taken on board a shipment."""
    shipment_id: str
    centigrade: float

    def __post_init__(self):
        if not self.shipment_id:
            raise ValueError("shipment_id must be non-empty.")
        if not isinstance(self.centigrade, (int, float)):
            raise ValueError("centigrade must be a number.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "TemperatureReading",
            shipment=factory.new_relationship(NAMESPACE, "Shipment", self.shipment_id),
            centigrade=self.centigrade,
        )


@dataclass(frozen=True)
class ShipmentReceivedRequest:
    """The importer took delivery of a shipment."""
    shipment_id: str
    received_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.shipment_id:
            raise ValueError("shipment_id must be non-empty.")
        if self.received_at is not None and self.received_at.tzinfo is None:
            raise ValueError("received_at must be timezone-aware.")

    def to_transaction(self, factory):
        fields = {"shipment": factory.new_relationship(NAMESPACE, "Shipment", self.shipment_id)}
        if self.received_at is not None:
            fields["timestamp"] = self.received_at
        return factory.new_transaction(NAMESPACE, "ShipmentReceived", **fields)


@dataclass(frozen=True)
class SetupDemoRequest:
    """Populate the network with the demo grower, importer, shipper and shipment."""

    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "SetupDemo")
