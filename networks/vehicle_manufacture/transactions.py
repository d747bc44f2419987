"""
Vehicle Manufacture Network — Transaction Requests
====================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from networks.vehicle_manufacture.models import NAMESPACE, VALID_ORDER_STATUSES


@dataclass(frozen=True)
class PlaceOrderRequest:
    order_id: str
    orderer: str
    make: str
    model_type: str
    colour: str
    trim: str
    interior: str
    extras: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.order_id:
            raise ValueError("order_id must be non-empty.")
        if not self.orderer:
            raise ValueError("orderer must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "PlaceOrder",
            order_id=self.order_id,
            vehicle_details=factory.new_concept(
                NAMESPACE, "VehicleDetails",
                make=factory.new_relationship(NAMESPACE, "Manufacturer", self.make),
                model_type=self.model_type,
                colour=self.colour,
            ),
            options=factory.new_concept(
                NAMESPACE, "Options",
                trim=self.trim,
                interior=self.interior,
                extras=list(self.extras),
            ),
            orderer=factory.new_relationship(NAMESPACE, "Person", self.orderer),
        )


@dataclass(frozen=True)
class UpdateOrderStatusRequest:
    order_id: str
    order_status: str
    vin: Optional[str] = None

    def __post_init__(self):
        if self.order_status not in VALID_ORDER_STATUSES:
            raise ValueError(
                f"order_status '{self.order_status}' not valid. "
                f"Must be one of: {sorted(VALID_ORDER_STATUSES)}"
            )

    def to_transaction(self, factory):
        fields = {
            "order": factory.new_relationship(NAMESPACE, "Order", self.order_id),
            "order_status": self.order_status,
        }
        if self.vin is not None:
            fields["vin"] = self.vin
        return factory.new_transaction(NAMESPACE, "UpdateOrderStatus", **fields)


@dataclass(frozen=True)
class SetupDemoRequest:
    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "SetupDemo")
