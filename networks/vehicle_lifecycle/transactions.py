"""
Vehicle Lifecycle Network — Transaction Requests
==================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from networks.vehicle_lifecycle.models import (
    DVLA_NAMESPACE,
    MANUFACTURER_NAMESPACE,
    NAMESPACE,
    VALID_ORDER_STATUSES,
)


@dataclass(frozen=True)
class VehicleDetails:
    make: str
    model_type: str
    colour: str
    vin: str = ""
    co2_rating: Optional[float] = None

    def __post_init__(self):
        if not self.make:
            raise ValueError("make must be non-empty.")
        if not self.model_type:
            raise ValueError("model_type must be non-empty.")
        if not self.colour:
            raise ValueError("colour must be non-empty.")

    def to_concept(self, factory):
        fields = {
            "make": self.make,
            "model_type": self.model_type,
            "colour": self.colour,
            "vin": self.vin,
        }
        if self.co2_rating is not None:
            fields["co2_rating"] = self.co2_rating
        return factory.new_concept(DVLA_NAMESPACE, "VehicleDetails", **fields)


# ══════════════════════════════════════════════════════════════
# LIFECYCLE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ManufactureVehicleRequest:
    vin: str
    details: VehicleDetails
    manufacturer_id: str

    def __post_init__(self):
        if not self.vin:
            raise ValueError("vin must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "ManufactureVehicle",
            vin=self.vin,
            vehicle_details=self.details.to_concept(factory),
            manufacturer=factory.new_relationship(MANUFACTURER_NAMESPACE, "Manufacturer", self.manufacturer_id),
        )


@dataclass(frozen=True)
class PrivateTransferRequest:
    vin: str
    private_owner_id: str

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "PrivateTransfer",
            vehicle=factory.new_relationship(NAMESPACE, "Vehicle", self.vin),
            private_owner=factory.new_relationship(NAMESPACE, "PrivateOwner", self.private_owner_id),
        )


@dataclass(frozen=True)
class CompanyTransferRequest:
    vin: str
    company_owner_id: str

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "CompanyTransfer",
            vehicle=factory.new_relationship(NAMESPACE, "Vehicle", self.vin),
            company_owner=factory.new_relationship(NAMESPACE, "CompanyOwner", self.company_owner_id),
        )


@dataclass(frozen=True)
class AuthoriseRequest:
    vin: str

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "Authorise",
            vehicle=factory.new_relationship(NAMESPACE, "Vehicle", self.vin),
        )


@dataclass(frozen=True)
class ScrapVehicleRequest:
    vin: str

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "ScrapVehicle",
            vehicle=factory.new_relationship(NAMESPACE, "Vehicle", self.vin),
        )


@dataclass(frozen=True)
class SetupDemoRequest:
    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "SetupDemo")


# ══════════════════════════════════════════════════════════════
# MANUFACTURER
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PlaceOrderRequest:
    """An owner orders a vehicle; the order id defaults to the transaction id."""
    manufacturer_id: str
    orderer_id: str
    details: VehicleDetails
    order_id: Optional[str] = None

    def to_transaction(self, factory):
        fields = {
            "manufacturer": factory.new_relationship(MANUFACTURER_NAMESPACE, "Manufacturer", self.manufacturer_id),
            "orderer": factory.new_relationship(NAMESPACE, "PrivateOwner", self.orderer_id),
            "vehicle_details": self.details.to_concept(factory),
        }
        if self.order_id:
            fields["order_id"] = self.order_id
        return factory.new_transaction(MANUFACTURER_NAMESPACE, "PlaceOrder", **fields)


@dataclass(frozen=True)
class UpdateOrderStatusRequest:
    order_id: str
    order_status: str
    vin: Optional[str] = None
    number_plate: Optional[str] = None
    v5c: Optional[str] = None

    def __post_init__(self):
        if self.order_status not in VALID_ORDER_STATUSES:
            raise ValueError(
                f"order_status '{self.order_status}' not valid. "
                f"Must be one of: {sorted(VALID_ORDER_STATUSES)}"
            )

    def to_transaction(self, factory):
        fields = {
            "order": factory.new_relationship(MANUFACTURER_NAMESPACE, "Order", self.order_id),
            "order_status": self.order_status,
        }
        for name in ("vin", "number_plate", "v5c"):
            value = getattr(self, name)
            if value is not None:
                fields[name] = value
        return factory.new_transaction(MANUFACTURER_NAMESPACE, "UpdateOrderStatus", **fields)


# ══════════════════════════════════════════════════════════════
# DVLA
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PrivateVehicleTransferRequest:
    vin: str
    seller_id: str
    buyer_id: str
    special_notes: Optional[str] = None

    def __post_init__(self):
        if self.seller_id == self.buyer_id:
            raise ValueError("seller and buyer must differ.")

    def to_transaction(self, factory):
        fields = {
            "vehicle": factory.new_relationship(DVLA_NAMESPACE, "Vehicle", self.vin),
            "seller": factory.new_relationship(NAMESPACE, "PrivateOwner", self.seller_id),
            "buyer": factory.new_relationship(NAMESPACE, "PrivateOwner", self.buyer_id),
        }
        if self.special_notes:
            fields["special_notes"] = self.special_notes
        return factory.new_transaction(DVLA_NAMESPACE, "PrivateVehicleTransfer", **fields)


@dataclass(frozen=True)
class DvlaScrapVehicleRequest:
    vin: str

    def to_transaction(self, factory):
        return factory.new_transaction(
            DVLA_NAMESPACE, "ScrapVehicle",
            vehicle=factory.new_relationship(DVLA_NAMESPACE, "Vehicle", self.vin),
        )


@dataclass(frozen=True)
class ScrapAllVehiclesByColourRequest:
    colour: str

    def __post_init__(self):
        if not self.colour:
            raise ValueError("colour must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(DVLA_NAMESPACE, "ScrapAllVehiclesByColour", colour=self.colour)
