"""
Vehicle Manufacture Network — Model
=====================================
People order vehicles from manufacturers; each order is tracked to
delivery and produces a registered vehicle.
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.acme.vehicle_network"

PERSON = f"{NAMESPACE}.Person"
MANUFACTURER = f"{NAMESPACE}.Manufacturer"
ORDER = f"{NAMESPACE}.Order"
VEHICLE = f"{NAMESPACE}.Vehicle"
PLACE_ORDER = f"{NAMESPACE}.PlaceOrder"
UPDATE_ORDER_STATUS = f"{NAMESPACE}.UpdateOrderStatus"
SETUP_DEMO = f"{NAMESPACE}.SetupDemo"
PLACE_ORDER_EVENT = f"{NAMESPACE}.PlaceOrderEvent"
UPDATE_ORDER_STATUS_EVENT = f"{NAMESPACE}.UpdateOrderStatusEvent"

# ── OrderStatus ───────────────────────────────────────────────
PLACED = "PLACED"
SCHEDULED_FOR_MANUFACTURE = "SCHEDULED_FOR_MANUFACTURE"
VIN_ASSIGNED = "VIN_ASSIGNED"
OWNER_ASSIGNED = "OWNER_ASSIGNED"
DELIVERED = "DELIVERED"

VALID_ORDER_STATUSES = frozenset({
    PLACED,
    SCHEDULED_FOR_MANUFACTURE,
    VIN_ASSIGNED,
    OWNER_ASSIGNED,
    DELIVERED,
})

# ── VehicleStatus ─────────────────────────────────────────────
ACTIVE = "ACTIVE"
OFF_THE_ROAD = "OFF_THE_ROAD"
SCRAPPED = "SCRAPPED"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Person", KIND_PARTICIPANT, identified_by="username")
    model.declare(NAMESPACE, "Manufacturer", KIND_PARTICIPANT, identified_by="name")
    model.declare(NAMESPACE, "VehicleDetails", KIND_CONCEPT, required=("make", "model_type", "colour"))
    model.declare(NAMESPACE, "Options", KIND_CONCEPT, required=("trim", "interior", "extras"))
    model.declare(NAMESPACE, "Order", KIND_ASSET,
                  identified_by="order_id",
                  required=("vehicle_details", "order_status", "options", "orderer"))
    model.declare(NAMESPACE, "Vehicle", KIND_ASSET,
                  identified_by="vin", required=("vehicle_details", "vehicle_status"))
    model.declare(NAMESPACE, "PlaceOrder", KIND_TRANSACTION,
                  required=("order_id", "vehicle_details", "options", "orderer"))
    model.declare(NAMESPACE, "UpdateOrderStatus", KIND_TRANSACTION, required=("order_status", "order"))
    model.declare(NAMESPACE, "SetupDemo", KIND_TRANSACTION)
    model.declare(NAMESPACE, "PlaceOrderEvent", KIND_EVENT,
                  required=("order_id", "vehicle_details", "options", "orderer"))
    model.declare(NAMESPACE, "UpdateOrderStatusEvent", KIND_EVENT, required=("order_status", "order"))
    return model
