"""
Vehicle Lifecycle Network — Model
===================================
Three namespaces share one network:

    org.acme.vehicle.lifecycle               owners, regulator, vehicles
    org.acme.vehicle.lifecycle.manufacturer  manufacturers and their orders
    org.gov.uk.dvla                          the licensing authority's register

A vehicle is tracked twice: as a lifecycle Vehicle that is
manufactured, authorised, transferred and scrapped, and as a DVLA
Vehicle created once its order has a VIN.
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.acme.vehicle.lifecycle"
MANUFACTURER_NAMESPACE = "org.acme.vehicle.lifecycle.manufacturer"
DVLA_NAMESPACE = "org.gov.uk.dvla"

# ── org.acme.vehicle.lifecycle ────────────────────────────────
PRIVATE_OWNER = f"{NAMESPACE}.PrivateOwner"
COMPANY_OWNER = f"{NAMESPACE}.CompanyOwner"
REGULATOR = f"{NAMESPACE}.Regulator"
DEALERSHIP = f"{NAMESPACE}.Dealership"
AUCTION_HOUSE = f"{NAMESPACE}.AuctionHouse"
SCRAP_MERCHANT = f"{NAMESPACE}.ScrapMerchant"
VEHICLE = f"{NAMESPACE}.Vehicle"
MANUFACTURE_VEHICLE = f"{NAMESPACE}.ManufactureVehicle"
PRIVATE_TRANSFER = f"{NAMESPACE}.PrivateTransfer"
COMPANY_TRANSFER = f"{NAMESPACE}.CompanyTransfer"
AUTHORISE = f"{NAMESPACE}.Authorise"
SCRAP_VEHICLE = f"{NAMESPACE}.ScrapVehicle"
SETUP_DEMO = f"{NAMESPACE}.SetupDemo"

# ── org.acme.vehicle.lifecycle.manufacturer ───────────────────
MANUFACTURER = f"{MANUFACTURER_NAMESPACE}.Manufacturer"
ORDER = f"{MANUFACTURER_NAMESPACE}.Order"
PLACE_ORDER = f"{MANUFACTURER_NAMESPACE}.PlaceOrder"
UPDATE_ORDER_STATUS = f"{MANUFACTURER_NAMESPACE}.UpdateOrderStatus"
PLACE_ORDER_EVENT = f"{MANUFACTURER_NAMESPACE}.PlaceOrderEvent"
UPDATE_ORDER_STATUS_EVENT = f"{MANUFACTURER_NAMESPACE}.UpdateOrderStatusEvent"

# ── org.gov.uk.dvla ───────────────────────────────────────────
DVLA_VEHICLE = f"{DVLA_NAMESPACE}.Vehicle"
PRIVATE_VEHICLE_TRANSFER = f"{DVLA_NAMESPACE}.PrivateVehicleTransfer"
DVLA_SCRAP_VEHICLE = f"{DVLA_NAMESPACE}.ScrapVehicle"
SCRAP_ALL_VEHICLES_BY_COLOUR = f"{DVLA_NAMESPACE}.ScrapAllVehiclesByColour"
SCRAP_VEHICLE_EVENT = f"{DVLA_NAMESPACE}.ScrapVehicleEvent"

# ── lifecycle VehicleStatus ───────────────────────────────────
CREATED = "CREATED"
AUTHORIZED = "AUTHORIZED"
SCRAPPED = "SCRAPPED"

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

# ── DVLA VehicleStatus ────────────────────────────────────────
ACTIVE = "ACTIVE"
OFF_THE_ROAD = "OFF_THE_ROAD"


def build_model() -> ModelManager:
    model = ModelManager()

    model.declare(DVLA_NAMESPACE, "VehicleDetails", KIND_CONCEPT, required=("make", "model_type", "colour"))
    model.declare(DVLA_NAMESPACE, "VehicleTransferLogEntry", KIND_CONCEPT,
                  datetime_fields=("timestamp",), required=("vehicle", "buyer", "timestamp"))

    for name in ("PrivateOwner", "CompanyOwner", "Regulator", "Dealership",
                 "AuctionHouse", "ScrapMerchant"):
        model.declare(NAMESPACE, name, KIND_PARTICIPANT, identified_by="email")
    model.declare(MANUFACTURER_NAMESPACE, "Manufacturer", KIND_PARTICIPANT, identified_by="email")

    model.declare(NAMESPACE, "Vehicle", KIND_ASSET,
                  identified_by="vin",
                  required=("vehicle_details", "vehicle_status", "manufacturer"))
    model.declare(NAMESPACE, "ManufactureVehicle", KIND_TRANSACTION,
                  required=("vin", "vehicle_details", "manufacturer"))
    model.declare(NAMESPACE, "PrivateTransfer", KIND_TRANSACTION, required=("vehicle", "private_owner"))
    model.declare(NAMESPACE, "CompanyTransfer", KIND_TRANSACTION, required=("vehicle", "company_owner"))
    model.declare(NAMESPACE, "Authorise", KIND_TRANSACTION, required=("vehicle",))
    model.declare(NAMESPACE, "ScrapVehicle", KIND_TRANSACTION, required=("vehicle",))
    model.declare(NAMESPACE, "SetupDemo", KIND_TRANSACTION)

    model.declare(MANUFACTURER_NAMESPACE, "Order", KIND_ASSET,
                  identified_by="order_id",
                  required=("vehicle_details", "order_status", "manufacturer", "orderer"))
    model.declare(MANUFACTURER_NAMESPACE, "PlaceOrder", KIND_TRANSACTION,
                  required=("vehicle_details", "manufacturer", "orderer"))
    model.declare(MANUFACTURER_NAMESPACE, "UpdateOrderStatus", KIND_TRANSACTION,
                  required=("order_status", "order"))
    model.declare(MANUFACTURER_NAMESPACE, "PlaceOrderEvent", KIND_EVENT,
                  required=("order_id", "vehicle_details"))
    model.declare(MANUFACTURER_NAMESPACE, "UpdateOrderStatusEvent", KIND_EVENT,
                  required=("order_status", "order"))

    model.declare(DVLA_NAMESPACE, "Vehicle", KIND_ASSET,
                  identified_by="vin", required=("vehicle_details", "vehicle_status"))
    model.declare(DVLA_NAMESPACE, "PrivateVehicleTransfer", KIND_TRANSACTION,
                  required=("seller", "buyer", "vehicle"))
    model.declare(DVLA_NAMESPACE, "ScrapVehicle", KIND_TRANSACTION, required=("vehicle",))
    model.declare(DVLA_NAMESPACE, "ScrapAllVehiclesByColour", KIND_TRANSACTION, required=("colour",))
    model.declare(DVLA_NAMESPACE, "ScrapVehicleEvent", KIND_EVENT, required=("vehicle",))
    return model
