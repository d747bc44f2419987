"""
Perishable Goods Network — Model
==================================
Growers ship perishable goods to importers under a contract that
fixes a unit price, an arrival deadline and a temperature range.
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.acme.shipping.perishable"

GROWER = f"{NAMESPACE}.Grower"
IMPORTER = f"{NAMESPACE}.Importer"
SHIPPER = f"{NAMESPACE}.Shipper"
CONTRACT = f"{NAMESPACE}.Contract"
SHIPMENT = f"{NAMESPACE}.Shipment"
TEMPERATURE_READING = f"{NAMESPACE}.TemperatureReading"
SHIPMENT_RECEIVED = f"{NAMESPACE}.ShipmentReceived"
SETUP_DEMO = f"{NAMESPACE}.SetupDemo"
TEMPERATURE_THRESHOLD_EVENT = f"{NAMESPACE}.TemperatureThresholdEvent"

# ── ProductType ───────────────────────────────────────────────
PRODUCT_BANANAS = "BANANAS"
PRODUCT_APPLES = "APPLES"
PRODUCT_COFFEE = "COFFEE"

# ── ShipmentStatus ────────────────────────────────────────────
SHIPMENT_CREATED = "CREATED"
SHIPMENT_IN_TRANSIT = "IN_TRANSIT"
SHIPMENT_ARRIVED = "ARRIVED"

BUSINESS_TYPES = ("Grower", "Importer", "Shipper")


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Address", KIND_CONCEPT, required=("country",))
    for name in BUSINESS_TYPES:
        model.declare(NAMESPACE, name, KIND_PARTICIPANT,
                      identified_by="email", required=("address", "account_balance"))
    model.declare(NAMESPACE, "Contract", KIND_ASSET,
                  identified_by="contract_id",
                  datetime_fields=("arrival_date_time",),
                  required=("grower", "shipper", "importer", "arrival_date_time",
                            "unit_price", "min_temperature", "max_temperature",
                            "min_penalty_factor", "max_penalty_factor"))
    model.declare(NAMESPACE, "Shipment", KIND_ASSET,
                  identified_by="shipment_id",
                  required=("type", "status", "unit_count", "contract"))
    model.declare(NAMESPACE, "TemperatureReading", KIND_TRANSACTION,
                  required=("shipment", "centigrade"))
    model.declare(NAMESPACE, "ShipmentReceived", KIND_TRANSACTION,
                  required=("shipment",))
    model.declare(NAMESPACE, "SetupDemo", KIND_TRANSACTION)
    model.declare(NAMESPACE, "TemperatureThresholdEvent", KIND_EVENT)
    return model
