"""
Animal Tracking Network — Model
=================================
Farmers move animals between the fields of their businesses.
"""

from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, KIND_TRANSACTION, ModelManager

NAMESPACE = "com.biz"

FARMER = f"{NAMESPACE}.Farmer"
REGULATOR = f"{NAMESPACE}.Regulator"
FIELD = f"{NAMESPACE}.Field"
ANIMAL = f"{NAMESPACE}.Animal"
BUSINESS = f"{NAMESPACE}.Business"
ANIMAL_MOVEMENT_DEPARTURE = f"{NAMESPACE}.AnimalMovementDeparture"
ANIMAL_MOVEMENT_ARRIVAL = f"{NAMESPACE}.AnimalMovementArrival"
SETUP_DEMO = f"{NAMESPACE}.SetupDemo"

# ── AnimalType ────────────────────────────────────────────────
SHEEP_GOAT = "SHEEP_GOAT"
CATTLE = "CATTLE"
PIG = "PIG"
DEER_OTHER = "DEER_OTHER"

# ── MovementStatus ────────────────────────────────────────────
IN_FIELD = "IN_FIELD"
IN_TRANSIT = "IN_TRANSIT"

# ── ProductionType ────────────────────────────────────────────
MEAT = "MEAT"
WOOL = "WOOL"
DAIRY = "DAIRY"
BREEDING = "BREEDING"
OTHER = "OTHER"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Farmer", KIND_PARTICIPANT,
                  identified_by="email", required=("first_name", "last_name"))
    model.declare(NAMESPACE, "Regulator", KIND_PARTICIPANT,
                  identified_by="email", required=("first_name", "last_name"))
    model.declare(NAMESPACE, "Field", KIND_ASSET,
                  identified_by="cph", required=("name", "business"))
    model.declare(NAMESPACE, "Animal", KIND_ASSET,
                  identified_by="animal_id",
                  required=("species", "movement_status", "production_type", "owner"))
    model.declare(NAMESPACE, "Business", KIND_ASSET,
                  identified_by="sbi", required=("owner",))
    model.declare(NAMESPACE, "AnimalMovementDeparture", KIND_TRANSACTION,
                  required=("animal", "from_business", "to", "from_field"))
    model.declare(NAMESPACE, "AnimalMovementArrival", KIND_TRANSACTION,
                  required=("animal", "from_business", "to", "arrival_field"))
    model.declare(NAMESPACE, "SetupDemo", KIND_TRANSACTION)
    return model
