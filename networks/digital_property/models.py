"""
Digital Property Network — Model
==================================
"""

from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, KIND_TRANSACTION, ModelManager

NAMESPACE = "net.biz.digitalPropertyNetwork"

LAND_TITLE = f"{NAMESPACE}.LandTitle"
SALES_AGREEMENT = f"{NAMESPACE}.SalesAgreement"
PERSON = f"{NAMESPACE}.Person"
REGISTER_PROPERTY_FOR_SALE = f"{NAMESPACE}.RegisterPropertyForSale"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Person", KIND_PARTICIPANT,
                  identified_by="person_id", required=("first_name", "last_name"))
    model.declare(NAMESPACE, "LandTitle", KIND_ASSET,
                  identified_by="title_id", required=("owner", "information"))
    model.declare(NAMESPACE, "SalesAgreement", KIND_ASSET,
                  identified_by="sales_id", required=("seller", "title"))
    model.declare(NAMESPACE, "RegisterPropertyForSale", KIND_TRANSACTION,
                  required=("seller", "title"))
    return model
