"""
Securities Reference Data Network — Model
===========================================
Corporate bond reference data, keyed by ISIN code. The Bond concept
has the same shape as in the bond network.
"""

from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, KIND_TRANSACTION, ModelManager
from networks.bond.models import declare_bond_concepts

NAMESPACE = "org.acme.securities"

CORPORATE_BOND_REFERENCE_DATA = f"{NAMESPACE}.CorporateBondReferenceData"
PUBLISH_DATA_ITEM = f"{NAMESPACE}.PublishDataItem"


def build_model() -> ModelManager:
    model = ModelManager()
    declare_bond_concepts(model, NAMESPACE)
    model.declare(NAMESPACE, "Issuer", KIND_PARTICIPANT,
                  identified_by="member_id", required=("name",))
    model.declare(NAMESPACE, "CorporateBondReferenceData", KIND_ASSET,
                  identified_by="isin_code", required=("data",))
    model.declare(NAMESPACE, "PublishDataItem", KIND_TRANSACTION,
                  required=("isin_code", "data"))
    return model
