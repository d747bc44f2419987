"""
Bond Network — Model
======================
A bond is described by the Bond concept; publishing it creates a
BondAsset keyed by its ISIN code.
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_CONCEPT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.acme.bond"

BOND_ASSET = f"{NAMESPACE}.BondAsset"
ISSUER = f"{NAMESPACE}.Issuer"
PUBLISH_BOND = f"{NAMESPACE}.PublishBond"

# ── PaymentFrequency.period ───────────────────────────────────
PERIOD_DAY = "DAY"
PERIOD_WEEK = "WEEK"
PERIOD_MONTH = "MONTH"
PERIOD_YEAR = "YEAR"

VALID_PERIODS = frozenset({PERIOD_DAY, PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR})


def declare_bond_concepts(model: ModelManager, namespace: str = NAMESPACE) -> None:
    """Bond and PaymentFrequency, shared with the securities network."""
    model.declare(namespace, "PaymentFrequency", KIND_CONCEPT,
                  required=("period_multiplier", "period"))
    model.declare(namespace, "Bond", KIND_CONCEPT,
                  datetime_fields=("maturity",),
                  required=("instrument_id", "exchange_id", "maturity", "par_value",
                            "face_amount", "payment_frequency", "day_count_fraction"))


def build_model() -> ModelManager:
    model = ModelManager()
    declare_bond_concepts(model)
    model.declare(NAMESPACE, "Issuer", KIND_PARTICIPANT,
                  identified_by="member_id", required=("name",))
    model.declare(NAMESPACE, "BondAsset", KIND_ASSET,
                  identified_by="isin_code", required=("bond",))
    model.declare(NAMESPACE, "PublishBond", KIND_TRANSACTION,
                  required=("isin_code", "bond"))
    return model
