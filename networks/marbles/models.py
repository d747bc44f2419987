"""
Marbles Network — Model
=========================
"""

from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, KIND_TRANSACTION, ModelManager

NAMESPACE = "org.hyperledger_composer.marbles"

MARBLE = f"{NAMESPACE}.Marble"
PLAYER = f"{NAMESPACE}.Player"
TRADE_MARBLE = f"{NAMESPACE}.TradeMarble"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Player", KIND_PARTICIPANT,
                  identified_by="email", required=("first_name", "last_name"))
    model.declare(NAMESPACE, "Marble", KIND_ASSET,
                  identified_by="marble_id", required=("size", "color", "owner"))
    model.declare(NAMESPACE, "TradeMarble", KIND_TRANSACTION,
                  required=("marble", "new_owner"))
    return model
