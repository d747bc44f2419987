"""
Commodity Trading Network — Model
===================================
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.acme.trading"

COMMODITY = f"{NAMESPACE}.Commodity"
TRADER = f"{NAMESPACE}.Trader"
TRADE = f"{NAMESPACE}.Trade"
REMOVE_HIGH_QUANTITY_COMMODITIES = f"{NAMESPACE}.RemoveHighQuantityCommodities"
TRADE_NOTIFICATION = f"{NAMESPACE}.TradeNotification"
REMOVE_NOTIFICATION = f"{NAMESPACE}.RemoveNotification"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Trader", KIND_PARTICIPANT,
                  identified_by="trade_id", required=("first_name", "last_name"))
    model.declare(NAMESPACE, "Commodity", KIND_ASSET,
                  identified_by="trading_symbol",
                  required=("description", "main_exchange", "quantity", "owner"))
    model.declare(NAMESPACE, "Trade", KIND_TRANSACTION,
                  required=("commodity", "new_owner"))
    model.declare(NAMESPACE, "RemoveHighQuantityCommodities", KIND_TRANSACTION)
    model.declare(NAMESPACE, "TradeNotification", KIND_EVENT)
    model.declare(NAMESPACE, "RemoveNotification", KIND_EVENT)
    return model
