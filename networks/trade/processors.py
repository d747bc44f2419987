"""
Commodity Trading Network — Transaction Processors
====================================================
"""

from networks.trade.events import remove_notification, trade_notification
from networks.trade.models import COMMODITY, REMOVE_HIGH_QUANTITY_COMMODITIES, TRADE


def trade_commodity(tx, ctx):
    """Give the commodity to tx.new_owner."""
    tx.commodity.owner = tx.new_owner
    ctx.emit(trade_notification(ctx.factory, tx.commodity))
    ctx.asset_registry(COMMODITY).update(tx.commodity)


def remove_high_quantity_commodities(tx, ctx):
    """Remove every commodity selected by selectCommoditiesWithHighQuantity."""
    registry = ctx.asset_registry(COMMODITY)
    for commodity in ctx.query("selectCommoditiesWithHighQuantity"):
        ctx.emit(remove_notification(ctx.factory, commodity))
        registry.remove(commodity)
        ctx.logger.info(f"Removed commodity {commodity.get_identifier()}")


PROCESSORS = {
    TRADE: trade_commodity,
    REMOVE_HIGH_QUANTITY_COMMODITIES: remove_high_quantity_commodities,
}
