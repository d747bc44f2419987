"""
Marbles Network — Transaction Processors
==========================================
"""

from networks.marbles.models import MARBLE, TRADE_MARBLE


def trade_marble(tx, ctx):
    tx.marble.owner = tx.new_owner
    ctx.asset_registry(MARBLE).update(tx.marble)


PROCESSORS = {
    TRADE_MARBLE: trade_marble,
}
