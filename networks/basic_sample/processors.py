"""
Basic Sample Network — Transaction Processors
===============================================
"""

from networks.basic_sample.events import sample_event
from networks.basic_sample.models import SAMPLE_ASSET, SAMPLE_TRANSACTION


def sample_transaction(tx, ctx):
    """Set the asset's value and emit SampleEvent with old and new values."""
    old_value = tx.asset.value
    tx.asset.value = tx.new_value

    ctx.asset_registry(SAMPLE_ASSET).update(tx.asset)
    ctx.emit(sample_event(ctx.factory, tx.asset, old_value, tx.new_value))


PROCESSORS = {
    SAMPLE_TRANSACTION: sample_transaction,
}
