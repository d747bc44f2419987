"""
Securities Reference Data Network — Transaction Processors
============================================================
"""

from networks.securities_reference_data.models import (
    CORPORATE_BOND_REFERENCE_DATA,
    NAMESPACE,
    PUBLISH_DATA_ITEM,
)


def publish(tx, ctx):
    """Create the CorporateBondReferenceData entry for tx.isin_code."""
    bond = ctx.factory.new_resource(NAMESPACE, "CorporateBondReferenceData", tx.isin_code)
    bond.data = tx.data
    ctx.asset_registry(CORPORATE_BOND_REFERENCE_DATA).add(bond)


PROCESSORS = {
    PUBLISH_DATA_ITEM: publish,
}
