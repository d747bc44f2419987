"""
Bond Network — Transaction Processors
=======================================
"""

from networks.bond.models import BOND_ASSET, NAMESPACE, PUBLISH_BOND


def publish(tx, ctx):
    """Create a BondAsset holding the published bond."""
    bond_asset = ctx.factory.new_resource(NAMESPACE, "BondAsset", tx.isin_code)
    bond_asset.bond = tx.bond
    ctx.asset_registry(BOND_ASSET).add(bond_asset)
    ctx.logger.info(f"Bond {tx.isin_code} published")


PROCESSORS = {
    PUBLISH_BOND: publish,
}
