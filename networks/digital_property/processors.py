"""
Digital Property Network — Transaction Processors
===================================================
"""

from networks.digital_property.models import (
    LAND_TITLE,
    NAMESPACE,
    REGISTER_PROPERTY_FOR_SALE,
    SALES_AGREEMENT,
)


def sales_agreement_id(seller, title) -> str:
    """'<person_id><title_id>', e.g. 'P1TITLE_1'."""
    return f"{seller.get_identifier()}{title.get_identifier()}"


def register_property_for_sale(tx, ctx):
    """Flag the title for sale and record a SalesAgreement for it."""
    ctx.logger.info(f"Registering {tx.title.get_identifier()} for sale")
    tx.title.for_sale = True

    agreement = ctx.factory.new_resource(
        NAMESPACE, "SalesAgreement", sales_agreement_id(tx.seller, tx.title)
    )
    agreement.seller = tx.seller
    agreement.title = tx.title
    ctx.asset_registry(SALES_AGREEMENT).add(agreement)

    ctx.asset_registry(LAND_TITLE).update(tx.title)


PROCESSORS = {
    REGISTER_PROPERTY_FOR_SALE: register_property_for_sale,
}
