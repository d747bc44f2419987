"""
Car Auction Network — Transaction Processors
==============================================
Closing a listing:
- no offer at or above the reserve price → RESERVE_NOT_MET
- otherwise the highest offer wins: seller credited, buyer debited,
  vehicle ownership moves to the buyer, offers cleared → SOLD
"""

from core.errors import TransactionError
from networks.car_auction.models import (
    CLOSE_BIDDING,
    FOR_SALE,
    MEMBER,
    OFFER,
    RESERVE_NOT_MET,
    SOLD,
    VEHICLE,
    VEHICLE_LISTING,
)


def _require_for_sale(listing) -> None:
    if listing.state != FOR_SALE:
        raise TransactionError("Listing is not FOR SALE")


def close_bidding(tx, ctx):
    listing = tx.listing
    _require_for_sale(listing)

    listing.state = RESERVE_NOT_MET
    highest_offer = None
    buyer = seller = None

    offers = listing.get("offers") or []
    if offers:
        offers = sorted(offers, key=lambda offer: offer.bid_price, reverse=True)
        listing.offers = offers
        highest_offer = offers[0]
        if highest_offer.bid_price >= listing.reserve_price:
            listing.state = SOLD
            buyer = highest_offer.member
            seller = listing.vehicle.owner

            seller.balance += highest_offer.bid_price
            buyer.balance -= highest_offer.bid_price
            ctx.logger.info(
                f"Listing {listing.get_identifier()} sold for {highest_offer.bid_price}: "
                f"seller balance {seller.balance}, buyer balance {buyer.balance}"
            )

            listing.vehicle.owner = buyer
            listing.offers = None

    if highest_offer is not None:
        ctx.asset_registry(VEHICLE).update(listing.vehicle)

    ctx.asset_registry(VEHICLE_LISTING).update(listing)

    if listing.state == SOLD:
        ctx.participant_registry(MEMBER).update_all([buyer, seller])


def make_offer(tx, ctx):
    listing = tx.listing
    _require_for_sale(listing)

    offers = list(listing.get("offers") or [])
    offers.append(tx)
    listing.offers = offers
    ctx.asset_registry(VEHICLE_LISTING).update(listing)


PROCESSORS = {
    CLOSE_BIDDING: close_bidding,
    OFFER: make_offer,
}
