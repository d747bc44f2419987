"""
Car Auction Network — Transaction Requests
============================================
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.car_auction.models import NAMESPACE


@dataclass(frozen=True)
class OfferRequest:
    """A member bids on a vehicle listing."""
    listing_id: str
    member_email: str
    bid_price: float

    def __post_init__(self):
        if not self.listing_id:
            raise ValueError("listing_id must be non-empty.")
        if not self.member_email:
            raise ValueError("member_email must be non-empty.")
        if self.bid_price < 0:
            raise ValueError("bid_price must be >= 0.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "Offer",
            bid_price=self.bid_price,
            listing=factory.new_relationship(NAMESPACE, "VehicleListing", self.listing_id),
            member=factory.new_relationship(NAMESPACE, "Member", self.member_email),
        )


@dataclass(frozen=True)
class CloseBiddingRequest:
    """Close the bidding on a listing."""
    listing_id: str

    def __post_init__(self):
        if not self.listing_id:
            raise ValueError("listing_id must be non-empty.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "CloseBidding",
            listing=factory.new_relationship(NAMESPACE, "VehicleListing", self.listing_id),
        )
