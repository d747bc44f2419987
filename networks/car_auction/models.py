"""
Car Auction Network — Model
=============================
Members list vehicles for sale, other members bid, an auctioneer
closes the bidding.
"""

from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, KIND_TRANSACTION, ModelManager

NAMESPACE = "org.acme.vehicle.auction"

VEHICLE = f"{NAMESPACE}.Vehicle"
VEHICLE_LISTING = f"{NAMESPACE}.VehicleListing"
MEMBER = f"{NAMESPACE}.Member"
AUCTIONEER = f"{NAMESPACE}.Auctioneer"
OFFER = f"{NAMESPACE}.Offer"
CLOSE_BIDDING = f"{NAMESPACE}.CloseBidding"

# ── ListingState ──────────────────────────────────────────────
FOR_SALE = "FOR_SALE"
RESERVE_NOT_MET = "RESERVE_NOT_MET"
SOLD = "SOLD"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "Member", KIND_PARTICIPANT,
                  identified_by="email", required=("first_name", "last_name", "balance"))
    model.declare(NAMESPACE, "Auctioneer", KIND_PARTICIPANT,
                  identified_by="email", required=("first_name", "last_name"))
    model.declare(NAMESPACE, "Vehicle", KIND_ASSET,
                  identified_by="vin", required=("owner",))
    model.declare(NAMESPACE, "VehicleListing", KIND_ASSET,
                  identified_by="listing_id",
                  required=("reserve_price", "description", "state", "vehicle"))
    model.declare(NAMESPACE, "Offer", KIND_TRANSACTION,
                  required=("bid_price", "listing", "member"))
    model.declare(NAMESPACE, "CloseBidding", KIND_TRANSACTION,
                  required=("listing",))
    return model
