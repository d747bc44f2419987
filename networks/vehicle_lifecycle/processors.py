"""
Vehicle Lifecycle Network — Transaction Processors
====================================================
Lifecycle vehicle states:

    CREATED ──Authorise──▶ AUTHORIZED ──ScrapVehicle──▶ SCRAPPED
                              │
                              └─ Private/CompanyTransfer (state unchanged)

Orders move PLACED → ... → VIN_ASSIGNED → OWNER_ASSIGNED; the VIN
registers an OFF_THE_ROAD DVLA vehicle, the owner activates it.
"""

from core.errors import TransactionError
from networks.vehicle_lifecycle.events import (
    place_order_event,
    scrap_vehicle_event,
    update_order_status_event,
)
from networks.vehicle_lifecycle.models import (
    ACTIVE,
    AUTHORISE,
    AUTHORIZED,
    COMPANY_OWNER,
    COMPANY_TRANSFER,
    CREATED,
    DVLA_NAMESPACE,
    DVLA_SCRAP_VEHICLE,
    DVLA_VEHICLE,
    MANUFACTURE_VEHICLE,
    MANUFACTURER,
    MANUFACTURER_NAMESPACE,
    NAMESPACE,
    OFF_THE_ROAD,
    ORDER,
    OWNER_ASSIGNED,
    PLACE_ORDER,
    PLACED,
    PRIVATE_OWNER,
    PRIVATE_TRANSFER,
    PRIVATE_VEHICLE_TRANSFER,
    REGULATOR,
    SCRAP_ALL_VEHICLES_BY_COLOUR,
    SCRAP_VEHICLE,
    SCRAPPED,
    SETUP_DEMO,
    UPDATE_ORDER_STATUS,
    VEHICLE,
    VIN_ASSIGNED,
)


# ══════════════════════════════════════════════════════════════
# LIFECYCLE
# ══════════════════════════════════════════════════════════════

def manufacture_vehicle(tx, ctx):
    ctx.logger.info("manufactureVehicle")
    vehicle = ctx.factory.new_resource(
        NAMESPACE, "Vehicle", tx.vin,
        vehicle_status=CREATED,
        vehicle_details=tx.vehicle_details,
        manufacturer=tx.manufacturer,
    )
    ctx.asset_registry(VEHICLE).add(vehicle)


def _transfer(tx, ctx, owner, owner_field, other_field, owner_fqt, kind):
    vehicle = tx.vehicle
    if vehicle.vehicle_status != AUTHORIZED:
        raise TransactionError(
            f"Cannot transfer the vehicle to {kind} ownership when in state {vehicle.vehicle_status}"
        )

    setattr(vehicle, owner_field, owner)
    setattr(vehicle, other_field, None)
    owner.vehicles = list(owner.get("vehicles") or []) + [vehicle]

    ctx.participant_registry(owner_fqt).update(owner)
    ctx.asset_registry(VEHICLE).update(vehicle)


def private_transfer(tx, ctx):
    ctx.logger.info("privateTransfer")
    _transfer(tx, ctx, tx.private_owner, "private_owner", "company_owner", PRIVATE_OWNER, "private")


def company_transfer(tx, ctx):
    ctx.logger.info("companyTransfer")
    _transfer(tx, ctx, tx.company_owner, "company_owner", "private_owner", COMPANY_OWNER, "company")


def authorise(tx, ctx):
    ctx.logger.info("authorize")
    vehicle = tx.vehicle
    if vehicle.vehicle_status != CREATED:
        raise TransactionError(f"Cannot authorize the vehicle when in state {vehicle.vehicle_status}")

    vehicle.vehicle_status = AUTHORIZED
    ctx.asset_registry(VEHICLE).update(vehicle)


def scrap_vehicle(tx, ctx):
    ctx.logger.info("scrapVehicle")
    vehicle = tx.vehicle
    if vehicle.vehicle_status != AUTHORIZED:
        raise TransactionError(f"Cannot scrap the vehicle when in state {vehicle.vehicle_status}")

    vehicle.vehicle_status = SCRAPPED
    ctx.asset_registry(VEHICLE).update(vehicle)


# ══════════════════════════════════════════════════════════════
# SETUP
# ══════════════════════════════════════════════════════════════

DEMO_MANUFACTURERS = ("arium", "morde", "ford")

DEMO_OWNERS = (
    "dan", "simon", "liz", "anthony", "matt", "caroline",
    "david", "kai", "bobby", "rosie", "jenny", "alex",
)

DEMO_VEHICLES = (
    # vin, make, model, colour, owner
    ("156478954", "Arium", "Nova", "white", "dan"),
    ("652345894", "Morde", "Putt", "black", "simon"),
    ("855834285", "Ford", "Mustang", "red", "liz"),
    ("318956274", "Doge", "Much Wow", "Beige", "anthony"),
    ("448569032", "Arium", "Gamora", "blue", "matt"),
    ("334578294", "Morde", "Pluto", "green", "caroline"),
    ("542578890", "Ford", "Focus", "silver", "david"),
    ("774562918", "Arium", "Nebula", "Beige", "kai"),
    ("235478823", "Morde", "Mars", "yellow", "bobby"),
    ("913425873", "Ford", "Fiesta", "white", "rosie"),
    ("387654291", "Arium", "Nova", "black", "jenny"),
    ("569213784", "Morde", "Putt", "red", "alex"),
)


def setup_demo(tx, ctx):
    """Regulator, manufacturers, private owners and their registered vehicles."""
    ctx.logger.info("setupDemo")
    factory = ctx.factory

    ctx.participant_registry(REGULATOR).add(
        factory.new_resource(NAMESPACE, "Regulator", "regulator")
    )
    ctx.participant_registry(MANUFACTURER).add_all(
        factory.new_resource(MANUFACTURER_NAMESPACE, "Manufacturer", name)
        for name in DEMO_MANUFACTURERS
    )
    ctx.participant_registry(PRIVATE_OWNER).add_all(
        factory.new_resource(NAMESPACE, "PrivateOwner", name, vehicles=[])
        for name in DEMO_OWNERS
    )

    vehicles = []
    for vin, make, model_type, colour, owner in DEMO_VEHICLES:
        details = factory.new_concept(
            DVLA_NAMESPACE, "VehicleDetails",
            make=make, model_type=model_type, colour=colour, vin=vin,
        )
        vehicles.append(factory.new_resource(
            DVLA_NAMESPACE, "Vehicle", vin,
            vehicle_details=details,
            vehicle_status=ACTIVE,
            owner=factory.new_relationship(NAMESPACE, "PrivateOwner", owner),
        ))
    ctx.asset_registry(DVLA_VEHICLE).add_all(vehicles)


# ══════════════════════════════════════════════════════════════
# MANUFACTURER
# ══════════════════════════════════════════════════════════════

def place_order(tx, ctx):
    ctx.logger.info("placeOrder")
    order = ctx.factory.new_resource(
        MANUFACTURER_NAMESPACE, "Order", tx.get("order_id") or tx.transaction_id,
        vehicle_details=tx.vehicle_details,
        order_status=PLACED,
        manufacturer=tx.manufacturer,
        orderer=tx.orderer,
    )
    ctx.asset_registry(ORDER).add(order)
    ctx.emit(place_order_event(ctx.factory, order))


def update_order_status(tx, ctx):
    ctx.logger.info("updateOrderStatus")
    order = tx.order
    order.order_status = tx.order_status

    if tx.order_status == VIN_ASSIGNED:
        if not tx.get("vin"):
            raise TransactionError("Value for VIN was expected")
        order.vehicle_details.vin = tx.vin
        vehicle = ctx.factory.new_resource(
            DVLA_NAMESPACE, "Vehicle", tx.vin,
            vehicle_details=order.vehicle_details,
            vehicle_status=OFF_THE_ROAD,
        )
        ctx.asset_registry(DVLA_VEHICLE).add(vehicle)

    elif tx.order_status == OWNER_ASSIGNED:
        registry = ctx.asset_registry(DVLA_VEHICLE)
        vehicle = registry.get(order.vehicle_details.vin)
        vehicle.vehicle_status = ACTIVE
        vehicle.owner = order.orderer
        vehicle.number_plate = tx.get("number_plate")
        if tx.get("v5c"):
            vehicle.v5c = tx.v5c
        registry.update(vehicle)

    ctx.asset_registry(ORDER).update(order)
    ctx.emit(update_order_status_event(ctx.factory, order))


# ══════════════════════════════════════════════════════════════
# DVLA
# ══════════════════════════════════════════════════════════════

def private_vehicle_transfer(tx, ctx):
    ctx.logger.info("privateVehicleTransfer")
    vehicle = tx.vehicle
    vehicle.owner = tx.buyer

    log_entry = ctx.factory.new_concept(
        DVLA_NAMESPACE, "VehicleTransferLogEntry",
        vehicle=vehicle,
        seller=tx.seller,
        buyer=tx.buyer,
        timestamp=tx.timestamp,
    )
    vehicle.log_entries = list(vehicle.get("log_entries") or []) + [log_entry]
    ctx.asset_registry(DVLA_VEHICLE).update(vehicle)


def dvla_scrap_vehicle(tx, ctx):
    registry = ctx.asset_registry(DVLA_VEHICLE)
    vehicle = registry.get(tx.vehicle.get_identifier())
    vehicle.vehicle_status = SCRAPPED
    registry.update(vehicle)


def scrap_all_vehicles_by_colour(tx, ctx):
    vehicles = ctx.query("selectAllCarsByColour", colour=tx.colour)
    to_scrap = [v for v in vehicles if v.vehicle_status != SCRAPPED]
    for vehicle in to_scrap:
        vehicle.vehicle_status = SCRAPPED
        ctx.emit(scrap_vehicle_event(ctx.factory, vehicle))
    ctx.asset_registry(DVLA_VEHICLE).update_all(to_scrap)
    ctx.logger.info(f"Scrapped {len(to_scrap)} {tx.colour} vehicle(s)")


PROCESSORS = {
    MANUFACTURE_VEHICLE: manufacture_vehicle,
    PRIVATE_TRANSFER: private_transfer,
    COMPANY_TRANSFER: company_transfer,
    AUTHORISE: authorise,
    SCRAP_VEHICLE: scrap_vehicle,
    SETUP_DEMO: setup_demo,
    PLACE_ORDER: place_order,
    UPDATE_ORDER_STATUS: update_order_status,
    PRIVATE_VEHICLE_TRANSFER: private_vehicle_transfer,
    DVLA_SCRAP_VEHICLE: dvla_scrap_vehicle,
    SCRAP_ALL_VEHICLES_BY_COLOUR: scrap_all_vehicles_by_colour,
}
