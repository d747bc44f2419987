"""
Vehicle Manufacture Network — Transaction Processors
======================================================
An order is PLACED, then moves through the manufacturer's statuses.
Two of them touch the vehicle register:

    VIN_ASSIGNED    registers the vehicle OFF_THE_ROAD
    OWNER_ASSIGNED  activates it and hands it to the orderer

Both need the transaction's VIN.
"""

from core.errors import TransactionError
from networks.vehicle_manufacture.events import place_order_event, update_order_status_event
from networks.vehicle_manufacture.models import (
    ACTIVE,
    MANUFACTURER,
    NAMESPACE,
    OFF_THE_ROAD,
    ORDER,
    OWNER_ASSIGNED,
    PERSON,
    PLACE_ORDER,
    PLACED,
    SETUP_DEMO,
    UPDATE_ORDER_STATUS,
    VEHICLE,
    VIN_ASSIGNED,
)


def place_order(tx, ctx):
    order = ctx.factory.new_resource(
        NAMESPACE, "Order", tx.order_id,
        vehicle_details=tx.vehicle_details,
        options=tx.options,
        order_status=PLACED,
        orderer=tx.orderer,
    )
    ctx.asset_registry(ORDER).add(order)
    ctx.emit(place_order_event(ctx.factory, order))


def _require_vin(tx) -> str:
    vin = tx.get("vin")
    if not vin:
        raise TransactionError("Value for VIN was expected")
    return vin


def update_order_status(tx, ctx):
    order = tx.order
    order.order_status = tx.order_status
    vehicles = ctx.asset_registry(VEHICLE)

    if tx.order_status == VIN_ASSIGNED:
        vin = _require_vin(tx)
        vehicles.add(ctx.factory.new_resource(
            NAMESPACE, "Vehicle", vin,
            vehicle_details=order.vehicle_details,
            vehicle_status=OFF_THE_ROAD,
        ))
    elif tx.order_status == OWNER_ASSIGNED:
        vin = _require_vin(tx)
        vehicle = vehicles.get(vin)
        vehicle.vehicle_status = ACTIVE
        vehicle.owner = order.orderer
        vehicles.update(vehicle)

    ctx.asset_registry(ORDER).update(order)
    ctx.emit(update_order_status_event(ctx.factory, order))


# ══════════════════════════════════════════════════════════════
# SETUP
# ══════════════════════════════════════════════════════════════

DEMO_PEOPLE = (
    "Paul", "Andy", "Hannah", "Sam", "Caroline", "Matt", "Fenglian",
    "Mark", "James", "Dave", "Rob", "Kai", "Ellis", "LesleyAnn",
)

DEMO_MANUFACTURERS = ("Arium", "Morde", "Ridge")

DEMO_VEHICLES = (
    # vin, make, model, colour, trim, interior
    ("ea290d9f5a6833a65", "Arium", "Nova", "Statement Blue", "executive", "rotor grey"),
    ("39fd242c2bbe80f11", "Morde", "Putt", "Inferno Red", "standard", "midnight black"),
    ("835125e50bca37ca1", "Ridge", "Cannon", "Pearl White", "luxury", "arctic white"),
    ("0812e6d8d486e0464", "Arium", "Gamora", "Midnight Black", "executive", "rotor grey"),
    ("c4aa418f26d4a0403", "Morde", "Pluto", "Ember Orange", "standard", "rotor grey"),
    ("7382fbfc083f696e5", "Ridge", "Rancher", "Statement Blue", "standard", "midnight black"),
    ("01a9cd3f8f5db5ef7", "Arium", "Nebula", "Pearl White", "luxury", "arctic white"),
    ("97f305df4c2881e71", "Morde", "Mars", "Inferno Red", "executive", "rotor grey"),
    ("af462063fb901d0e6", "Ridge", "Speedster", "Midnight Black", "luxury", "midnight black"),
    ("3ff3395ecfd38f787", "Arium", "Nova", "Ember Orange", "standard", "rotor grey"),
    ("de701fcf2a78d8086", "Morde", "Putt", "Pearl White", "executive", "arctic white"),
    ("2fcdd7b5131e81fd0", "Ridge", "Cannon", "Statement Blue", "standard", "midnight black"),
    ("79540e5384c970321", "Arium", "Gamora", "Inferno Red", "luxury", "rotor grey"),
)


def setup_demo(tx, ctx):
    """Fourteen people, three manufacturers; everyone but Paul owns an active vehicle."""
    factory = ctx.factory

    ctx.participant_registry(PERSON).add_all(
        factory.new_resource(NAMESPACE, "Person", name) for name in DEMO_PEOPLE
    )
    ctx.participant_registry(MANUFACTURER).add_all(
        factory.new_resource(NAMESPACE, "Manufacturer", name)
        for name in DEMO_MANUFACTURERS
    )

    vehicles = []
    for owner, (vin, make, model_type, colour, trim, interior) in zip(DEMO_PEOPLE[1:], DEMO_VEHICLES):
        vehicles.append(factory.new_resource(
            NAMESPACE, "Vehicle", vin,
            vehicle_details=factory.new_concept(
                NAMESPACE, "VehicleDetails",
                make=factory.new_relationship(NAMESPACE, "Manufacturer", make),
                model_type=model_type,
                colour=colour,
            ),
            options=factory.new_concept(
                NAMESPACE, "Options", trim=trim, interior=interior, extras=[],
            ),
            vehicle_status=ACTIVE,
            owner=factory.new_relationship(NAMESPACE, "Person", owner),
        ))
    ctx.asset_registry(VEHICLE).add_all(vehicles)
    ctx.logger.info(f"Demo: {len(DEMO_PEOPLE)} people, {len(vehicles)} vehicles")


PROCESSORS = {
    PLACE_ORDER: place_order,
    UPDATE_ORDER_STATUS: update_order_status,
    SETUP_DEMO: setup_demo,
}
