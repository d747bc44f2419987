"""
Animal Tracking Network — Transaction Processors
==================================================
Departure:  IN_FIELD → IN_TRANSIT, animal joins the destination
            business's incoming animals.
Arrival:    IN_TRANSIT → IN_FIELD, animal takes the destination's
            owner and field and leaves its incoming animals.
"""

from core.errors import TransactionError
from networks.animal_tracking.models import (
    ANIMAL,
    ANIMAL_MOVEMENT_ARRIVAL,
    ANIMAL_MOVEMENT_DEPARTURE,
    BUSINESS,
    FARMER,
    FIELD,
    IN_FIELD,
    IN_TRANSIT,
    MEAT,
    NAMESPACE,
    REGULATOR,
    SETUP_DEMO,
    SHEEP_GOAT,
)

FARMER_COUNT = 2
FIELD_COUNT = 4
ANIMAL_COUNT = 8


def on_animal_movement_departure(tx, ctx):
    ctx.logger.info("onAnimalMovementDeparture")
    animal = tx.animal
    if animal.movement_status != IN_FIELD:
        raise TransactionError("Animal is already IN_TRANSIT")

    animal.movement_status = IN_TRANSIT
    ctx.asset_registry(ANIMAL).update(animal)

    destination = tx.to
    destination.incoming_animals = list(destination.get("incoming_animals") or []) + [animal]
    ctx.asset_registry(BUSINESS).update(destination)


def on_animal_movement_arrival(tx, ctx):
    ctx.logger.info("onAnimalMovementArrival")
    animal = tx.animal
    if animal.movement_status != IN_TRANSIT:
        raise TransactionError("Animal is not IN_TRANSIT")

    destination = tx.to
    animal.movement_status = IN_FIELD
    animal.owner = destination.owner
    animal.location = tx.arrival_field
    ctx.asset_registry(ANIMAL).update(animal)

    incoming = destination.get("incoming_animals")
    if not incoming:
        raise TransactionError(
            "Incoming business should have incomingAnimals on AnimalMovementArrival."
        )
    destination.incoming_animals = [
        other for other in incoming
        if other.get_identifier() != animal.get_identifier()
    ]
    ctx.asset_registry(BUSINESS).update(destination)


def setup_demo(tx, ctx):
    """Regulator, two farmers with a business each, four fields, eight sheep."""
    factory = ctx.factory

    regulator = factory.new_resource(
        NAMESPACE, "Regulator", "REGULATOR", first_name="Ronnie", last_name="Regulator"
    )
    ctx.participant_registry(REGULATOR).add_all([regulator])

    farmers = []
    for n in range(1, FARMER_COUNT + 1):
        farmer_id = f"FARMER_{n}"
        farmers.append(factory.new_resource(
            NAMESPACE, "Farmer", farmer_id,
            first_name=farmer_id,
            last_name="",
            address1="Address1",
            address2="Address2",
            county="County",
            postcode="PO57C0D3",
            business=factory.new_relationship(NAMESPACE, "Business", f"BUSINESS_{n}"),
        ))
    ctx.participant_registry(FARMER).add_all(farmers)

    businesses = [
        factory.new_resource(
            NAMESPACE, "Business", f"BUSINESS_{n}",
            address1="Address1",
            address2="Address2",
            county="County",
            postcode="PO57C0D3",
            owner=factory.new_relationship(NAMESPACE, "Farmer", f"FARMER_{n}"),
        )
        for n in range(1, FARMER_COUNT + 1)
    ]
    ctx.asset_registry(BUSINESS).add_all(businesses)

    fields = [
        factory.new_resource(
            NAMESPACE, "Field", f"FIELD_{index + 1}",
            name=f"FIELD_{index + 1}",
            business=factory.new_relationship(NAMESPACE, "Business", f"BUSINESS_{index % 2 + 1}"),
        )
        for index in range(FIELD_COUNT)
    ]
    ctx.asset_registry(FIELD).add_all(fields)

    animals = [
        factory.new_resource(
            NAMESPACE, "Animal", f"ANIMAL_{index + 1}",
            species=SHEEP_GOAT,
            movement_status=IN_FIELD,
            production_type=MEAT,
            location=factory.new_relationship(NAMESPACE, "Field", f"FIELD_{index % 2 + 1}"),
            owner=factory.new_relationship(NAMESPACE, "Farmer", f"FARMER_{index % 2 + 1}"),
        )
        for index in range(ANIMAL_COUNT)
    ]
    ctx.asset_registry(ANIMAL).add_all(animals)


PROCESSORS = {
    ANIMAL_MOVEMENT_DEPARTURE: on_animal_movement_departure,
    ANIMAL_MOVEMENT_ARRIVAL: on_animal_movement_arrival,
    SETUP_DEMO: setup_demo,
}
