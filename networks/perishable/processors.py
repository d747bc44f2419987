"""
Perishable Goods Network — Transaction Processors
===================================================
Payout rules for ShipmentReceived:

    payout = unit_price × unit_count
    late (tx timestamp after contract.arrival_date_time) → payout = 0
    otherwise, with readings:
        penalty  = (min_temperature − lowest) × min_penalty_factor   if lowest < min
                 + (highest − max_temperature) × max_penalty_factor  if highest > max
        payout  -= penalty × unit_count, floored at 0

The grower is credited and the importer debited by the payout.
"""

from datetime import timedelta

from networks.perishable.events import temperature_threshold_event
from networks.perishable.models import (
    CONTRACT,
    GROWER,
    IMPORTER,
    NAMESPACE,
    PRODUCT_BANANAS,
    SETUP_DEMO,
    SHIPMENT,
    SHIPMENT_ARRIVED,
    SHIPMENT_IN_TRANSIT,
    SHIPMENT_RECEIVED,
    SHIPPER,
    TEMPERATURE_READING,
)


def calculate_payout(contract, shipment, received_at) -> float:
    payout = contract.unit_price * shipment.unit_count

    if received_at > contract.arrival_date_time:
        return 0

    readings = shipment.get("temperature_readings") or []
    if not readings:
        return payout

    lowest = min(reading.centigrade for reading in readings)
    highest = max(reading.centigrade for reading in readings)

    penalty = 0
    if lowest < contract.min_temperature:
        penalty += (contract.min_temperature - lowest) * contract.min_penalty_factor
    if highest > contract.max_temperature:
        penalty += (highest - contract.max_temperature) * contract.max_penalty_factor

    payout -= penalty * shipment.unit_count
    return max(payout, 0)


def pay_out(tx, ctx):
    """ShipmentReceived: mark ARRIVED and settle between grower and importer."""
    shipment = tx.shipment
    contract = shipment.contract

    shipment.status = SHIPMENT_ARRIVED
    payout = calculate_payout(contract, shipment, tx.timestamp)
    if payout == 0:
        ctx.logger.info(f"No payout for shipment {shipment.get_identifier()}")

    contract.grower.account_balance += payout
    contract.importer.account_balance -= payout
    ctx.logger.info(
        f"Payout {payout}: grower {contract.grower.get_identifier()} balance "
        f"{contract.grower.account_balance}, importer {contract.importer.get_identifier()} "
        f"balance {contract.importer.account_balance}"
    )

    ctx.participant_registry(GROWER).update(contract.grower)
    ctx.participant_registry(IMPORTER).update(contract.importer)
    ctx.asset_registry(SHIPMENT).update(shipment)


def temperature_reading(tx, ctx):
    """Append the reading to the shipment; emit an event when out of range."""
    shipment = tx.shipment
    contract = shipment.contract

    readings = list(shipment.get("temperature_readings") or [])
    readings.append(tx)
    shipment.temperature_readings = readings
    ctx.logger.debug(f"Adding temperature {tx.centigrade} to shipment {shipment.get_identifier()}")

    if tx.centigrade < contract.min_temperature or tx.centigrade > contract.max_temperature:
        ctx.emit(temperature_threshold_event(ctx.factory, shipment, tx.centigrade))

    ctx.asset_registry(SHIPMENT).update(shipment)


def setup_demo(tx, ctx):
    """Create the demo participants, contract CON_001 and shipment SHIP_001."""
    factory = ctx.factory

    def business(type_name, email, country):
        participant = factory.new_resource(NAMESPACE, type_name, email)
        participant.address = factory.new_concept(NAMESPACE, "Address", country=country)
        participant.account_balance = 0
        return participant

    grower = business("Grower", "farmer@email.com", "USA")
    importer = business("Importer", "supermarket@email.com", "UK")
    shipper = business("Shipper", "shipper@email.com", "Panama")

    contract = factory.new_resource(NAMESPACE, "Contract", "CON_001")
    contract.grower = factory.new_relationship(NAMESPACE, "Grower", grower.email)
    contract.importer = factory.new_relationship(NAMESPACE, "Importer", importer.email)
    contract.shipper = factory.new_relationship(NAMESPACE, "Shipper", shipper.email)
    contract.arrival_date_time = tx.timestamp + timedelta(days=1)
    contract.unit_price = 0.5
    contract.min_temperature = 2
    contract.max_temperature = 10
    contract.min_penalty_factor = 0.2
    contract.max_penalty_factor = 0.1

    shipment = factory.new_resource(NAMESPACE, "Shipment", "SHIP_001")
    shipment.type = PRODUCT_BANANAS
    shipment.status = SHIPMENT_IN_TRANSIT
    shipment.unit_count = 5000
    shipment.contract = factory.new_relationship(NAMESPACE, "Contract", "CON_001")

    ctx.participant_registry(GROWER).add_all([grower])
    ctx.participant_registry(IMPORTER).add_all([importer])
    ctx.participant_registry(SHIPPER).add_all([shipper])
    ctx.asset_registry(CONTRACT).add_all([contract])
    ctx.asset_registry(SHIPMENT).add_all([shipment])


PROCESSORS = {
    SHIPMENT_RECEIVED: pay_out,
    TEMPERATURE_READING: temperature_reading,
    SETUP_DEMO: setup_demo,
}
