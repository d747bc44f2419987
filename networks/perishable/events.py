"""
Perishable Goods Network — Events
===================================
"""

from networks.perishable.models import NAMESPACE, TEMPERATURE_THRESHOLD_EVENT

ALL_EVENT_TYPES = (TEMPERATURE_THRESHOLD_EVENT,)


def temperature_threshold_event(factory, shipment, temperature):
    return factory.new_event(
        NAMESPACE, "TemperatureThresholdEvent",
        shipment=shipment,
        temperature=temperature,
        message=(
            "Temperature threshold violated! Emitting TemperatureEvent "
            f"for shipment: {shipment.get_identifier()}"
        ),
    )
