"""
Vehicle Lifecycle Network — Events
"""

from networks.vehicle_lifecycle.models import (
    DVLA_NAMESPACE,
    MANUFACTURER_NAMESPACE,
    PLACE_ORDER_EVENT,
    SCRAP_VEHICLE_EVENT,
    UPDATE_ORDER_STATUS_EVENT,
)

ALL_EVENT_TYPES = (
    PLACE_ORDER_EVENT,
    UPDATE_ORDER_STATUS_EVENT,
    SCRAP_VEHICLE_EVENT,
)


def place_order_event(factory, order):
    return factory.new_event(
        MANUFACTURER_NAMESPACE, "PlaceOrderEvent",
        order_id=order.get_identifier(),
        vehicle_details=order.vehicle_details,
    )


def update_order_status_event(factory, order):
    return factory.new_event(
        MANUFACTURER_NAMESPACE, "UpdateOrderStatusEvent",
        order_status=order.order_status,
        order=order,
    )


def scrap_vehicle_event(factory, vehicle):
    return factory.new_event(DVLA_NAMESPACE, "ScrapVehicleEvent", vehicle=vehicle)
