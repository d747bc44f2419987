"""
Vehicle Manufacture Network — Events
"""

from networks.vehicle_manufacture.models import NAMESPACE, PLACE_ORDER_EVENT, UPDATE_ORDER_STATUS_EVENT

ALL_EVENT_TYPES = (PLACE_ORDER_EVENT, UPDATE_ORDER_STATUS_EVENT)


def place_order_event(factory, order):
    return factory.new_event(
        NAMESPACE, "PlaceOrderEvent",
        order_id=order.get_identifier(),
        vehicle_details=order.vehicle_details,
        options=order.options,
        orderer=order.orderer,
    )


def update_order_status_event(factory, order):
    return factory.new_event(
        NAMESPACE, "UpdateOrderStatusEvent",
        order_status=order.order_status,
        order=order,
    )
