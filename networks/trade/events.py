"""
Commodity Trading Network — Events
====================================
"""

from networks.trade.models import NAMESPACE, REMOVE_NOTIFICATION, TRADE_NOTIFICATION

ALL_EVENT_TYPES = (TRADE_NOTIFICATION, REMOVE_NOTIFICATION)


def trade_notification(factory, commodity):
    return factory.new_event(NAMESPACE, "TradeNotification", commodity=commodity)


def remove_notification(factory, commodity):
    return factory.new_event(NAMESPACE, "RemoveNotification", commodity=commodity)
