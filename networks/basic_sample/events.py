"""
Basic Sample Network — Events
===============================
"""

from networks.basic_sample.models import NAMESPACE, SAMPLE_EVENT

ALL_EVENT_TYPES = (SAMPLE_EVENT,)


def sample_event(factory, asset, old_value, new_value):
    return factory.new_event(
        NAMESPACE, "SampleEvent",
        asset=asset,
        old_value=old_value,
        new_value=new_value,
    )
