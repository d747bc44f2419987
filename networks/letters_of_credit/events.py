"""
Letters of Credit Network — Events
====================================
Every transaction announces the letter it touched, plus whatever
the transaction carried (approving party, reason, new rules).
"""

from networks.letters_of_credit.models import EVENT_NAMES, NAMESPACE

ALL_EVENT_TYPES = tuple(f"{NAMESPACE}.{name}" for name in EVENT_NAMES)


def loc_event(factory, name, letter, **fields):
    return factory.new_event(NAMESPACE, name, loc=letter, **fields)
