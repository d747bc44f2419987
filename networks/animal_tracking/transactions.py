"""
Animal Tracking Network — Transaction Requests
================================================
`from` is a Python keyword, so the origin business travels as
`from_business`.
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.animal_tracking.models import NAMESPACE


def _movement_fields(factory, animal_id: str, from_sbi: str, to_sbi: str) -> dict:
    return {
        "animal": factory.new_relationship(NAMESPACE, "Animal", animal_id),
        "from_business": factory.new_relationship(NAMESPACE, "Business", from_sbi),
        "to": factory.new_relationship(NAMESPACE, "Business", to_sbi),
    }


@dataclass(frozen=True)
class AnimalMovementDepartureRequest:
    animal_id: str
    from_sbi: str
    to_sbi: str
    from_field_cph: str

    def __post_init__(self):
        if self.from_sbi == self.to_sbi:
            raise ValueError("from_sbi and to_sbi must differ.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "AnimalMovementDeparture",
            from_field=factory.new_relationship(NAMESPACE, "Field", self.from_field_cph),
            **_movement_fields(factory, self.animal_id, self.from_sbi, self.to_sbi),
        )


@dataclass(frozen=True)
class AnimalMovementArrivalRequest:
    animal_id: str
    from_sbi: str
    to_sbi: str
    arrival_field_cph: str

    def __post_init__(self):
        if self.from_sbi == self.to_sbi:
            raise ValueError("from_sbi and to_sbi must differ.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "AnimalMovementArrival",
            arrival_field=factory.new_relationship(NAMESPACE, "Field", self.arrival_field_cph),
            **_movement_fields(factory, self.animal_id, self.from_sbi, self.to_sbi),
        )


@dataclass(frozen=True)
class SetupDemoRequest:
    def to_transaction(self, factory):
        return factory.new_transaction(NAMESPACE, "SetupDemo")
