"""
Vehicle Lifecycle Network — Named Queries
"""

from core.runtime.query import Query
from networks.vehicle_lifecycle.models import DVLA_VEHICLE


def _colour(vehicle):
    details = vehicle.get("vehicle_details")
    return details.get("colour") if details is not None else None


QUERIES = (
    Query(
        name="selectAllCarsByColour",
        description="Select all cars based on their colour",
        resource_type=DVLA_VEHICLE,
        predicate=lambda vehicle, params: _colour(vehicle) == params["colour"],
        parameters=("colour",),
    ),
)
