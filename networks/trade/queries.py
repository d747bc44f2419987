"""
Commodity Trading Network — Named Queries
===========================================
"""

from core.resources.resource import RESOURCE_URI_PREFIX
from core.runtime.query import Query
from networks.trade.models import COMMODITY

HIGH_QUANTITY = 60


def _uri(value) -> str:
    """Accept 'resource:ns.T#id', 'ns.T#id', a Relationship or a Resource."""
    if isinstance(value, str):
        return value if value.startswith(RESOURCE_URI_PREFIX) else RESOURCE_URI_PREFIX + value
    return RESOURCE_URI_PREFIX + value.get_fully_qualified_identifier()


QUERIES = (
    Query(
        name="selectCommodities",
        description="Select all commodities",
        resource_type=COMMODITY,
    ),
    Query(
        name="selectCommoditiesByExchange",
        description="Select all commodities based on their main exchange",
        resource_type=COMMODITY,
        predicate=lambda c, params: c.get("main_exchange") == params["exchange"],
        parameters=("exchange",),
    ),
    Query(
        name="selectCommoditiesByOwner",
        description="Select all commodities based on their owner",
        resource_type=COMMODITY,
        predicate=lambda c, params: c.get("owner") is not None and _uri(c.owner) == _uri(params["owner"]),
        parameters=("owner",),
    ),
    Query(
        name="selectCommoditiesWithHighQuantity",
        description=f"Select commodities based on quantity greater than {HIGH_QUANTITY}",
        resource_type=COMMODITY,
        predicate=lambda c, params: c.get("quantity", 0) > HIGH_QUANTITY,
    ),
)
