"""
Composer Runtime — Named Queries
===================================
A named query selects resources of one type with a Python predicate.

Example:
    Query(
        name="selectCommoditiesByExchange",
        description="Select all commodities based on their main exchange",
        resource_type="org.acme.trading.Commodity",
        predicate=lambda c, params: c.get("main_exchange") == params["exchange"],
        parameters=("exchange",),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Tuple

from core.errors import NetworkError

# (resource, params) → bool
QueryPredicate = Callable[[Any, Mapping[str, Any]], bool]


class QueryError(NetworkError):
    """Unknown query, or a query run without its parameters."""
    pass


def _select_all(resource: Any, params: Mapping[str, Any]) -> bool:
    return True


@dataclass(frozen=True)
class Query:
    name: str
    description: str
    resource_type: str
    predicate: QueryPredicate = _select_all
    parameters: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        if not self.resource_type or "." not in self.resource_type:
            raise ValueError("resource_type must be a fully-qualified type.")

        if not callable(self.predicate):
            raise TypeError("predicate must be callable.")

    def check_parameters(self, params: Mapping[str, Any]) -> None:
        for parameter in self.parameters:
            if parameter not in params:
                raise QueryError(
                    f"Query '{self.name}' requires parameter '{parameter}'"
                )

    def matches(self, resource: Any, params: Mapping[str, Any]) -> bool:
        return bool(self.predicate(resource, params))
