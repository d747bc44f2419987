"""
Composer Runtime — Business Network Definition
=================================================
Everything a runtime needs to deploy one sample network: its model,
its transaction processors, its named queries and its ACL rules.

A processor is a plain function:

    def trade(tx, ctx):
        tx.commodity.owner = tx.new_owner
        ctx.asset_registry(COMMODITY).update(tx.commodity)

Processors receive the transaction with relationships resolved and
raise TransactionError when a precondition does not hold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from core.permissions.models import AclRule
from core.resources.model import KIND_TRANSACTION, ModelManager
from core.runtime.query import Query, QueryError

# (transaction, TransactionContext) → None
Processor = Callable[[Any, Any], None]


@dataclass(frozen=True)
class BusinessNetworkDefinition:
    """
    Fields:
        name:         Network name, e.g. 'perishable-network'.
        version:      Version string.
        description:  One line of prose.
        model:        ModelManager with every declared type.
        processors:   Transaction fqt → processor function.
        queries:      Named queries.
        acl:          Ordered ACL rules (empty → no restrictions).
        logger_name:  Logger handed to processors as ctx.logger.
    """

    name: str
    version: str
    description: str
    model: ModelManager
    processors: Mapping[str, Processor]
    queries: Tuple[Query, ...] = ()
    acl: Tuple[AclRule, ...] = ()
    logger_name: Optional[str] = None
    _queries_by_name: Dict[str, Query] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        if not self.version or not isinstance(self.version, str):
            raise ValueError("version must be a non-empty string.")

        if not isinstance(self.model, ModelManager):
            raise TypeError("model must be a ModelManager.")

        for transaction_type, processor in self.processors.items():
            declaration = self.model.get(transaction_type)
            if declaration.kind != KIND_TRANSACTION:
                raise ValueError(
                    f"Processor registered for '{transaction_type}', "
                    f"which is a {declaration.kind.lower()}."
                )
            if not callable(processor):
                raise TypeError(f"Processor for '{transaction_type}' must be callable.")

        for query in self.queries:
            if query.name in self._queries_by_name:
                raise ValueError(f"Query '{query.name}' is declared twice.")
            self.model.get(query.resource_type)
            self._queries_by_name[query.name] = query

        object.__setattr__(self, "acl", tuple(self.acl))
        object.__setattr__(self, "queries", tuple(self.queries))

    @property
    def identifier(self) -> str:
        return f"{self.name}@{self.version}"

    def get_query(self, name: str) -> Query:
        query = self._queries_by_name.get(name)
        if query is None:
            raise QueryError(f"Named query {name} does not exist")
        return query
