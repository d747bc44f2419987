"""
Composer Resources — JSON Serializer
=======================================
Converts resources to and from the JSON documents held by a
world-state store.

Document shape:
    {
        "$class": "org.acme.trading.Commodity",
        "trading_symbol": "EMA",
        "owner": "resource:org.acme.trading.Trader#dan",
        "details": {"$class": "org.acme.trading.Details", ...}
    }

Rules:
- Relationships are written as 'resource:ns.Type#id' strings.
- An embedded asset or participant (a resolved relationship) is
  written back as a relationship, never inlined.
- Concepts, transactions and events are inlined with their $class.
- Datetimes are ISO-8601 strings, decoded for declared datetime fields.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from core.resources.model import ModelManager
from core.resources.resource import RESOURCE_URI_PREFIX, Relationship, Resource

CLASS_KEY = "$class"


def dehydrate(value: Any) -> Any:
    """
    Replace embedded registry resources with relationships, recursively.

    Used on write so that a processor may hand back a fully resolved
    graph without the targets being inlined.
    """
    if isinstance(value, Resource):
        if value.declaration.is_registry_kind:
            return value.to_relationship()
        return Resource(
            value.declaration,
            {name: dehydrate(item) for name, item in value.to_fields().items()},
        )
    if isinstance(value, list):
        return [dehydrate(item) for item in value]
    if isinstance(value, tuple):
        return [dehydrate(item) for item in value]
    if isinstance(value, dict):
        return {key: dehydrate(item) for key, item in value.items()}
    return value


def dehydrate_fields(resource: Resource) -> Resource:
    """Copy of resource whose own fields are dehydrated; the resource itself stays whole."""
    return Resource(
        resource.declaration,
        {name: dehydrate(item) for name, item in resource.to_fields().items()},
    )


class Serializer:
    """Round-trips resources through plain JSON-compatible dicts."""

    def __init__(self, model: ModelManager):
        self._model = model

    # ══════════════════════════════════════════════════════════
    # ENCODE
    # ══════════════════════════════════════════════════════════

    def to_json(self, resource: Resource) -> Dict[str, Any]:
        if not isinstance(resource, Resource):
            raise TypeError(f"Expected Resource, got {type(resource).__name__}.")
        document: Dict[str, Any] = {CLASS_KEY: resource.get_fully_qualified_type()}
        for name, value in resource.to_fields().items():
            if value is None:
                continue
            document[name] = self._encode(value)
        return document

    def _encode(self, value: Any) -> Any:
        if isinstance(value, Relationship):
            return value.to_uri()
        if isinstance(value, Resource):
            if value.declaration.is_registry_kind:
                return value.to_uri()
            return self.to_json(value)
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, (list, tuple)):
            return [self._encode(item) for item in value]
        if isinstance(value, dict):
            return {key: self._encode(item) for key, item in value.items()}
        return value

    # ══════════════════════════════════════════════════════════
    # DECODE
    # ══════════════════════════════════════════════════════════

    def from_json(self, document: Dict[str, Any]) -> Resource:
        fqt = document.get(CLASS_KEY)
        if not fqt:
            raise ValueError(f"Document has no '{CLASS_KEY}' key.")
        declaration = self._model.get(fqt)
        datetime_fields = set(declaration.all_datetime_fields())
        fields = {
            name: self._decode(value, name in datetime_fields)
            for name, value in document.items()
            if name != CLASS_KEY
        }
        return Resource(declaration, fields)

    def _decode(self, value: Any, is_datetime: bool = False) -> Any:
        if isinstance(value, str):
            if is_datetime:
                return datetime.fromisoformat(value)
            if value.startswith(RESOURCE_URI_PREFIX):
                return Relationship.from_uri(value)
            return value
        if isinstance(value, list):
            return [self._decode(item, is_datetime) for item in value]
        if isinstance(value, dict):
            if CLASS_KEY in value:
                return self.from_json(value)
            return {key: self._decode(item) for key, item in value.items()}
        return value
