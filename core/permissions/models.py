"""
Composer Permissions — ACL Rule Model
========================================
An ACL rule says: this participant may (or may not) perform these
operations on this resource, optionally only while a given
transaction runs, optionally only when a condition holds.

Patterns for participant / resource / transaction:
    ANY                      every type
    org.acme.pii.Member      exactly this type
    org.acme.pii.Member#bob  exactly this instance
    org.acme.pii.*           every type in the namespace
    org.acme.**              every type in the namespace and below
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Optional

from core.permissions.constants import (
    ACTION_ALLOW,
    ANY,
    OP_ALL,
    VALID_ACTIONS,
    VALID_OPERATIONS,
)

# (participant, resource, transaction) → bool
AclCondition = Callable[[Any, Any, Any], bool]


def pattern_matches(pattern: str, target: Any) -> bool:
    """Match a rule pattern against a Resource or Relationship."""
    if pattern == ANY:
        return True
    if target is None:
        return False

    fqt = target.get_fully_qualified_type()
    if pattern.endswith(".**"):
        prefix = pattern[:-3]
        return fqt.startswith(prefix + ".")
    if pattern.endswith(".*"):
        return target.get_namespace() == pattern[:-2]
    if "#" in pattern:
        return target.get_fully_qualified_identifier() == pattern
    return fqt == pattern


@dataclass(frozen=True)
class AclRule:
    """
    One ordered ACL rule.

    Example:
        AclRule(
            name="MemberReadOwnRecord",
            description="Members may read their own record",
            participant="org.acme.pii.Member",
            operations=frozenset({OP_READ}),
            resource="org.acme.pii.Member",
            condition=lambda p, r, tx: r.get_identifier() == p.get_identifier(),
            action=ACTION_ALLOW,
        )
    """

    name: str
    description: str
    participant: str
    operations: FrozenSet[str]
    resource: str
    action: str = ACTION_ALLOW
    transaction: Optional[str] = None
    condition: Optional[AclCondition] = None

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        operations = frozenset(self.operations)
        if not operations:
            raise ValueError("operations must contain at least one value.")
        for operation in operations:
            if operation not in VALID_OPERATIONS:
                raise ValueError(
                    f"operation '{operation}' not valid. "
                    f"Must be one of: {sorted(VALID_OPERATIONS)}"
                )
        object.__setattr__(self, "operations", operations)

        if self.action not in VALID_ACTIONS:
            raise ValueError(
                f"action '{self.action}' not valid. "
                f"Must be one of: {sorted(VALID_ACTIONS)}"
            )

        if self.condition is not None and not callable(self.condition):
            raise TypeError("condition must be callable.")

    def covers(self, operation: str) -> bool:
        return OP_ALL in self.operations or operation in self.operations

    def matches(self, operation: str, participant: Any, resource: Any, transaction: Any = None) -> bool:
        if not self.covers(operation):
            return False
        if not pattern_matches(self.participant, participant):
            return False
        if not pattern_matches(self.resource, resource):
            return False
        if self.transaction is not None and not pattern_matches(self.transaction, transaction):
            return False
        if self.condition is not None:
            return bool(self.condition(participant, resource, transaction))
        return True
