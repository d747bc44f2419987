"""
Composer Permissions — ACL Evaluator
=======================================
Deterministic evaluation of ordered ACL rules.

Rules:
- The network administrator is never restricted.
- A network without rules allows everything.
- Otherwise the first matching rule decides; no match means DENY.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from core.errors import NetworkError
from core.permissions.constants import ACTION_ALLOW
from core.permissions.models import AclRule
from core.resources.model import NETWORK_ADMIN_FQT

logger = logging.getLogger("composer.acl")


class AccessDenied(NetworkError):
    """Participant lacks the ACL grant for an operation on a resource."""

    def __init__(self, participant_fqi: str, operation: str, resource_fqi: str):
        self.participant_fqi = participant_fqi
        self.operation = operation
        self.resource_fqi = resource_fqi
        super().__init__(
            f"Participant '{participant_fqi}' does not have '{operation}' "
            f"access to resource '{resource_fqi}'"
        )


@dataclass(frozen=True)
class AccessEvaluationResult:
    allowed: bool
    rule_name: Optional[str] = None
    message: str = ""


def _describe(target: Any) -> str:
    if target is None:
        return "<none>"
    identifier = target.get_identifier()
    if identifier is None:
        return target.get_fully_qualified_type()
    return target.get_fully_qualified_identifier()


class AclEvaluator:
    """
    Usage:
        evaluator = AclEvaluator(rules)
        result = evaluator.evaluate(OP_READ, participant, resource)
        result.allowed
    """

    def __init__(self, rules: Iterable[AclRule] = ()):
        self._rules: Tuple[AclRule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[AclRule, ...]:
        return self._rules

    @staticmethod
    def _allow(rule_name: Optional[str] = None) -> AccessEvaluationResult:
        return AccessEvaluationResult(allowed=True, rule_name=rule_name)

    @staticmethod
    def _deny(operation: str, participant: Any, resource: Any, rule_name: Optional[str] = None) -> AccessEvaluationResult:
        return AccessEvaluationResult(
            allowed=False,
            rule_name=rule_name,
            message=(
                f"Participant '{_describe(participant)}' does not have "
                f"'{operation}' access to resource '{_describe(resource)}'"
            ),
        )

    def evaluate(self, operation: str, participant: Any, resource: Any, transaction: Any = None) -> AccessEvaluationResult:
        if not self._rules:
            return self._allow()

        if participant is None:
            return self._deny(operation, participant, resource)

        if participant.get_fully_qualified_type() == NETWORK_ADMIN_FQT:
            return self._allow()

        for rule in self._rules:
            if rule.matches(operation, participant, resource, transaction):
                if rule.action == ACTION_ALLOW:
                    return self._allow(rule.name)
                logger.debug(
                    f"ACL rule '{rule.name}' denies {operation} on "
                    f"{_describe(resource)} for {_describe(participant)}"
                )
                return self._deny(operation, participant, resource, rule.name)

        return self._deny(operation, participant, resource)


class AccessController:
    """
    Evaluator bound to the caller of one connection or transaction.

    Registries consult it on every read and write.
    """

    def __init__(self, evaluator: AclEvaluator, participant: Any = None, transaction: Any = None):
        self._evaluator = evaluator
        self._participant = participant
        self._transaction = transaction

    @property
    def participant(self) -> Any:
        return self._participant

    def for_transaction(self, transaction: Any) -> "AccessController":
        return AccessController(self._evaluator, self._participant, transaction)

    def can(self, operation: str, resource: Any) -> bool:
        return self._evaluator.evaluate(
            operation, self._participant, resource, self._transaction
        ).allowed

    def check(self, operation: str, resource: Any) -> None:
        result = self._evaluator.evaluate(
            operation, self._participant, resource, self._transaction
        )
        if not result.allowed:
            raise AccessDenied(
                _describe(self._participant), operation, _describe(resource)
            )


# Controller for code paths with no caller (setup, the administrator).
UNRESTRICTED = AccessController(AclEvaluator())
