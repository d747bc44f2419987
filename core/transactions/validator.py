"""
Composer Transactions — Submission Validator
===============================================
Checks a submission against the deployed network before any policy
runs.

It only checks:
- the transaction type is declared in the network model
- the submission targets this network
- required transaction fields are present
"""

from __future__ import annotations

from typing import Any, Protocol

from core.transactions.base import TransactionSubmission
from core.transactions.rejection import ReasonCode


class NetworkContextProtocol(Protocol):
    """What the dispatcher needs to know about the deployed network."""

    identifier: str
    model: Any
    processors: dict
    acl: Any


class TransactionValidationError(Exception):
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


def validate_submission(submission: TransactionSubmission, context: NetworkContextProtocol) -> None:
    if submission.network != context.identifier:
        raise TransactionValidationError(
            ReasonCode.INVALID_TRANSACTION_STRUCTURE,
            f"Submission targets '{submission.network}', "
            f"not deployed network '{context.identifier}'.",
        )

    if not context.model.is_declared(submission.transaction_type):
        raise TransactionValidationError(
            ReasonCode.UNKNOWN_TRANSACTION_TYPE,
            f"Transaction type '{submission.transaction_type}' is not "
            f"declared in '{context.identifier}'.",
        )

    declaration = context.model.get(submission.transaction_type)
    for field_name in declaration.required:
        if submission.transaction.get(field_name) is None:
            raise TransactionValidationError(
                ReasonCode.INVALID_TRANSACTION_STRUCTURE,
                f"Instance {submission.transaction.get_fully_qualified_identifier()} "
                f"missing required field {field_name}",
            )
