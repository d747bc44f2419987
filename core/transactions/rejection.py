"""
Composer Transactions — Rejection Model
==========================================
Structured reasons for rejected transactions.

Every rejection is:
- Machine-readable (code)
- Human-readable (message; for processor failures, the message the
  processor raised, verbatim)
- Attributed (policy_name: the policy or processor that refused)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RejectionReason:
    """
    Structured reason for transaction rejection.

    Fields:
        code:        Machine-readable rejection code (e.g. 'ACCESS_DENIED').
        message:     Human-readable explanation.
        policy_name: Policy or processor that caused rejection.
    """

    code: str
    message: str
    policy_name: str

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
        }


class ReasonCode:
    """
    Known rejection codes.

    Convention: SCREAMING_SNAKE_CASE.
    """

    # ── Submission structure ──────────────────────────────────
    INVALID_TRANSACTION_STRUCTURE = "INVALID_TRANSACTION_STRUCTURE"
    UNKNOWN_TRANSACTION_TYPE = "UNKNOWN_TRANSACTION_TYPE"
    NO_PROCESSOR = "NO_PROCESSOR"

    # ── Identity / authorization ──────────────────────────────
    ACCESS_DENIED = "ACCESS_DENIED"
    IDENTITY_INVALID = "IDENTITY_INVALID"

    # ── Processor outcomes ────────────────────────────────────
    PROCESSOR_ERROR = "PROCESSOR_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_EXISTS = "RESOURCE_EXISTS"
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # ── General ───────────────────────────────────────────────
    NETWORK_ERROR = "NETWORK_ERROR"
