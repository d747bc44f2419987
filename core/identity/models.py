"""
Composer Identity — Identity Model
=====================================
An identity is a named credential bound to exactly one participant.

States:
    ISSUED  → may connect and submit transactions
    REVOKED → refused at connect time and on every submission
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict

IDENTITY_ISSUED = "ISSUED"
IDENTITY_REVOKED = "REVOKED"

VALID_IDENTITY_STATES = frozenset({IDENTITY_ISSUED, IDENTITY_REVOKED})


@dataclass(frozen=True)
class Identity:
    """
    Fields:
        name:         User id the identity was issued under (e.g. 'alice1').
        identity_id:  Opaque unique identifier of the credential.
        participant:  Fully-qualified identifier of the bound participant.
        state:        ISSUED or REVOKED.
    """

    name: str
    identity_id: str
    participant: str
    state: str = IDENTITY_ISSUED

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        if not self.identity_id or not isinstance(self.identity_id, str):
            raise ValueError("identity_id must be a non-empty string.")

        if not self.participant or "#" not in self.participant:
            raise ValueError(
                "participant must be a fully-qualified identifier (ns.Type#id)."
            )

        if self.state not in VALID_IDENTITY_STATES:
            raise ValueError(
                f"state '{self.state}' not valid. "
                f"Must be one of: {sorted(VALID_IDENTITY_STATES)}"
            )

    @property
    def is_revoked(self) -> bool:
        return self.state == IDENTITY_REVOKED

    def revoked(self) -> "Identity":
        return replace(self, state=IDENTITY_REVOKED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "identity_id": self.identity_id,
            "participant": self.participant,
            "state": self.state,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Identity":
        return cls(
            name=data["name"],
            identity_id=data["identity_id"],
            participant=data["participant"],
            state=data.get("state", IDENTITY_ISSUED),
        )
