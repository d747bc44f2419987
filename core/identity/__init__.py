"""
Composer Identity — Public API
================================
Identities bind user ids to participants.
"""

from core.identity.models import (
    IDENTITY_ISSUED,
    IDENTITY_REVOKED,
    Identity,
)
from core.identity.service import IdentityError, IdentityService

__all__ = [
    "IDENTITY_ISSUED",
    "IDENTITY_REVOKED",
    "Identity",
    "IdentityError",
    "IdentityService",
]
