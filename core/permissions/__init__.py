"""
Composer Permissions — Public API
===================================
Ordered ACL rules and their evaluator.
"""

from core.permissions.constants import (
    ACTION_ALLOW,
    ACTION_DENY,
    ANY,
    OP_ALL,
    OP_CREATE,
    OP_DELETE,
    OP_READ,
    OP_UPDATE,
)
from core.permissions.evaluator import (
    UNRESTRICTED,
    AccessController,
    AccessDenied,
    AccessEvaluationResult,
    AclEvaluator,
)
from core.permissions.models import AclRule, pattern_matches

__all__ = [
    "ACTION_ALLOW",
    "ACTION_DENY",
    "ANY",
    "OP_ALL",
    "OP_CREATE",
    "OP_DELETE",
    "OP_READ",
    "OP_UPDATE",
    "AccessController",
    "AccessDenied",
    "AccessEvaluationResult",
    "AclEvaluator",
    "AclRule",
    "UNRESTRICTED",
    "pattern_matches",
]
