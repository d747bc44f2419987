"""
PII Network — Named Queries
===========================
"""

from core.runtime.query import Query
from networks.pii.models import MEMBER

QUERIES = (
    Query(
        name="selectMembers",
        description="Select all members the caller can see",
        resource_type=MEMBER,
    ),
)
