"""
Composer Resources — Public API
=================================
Typed resources, relationships, the factory that builds them,
and the serializer/resolver pair the runtime stores them with.
"""

from core.resources.factory import Factory
from core.resources.model import (
    KIND_ASSET,
    KIND_CONCEPT,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    NETWORK_ADMIN_FQT,
    ModelManager,
    TypeDeclaration,
    split_fqt,
)
from core.resources.resolver import Resolver
from core.resources.resource import Relationship, Resource, same_target
from core.resources.serializer import Serializer, dehydrate, dehydrate_fields

__all__ = [
    "Factory",
    "ModelManager",
    "TypeDeclaration",
    "KIND_ASSET",
    "KIND_PARTICIPANT",
    "KIND_TRANSACTION",
    "KIND_EVENT",
    "KIND_CONCEPT",
    "NETWORK_ADMIN_FQT",
    "split_fqt",
    "Resolver",
    "Relationship",
    "Resource",
    "same_target",
    "Serializer",
    "dehydrate",
    "dehydrate_fields",
]
