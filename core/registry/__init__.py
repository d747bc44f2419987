"""
Composer Registry — Public API
================================
"""

from core.registry.errors import (
    RegistryError,
    ResourceAlreadyExists,
    ResourceNotFound,
    ResourceTypeMismatch,
)
from core.registry.registry import (
    ASSET_REGISTRY,
    PARTICIPANT_REGISTRY,
    AssetRegistry,
    ParticipantRegistry,
    Registry,
    collection_id_for,
)
from core.registry.store import InMemoryWorldStateStore, WorldStateStore

__all__ = [
    "ASSET_REGISTRY",
    "PARTICIPANT_REGISTRY",
    "AssetRegistry",
    "ParticipantRegistry",
    "Registry",
    "collection_id_for",
    "RegistryError",
    "ResourceAlreadyExists",
    "ResourceNotFound",
    "ResourceTypeMismatch",
    "InMemoryWorldStateStore",
    "WorldStateStore",
]
