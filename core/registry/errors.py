"""
Composer Registry — Errors
============================
Messages mirror the wording callers match on, e.g.
"Object with ID 'X' in collection with ID 'Asset:ns.Type' does not exist".
"""

from core.errors import NetworkError


class RegistryError(NetworkError):
    """Base error for registry operations."""
    pass


class ResourceNotFound(RegistryError):
    """No readable entry with this identifier in the collection."""

    def __init__(self, collection_id: str, identifier: str):
        self.collection_id = collection_id
        self.identifier = identifier
        super().__init__(
            f"Object with ID '{identifier}' in collection with ID "
            f"'{collection_id}' does not exist"
        )


class ResourceAlreadyExists(RegistryError):
    """An entry with this identifier is already stored."""

    def __init__(self, collection_id: str, identifier: str):
        self.collection_id = collection_id
        self.identifier = identifier
        super().__init__(
            f"Failed to add object with ID '{identifier}' in collection with ID "
            f"'{collection_id}' as the object already exists"
        )


class ResourceTypeMismatch(RegistryError):
    """Resource type does not belong to the registry it was handed to."""

    def __init__(self, collection_id: str, fqt: str):
        self.collection_id = collection_id
        self.fqt = fqt
        super().__init__(
            f"Cannot store a '{fqt}' in collection with ID '{collection_id}'"
        )
