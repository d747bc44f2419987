"""
Composer Core — Error Hierarchy
=================================
Every failure a transaction processor or the embedded runtime can
surface to a caller derives from NetworkError.

The TransactionBus converts NetworkError into a REJECTED outcome
and rolls back the unit of work. Anything else is a defect and
propagates after rollback.
"""


class NetworkError(Exception):
    """Base error for business network operations."""
    pass


class TransactionError(NetworkError):
    """
    Raised by a transaction processor when a precondition on
    entity state does not hold.

    The message is surfaced verbatim as the rejection message.
    """
    pass


class ValidationError(NetworkError):
    """Resource does not satisfy its type declaration."""
    pass


class UnknownTypeError(NetworkError):
    """Fully-qualified type is not declared in the model."""

    def __init__(self, fqt: str):
        self.fqt = fqt
        super().__init__(f"Type '{fqt}' is not declared in the business network model.")
