class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StorageError(Exception):
    """Base exception for persistence problems."""


class RosterDecodeError(StorageError):
    """Raised when a stored roster record cannot be decoded."""
