class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ImportFormatError(ValidationError):
    """Raised when an imported document is not an attendance store."""


class StorageError(DomainError):
    """Raised when the durable attendance file cannot be written."""


class StoreNotReadyError(DomainError):
    """Raised when the client store is mutated before hydration finished."""
