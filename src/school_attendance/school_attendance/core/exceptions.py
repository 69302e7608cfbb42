class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StoreError(DomainError):
    """Raised when the document store rejects or fails a call."""


class RecordNotFoundError(StoreError):
    """Raised when a document to update does not exist."""
