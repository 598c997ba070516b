class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced worker or entry does not exist."""


class SyncError(DomainError):
    """Raised when the remote sheet endpoint rejects or garbles a request."""
