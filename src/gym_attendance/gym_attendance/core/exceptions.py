class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


InvalidInput = ValidationError


class NotFound(DomainError):
    """Raised when the face API knows a person the member store does not."""


class ExternalServiceFailure(DomainError):
    """Raised when the face API or the database fails or times out."""


class LockTimeout(ExternalServiceFailure):
    """Raised when a member lock cannot be acquired in time."""


class DataIntegrityWarning(UserWarning):
    """Issued when a member has more than one open attendance session."""
