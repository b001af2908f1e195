class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class DataAccessError(DomainError):
    """Raised when the underlying store cannot be read or written."""


class DeliveryError(DomainError):
    """Raised when a backup could not be handed to the mail transport."""
