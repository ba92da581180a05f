"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
REFERENCE_NOT_FOUND = "REFERENCE_NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
NO_STOCK_AVAILABLE = "NO_STOCK_AVAILABLE"
INVALID_RENTAL_STATE = "INVALID_RENTAL_STATE"
STORAGE_ERROR = "STORAGE_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class ReferentialError(DomainError):
    """Raised when a request references another resource (by id) that does not exist."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when attempting to create or update a resource that would violate a uniqueness constraint."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. invalid dates, missing required fields)."""

    pass


class CapacityExceededError(DomainError):
    """Raised when a game has no unit left to rent."""

    pass


class RentalStateError(DomainError):
    """Raised when an operation is not allowed in the rental's current state."""

    pass


class RentalAlreadyClosedError(RentalStateError):
    pass


class RentalStillOpenError(RentalStateError):
    pass


class StorageError(DomainError):
    """Raised when the underlying store fails. The message is safe to show to callers."""

    pass
