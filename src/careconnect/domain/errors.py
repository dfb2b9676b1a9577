"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. Each category carries a
    stable ``code`` that outer layers (HTTP, CLI) can rely on.
    """

    code = "domain.error"


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    code = "request.invalid"


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""

    code = "resource.not_found"


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""

    code = "request.conflict"


class AuthError(DomainError):
    """Credentials did not match. Never says which part was wrong."""

    code = "auth.invalid_credentials"


class StorageError(DomainError):
    """Unexpected failure in the persistence layer."""

    code = "storage.failure"


INVALID_CREDENTIALS = "Invalid email or password"
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"
EMAIL_IN_USE = "Email already in use"


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"User {account_id} not found"


def donation_not_found(donation_id: int) -> str:
    """Return message for missing donation."""
    return f"Donation {donation_id} not found"


def missing_field(field_name: str) -> str:
    """Return message for a required field left blank."""
    return f"Field '{field_name}' is required"


def invalid_quantity(quantity: object) -> str:
    """Return message for a non-positive or non-integer quantity."""
    return f"Quantity must be a positive integer, got {quantity!r}"
