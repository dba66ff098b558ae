"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested record does not exist."""


class MissingDataError(DomainError):
    """A record lacks data required for the requested action."""


class FatalError(DomainError):
    """Error that blocks the application until the environment is fixed."""

    def __init__(self, message: str, remediation: Optional[str] = None):
        super().__init__(message)
        self.remediation = remediation


class ConfigurationError(FatalError):
    """Missing or unusable configuration for an external service."""


class AuthenticationError(FatalError):
    """Identity provider failure or a session without the required role."""


class SyncError(DomainError):
    """Failure while replacing the shared account collection."""

    def __init__(self, phase: str, message: str, inserted: int = 0):
        super().__init__(f"{phase} failed: {message}")
        self.phase = phase
        self.inserted = inserted


def invalid_admin_password() -> str:
    """Return message for a rejected administrator secret."""
    return "Incorrect password"


def invalid_vendor_name() -> str:
    """Return message for a vendor name that is too short."""
    return "Enter a valid vendor name"


def record_position_not_found(position: int, total: int) -> str:
    """Return message for a record position outside the visible list."""
    return f"No account at position {position} (showing {total})"


def unknown_field(name: str, valid: list[str]) -> str:
    """Return message for an unknown field name in a mapping override."""
    return f"Invalid field '{name}'. Must be one of: {', '.join(valid)}"
