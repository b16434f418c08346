from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``field_errors`` maps a form field name to its message; every failing
    field is reported, not only the first one.
    """

    def __init__(self, message: str, field_errors: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.field_errors = dict(field_errors or {})


class ConflictError(DomainError):
    """Raised when a write would break a collection-level rule (e.g. a second spouse)."""


class NotFoundError(DomainError):
    """Raised when an operation targets a record that no longer exists."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class UnavailableError(DomainError):
    """Raised when backing data could not be loaded; the message is safe to show."""
