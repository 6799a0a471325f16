from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for failures surfaced to the user."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StateConflictError(ValidationError):
    """Raised when a work log is no longer in a state that allows the action."""


class NotFoundError(DomainError):
    """Raised when the API reports that a resource does not exist."""


class AuthenticationError(DomainError):
    """Raised when credentials are invalid or the session has expired."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class TransportError(DomainError):
    """Raised when the API cannot be reached."""


class ApiError(DomainError):
    """Raised for any other non-successful API response."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
