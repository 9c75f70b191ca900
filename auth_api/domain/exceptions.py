"""
Exception hierarchy for the authentication backend.

AuthError and its subclasses are what the signup flow raises to the request
boundary. StoreError and its subclasses are raised by user repositories and
consumed by the flow; they never reach a caller directly.
"""

# Standard library imports
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Caller-facing errors
# -----------------------------------------------------------------------------


class AuthError(Exception):
    """Base exception for all authentication flow errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


class InvalidInputError(AuthError):
    """Raised when a required field is missing or empty."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)
        self.field = field


class CredentialsTakenError(AuthError):
    """Raised when the email is already registered."""

    def __init__(self, message: str = "Credentials taken", **kwargs):
        kwargs.setdefault("user_message", "Credentials taken")
        super().__init__(message, **kwargs)


class PersistenceError(AuthError):
    """Raised when the user store fails for a reason the caller cannot fix."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Internal server error")
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# Store errors
# -----------------------------------------------------------------------------


class StoreError(Exception):
    """Base exception for user store failures."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


class UniqueConstraintViolation(StoreError):
    """Raised when an insert collides with a unique index."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(message, operation=operation)
        self.field = field
