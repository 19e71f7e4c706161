"""
Base exception classes for the Apptrack backend.

Each module should define its own exceptions that inherit from these bases.
Every class carries the HTTP status it maps to, so the API layer can render
any of them through a single handler.
"""

from typing import Optional, Any


class ApptrackError(Exception):
    """
    Base exception for all Apptrack errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(ApptrackError):
    """Input validation failed."""

    status_code = 400


class ConflictError(ApptrackError):
    """Resource already exists."""

    status_code = 409


class AuthenticationError(ApptrackError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(ApptrackError):
    """Access refused (invalid token or the account behind it is gone)."""

    status_code = 403


class InternalError(ApptrackError):
    """
    Infrastructure failure.

    The message is user-facing and generic; the underlying cause is only
    logged and chained via ``raise ... from``.
    """

    status_code = 500

    def __init__(self, message: str = "Internal server error.", code: Optional[str] = None):
        super().__init__(message, code=code or "INTERNAL_ERROR")


class StorageError(InternalError):
    """The credential store could not complete an operation."""

    def __init__(self, message: str = "Database error."):
        super().__init__(message, code="STORAGE_ERROR")
