"""
Shared infrastructure for the Apptrack backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: PostgreSQL connection factory
- exceptions: Base exception classes
- repository: Base class for PostgreSQL repositories

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_db_connection, db_transaction
from .exceptions import (
    ApptrackError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    StorageError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_db_connection",
    "db_transaction",
    "ApptrackError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
    "StorageError",
    "AuthenticatedUser",
]
