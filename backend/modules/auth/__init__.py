"""
Authentication module.

Handles session token issuing/validation and the per-request session guard.

Public API:
- IAuthService: Interface for the session guard
- ITokenService: Interface for token issuing and verification
- TokenClaims: Decoded token payload
- Auth exceptions: InvalidCredentialsError, MissingTokenError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, ITokenService
from .models import TokenClaims
from .exceptions import (
    InvalidCredentialsError,
    MissingTokenError,
    InvalidTokenError,
    ExpiredTokenError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ITokenService",
    # Models
    "TokenClaims",
    # Exceptions
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
]
