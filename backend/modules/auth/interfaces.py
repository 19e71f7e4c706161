"""
Authentication module interface.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import TokenClaims


@runtime_checkable
class ITokenService(Protocol):
    """Issues and verifies stateless session tokens."""

    def issue(self, subject_email: str) -> str:
        """Return a signed token bound to ``subject_email``."""
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry.

        Raises:
            InvalidTokenError: If the token is malformed, badly signed or expired
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for per-request session checks.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def validate_token(self, token: Optional[str]) -> TokenClaims:
        """
        Validate a token without consulting the credential store.

        Raises:
            MissingTokenError: If no token is given
            InvalidTokenError: If the token is invalid or expired
        """
        ...

    async def authorize(self, authorization: Optional[str]) -> AuthenticatedUser:
        """
        Turn an Authorization header value into an authenticated user.

        Args:
            authorization: ``Bearer <token>`` or a bare token

        Returns:
            AuthenticatedUser for the token's subject

        Raises:
            MissingTokenError: If the header is absent or blank
            InvalidTokenError: If the token is invalid or expired
            AccountNotFoundError: If the subject no longer has an account
            InternalError: If the credential store fails
        """
        ...
