"""
Authentication service implementation.

Guards protected requests: extracts the bearer token, verifies it, and
re-confirms on every request that the account it names still exists.
"""

import asyncio
import logging
from typing import Optional

from shared.exceptions import InternalError, StorageError
from shared.models import AuthenticatedUser
from modules.accounts.exceptions import AccountNotFoundError
from modules.accounts.interfaces import ICredentialStore
from modules.accounts.models import normalize_email

from .interfaces import IAuthService, ITokenService
from .models import TokenClaims
from .exceptions import MissingTokenError


logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    Accepts ``Bearer <token>`` (scheme matched case-insensitively) or a bare
    token. Returns None when nothing usable is present.
    """
    parts = (authorization or "").split(None, 1)
    if parts and parts[0].lower() == BEARER_SCHEME:
        parts = parts[1:]
    return parts[0].strip() if parts else None


class AuthService(IAuthService):
    """
    Implementation of the session guard.

    Each call runs the full chain (extract, verify, re-check the store);
    nothing is cached between requests.
    """

    def __init__(self, tokens: ITokenService, store: ICredentialStore):
        self._tokens = tokens
        self._store = store

    async def validate_token(self, token: Optional[str]) -> TokenClaims:
        if not token:
            raise MissingTokenError()
        return self._tokens.verify(token)

    async def authorize(self, authorization: Optional[str]) -> AuthenticatedUser:
        claims = await self.validate_token(extract_bearer_token(authorization))
        email = normalize_email(claims.subject)

        try:
            exists = await asyncio.to_thread(self._store.exists, email)
        except StorageError as e:
            raise InternalError("Database error during authentication.") from e

        if not exists:
            logger.info("Rejected token for missing account %s", email)
            raise AccountNotFoundError(email)

        return AuthenticatedUser(email=email)
