"""
Session token issuing and verification.

Tokens are stateless HS256 JWTs bound to a normalized account email. The
server never stores them; validity is purely signature + expiry.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidTokenError, ExpiredTokenError
from .models import TokenClaims


Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Mints and verifies signed, time-limited session tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_seconds: int = 3600,
        clock: Optional[Clock] = None,
    ):
        """
        Args:
            secret: Server-held signing secret
            algorithm: Symmetric JWT algorithm
            expires_seconds: Token lifetime from issuance
            clock: Source of "now" for issued-at; defaults to UTC wall clock

        Raises:
            RuntimeError: If no signing secret is configured
        """
        if not secret:
            raise RuntimeError(
                "Token signing secret missing. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._expires_seconds = expires_seconds
        self._clock = clock or _utcnow

    @property
    def expires_seconds(self) -> int:
        return self._expires_seconds

    def issue(self, subject_email: str) -> str:
        """Sign a token for ``subject_email`` valid for ``expires_seconds``."""
        issued_at = int(self._clock().timestamp())
        payload = {
            "sub": subject_email,
            "email": subject_email,
            "iat": issued_at,
            "exp": issued_at + self._expires_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Validate signature, structure and expiry of a token.

        A token is expired from the exact second of its ``exp`` claim.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed, badly signed or has no subject
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
            claims = TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except (jwt.InvalidTokenError, PydanticValidationError):
            raise InvalidTokenError()

        if not claims.subject.strip():
            raise InvalidTokenError()
        return claims
