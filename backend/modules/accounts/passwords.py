"""
Password hashing and verification.

New credentials are always bcrypt hashes. Rows written by older versions of
the app may still hold the plaintext password; those are compared literally
and reported back so the caller can upgrade them.
"""

import hmac
import logging
from typing import Optional

import bcrypt

from shared.exceptions import ValidationError

from .models import (
    Credential,
    CredentialEncoding,
    HashedCredential,
    LegacyCredential,
    VerificationResult,
)


logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordVerifier:
    """Hashes passwords with bcrypt and checks them against stored credentials."""

    def __init__(self, rounds: int = 10):
        """
        Args:
            rounds: bcrypt cost factor (log2 of the key expansion rounds)
        """
        self._rounds = rounds
        self._unknown_hash: Optional[str] = None

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh salt.

        Raises:
            ValidationError: If the password is empty or longer than bcrypt accepts
        """
        if not password:
            raise ValidationError("Password is required.", code="PASSWORD_REQUIRED")
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes.",
                code="PASSWORD_TOO_LONG",
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, password: str, credential: Credential) -> VerificationResult:
        """
        Check a supplied password against a stored credential.

        A hashed credential only ever goes through bcrypt; a legacy one only
        ever through literal comparison.
        """
        if isinstance(credential, HashedCredential):
            return VerificationResult(
                matched=self._check_hash(password, credential.hash),
                encoding=CredentialEncoding.HASH,
            )
        if isinstance(credential, LegacyCredential):
            matched = bool(credential.plaintext) and hmac.compare_digest(
                password.encode("utf-8"), credential.plaintext.encode("utf-8")
            )
            return VerificationResult(matched=matched, encoding=CredentialEncoding.PLAINTEXT)
        raise TypeError(f"Unsupported credential type: {type(credential).__name__}")

    def check_unknown(self, password: str) -> bool:
        """
        Run a bcrypt check against a throwaway hash and return False.

        Used when no account exists so the failure costs as much as a wrong
        password.
        """
        if self._unknown_hash is None:
            self._unknown_hash = bcrypt.hashpw(
                b"unknown-account", bcrypt.gensalt(rounds=self._rounds)
            ).decode("ascii")
        self._check_hash(password, self._unknown_hash)
        return False

    @staticmethod
    def _check_hash(password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Corrupt stored hash, or a password bcrypt refuses to process
            logger.debug("bcrypt rejected password check input")
            return False
