"""
Accounts module data models.

Stored credentials are exposed as a tagged union: every raw value read
from the store is classified once, at the storage boundary, into either a
bcrypt hash or a legacy plaintext password.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# Structural markers of a bcrypt hash ("$2b$10$<salt+digest>")
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def normalize_email(email: Optional[str]) -> str:
    """Trim and lowercase an email; the canonical lookup and uniqueness key."""
    return str(email or "").strip().lower()


class CredentialEncoding(str, Enum):
    """How a stored credential is encoded."""

    HASH = "hash"
    PLAINTEXT = "plaintext"


@dataclass(frozen=True)
class HashedCredential:
    """A bcrypt hash string."""

    hash: str = field(repr=False)

    encoding = CredentialEncoding.HASH


@dataclass(frozen=True)
class LegacyCredential:
    """A password stored in plaintext by an older version of the app."""

    plaintext: str = field(repr=False)

    encoding = CredentialEncoding.PLAINTEXT


Credential = Union[HashedCredential, LegacyCredential]


def classify_credential(raw: Optional[str]) -> Credential:
    """
    Classify a raw stored credential by its prefix.

    Anything carrying a bcrypt marker is a hash; everything else is treated
    as a legacy plaintext password.
    """
    value = str(raw or "")
    if value.startswith(BCRYPT_PREFIXES):
        return HashedCredential(value)
    return LegacyCredential(value)


@dataclass(frozen=True)
class Account:
    """A row of the users table."""

    email: str
    credential: Credential
    id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of checking a supplied password against a stored credential."""

    matched: bool
    encoding: CredentialEncoding

    @property
    def needs_rehash(self) -> bool:
        """True when a plaintext credential matched and should be upgraded."""
        return self.matched and self.encoding is CredentialEncoding.PLAINTEXT


# =============================================================================
# API Request/Response Models
# =============================================================================


class CredentialsRequest(BaseModel):
    """Body of the create-account and login requests."""

    email: Optional[str] = Field(default=None, description="Account email")
    password: Optional[str] = Field(default=None, description="Plaintext password")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class LoginResponse(BaseModel):
    """Successful login."""

    token: str = Field(..., description="Signed session token (1 hour)")


class EmailListResponse(BaseModel):
    """Every account email in the store."""

    emails: list[str]
