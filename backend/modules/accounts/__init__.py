"""
Accounts module.

Handles account creation, credential storage and login.

Public API:
- IAccountService: Interface for account operations
- ICredentialStore: Interface for the accounts table
- Account, Credential: Stored account and its classified credential
- Account exceptions: DuplicateAccountError, AccountNotFoundError
"""

from .interfaces import IAccountService, ICredentialStore
from .models import (
    Account,
    Credential,
    CredentialEncoding,
    HashedCredential,
    LegacyCredential,
    VerificationResult,
    classify_credential,
    normalize_email,
)
from .exceptions import DuplicateAccountError, AccountNotFoundError

__all__ = [
    # Interfaces
    "IAccountService",
    "ICredentialStore",
    # Models
    "Account",
    "Credential",
    "CredentialEncoding",
    "HashedCredential",
    "LegacyCredential",
    "VerificationResult",
    "classify_credential",
    "normalize_email",
    # Exceptions
    "DuplicateAccountError",
    "AccountNotFoundError",
]
