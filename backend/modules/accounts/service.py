"""
Account service implementation.

Creates accounts and authenticates logins. Legacy plaintext credentials are
upgraded to bcrypt hashes the first time they are used successfully.
"""

import asyncio
import logging
from typing import Optional

from shared.exceptions import InternalError, StorageError, ValidationError
from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.interfaces import ITokenService

from .interfaces import IAccountService, ICredentialStore
from .models import Account, normalize_email
from .passwords import PasswordVerifier


logger = logging.getLogger(__name__)


def _require_credentials(email: Optional[str], password: Optional[str]) -> str:
    normalized = normalize_email(email)
    if not normalized or not password:
        raise ValidationError("Email and password are required.", code="MISSING_FIELDS")
    return normalized


class AccountService(IAccountService):
    """
    Implementation of the account service.

    bcrypt and store calls are blocking, so they run in worker threads to
    keep the event loop free for other requests.
    """

    def __init__(
        self,
        store: ICredentialStore,
        passwords: PasswordVerifier,
        tokens: ITokenService,
    ):
        self._store = store
        self._passwords = passwords
        self._tokens = tokens

    async def create_account(self, email: Optional[str], password: Optional[str]) -> Account:
        normalized = _require_credentials(email, password)
        hashed = await asyncio.to_thread(self._passwords.hash, password)

        try:
            account = await asyncio.to_thread(self._store.create, normalized, hashed)
        except StorageError as e:
            raise InternalError("Error creating account.") from e

        logger.info("Created account %s", normalized)
        return account

    async def authenticate(self, email: Optional[str], password: Optional[str]) -> str:
        normalized = _require_credentials(email, password)

        try:
            account = await asyncio.to_thread(self._store.get, normalized)
        except StorageError as e:
            raise InternalError("Error logging in.") from e

        if account is None:
            # Unknown emails pay the same bcrypt cost as a wrong password
            await asyncio.to_thread(self._passwords.check_unknown, password)
            logger.info("Login failed for %s", normalized)
            raise InvalidCredentialsError()

        result = await asyncio.to_thread(self._passwords.verify, password, account.credential)
        if not result.matched:
            logger.info("Login failed for %s", normalized)
            raise InvalidCredentialsError()

        if result.needs_rehash:
            await self._upgrade_legacy_credential(account.email, account.credential.plaintext, password)

        logger.info("Login succeeded for %s", normalized)
        return self._tokens.issue(normalize_email(account.email))

    async def list_emails(self) -> list[str]:
        try:
            return await asyncio.to_thread(self._store.list_emails)
        except StorageError as e:
            raise InternalError("Error retrieving email addresses.") from e

    async def _upgrade_legacy_credential(self, email: str, plaintext: str, password: str) -> None:
        """
        Replace a plaintext credential with its bcrypt hash.

        The write only lands if the row still holds ``plaintext``, so when
        two logins race, one upgrades and the other leaves the hash alone.
        Best-effort: the login has already succeeded, so failures are only
        logged.
        """
        try:
            hashed = await asyncio.to_thread(self._passwords.hash, password)
            replaced = await asyncio.to_thread(
                self._store.update_credential, normalize_email(email), plaintext, hashed
            )
        except Exception:
            logger.warning("Failed to rehash legacy credential for %s", email, exc_info=True)
            return
        if replaced:
            logger.info("Rehashed legacy credential for %s", email)
        else:
            logger.debug("Legacy credential for %s was already replaced", email)
