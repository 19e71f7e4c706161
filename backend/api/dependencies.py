"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from one immutable
Settings instance.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.accounts.interfaces import IAccountService, ICredentialStore
    from modules.accounts.passwords import PasswordVerifier
    from modules.auth.interfaces import IAuthService, ITokenService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._store: "ICredentialStore | None" = None
        self._passwords: "PasswordVerifier | None" = None
        self._tokens: "ITokenService | None" = None
        self._account_service: "IAccountService | None" = None
        self._auth_service: "IAuthService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def store(self) -> "ICredentialStore":
        """Get the credential store selected by STORAGE_BACKEND."""
        if self._store is None:
            if self._settings.storage_backend == "memory":
                from modules.accounts.repository import InMemoryCredentialStore
                self._store = InMemoryCredentialStore()
            else:
                from modules.accounts.repository import PostgresCredentialStore
                self._store = PostgresCredentialStore(self._settings)
        return self._store

    @property
    def passwords(self) -> "PasswordVerifier":
        """Get the password hasher/verifier."""
        if self._passwords is None:
            from modules.accounts.passwords import PasswordVerifier
            self._passwords = PasswordVerifier(rounds=self._settings.bcrypt_rounds)
        return self._passwords

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service. Raises RuntimeError without JWT_SECRET."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(
                secret=self._settings.jwt_secret,
                algorithm=self._settings.jwt_algorithm,
                expires_seconds=self._settings.jwt_expires_seconds,
            )
        return self._tokens

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            self._account_service = AccountService(
                store=self.store,
                passwords=self.passwords,
                tokens=self.tokens,
            )
        return self._account_service

    @property
    def auth(self) -> "IAuthService":
        """Get the session guard instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(tokens=self.tokens, store=self.store)
        return self._auth_service

    def warm_up(self) -> None:
        """Build every service now so misconfiguration surfaces at startup."""
        self.accounts
        self.auth

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._store = None
        self._passwords = None
        self._tokens = None
        self._account_service = None
        self._auth_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_account_service() -> "IAccountService":
    """FastAPI dependency for the account service."""
    return get_container().accounts


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for the session guard."""
    return get_container().auth


def get_credential_store() -> "ICredentialStore":
    """FastAPI dependency for the credential store."""
    return get_container().store
