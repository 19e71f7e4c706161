"""
Accounts module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory stores and mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Account


@runtime_checkable
class ICredentialStore(Protocol):
    """
    Persistent accounts keyed by normalized email.

    Implementations are synchronous; callers run them off the event loop.
    Every method takes an already-normalized email.
    """

    def get(self, email: str) -> Optional[Account]:
        """
        Look up an account by email (case-insensitive).

        Returns:
            The Account, or None if absent

        Raises:
            StorageError: If the store cannot be reached
        """
        ...

    def exists(self, email: str) -> bool:
        """Return True if an account with this email exists."""
        ...

    def create(self, email: str, credential: str) -> Account:
        """
        Insert a new account.

        Raises:
            DuplicateAccountError: If the email is already taken
            StorageError: On any other storage failure
        """
        ...

    def update_credential(self, email: str, expected: str, credential: str) -> bool:
        """
        Replace the stored credential only if it still equals ``expected``.

        Returns:
            True if the row was changed, False if it was missing or had
            already been replaced
        """
        ...

    def list_emails(self) -> list[str]:
        """Return every stored account email."""
        ...

    def ping(self) -> None:
        """Raise StorageError if the store is unreachable."""
        ...


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations.

    This protocol defines the contract that the accounts module exposes
    to the API layer.
    """

    async def create_account(self, email: Optional[str], password: Optional[str]) -> Account:
        """
        Create a new account with a bcrypt-hashed password.

        Raises:
            ValidationError: If email or password is empty
            DuplicateAccountError: If the normalized email exists
            InternalError: On storage failure
        """
        ...

    async def authenticate(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Verify credentials and return a signed session token.

        Raises:
            ValidationError: If email or password is empty
            InvalidCredentialsError: If the email is unknown or the password wrong
            InternalError: On storage failure
        """
        ...

    async def list_emails(self) -> list[str]:
        """Return every account email."""
        ...
