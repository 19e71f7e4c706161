"""
Accounts module exceptions.
"""

from shared.exceptions import ConflictError, AuthorizationError


class DuplicateAccountError(ConflictError):
    """Raised when an account with the same normalized email already exists."""

    def __init__(self, email: str):
        super().__init__(
            "An account with this email already exists.",
            code="ACCOUNT_EXISTS",
            details={"email": email},
        )


class AccountNotFoundError(AuthorizationError):
    """Raised when a verified token's subject no longer has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Account not found or deactivated.",
            code="ACCOUNT_NOT_FOUND",
            details={"email": email},
        )
