"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a login fails.

    The message is the same whether the email is unknown or the password
    is wrong.
    """

    def __init__(self, message: str = "Invalid email or password."):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Access denied. No token provided."):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthorizationError):
    """Raised when a JWT token is invalid, malformed or expired."""

    def __init__(self, message: str = "Invalid token.", code: str = "INVALID_TOKEN"):
        super().__init__(message, code=code)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Token has expired."):
        super().__init__(message, code="TOKEN_EXPIRED")
