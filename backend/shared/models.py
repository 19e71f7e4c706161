"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated by the session guard once the bearer token has been verified
    and the account behind it re-confirmed in the credential store. Made
    available to route handlers via dependency injection.
    """

    email: str = Field(..., description="Normalized account email (token subject)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
