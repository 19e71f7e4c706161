"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Decoded session token payload.

    ``sub`` is the normalized account email. Tokens minted by the original
    Node server only carried an ``email`` claim, so it is accepted as a
    fallback subject.
    """

    sub: Optional[str] = Field(None, description="Subject (normalized email)")
    email: Optional[str] = Field(None, description="Account email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def subject(self) -> str:
        return self.sub or self.email or ""
