"""
Account and session endpoints.

Create an account, log in for a session token, and check who a token
belongs to.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.accounts.interfaces import IAccountService
from modules.accounts.models import CredentialsRequest, LoginResponse, MessageResponse
from shared.models import AuthenticatedUser
from ..dependencies import get_account_service
from ..middleware.auth import get_current_user

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """The account a session token belongs to."""

    email: str


@router.post("/create-account", response_model=MessageResponse, status_code=201)
async def create_account(
    request: CredentialsRequest,
    service: IAccountService = Depends(get_account_service),
) -> MessageResponse:
    """
    Create an account.

    Returns 400 when a field is missing and 409 when the email is taken.
    No token is issued; clients log in afterwards.
    """
    await service.create_account(request.email, request.password)
    return MessageResponse(message="Account created successfully!")


@router.post("/login", response_model=LoginResponse)
async def login(
    request: CredentialsRequest,
    service: IAccountService = Depends(get_account_service),
) -> LoginResponse:
    """Exchange email and password for a one-hour session token."""
    token = await service.authenticate(request.email, request.password)
    return LoginResponse(token=token)


@router.get("/auth/me", response_model=CurrentUserResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
) -> CurrentUserResponse:
    """
    Get the current user's email.

    Requires authentication.
    """
    return CurrentUserResponse(email=user.email)
