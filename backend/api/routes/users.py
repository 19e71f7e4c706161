"""
User-related endpoints.
"""

from fastapi import APIRouter, Depends

from modules.accounts.interfaces import IAccountService
from modules.accounts.models import EmailListResponse
from shared.models import AuthenticatedUser
from ..dependencies import get_account_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("", response_model=EmailListResponse)
async def list_users(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> EmailListResponse:
    """
    List every account email.

    Any authenticated user may call this; there are no roles.
    """
    return EmailListResponse(emails=await service.list_emails())
