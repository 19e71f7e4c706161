"""
Bearer token authentication middleware.

Runs the session guard for protected endpoints and exposes the
authenticated user to handlers.
"""

from typing import Optional
from fastapi import Depends, Header, Request

from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser
from ..dependencies import get_auth_service


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Accepts ``Authorization: Bearer <token>`` or a bare token value. The
    user is also stored on ``request.state.user`` for the rest of the
    request. Guard failures propagate as module exceptions and are
    rendered by the API error handlers (401/403/500).

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"email": user.email}
    """
    user = await auth.authorize(authorization)
    request.state.user = user
    return user

