"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import asyncio

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from modules.accounts.interfaces import ICredentialStore
from shared.config import get_settings
from shared.exceptions import StorageError
from ..dependencies import get_credential_store

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    store: ICredentialStore = Depends(get_credential_store),
):
    """
    Readiness check endpoint.

    Pings the credential store; 503 when it cannot be reached or is
    not configured.
    """
    try:
        await asyncio.to_thread(store.ping)
    except (StorageError, RuntimeError):
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(status="unavailable", database="unreachable").model_dump(),
        )
    return ReadinessResponse(status="ready", database="connected")
