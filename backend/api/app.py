"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .dependencies import get_container
from .frontend import mount_frontend
from .middleware.errors import register_exception_handlers
from .routes import auth, health, users


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the services eagerly so a missing JWT_SECRET stops startup
    instead of failing the first request.
    """
    # Startup
    container = get_container()
    settings = container.settings
    container.warm_up()
    if settings.storage_backend == "postgres" and settings.database_auto_create:
        container.store.ensure_schema()
    logger.info(
        "Starting %s on %s:%s (storage: %s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.storage_backend,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Job application tracker API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix="/api", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    if settings.frontend_dist_dir:
        mount_frontend(app, Path(settings.frontend_dist_dir))

    return app


# Application instance for uvicorn
app = create_app()
