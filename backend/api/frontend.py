"""
Single-page front end serving.

When a built front end exists, its files are served as-is and every other
non-API path falls back to ``index.html`` so client-side routing works.
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse

from .models.errors import ErrorResponse


logger = logging.getLogger(__name__)

API_PREFIX = "api"


def mount_frontend(app: FastAPI, dist_dir: Path) -> bool:
    """
    Register the static/SPA catch-all route on ``app``.

    Must be called after the API routers so it never shadows them.

    Returns:
        True if the front end was mounted, False if ``dist_dir`` has no index.html
    """
    root = dist_dir.resolve()
    index = root / "index.html"
    if not index.is_file():
        logger.info("No front-end build at %s; serving API only", root)
        return False

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        if full_path == API_PREFIX or full_path.startswith(f"{API_PREFIX}/"):
            return JSONResponse(
                status_code=404,
                content=ErrorResponse(error="NOT_FOUND", message="Not found.").model_dump(),
            )

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        return FileResponse(index)

    logger.info("Serving front end from %s", root)
    return True
