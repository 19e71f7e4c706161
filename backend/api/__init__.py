"""
Apptrack API package.

Provides the FastAPI application for the job application tracker.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
