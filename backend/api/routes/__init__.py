"""API route modules."""

from fastapi import FastAPI

from . import mission, settings


def register_routes(app: FastAPI):
    """Register all API routers. Call after app is created."""
    app.include_router(mission.router, prefix="/api/mission", tags=["mission"])
    app.include_router(settings.router, prefix="/api/settings", tags=["settings"])
