from fastapi import FastAPI

from .health import router as health_router
from .inbox import router as inbox_router
from .settings import router as settings_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(inbox_router)
    app.include_router(settings_router)
