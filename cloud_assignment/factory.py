"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from .api import greeting_router, health_router
from .settings import Settings, get_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.include_router(greeting_router)
    app.include_router(health_router)
    app.state.settings = settings

    return app
