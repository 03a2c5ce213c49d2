"""API exports."""

from .greeting import router as greeting_router
from .routes import router as health_router

__all__ = ["greeting_router", "health_router"]
