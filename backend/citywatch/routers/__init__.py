"""API routers."""

from citywatch.routers.auth import router as auth_router
from citywatch.routers.health import router as health_router
from citywatch.routers.incidents import router as incidents_router

__all__ = ["auth_router", "health_router", "incidents_router"]
