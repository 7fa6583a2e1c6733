"""API route modules."""

from swimlog.api.routes.health import router as health_router
from swimlog.api.routes.teams import router as teams_router
from swimlog.api.routes.times import router as times_router
from swimlog.api.routes.users import router as users_router

__all__ = [
    "health_router",
    "teams_router",
    "times_router",
    "users_router",
]
