"""Routers for the SCIM identity management plugin"""

from .config import router as config_router
from .groups import router as groups_router
from .users import router as users_router
from .health import router as health_router

__all__ = [
    "config_router",
    "groups_router",
    "users_router",
    "health_router",
]
