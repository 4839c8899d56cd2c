"""FastAPI adapter – tenant/access middleware, shell routes, exception mapper, app factory."""
from schooldesk.adapters.fastapi.app import create_app
from schooldesk.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from schooldesk.adapters.fastapi.middleware import (
    AccessContextMiddleware,
    TenantHostMiddleware,
    UserLoader,
)
from schooldesk.adapters.fastapi.routers import BadgeProvider, NavigationRouter

__all__ = [
    "AccessContextMiddleware",
    "BadgeProvider",
    "FastAPIExceptionMapper",
    "NavigationRouter",
    "TenantHostMiddleware",
    "UserLoader",
    "create_app",
]
