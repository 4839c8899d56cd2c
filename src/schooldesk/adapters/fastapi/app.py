"""FastAPI adapter – create_app wiring for the dashboard shell service."""
from __future__ import annotations

from typing import Any

from schooldesk.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from schooldesk.adapters.fastapi.middleware import (
    AccessContextMiddleware,
    TenantHostMiddleware,
    UserLoader,
)
from schooldesk.adapters.fastapi.routers import BadgeProvider, NavigationRouter
from schooldesk.config import SchoolDeskSettings, load_settings
from schooldesk.navigation.resolver import NavigationResolver
from schooldesk.observability.logging import JsonLoggerFactory
from schooldesk.tenancy.directory import TenantDirectory, build_tenant_directory
from schooldesk.tenancy.resolver import TenantResolver


def create_app(
    user_loader: UserLoader,
    settings: SchoolDeskSettings | None = None,
    *,
    directory: TenantDirectory | None = None,
    resolver: NavigationResolver | None = None,
    badge_provider: BadgeProvider | None = None,
    configure_logging: bool = True,
) -> Any:
    """Build a FastAPI app serving ``/navigation``, ``/tenant`` and ``/permissions``.

    *settings* default to the ``SCHOOLDESK_*`` environment. The tenant
    directory follows :func:`build_tenant_directory` unless one is passed.
    """
    from fastapi import FastAPI  # type: ignore[import-untyped]

    settings = settings or load_settings()
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level)

    app = FastAPI(title="schooldesk")
    app.include_router(NavigationRouter(resolver=resolver, badge_provider=badge_provider))
    FastAPIExceptionMapper().register(app)
    app.add_middleware(AccessContextMiddleware, user_loader=user_loader)
    # Added last so it runs first: tenant state is set before the user loads.
    app.add_middleware(
        TenantHostMiddleware,
        resolver=TenantResolver(directory or build_tenant_directory(settings), settings),
    )
    return app


__all__ = ["create_app"]
