"""FastAPI adapter – navigation, tenant and permission-registry routes."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping

from schooldesk.kernel.security.access import AccessModel
from schooldesk.kernel.security.access_context import AccessContext
from schooldesk.kernel.security.permissions import PERMISSION_GROUPS, describe_permission
from schooldesk.navigation.resolver import NavigationResolver, default_resolver
from schooldesk.tenancy.context import CurrentTenant


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'schooldesk[fastapi]' to use the FastAPI adapter"
        ) from exc


BadgeProvider = Callable[[AccessModel], Awaitable[Mapping[str, int]]]


def NavigationRouter(
    resolver: NavigationResolver | None = None,
    badge_provider: BadgeProvider | None = None,
    prefix: str = "",
    tags: list[str] | None = None,
) -> Any:
    """Return a router exposing the shell's read-only endpoints.

    ``GET {prefix}/navigation``
        The caller's resolved navigation tree. Anonymous callers get an
        empty catalog.
    ``GET {prefix}/tenant``
        The active :class:`~schooldesk.tenancy.context.TenantState`.
    ``GET {prefix}/permissions``
        Permission registry grouped for a role editor.

    Parameters
    ----------
    resolver:
        Defaults to :func:`default_resolver`.
    badge_provider:
        Optional ``async (access) -> {destination: count}``; counts are
        overlaid on the visible items.
    """
    _require_fastapi()
    from fastapi import APIRouter  # type: ignore[import-untyped]

    nav = resolver or default_resolver()
    router = APIRouter(prefix=prefix, tags=tags or ["shell"])

    @router.get("/navigation")
    async def navigation() -> dict[str, Any]:
        access = AccessContext.get_current() or AccessModel.anonymous()
        badges = await badge_provider(access) if badge_provider is not None else None
        return nav.resolve(access, badges).to_dict()

    @router.get("/tenant")
    async def tenant() -> dict[str, Any]:
        return CurrentTenant.get().to_dict()

    @router.get("/permissions")
    async def permissions() -> list[dict[str, Any]]:
        return [
            {
                "name": group.name,
                "permissions": [
                    {
                        "token": token,
                        "label": describe_permission(token).label,
                        "description": describe_permission(token).description,
                    }
                    for token in group.permissions
                ],
            }
            for group in PERMISSION_GROUPS
        ]

    return router


__all__ = ["BadgeProvider", "NavigationRouter"]
