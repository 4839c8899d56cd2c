"""FastAPI adapter – ASGI middleware.

TenantHostMiddleware     resolves the tenant from the ``Host`` header
AccessContextMiddleware  builds the caller's AccessModel from a bearer token
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from schooldesk.kernel.security.access import AccessModel, SessionUser
from schooldesk.kernel.security.access_context import AccessContext
from schooldesk.observability.logging import get_logger
from schooldesk.tenancy.context import CurrentTenant
from schooldesk.tenancy.resolver import TenantResolver

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

logger = get_logger(__name__)

UserLoader = Callable[[str | None], Awaitable[SessionUser | None]]


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'schooldesk[fastapi]' to use the FastAPI adapter"
        ) from exc


class TenantHostMiddleware:
    """Resolve the ``Host`` header through a :class:`TenantResolver` and set
    :class:`CurrentTenant` for the rest of the request.

    Resolution never fails the request; an unknown or unreachable tenant
    yields the fallback state. Log events pick the tenant up through
    :class:`~schooldesk.observability.logging.TenantProcessor`.
    """

    def __init__(self, app: "ASGIApp", resolver: TenantResolver) -> None:
        _require_fastapi()
        self.app = app
        self._resolver = resolver

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        host = headers.get(b"host", b"").decode("latin-1")
        state = await self._resolver.resolve(host)
        token = CurrentTenant.set(state)
        try:
            await self.app(scope, receive, send)
        finally:
            CurrentTenant.reset(token)


class AccessContextMiddleware:
    """Populate :class:`AccessContext` from the request's bearer token.

    Parameters
    ----------
    app:
        The inner ASGI application.
    user_loader:
        ``async (token: str | None) -> SessionUser | None``, typically a call
        to the auth backend's ``/auth/me``. ``None`` means anonymous.

    Loader errors are logged and treated as anonymous so navigation still
    renders (empty) instead of failing the request.
    """

    def __init__(self, app: "ASGIApp", user_loader: UserLoader) -> None:
        _require_fastapi()
        self.app = app
        self._user_loader = user_loader

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        auth_value = headers.get(b"authorization", b"").decode().strip()
        bearer: str | None = None
        if auth_value.lower().startswith("bearer "):
            bearer = auth_value[7:].strip() or None

        try:
            user = await self._user_loader(bearer)
        except Exception as exc:  # noqa: BLE001
            logger.warning("access.user_load_failed", error=repr(exc))
            user = None

        token = AccessContext.set_current(AccessModel.from_user(user))
        try:
            await self.app(scope, receive, send)
        finally:
            AccessContext.reset(token)


__all__ = ["AccessContextMiddleware", "TenantHostMiddleware", "UserLoader"]
