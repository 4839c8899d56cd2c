"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from schooldesk.kernel.errors import (
    BaseError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    TimeoutError,
    UnauthorizedError,
    ValidationError,
)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'schooldesk[fastapi]' to use the FastAPI adapter"
        ) from exc


class FastAPIExceptionMapper:
    """Register schooldesk error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "forbidden", "message": "...", "detail": {}, "tenant_slug": "..."}

    Mappings
    --------
    ``ValidationError``     → 400
    ``NotFoundError``       → 404
    ``UnauthorizedError``   → 401
    ``ForbiddenError``      → 403
    ``TimeoutError``        → 504
    ``InfrastructureError`` → 503
    ``DomainError``         → 422
    """

    def __init__(self) -> None:
        _require_fastapi()
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (UnauthorizedError, 401),
            (ForbiddenError, 403),
            (TimeoutError, 504),
            (InfrastructureError, 503),
            (DomainError, 422),
        ]

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        from schooldesk.tenancy.context import CurrentTenant

        def make_handler(code: int) -> Callable[[Any, Any], Any]:
            async def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                if isinstance(exc, BaseError):
                    body = exc.to_dict()
                else:
                    body = {"code": "error", "message": str(exc)}
                if isinstance(exc, ForbiddenError) and exc.permission is not None:
                    body["permission"] = exc.permission
                body["tenant_slug"] = CurrentTenant.get().tenant.tenant_slug or None
                return JSONResponse(status_code=code, content=body)

            return handler

        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
