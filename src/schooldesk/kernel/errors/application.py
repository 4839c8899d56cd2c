"""Application-layer errors – auth failures and deadlines."""

from __future__ import annotations

from typing import Any

from schooldesk.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No authenticated user in the current context."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """The current user lacks the required permission(s)."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | tuple[str, ...] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation timed out."""

    default_code = "timeout"


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "TimeoutError",
    "UnauthorizedError",
]
