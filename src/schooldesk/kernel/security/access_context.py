"""Kernel security – AccessContext using contextvars."""

from __future__ import annotations

import contextvars

from schooldesk.kernel.errors import UnauthorizedError
from schooldesk.kernel.security.access import AccessModel

_VAR: contextvars.ContextVar[AccessModel | None] = contextvars.ContextVar(
    "_access_context", default=None
)


class AccessContext:
    """Store and retrieve the current :class:`AccessModel` via
    :mod:`contextvars` so each asyncio task has its own isolated context."""

    @staticmethod
    def get_current() -> AccessModel | None:
        """Return the current access model, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(access: AccessModel) -> contextvars.Token[AccessModel | None]:
        """Set the current access model and return a reset token."""
        return _VAR.set(access)

    @staticmethod
    def reset(token: contextvars.Token[AccessModel | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Discard the current access model (logout)."""
        _VAR.set(None)

    @staticmethod
    def require() -> AccessModel:
        """Return the current access model or raise ``UnauthorizedError``."""
        access = _VAR.get()
        if access is None:
            raise UnauthorizedError("No authenticated user in context")
        return access


__all__ = ["AccessContext"]
