"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class TenantProcessor:
    """structlog processor that injects the active tenant from
    :class:`~schooldesk.tenancy.context.CurrentTenant`.

    Adds ``tenant_slug`` when a tenant is resolved and ``super_admin=True`` in
    super-admin mode. Nothing is added while resolution is still pending.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from schooldesk.tenancy.context import CurrentTenant

        state = CurrentTenant.get()
        if state.is_super_admin:
            event_dict.setdefault("super_admin", True)
        elif state.tenant.tenant_slug:
            event_dict.setdefault("tenant_slug", state.tenant.tenant_slug)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["TenantProcessor", "get_logger"]
