"""Infrastructure errors – failures of the tenant backend and other I/O."""

from __future__ import annotations

from typing import Any

from schooldesk.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class TenantResolutionError(InfrastructureError):
    """A tenant slug could not be turned into a TenantContext."""

    default_code = "tenant_resolution_failed"

    def __init__(self, slug: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not resolve tenant '{slug}'", **kwargs)
        self.slug = slug


__all__ = ["ExternalServiceError", "InfrastructureError", "TenantResolutionError"]
