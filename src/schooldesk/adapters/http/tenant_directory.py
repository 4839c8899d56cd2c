"""HTTP adapter – HttpTenantDirectory."""
from __future__ import annotations

import dataclasses

from schooldesk.adapters.http.client import HttpxHttpClient
from schooldesk.kernel.errors import ExternalServiceError, NotFoundError
from schooldesk.tenancy.context import TenantContext


class HttpTenantDirectory:
    """Looks tenants up at ``GET {base_url}/tenant/{slug}``.

    A 404 becomes ``NotFoundError``; other failures surface as
    ``ExternalServiceError`` or ``TimeoutError`` from the client. The payload
    is the backend's camelCase tenant document.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        client: HttpxHttpClient | None = None,
    ) -> None:
        self._client = client or HttpxHttpClient(base_url=base_url.rstrip("/"), timeout=timeout)

    async def lookup(self, slug: str) -> TenantContext:
        try:
            response = await self._client.get(f"/tenant/{slug}")
        except ExternalServiceError as exc:
            if exc.status_code == 404:
                raise NotFoundError("Tenant", slug, cause=exc) from exc
            raise
        payload = response.json()
        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            payload = payload["data"]
        tenant = TenantContext.from_payload(payload)
        if not tenant.tenant_slug:
            tenant = dataclasses.replace(tenant, tenant_slug=slug)
        return tenant

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["HttpTenantDirectory"]
