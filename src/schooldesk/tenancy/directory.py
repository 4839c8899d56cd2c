"""Tenancy – TenantDirectory port and in-process implementations."""
from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol

from schooldesk.kernel.errors import NotFoundError
from schooldesk.tenancy.context import AcademicConfig, TenantBranding, TenantContext

if TYPE_CHECKING:
    from schooldesk.config.settings import SchoolDeskSettings


class TenantDirectory(Protocol):
    """Port: turns a tenant slug into a full :class:`TenantContext`."""

    async def lookup(self, slug: str) -> TenantContext: ...


class MockTenantDirectory:
    """Offline directory that fabricates a tenant for any slug.

    Stands in for the backend until a tenant API is configured:
    ``acme`` becomes ``tenant-acme`` / "Acme International School" on the
    2024-2025 session, first term.
    """

    async def lookup(self, slug: str) -> TenantContext:
        return TenantContext(
            tenant_id=f"tenant-{slug}",
            tenant_slug=slug,
            school_name=f"{slug[:1].upper()}{slug[1:]} International School",
            branding=TenantBranding(),
            academic_config=AcademicConfig(
                current_session_id="session-2024-2025",
                current_term_id="term-1",
            ),
        )


class InMemoryTenantDirectory:
    """Explicit slug → tenant mapping. Unknown slugs raise ``NotFoundError``."""

    def __init__(self, tenants: Mapping[str, TenantContext] | None = None) -> None:
        self._tenants: dict[str, TenantContext] = dict(tenants or {})

    def add(self, tenant: TenantContext) -> None:
        self._tenants[tenant.tenant_slug] = tenant

    async def lookup(self, slug: str) -> TenantContext:
        try:
            return self._tenants[slug]
        except KeyError:
            raise NotFoundError("Tenant", slug) from None


def build_tenant_directory(settings: SchoolDeskSettings) -> TenantDirectory:
    """Pick the HTTP directory when a tenant API is configured, else the mock."""
    if settings.tenant_api_base_url:
        from schooldesk.adapters.http.tenant_directory import HttpTenantDirectory

        return HttpTenantDirectory(
            base_url=settings.tenant_api_base_url,
            timeout=settings.tenant_resolution_timeout_seconds,
        )
    return MockTenantDirectory()


__all__ = [
    "InMemoryTenantDirectory",
    "MockTenantDirectory",
    "TenantDirectory",
    "build_tenant_directory",
]
