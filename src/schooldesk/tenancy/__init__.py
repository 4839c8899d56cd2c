"""Tenancy – tenant data model, directories and host-based resolution."""
from schooldesk.tenancy.context import (
    DEFAULT_TENANT,
    AcademicConfig,
    CurrentTenant,
    TenantBranding,
    TenantContext,
    TenantState,
)
from schooldesk.tenancy.directory import (
    InMemoryTenantDirectory,
    MockTenantDirectory,
    TenantDirectory,
    build_tenant_directory,
)
from schooldesk.tenancy.resolver import HostResolution, TenantResolver, parse_host

__all__ = [
    "AcademicConfig",
    "CurrentTenant",
    "DEFAULT_TENANT",
    "HostResolution",
    "InMemoryTenantDirectory",
    "MockTenantDirectory",
    "TenantBranding",
    "TenantContext",
    "TenantDirectory",
    "TenantResolver",
    "TenantState",
    "build_tenant_directory",
    "parse_host",
]
