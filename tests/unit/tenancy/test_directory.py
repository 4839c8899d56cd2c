"""Unit tests for the in-process tenant directories."""

from __future__ import annotations

import asyncio

import pytest

from schooldesk.adapters.http import HttpTenantDirectory
from schooldesk.config import SchoolDeskSettings
from schooldesk.kernel.errors import NotFoundError
from schooldesk.tenancy import (
    InMemoryTenantDirectory,
    MockTenantDirectory,
    TenantContext,
    build_tenant_directory,
)


class TestMockTenantDirectory:
    def test_fabricates_tenant(self) -> None:
        tenant = asyncio.run(MockTenantDirectory().lookup("greenfield"))
        assert tenant.tenant_id == "tenant-greenfield"
        assert tenant.tenant_slug == "greenfield"
        assert tenant.school_name == "Greenfield International School"
        assert tenant.academic_config.current_session_id == "session-2024-2025"
        assert tenant.academic_config.current_term_id == "term-1"


class TestInMemoryTenantDirectory:
    def test_lookup_known(self) -> None:
        tenant = TenantContext(tenant_id="t-1", tenant_slug="acme")
        directory = InMemoryTenantDirectory({"acme": tenant})
        assert asyncio.run(directory.lookup("acme")) is tenant

    def test_add(self) -> None:
        directory = InMemoryTenantDirectory()
        tenant = TenantContext(tenant_id="t-2", tenant_slug="oak")
        directory.add(tenant)
        assert asyncio.run(directory.lookup("oak")) is tenant

    def test_unknown_raises_not_found(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            asyncio.run(InMemoryTenantDirectory().lookup("ghost"))
        assert exc_info.value.identifier == "ghost"


class TestBuildTenantDirectory:
    def test_mock_without_base_url(self) -> None:
        assert isinstance(build_tenant_directory(SchoolDeskSettings()), MockTenantDirectory)

    def test_http_with_base_url(self) -> None:
        directory = build_tenant_directory(
            SchoolDeskSettings(tenant_api_base_url="https://api.schooldesk.test")
        )
        assert isinstance(directory, HttpTenantDirectory)
        asyncio.run(directory.aclose())
