"""Unit tests for the FastAPI adapter: middleware, shell router, error mapping."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from schooldesk.adapters.fastapi import (
    AccessContextMiddleware,
    FastAPIExceptionMapper,
    NavigationRouter,
    TenantHostMiddleware,
    create_app,
)
from schooldesk.config import SchoolDeskSettings
from schooldesk.kernel.errors import ExternalServiceError, NotFoundError
from schooldesk.kernel.errors import TimeoutError as AppTimeoutError
from schooldesk.kernel.security import (
    PERMISSIONS,
    AccessContext,
    AccessModel,
    SessionUser,
    require_permission,
)
from schooldesk.observability import TenantProcessor
from schooldesk.tenancy import (
    CurrentTenant,
    InMemoryTenantDirectory,
    MockTenantDirectory,
    TenantContext,
    TenantResolver,
)

TENANT_HOST = "http://greenfield.schooldesk.io"
SYSTEM_HOST = "http://app.schooldesk.io"

_USERS = {
    "teacher": SessionUser(
        id="1",
        role="teacher",
        permissions=(PERMISSIONS.PORTAL_STAFF, PERMISSIONS.ACADEMIC_VIEW),
    ),
    "guardian": SessionUser(id="2", role="parent", permissions=(PERMISSIONS.PORTAL_GUARDIAN,)),
    "root": SessionUser(id="3", role="super-admin", is_system=True),
}


async def _load_user(token: str | None) -> SessionUser | None:
    if token == "boom":
        raise RuntimeError("auth backend down")
    return _USERS.get(token) if token else None


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _app(**router_kwargs: Any) -> FastAPI:
    app = FastAPI()
    app.include_router(NavigationRouter(**router_kwargs))
    FastAPIExceptionMapper().register(app)
    app.add_middleware(AccessContextMiddleware, user_loader=_load_user)
    app.add_middleware(TenantHostMiddleware, resolver=TenantResolver(MockTenantDirectory()))

    @app.get("/ledger")
    @require_permission(PERMISSIONS.FINANCE_MANAGE)
    async def ledger() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/whoami")
    async def whoami() -> dict[str, Any]:
        access = AccessContext.get_current()
        return {
            "role": str(access.role) if access else None,
            "tenant": CurrentTenant.get().tenant.tenant_slug,
        }

    @app.get("/missing")
    async def missing() -> None:
        raise NotFoundError("Student", "s-9")

    @app.get("/slow")
    async def slow() -> None:
        raise AppTimeoutError("report generation timed out")

    @app.get("/backend")
    async def backend() -> None:
        raise ExternalServiceError("tenant-api", status_code=502)

    return app


# ---------------------------------------------------------------------------
# TenantHostMiddleware
# ---------------------------------------------------------------------------


class TestTenantHostMiddleware:
    def test_tenant_resolved_from_host(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        body = client.get("/tenant").json()
        assert body["is_loading"] is False
        assert body["is_super_admin"] is False
        assert body["tenant"]["tenant_slug"] == "greenfield"
        assert body["display_name"] == "Greenfield International School"
        assert body["css_variables"]["--tenant-primary"] == "#2563eb"

    def test_system_host_is_super_admin(self) -> None:
        client = TestClient(_app(), base_url=SYSTEM_HOST)
        body = client.get("/tenant").json()
        assert body["is_super_admin"] is True
        assert body["display_name"] == "Super Admin"

    def test_unresolvable_host_gets_defaults(self) -> None:
        client = TestClient(_app())
        body = client.get("/tenant").json()
        assert body["is_loading"] is False
        assert body["tenant"]["school_name"] == "School Management System"

    def test_tenant_reaches_logs_through_processor_only(self) -> None:
        app = _app()

        @app.get("/log-context")
        async def log_context() -> dict[str, Any]:
            return {
                "bound": structlog.contextvars.get_contextvars(),
                "event": TenantProcessor()(None, "info", {"event": "x"}),
            }

        body = TestClient(app, base_url=TENANT_HOST).get("/log-context").json()
        assert "tenant_slug" not in body["bound"]
        assert "super_admin" not in body["bound"]
        assert body["event"]["tenant_slug"] == "greenfield"

    def test_context_reset_after_request(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        client.get("/tenant")
        assert CurrentTenant.get().tenant.tenant_slug != "greenfield"


# ---------------------------------------------------------------------------
# AccessContextMiddleware
# ---------------------------------------------------------------------------


class TestAccessContextMiddleware:
    def test_bearer_token_loads_user(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        assert client.get("/whoami", headers=_auth("teacher")).json() == {
            "role": "teacher",
            "tenant": "greenfield",
        }

    def test_no_token_is_anonymous(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        assert client.get("/whoami").json()["role"] == "unclassified"

    def test_loader_failure_is_anonymous(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        response = client.get("/whoami", headers=_auth("boom"))
        assert response.status_code == 200
        assert response.json()["role"] == "unclassified"

    def test_non_bearer_scheme_ignored(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        response = client.get("/whoami", headers={"Authorization": "Basic dGVhY2hlcg=="})
        assert response.json()["role"] == "unclassified"


# ---------------------------------------------------------------------------
# NavigationRouter
# ---------------------------------------------------------------------------


class TestNavigationRouter:
    def test_teacher_navigation(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        body = client.get("/navigation", headers=_auth("teacher")).json()
        assert body["audience"] == "staff"
        assert [s["title"] for s in body["sections"]] == [
            "Overview",
            "People",
            "Academics",
            "Communication",
            "Reports",
        ]

    def test_guardian_navigation(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        body = client.get("/navigation", headers=_auth("guardian")).json()
        assert body["audience"] == "parent"
        assert body["sections"][0]["items"][0] == {
            "title": "Dashboard",
            "destination": "/parent",
            "icon": "layout-dashboard",
        }

    def test_system_user_navigation(self) -> None:
        client = TestClient(_app(), base_url=SYSTEM_HOST)
        body = client.get("/navigation", headers=_auth("root")).json()
        assert body["audience"] == "super-admin"

    def test_anonymous_gets_empty_navigation(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        assert client.get("/navigation").json() == {"audience": None, "sections": []}

    def test_badges(self) -> None:
        async def badges(access: AccessModel) -> dict[str, int]:
            return {"/parent/messages": 2}

        client = TestClient(_app(badge_provider=badges), base_url=TENANT_HOST)
        body = client.get("/navigation", headers=_auth("guardian")).json()
        messages = body["sections"][3]["items"][0]
        assert messages["destination"] == "/parent/messages"
        assert messages["badge_count"] == 2

    def test_prefix(self) -> None:
        app = FastAPI()
        app.include_router(NavigationRouter(prefix="/shell"))
        assert TestClient(app).get("/shell/permissions").status_code == 200

    def test_permissions_registry(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        groups = client.get("/permissions").json()
        assert [g["name"] for g in groups] == ["Portals", "Academic", "Finance", "Identity & System"]
        finance = groups[2]["permissions"]
        assert finance[1] == {
            "token": "finance.manage",
            "label": "Manage Finance",
            "description": "Can configure fees and manage school revenue.",
        }


# ---------------------------------------------------------------------------
# FastAPIExceptionMapper
# ---------------------------------------------------------------------------


class TestFastAPIExceptionMapper:
    def test_anonymous_is_forbidden_not_unauthorized(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        response = client.get("/ledger")
        assert response.status_code == 403

    def test_forbidden_body(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        response = client.get("/ledger", headers=_auth("teacher"))
        assert response.status_code == 403
        body = response.json()
        assert body["code"] == "forbidden"
        assert body["permission"] == "finance.manage"
        assert body["tenant_slug"] == "greenfield"

    def test_system_user_allowed(self) -> None:
        client = TestClient(_app(), base_url=SYSTEM_HOST)
        response = client.get("/ledger", headers=_auth("root"))
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_not_found(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        response = client.get("/missing")
        assert response.status_code == 404
        assert response.json()["message"] == "Student 's-9' not found"

    def test_timeout(self) -> None:
        client = TestClient(_app(), base_url=TENANT_HOST)
        assert client.get("/slow").status_code == 504

    def test_infrastructure(self) -> None:
        client = TestClient(_app(), base_url=SYSTEM_HOST)
        response = client.get("/backend")
        assert response.status_code == 503
        assert response.json()["tenant_slug"] is None


# ---------------------------------------------------------------------------
# create_app
# ---------------------------------------------------------------------------


class TestCreateApp:
    def test_wires_mock_directory_by_default(self) -> None:
        app = create_app(_load_user, SchoolDeskSettings(), configure_logging=False)
        client = TestClient(app, base_url=TENANT_HOST)
        assert client.get("/tenant").json()["tenant"]["tenant_id"] == "tenant-greenfield"
        assert client.get("/navigation", headers=_auth("teacher")).json()["audience"] == "staff"

    def test_custom_directory_and_system_subdomain(self) -> None:
        directory = InMemoryTenantDirectory(
            {"oak": TenantContext(tenant_id="t-oak", tenant_slug="oak", school_name="Oak Hill")}
        )
        app = create_app(
            _load_user,
            SchoolDeskSettings(system_subdomain="console"),
            directory=directory,
            configure_logging=False,
        )
        assert TestClient(app, base_url="http://oak.schooldesk.io").get("/tenant").json()[
            "display_name"
        ] == "Oak Hill"
        assert TestClient(app, base_url="http://console.schooldesk.io").get("/tenant").json()[
            "is_super_admin"
        ] is True
        unknown = TestClient(app, base_url="http://ghost.schooldesk.io").get("/tenant").json()
        assert unknown["tenant"]["school_name"] == "School Management System"

    def test_anonymous_gets_empty_navigation(self) -> None:
        app = create_app(_load_user, SchoolDeskSettings(), configure_logging=False)
        client = TestClient(app, base_url=TENANT_HOST)
        response = client.get("/navigation")
        assert response.status_code == 200
        assert response.json()["sections"] == []
