"""Testing – pytest fixtures for the ambient access and tenant contexts.

Enable in a ``conftest.py``::

    pytest_plugins = ["schooldesk.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from schooldesk.kernel.security.access import AccessModel, RoleTag
from schooldesk.kernel.security.access_context import AccessContext
from schooldesk.kernel.security.permissions import PERMISSIONS
from schooldesk.tenancy.context import CurrentTenant, TenantContext, TenantState


@pytest.fixture
def staff_access() -> AccessModel:
    """A teacher with staff-portal access and read-only academics."""
    return AccessModel(
        role=RoleTag.TEACHER,
        permissions=frozenset({PERMISSIONS.PORTAL_STAFF, PERMISSIONS.ACADEMIC_VIEW}),
    )


@pytest.fixture
def access_context(staff_access: AccessModel):
    """Set *staff_access* as the current :class:`AccessContext` for the test.

    Override ``staff_access`` in a test module to install a different model.
    """
    token = AccessContext.set_current(staff_access)
    yield staff_access
    AccessContext.reset(token)


@pytest.fixture
def tenant_state():
    """Install a resolved ``greenfield`` tenant as :class:`CurrentTenant`."""
    state = TenantState.resolved(
        TenantContext(
            tenant_id="tenant-greenfield",
            tenant_slug="greenfield",
            school_name="Greenfield International School",
        )
    )
    with CurrentTenant.scoped(state):
        yield state


__all__ = ["access_context", "staff_access", "tenant_state"]
