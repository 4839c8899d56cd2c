"""Navigation – audience classification.

First match wins:

1. ``portal.guardian``                    → parent
2. ``portal.student``                     → student
3. ``portal.staff`` or ``portal.admin``   → staff
4. system user                            → super-admin
5. otherwise                              → ``None`` (no navigation)

Rules 1-3 look at the granted permission set only, so the system-user bypass
never drags a system user into the parent or student portal. A system user
holding a staff portal permission lands on the staff catalog.
"""
from __future__ import annotations

from schooldesk.kernel.security.access import AccessModel
from schooldesk.kernel.security.permissions import PERMISSIONS
from schooldesk.navigation.model import Audience

_STAFF_PORTALS = frozenset({PERMISSIONS.PORTAL_STAFF, PERMISSIONS.PORTAL_ADMIN})


def classify_audience(access: AccessModel) -> Audience | None:
    granted = access.permissions
    if PERMISSIONS.PORTAL_GUARDIAN in granted:
        return Audience.PARENT
    if PERMISSIONS.PORTAL_STUDENT in granted:
        return Audience.STUDENT
    if not _STAFF_PORTALS.isdisjoint(granted):
        return Audience.STAFF
    if access.is_system_user:
        return Audience.SUPER_ADMIN
    return None


__all__ = ["classify_audience"]
