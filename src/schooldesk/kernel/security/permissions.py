"""Kernel security – static permission vocabulary.

Tokens follow the ``"<module>.<action>"`` convention and are never created at
runtime; everything else in the package references them by value through
:data:`PERMISSIONS`.
"""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Final, Mapping


class PERMISSIONS:
    """Namespace of every registered permission token."""

    # Portal access
    PORTAL_STAFF: Final = "portal.staff"
    PORTAL_GUARDIAN: Final = "portal.guardian"
    PORTAL_STUDENT: Final = "portal.student"
    PORTAL_ADMIN: Final = "portal.admin"

    # Academic scopes
    ACADEMIC_VIEW: Final = "academic.view"
    ACADEMIC_MANAGE: Final = "academic.manage"

    # Finance scopes
    FINANCE_VIEW: Final = "finance.view"
    FINANCE_MANAGE: Final = "finance.manage"

    # Identity & management
    IDENTITY_MANAGE: Final = "identity.manage"
    SYSTEM_SETTINGS: Final = "system.settings"
    COMMUNICATION_SEND: Final = "communication.send"

    # Super admin
    APP_MANAGE: Final = "app.manage"

    @classmethod
    def all(cls) -> frozenset[str]:
        """Return every registered token."""
        return frozenset(
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        )


@dataclasses.dataclass(frozen=True)
class PermissionMeta:
    """Display metadata for a permission token."""

    label: str
    description: str


PERMISSION_META: Mapping[str, PermissionMeta] = MappingProxyType({
    PERMISSIONS.PORTAL_STAFF: PermissionMeta(
        "Staff Portal Access",
        "Basic access to the staff dashboard and core features.",
    ),
    PERMISSIONS.PORTAL_ADMIN: PermissionMeta(
        "Admin Portal Access",
        "Access to the admin portal to manage school data.",
    ),
    PERMISSIONS.PORTAL_GUARDIAN: PermissionMeta(
        "Guardian Portal Access",
        "Access to the parent/guardian portal to view children data.",
    ),
    PERMISSIONS.PORTAL_STUDENT: PermissionMeta(
        "Student Portal Access",
        "Access to the student portal to view personal academic data.",
    ),
    PERMISSIONS.ACADEMIC_VIEW: PermissionMeta(
        "View Academic Data",
        "Can view students, classes, sessions, and academic records.",
    ),
    PERMISSIONS.ACADEMIC_MANAGE: PermissionMeta(
        "Manage Academics",
        "Can create and edit classes, sessions, and student profiles.",
    ),
    PERMISSIONS.FINANCE_VIEW: PermissionMeta(
        "View Finance",
        "Can view fee structures, invoices, and payments.",
    ),
    PERMISSIONS.FINANCE_MANAGE: PermissionMeta(
        "Manage Finance",
        "Can configure fees and manage school revenue.",
    ),
    PERMISSIONS.IDENTITY_MANAGE: PermissionMeta(
        "Manage Identity",
        "Can manage staff, users, roles, and permissions.",
    ),
    PERMISSIONS.SYSTEM_SETTINGS: PermissionMeta(
        "System Settings",
        "Can update school profile, branding, and system configs.",
    ),
    PERMISSIONS.COMMUNICATION_SEND: PermissionMeta(
        "Send Communication",
        "Can send school-wide broadcast messages and notifications.",
    ),
})


@dataclasses.dataclass(frozen=True)
class PermissionGroup:
    """Named grouping of tokens, used by role editors to lay out a picker."""

    name: str
    permissions: tuple[str, ...]


PERMISSION_GROUPS: tuple[PermissionGroup, ...] = (
    PermissionGroup(
        "Portals",
        (
            PERMISSIONS.PORTAL_STAFF,
            PERMISSIONS.PORTAL_GUARDIAN,
            PERMISSIONS.PORTAL_STUDENT,
            PERMISSIONS.PORTAL_ADMIN,
        ),
    ),
    PermissionGroup("Academic", (PERMISSIONS.ACADEMIC_VIEW, PERMISSIONS.ACADEMIC_MANAGE)),
    PermissionGroup("Finance", (PERMISSIONS.FINANCE_VIEW, PERMISSIONS.FINANCE_MANAGE)),
    PermissionGroup(
        "Identity & System",
        (
            PERMISSIONS.IDENTITY_MANAGE,
            PERMISSIONS.SYSTEM_SETTINGS,
            PERMISSIONS.COMMUNICATION_SEND,
        ),
    ),
)


def describe_permission(token: str) -> PermissionMeta:
    """Return display metadata for *token*.

    Unregistered tokens are inert rather than invalid, so they get the raw
    token as label and an empty description.
    """
    meta = PERMISSION_META.get(token)
    if meta is None:
        return PermissionMeta(label=token, description="")
    return meta


def is_registered(token: str) -> bool:
    return token in PERMISSIONS.all()


# Named shortcuts mirroring the dashboard's permission hook. A plain string is
# checked on its own; a tuple is an any-of requirement.
CAPABILITIES: Mapping[str, str | tuple[str, ...]] = MappingProxyType({
    "view_dashboard": (
        PERMISSIONS.PORTAL_STAFF,
        PERMISSIONS.PORTAL_STUDENT,
        PERMISSIONS.PORTAL_GUARDIAN,
    ),
    "manage_students": PERMISSIONS.ACADEMIC_MANAGE,
    "view_students": PERMISSIONS.ACADEMIC_VIEW,
    "manage_staff": PERMISSIONS.IDENTITY_MANAGE,
    "view_staff": PERMISSIONS.IDENTITY_MANAGE,
    "manage_academics": PERMISSIONS.ACADEMIC_MANAGE,
    "view_academics": PERMISSIONS.ACADEMIC_VIEW,
    "manage_assessments": PERMISSIONS.ACADEMIC_MANAGE,
    "view_assessments": PERMISSIONS.ACADEMIC_VIEW,
    "publish_results": PERMISSIONS.ACADEMIC_MANAGE,
    "view_results": (
        PERMISSIONS.ACADEMIC_VIEW,
        PERMISSIONS.PORTAL_STUDENT,
        PERMISSIONS.PORTAL_GUARDIAN,
    ),
    "manage_finance": PERMISSIONS.FINANCE_MANAGE,
    "view_finance": (PERMISSIONS.FINANCE_VIEW, PERMISSIONS.PORTAL_GUARDIAN),
    "manage_attendance": PERMISSIONS.ACADEMIC_MANAGE,
    "view_attendance": (
        PERMISSIONS.ACADEMIC_VIEW,
        PERMISSIONS.PORTAL_STUDENT,
        PERMISSIONS.PORTAL_GUARDIAN,
    ),
    "send_communications": PERMISSIONS.COMMUNICATION_SEND,
    "view_communications": (PERMISSIONS.COMMUNICATION_SEND, PERMISSIONS.PORTAL_GUARDIAN),
    "export_reports": PERMISSIONS.ACADEMIC_VIEW,
    "view_reports": PERMISSIONS.ACADEMIC_VIEW,
    "manage_settings": PERMISSIONS.SYSTEM_SETTINGS,
    "view_settings": PERMISSIONS.SYSTEM_SETTINGS,
    "manage_tenants": PERMISSIONS.SYSTEM_SETTINGS,
    "view_tenants": PERMISSIONS.SYSTEM_SETTINGS,
    "manage_system": PERMISSIONS.SYSTEM_SETTINGS,
    "view_audit": PERMISSIONS.SYSTEM_SETTINGS,
})


__all__ = [
    "CAPABILITIES",
    "PERMISSIONS",
    "PERMISSION_GROUPS",
    "PERMISSION_META",
    "PermissionGroup",
    "PermissionMeta",
    "describe_permission",
    "is_registered",
]
