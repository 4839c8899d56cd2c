"""Kernel security – SessionUser and AccessModel.

The auth collaborator hands us a :class:`SessionUser`; everything that needs a
yes/no answer about the caller works against the immutable
:class:`AccessModel` derived from it.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Iterable, Mapping

from schooldesk.kernel.security.permissions import CAPABILITIES


class RoleTag(str, enum.Enum):
    """Closed set of role classifications."""

    SUPER_ADMIN = "super-admin"
    SCHOOL_ADMIN = "school-admin"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"
    FINANCE_OFFICER = "finance-officer"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def parse(cls, raw: str | None) -> "RoleTag":
        """Map a server-supplied role string onto the enum.

        Matching ignores case and treats ``_`` like ``-``; anything else is
        :attr:`UNCLASSIFIED`.
        """
        if not raw:
            return cls.UNCLASSIFIED
        normalised = raw.strip().lower().replace("_", "-")
        try:
            return cls(normalised)
        except ValueError:
            return cls.UNCLASSIFIED

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class SessionUser:
    """Authenticated user as returned by the auth backend (``/auth/me``)."""

    id: str
    role: str
    permissions: tuple[str, ...] = ()
    is_system: bool = False
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    is_active: bool = True
    tenant_name: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SessionUser":
        """Build from the camelCase JSON shape used by the backend."""
        tenant_users = payload.get("tenantUsers") or []
        tenant_name: str | None = None
        if tenant_users:
            tenant_name = (tenant_users[0].get("tenant") or {}).get("name")
        return cls(
            id=str(payload.get("id", "")),
            role=str(payload.get("role", "")),
            permissions=tuple(payload.get("permissions") or ()),
            is_system=bool(payload.get("isSystem", False)),
            email=payload.get("email", ""),
            first_name=payload.get("firstName", ""),
            last_name=payload.get("lastName", ""),
            is_active=bool(payload.get("isActive", True)),
            tenant_name=tenant_name,
        )


@dataclasses.dataclass(frozen=True)
class AccessModel:
    """Immutable permission/role snapshot for one authenticated session.

    ``is_system_user`` holders pass every permission check, including checks
    for tokens absent from ``permissions``.
    """

    role: RoleTag = RoleTag.UNCLASSIFIED
    permissions: frozenset[str] = frozenset()
    is_system_user: bool = False

    @classmethod
    def from_user(
        cls,
        user: SessionUser | None,
        permissions: Iterable[str] | None = None,
    ) -> "AccessModel":
        """Derive the access model for *user*.

        An explicit *permissions* list takes precedence over the user's own,
        which lets a tenant-scoped permission set replace the global one.
        """
        if user is None:
            return cls.anonymous()
        granted = permissions if permissions is not None else user.permissions
        return cls(
            role=RoleTag.parse(user.role),
            permissions=frozenset(granted),
            is_system_user=user.is_system,
        )

    @classmethod
    def anonymous(cls) -> "AccessModel":
        return cls()

    def has_permission(self, token: str) -> bool:
        return self.is_system_user or token in self.permissions

    def has_any_permission(self, tokens: Iterable[str]) -> bool:
        """True when at least one of *tokens* is held.

        An empty *tokens* is False for non-system users: the any-of over
        nothing is never satisfied.
        """
        if self.is_system_user:
            return True
        return not self.permissions.isdisjoint(tokens)

    def has_all_permissions(self, tokens: Iterable[str]) -> bool:
        if self.is_system_user:
            return True
        return self.permissions.issuperset(tokens)

    def is_role(self, role: RoleTag | str) -> bool:
        tag = role if isinstance(role, RoleTag) else RoleTag.parse(role)
        return self.role is tag

    def can(self, capability: str) -> bool:
        """Evaluate a named shortcut from :data:`CAPABILITIES`.

        Raises ``KeyError`` for an unknown capability name.
        """
        requirement = CAPABILITIES[capability]
        if isinstance(requirement, str):
            return self.has_permission(requirement)
        return self.has_any_permission(requirement)


__all__ = ["AccessModel", "RoleTag", "SessionUser"]
