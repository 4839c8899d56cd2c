"""Tenancy – TenantContext data model and the ambient CurrentTenant holder."""

from __future__ import annotations

import contextlib
import dataclasses
from contextvars import ContextVar, Token
from types import MappingProxyType
from typing import Any, Iterator, Literal, Mapping

AttendanceType = Literal["daily", "period-based"]


@dataclasses.dataclass(frozen=True)
class TenantBranding:
    logo: str = "/logo.png"
    primary_color: str = "#2563eb"
    secondary_color: str = "#1e40af"

    def css_variables(self) -> dict[str, str]:
        """CSS custom properties the shell applies to the document root."""
        return {
            "--tenant-primary": self.primary_color,
            "--tenant-secondary": self.secondary_color,
        }


@dataclasses.dataclass(frozen=True)
class AcademicConfig:
    current_session_id: str = ""
    current_term_id: str = ""
    grading_system: str = "default"
    attendance_type: AttendanceType = "daily"
    promotion_rules: Mapping[str, Any] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclasses.dataclass(frozen=True)
class TenantContext:
    """One school's identity, branding and academic configuration."""

    tenant_id: str = ""
    tenant_slug: str = ""
    school_name: str = "School Management System"
    branding: TenantBranding = dataclasses.field(default_factory=TenantBranding)
    academic_config: AcademicConfig = dataclasses.field(default_factory=AcademicConfig)

    @property
    def is_default(self) -> bool:
        return not self.tenant_id

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TenantContext":
        """Build from the backend's camelCase tenant document.

        Missing keys fall back to the defaults of :data:`DEFAULT_TENANT`.
        """
        branding = payload.get("branding") or {}
        academic = payload.get("academicConfig") or {}
        return cls(
            tenant_id=str(payload.get("tenantId") or ""),
            tenant_slug=str(payload.get("tenantSlug") or ""),
            school_name=payload.get("schoolName") or DEFAULT_TENANT.school_name,
            branding=TenantBranding(
                logo=branding.get("logo", DEFAULT_BRANDING.logo),
                primary_color=branding.get("primaryColor", DEFAULT_BRANDING.primary_color),
                secondary_color=branding.get("secondaryColor", DEFAULT_BRANDING.secondary_color),
            ),
            academic_config=AcademicConfig(
                current_session_id=academic.get("currentSessionId", ""),
                current_term_id=academic.get("currentTermId", ""),
                grading_system=academic.get("gradingSystem", "default"),
                attendance_type=academic.get("attendanceType", "daily"),
                promotion_rules=MappingProxyType(dict(academic.get("promotionRules") or {})),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "tenant_id": self.tenant_id,
            "tenant_slug": self.tenant_slug,
            "school_name": self.school_name,
            "branding": {
                "logo": self.branding.logo,
                "primary_color": self.branding.primary_color,
                "secondary_color": self.branding.secondary_color,
            },
            "academic_config": {
                "current_session_id": self.academic_config.current_session_id,
                "current_term_id": self.academic_config.current_term_id,
                "grading_system": self.academic_config.grading_system,
                "attendance_type": self.academic_config.attendance_type,
                "promotion_rules": dict(self.academic_config.promotion_rules),
            },
        }


DEFAULT_BRANDING = TenantBranding()
DEFAULT_TENANT = TenantContext()


@dataclasses.dataclass(frozen=True)
class TenantState:
    """What UI chrome sees: either still loading, super-admin mode, or a
    resolved tenant. Replaced wholesale, never merged."""

    tenant: TenantContext = DEFAULT_TENANT
    is_loading: bool = True
    is_super_admin: bool = False

    @classmethod
    def loading(cls) -> "TenantState":
        return cls()

    @classmethod
    def super_admin(cls) -> "TenantState":
        return cls(tenant=DEFAULT_TENANT, is_loading=False, is_super_admin=True)

    @classmethod
    def fallback(cls) -> "TenantState":
        """Resolution finished without a tenant; consumers keep the defaults."""
        return cls(tenant=DEFAULT_TENANT, is_loading=False, is_super_admin=False)

    @classmethod
    def resolved(cls, tenant: TenantContext) -> "TenantState":
        return cls(tenant=tenant, is_loading=False, is_super_admin=False)

    @property
    def display_name(self) -> str:
        return "Super Admin" if self.is_super_admin else self.tenant.school_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "tenant": self.tenant.to_dict(),
            "is_loading": self.is_loading,
            "is_super_admin": self.is_super_admin,
            "display_name": self.display_name,
            "css_variables": self.tenant.branding.css_variables(),
        }


_LOADING = TenantState.loading()

_TENANT_STATE_VAR: ContextVar[TenantState | None] = ContextVar(
    "_schooldesk_tenant_state", default=None
)


class CurrentTenant:
    """Ambient tenant state using ``contextvars``.

    ``get()`` never fails: before resolution it returns the loading state.
    """

    @staticmethod
    def set(state: TenantState) -> Token[TenantState | None]:
        return _TENANT_STATE_VAR.set(state)

    @staticmethod
    def get() -> TenantState:
        state = _TENANT_STATE_VAR.get()
        return state if state is not None else _LOADING

    @staticmethod
    def reset(token: Token[TenantState | None]) -> None:
        _TENANT_STATE_VAR.reset(token)

    @staticmethod
    def clear() -> None:
        _TENANT_STATE_VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scoped(state: TenantState) -> Iterator[TenantState]:
        """Set *state* for the duration of the block, restoring the previous
        value on exit, even on error."""
        token = _TENANT_STATE_VAR.set(state)
        try:
            yield state
        finally:
            _TENANT_STATE_VAR.reset(token)


__all__ = [
    "AcademicConfig",
    "AttendanceType",
    "CurrentTenant",
    "DEFAULT_BRANDING",
    "DEFAULT_TENANT",
    "TenantBranding",
    "TenantContext",
    "TenantState",
]
