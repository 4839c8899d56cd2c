"""Kernel security – permission registry, AccessModel, AccessContext, gates."""
from schooldesk.kernel.security.permissions import (
    CAPABILITIES,
    PERMISSION_GROUPS,
    PERMISSION_META,
    PERMISSIONS,
    PermissionGroup,
    PermissionMeta,
    describe_permission,
    is_registered,
)
from schooldesk.kernel.security.access import AccessModel, RoleTag, SessionUser
from schooldesk.kernel.security.access_context import AccessContext
from schooldesk.kernel.security.gate import (
    EMPTY_REQUIREMENT_IS_OPEN,
    GateMode,
    Requirement,
    check_requirement,
    normalise_requirement,
    permission_gate,
    require_permission,
)

__all__ = [
    "AccessContext",
    "AccessModel",
    "CAPABILITIES",
    "EMPTY_REQUIREMENT_IS_OPEN",
    "GateMode",
    "PERMISSIONS",
    "PERMISSION_GROUPS",
    "PERMISSION_META",
    "PermissionGroup",
    "PermissionMeta",
    "Requirement",
    "RoleTag",
    "SessionUser",
    "check_requirement",
    "describe_permission",
    "is_registered",
    "normalise_requirement",
    "permission_gate",
    "require_permission",
]
