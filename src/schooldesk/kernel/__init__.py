"""Kernel – framework-agnostic errors and access control."""

from schooldesk.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    TenantResolutionError,
    TimeoutError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "ForbiddenError",
    "InfrastructureError",
    "NotFoundError",
    "TenantResolutionError",
    "TimeoutError",
    "UnauthorizedError",
    "ValidationError",
]
