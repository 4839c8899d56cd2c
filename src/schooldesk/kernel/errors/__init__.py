"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    │   ├── UnauthorizedError
    │   ├── ForbiddenError
    │   └── TimeoutError
    └── InfrastructureError  (infrastructure.py)
        ├── ExternalServiceError
        └── TenantResolutionError
"""

from schooldesk.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    TimeoutError,
    UnauthorizedError,
)
from schooldesk.kernel.errors.base import BaseError
from schooldesk.kernel.errors.domain import DomainError, NotFoundError, ValidationError
from schooldesk.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TenantResolutionError,
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
