"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidSortFieldError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (es_commons.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        └── ExternalServiceError
"""

from es_commons.kernel.errors.application import ApplicationError
from es_commons.kernel.errors.base import BaseError
from es_commons.kernel.errors.domain import (
    DomainError,
    InvalidSortFieldError,
    ValidationError,
)
from es_commons.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidSortFieldError",
    "SerializationError",
    "ValidationError",
]
