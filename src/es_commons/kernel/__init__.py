"""Kernel – framework-agnostic errors, result type and clock."""

from es_commons.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    InvalidSortFieldError,
    SerializationError,
    ValidationError,
)
from es_commons.kernel.types import Err, Ok, Result

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "Err",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidSortFieldError",
    "Ok",
    "Result",
    "SerializationError",
    "ValidationError",
]
