"""Domain errors — invalid query conditions and sort requests."""

from __future__ import annotations

import json
from typing import Any, Iterable

from es_commons.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query condition violates a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidSortFieldError(ValidationError):
    """A requested sort field is not declared as sortable.

    The message lists every allowed name so callers can fix the request
    without reading the source.
    """

    default_code = "invalid_sort_field"

    def __init__(self, field: Any, allowed: Iterable[str], **kwargs: Any) -> None:
        allowed_names = list(allowed)
        super().__init__(
            f"Unknown sort field {field!r}; allowed sort fields: {json.dumps(allowed_names)}",
            detail={"field": field, "allowed": allowed_names},
            errors=[{"field": "sorts", "value": field, "allowed": allowed_names}],
            **kwargs,
        )
        self.field = field
        self.allowed = allowed_names


__all__ = [
    "DomainError",
    "InvalidSortFieldError",
    "ValidationError",
]
