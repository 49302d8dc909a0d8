"""Application pagination – PageRequest, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @property
    def es_order(self) -> str:
        """Lower-case order keyword understood by the search engine."""
        return self.value.lower()


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters (1-based page number)."""
    page: int = 1
    size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.size < 1 or self.size > 1000:
            raise ValueError("size must be between 1 and 1000")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size


__all__ = ["PageRequest", "SortDirection"]
