"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

from es_commons.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """Offset-based page of results with computed navigation properties.

    ``total`` is the number of matches across all pages, not ``len(items)``.
    """

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    @classmethod
    def of(cls, items: list[T], total: int, request: PageRequest) -> "Page[T]":
        """Build a :class:`Page` for *request* from one window of results."""
        return cls(items=list(items), total=total, page=request.page, size=request.size)

    @classmethod
    def empty(cls, request: PageRequest) -> "Page[T]":
        return cls(items=[], total=0, page=request.page, size=request.size)


__all__ = ["Page"]
