"""Elasticsearch adapter – sort descriptors.

Every query-condition type declares the fields it can be sorted on as a
:class:`SortableField` enum. Members carry their Elasticsearch field name and
pre-compute ascending and descending :class:`Sorts` once, when the enum class
is created. Incoming :class:`Order` requests are resolved by member *name*::

    class ArticleOrderBy(SortableField):
        published = "publishedAt"

    resolve_sorts(ArticleOrderBy, [Order("published", SortDirection.DESC)])
    # -> [Sorts(field='publishedAt', direction=DESC)]
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterable

from es_commons.application.pagination import SortDirection
from es_commons.kernel.errors import InvalidSortFieldError


@dataclasses.dataclass(frozen=True)
class Sorts:
    """A compiled sort instruction on one document field."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def asc(cls, field: str) -> "Sorts":
        return cls(field, SortDirection.ASC)

    @classmethod
    def desc(cls, field: str) -> "Sorts":
        return cls(field, SortDirection.DESC)

    @property
    def es_sort(self) -> dict[str, Any]:
        return {self.field: {"order": self.direction.es_order}}


@dataclasses.dataclass(frozen=True)
class Order:
    """A caller's sort request: symbolic field name plus direction."""

    name: str
    direction: SortDirection = SortDirection.ASC


class SortableField(Enum):
    """Base for per-condition enumerations of sortable fields."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        self.asc = Sorts.asc(field_name)
        self.desc = Sorts.desc(field_name)

    def get(self, direction: SortDirection) -> Sorts:
        return self.asc if direction == SortDirection.ASC else self.desc

    def asc_order(self) -> Order:
        return Order(self.name, SortDirection.ASC)

    def desc_order(self) -> Order:
        return Order(self.name, SortDirection.DESC)

    @classmethod
    def names(cls) -> list[str]:
        return [member.name for member in cls]


def resolve_sorts(order_by: type[SortableField], orders: Iterable[Order] | None) -> list[Sorts]:
    """Map sort requests onto *order_by* members, preserving request order.

    ``None`` means "no ordering requested" and yields ``[]``. An unknown name
    raises :class:`InvalidSortFieldError` listing every valid name.
    """
    if orders is None:
        return []
    resolved: list[Sorts] = []
    for order in orders:
        try:
            member = order_by[order.name]
        except (KeyError, TypeError) as exc:
            raise InvalidSortFieldError(order.name, order_by.names(), cause=exc) from exc
        resolved.append(member.get(order.direction))
    return resolved


def to_es_sort(sorts: Iterable[Sorts] | None) -> list[dict[str, Any]]:
    return [s.es_sort for s in sorts or ()]


__all__ = ["Order", "SortableField", "Sorts", "resolve_sorts", "to_es_sort"]
