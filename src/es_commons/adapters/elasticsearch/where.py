"""Elasticsearch adapter – ESWhere / Or conditional boolean-query builders.

Both builders accumulate ``elasticsearch_dsl`` query objects and append a
predicate only when its gate holds, so that absent request parameters never
narrow the result set. Predicates are supplied as zero-argument callables and
are only evaluated after the gate passes.

Example::

    predicate = (
        ESWhere.of()
        .and_(user_id, lambda: Q("term", userId=user_id))
        .and_if_non_blank(name, lambda: Q("wildcard", name=f"*{name}*"))
        .and_(Or.of().or_(a, lambda: Q("term", a=a)).or_(b, lambda: Q("term", b=b)))
        .to_predicate()
    )
"""
from __future__ import annotations

from collections.abc import Sized
from typing import Any, Callable, Final

from elasticsearch_dsl import query

Predicate = query.Query
Supplier = Callable[[], Predicate]

_MISSING: Final = object()


def _require_supplier(supplier: Any) -> Supplier:
    if supplier is None or supplier is _MISSING:
        raise ValueError("argument 'supplier' is required")
    if not callable(supplier):
        raise TypeError(f"argument 'supplier' must be callable, got {type(supplier).__name__}")
    return supplier


def _require_predicate(predicate: Any) -> Predicate:
    if predicate is None:
        raise ValueError("argument 'predicate' is required")
    if not isinstance(predicate, query.Query):
        raise TypeError(f"argument 'predicate' must be an elasticsearch_dsl Query, got {type(predicate).__name__}")
    return predicate


def _is_non_blank(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def _is_non_empty(values: Sized | None) -> bool:
    return values is not None and len(values) > 0


class _Expressions:
    """Ordered predicate accumulator shared by the AND and OR contexts."""

    def __init__(self) -> None:
        self._expressions: list[Predicate] = []

    def _push(self, flag: bool, supplier: Any) -> None:
        supplier = _require_supplier(supplier)
        if flag:
            self._expressions.append(_require_predicate(supplier()))

    def _collapse(self, occur: str) -> Predicate | None:
        if not self._expressions:
            return None
        if len(self._expressions) == 1:
            return self._expressions[0]
        return query.Bool(**{occur: list(self._expressions)})

    def is_empty(self) -> bool:
        return not self._expressions

    def not_empty(self) -> bool:
        return not self.is_empty()

    def get(self) -> list[Predicate]:
        """Copy of the accumulated predicates, in insertion order."""
        return list(self._expressions)

    def to_array(self) -> tuple[Predicate, ...]:
        return tuple(self._expressions)

    def __len__(self) -> int:
        return len(self._expressions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._expressions!r})"


class Or(_Expressions):
    """OR context; finalizes into ``bool.should`` when it holds several predicates."""

    @classmethod
    def of(cls, predicate: Predicate | None = None) -> "Or":
        ctx = cls()
        if predicate is not None:
            ctx.or_(predicate)
        return ctx

    def or_(self, value: Any, supplier: Any = _MISSING) -> "Or":
        """Append ``value`` when called with one argument, otherwise append
        ``supplier()`` if ``value`` is not ``None``."""
        if supplier is _MISSING:
            self._expressions.append(_require_predicate(value))
            return self
        self._push(value is not None, supplier)
        return self

    def or_if(self, flag: bool, supplier: Supplier) -> "Or":
        self._push(bool(flag), supplier)
        return self

    def or_if_non_blank(self, value: str | None, supplier: Supplier) -> "Or":
        self._push(_is_non_blank(value), supplier)
        return self

    def or_if_non_empty(self, values: Sized | None, supplier: Supplier) -> "Or":
        self._push(_is_non_empty(values), supplier)
        return self

    def to_predicate(self) -> Predicate | None:
        """``None`` when empty, the sole predicate unwrapped, else ``bool.should``."""
        return self._collapse("should")

    build = to_predicate


class ESWhere(_Expressions):
    """AND context; finalizes into ``bool.must`` when it holds several predicates."""

    Or = Or

    @classmethod
    def of(cls, predicate: Predicate | None = None) -> "ESWhere":
        where = cls()
        if predicate is not None:
            where.and_(predicate)
        return where

    def and_(self, value: Any, supplier: Any = _MISSING) -> "ESWhere":
        """Append a predicate.

        * ``and_(predicate)`` appends unconditionally; ``None`` is rejected.
        * ``and_(or_context)`` appends the finalized OR only if it is non-empty.
        * ``and_(value, supplier)`` appends ``supplier()`` only if ``value`` is
          not ``None``. ``False`` and ``0`` count as present.
        """
        if supplier is _MISSING:
            if isinstance(value, Or):
                if value.not_empty():
                    self._expressions.append(value.to_predicate())
                return self
            if value is None:
                raise ValueError("argument 'predicate' is required")
            self._expressions.append(_require_predicate(value))
            return self
        self._push(value is not None, supplier)
        return self

    def and_if(self, flag: bool, supplier: Supplier) -> "ESWhere":
        self._push(bool(flag), supplier)
        return self

    def and_if_null(self, value: Any, supplier: Supplier) -> "ESWhere":
        self._push(value is None, supplier)
        return self

    def and_if_non_null(self, value: Any, supplier: Supplier) -> "ESWhere":
        return self.and_(value, supplier)

    def and_if_non_blank(self, value: str | None, supplier: Supplier) -> "ESWhere":
        self._push(_is_non_blank(value), supplier)
        return self

    def and_if_non_empty(self, values: Sized | None, supplier: Supplier) -> "ESWhere":
        self._push(_is_non_empty(values), supplier)
        return self

    def to_predicate(self) -> Predicate | None:
        """``None`` when empty, the sole predicate unwrapped, else ``bool.must``."""
        return self._collapse("must")

    build = to_predicate


__all__ = ["ESWhere", "Or", "Predicate", "Supplier"]
