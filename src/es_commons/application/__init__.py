"""Application – pagination primitives."""

from es_commons.application.pagination import Page, PageRequest, SortDirection

__all__ = ["Page", "PageRequest", "SortDirection"]
