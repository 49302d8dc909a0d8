"""Application pagination – page request and page primitives."""
from es_commons.application.pagination.page_request import PageRequest, SortDirection
from es_commons.application.pagination.page import Page

__all__ = ["Page", "PageRequest", "SortDirection"]
