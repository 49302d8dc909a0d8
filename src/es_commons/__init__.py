"""
es_commons – Elasticsearch query and paginated-search toolkit.

Import path convention::

    from es_commons.adapters.elasticsearch import ESWhere, ElasticSearchService
    from es_commons.application.pagination import Page, PageRequest
    from es_commons.adapters.elasticsearch import ApplicationLoginLog, SecurityAuditService
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
