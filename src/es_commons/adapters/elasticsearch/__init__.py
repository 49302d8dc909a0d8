"""Elasticsearch adapter – client factory, query builders, sorts, paginated search, security audit."""
from es_commons.adapters.elasticsearch.audit import ApplicationLoginLog, LoginLogOrderBy, SecurityAuditService
from es_commons.adapters.elasticsearch.client import ElasticsearchClientFactory
from es_commons.adapters.elasticsearch.search import ElasticSearchService
from es_commons.adapters.elasticsearch.settings import ElasticsearchSettings
from es_commons.adapters.elasticsearch.sorts import Order, SortableField, Sorts, resolve_sorts, to_es_sort
from es_commons.adapters.elasticsearch.where import ESWhere, Or, Predicate

__all__ = [
    "ApplicationLoginLog",
    "ESWhere",
    "ElasticSearchService",
    "ElasticsearchClientFactory",
    "ElasticsearchSettings",
    "LoginLogOrderBy",
    "Or",
    "Order",
    "Predicate",
    "SecurityAuditService",
    "SortableField",
    "Sorts",
    "resolve_sorts",
    "to_es_sort",
]
