"""Elasticsearch adapter – ElasticSearchService (paginated search)."""
from __future__ import annotations

from typing import Any, Mapping, Sequence, TypeVar

from elasticsearch import ApiError, Elasticsearch, TransportError
from elasticsearch_dsl import Search, query
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from es_commons.adapters.elasticsearch.sorts import Sorts, to_es_sort
from es_commons.adapters.elasticsearch.where import Predicate
from es_commons.application.pagination import Page, PageRequest
from es_commons.kernel.errors import ExternalServiceError, SerializationError
from es_commons.kernel.types import Err, Ok, Result
from es_commons.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _total_hits(hits: Mapping[str, Any]) -> int:
    total = hits.get("total", 0)
    # ES 6 reports a bare integer, ES 7+ an object with a relation
    if isinstance(total, Mapping):
        return int(total.get("value", 0))
    return int(total or 0)


class ElasticSearchService:
    """Runs one paginated search per call and decodes hits into typed objects.

    Transport failures are returned as ``Err(ExternalServiceError)`` so that
    callers can tell a failed query from an empty result. Decoding failures
    are raised: a page is either fully decoded or not returned at all.
    """

    service_name = "elasticsearch"

    def __init__(self, client: Elasticsearch) -> None:
        self._client = client

    def build_search(
        self,
        index: str,
        predicate: Predicate | None,
        page_request: PageRequest,
        sorts: Sequence[Sorts] | None = None,
    ) -> Search:
        search = Search(index=index).query(predicate if predicate is not None else query.MatchAll())
        search = search[page_request.offset : page_request.offset + page_request.limit]
        if sorts:
            search = search.sort(*to_es_sort(sorts))
        return search.extra(track_total_hits=True)

    def query_for_page(
        self,
        index: str,
        predicate: Predicate | None,
        page_request: PageRequest,
        result_type: type[T],
        sorts: Sequence[Sorts] | None = None,
        *,
        id_field: str | None = None,
    ) -> Result[Page[T], ExternalServiceError]:
        """Search *index* and return one page of *result_type* objects.

        When *id_field* is given, each hit's ``_id`` is copied into the
        decoded document under that key unless the source already has it.
        """
        body = self.build_search(index, predicate, page_request, sorts).to_dict()
        logger.debug("es_search", index=index, body=body)
        try:
            response = self._client.search(index=index, body=body)
        except (ApiError, TransportError) as exc:
            status_code = getattr(getattr(exc, "meta", None), "status", None)
            logger.error(
                "es_search_failed",
                index=index,
                page=page_request.page,
                size=page_request.size,
                status_code=status_code,
                error=str(exc),
            )
            return Err(
                ExternalServiceError(
                    self.service_name,
                    f"Search on index '{index}' failed: {exc}",
                    status_code=status_code,
                    detail={"index": index, "page": page_request.page, "size": page_request.size},
                    cause=exc,
                )
            )

        hits = response["hits"]
        adapter = TypeAdapter(result_type)
        items: list[T] = []
        for hit in hits.get("hits", []):
            source = dict(hit.get("_source") or {})
            if id_field is not None and "_id" in hit:
                source.setdefault(id_field, hit["_id"])
            try:
                items.append(adapter.validate_python(source))
            except PydanticValidationError as exc:
                raise SerializationError(
                    f"Document '{hit.get('_id')}' in index '{index}' could not be decoded "
                    f"as {getattr(result_type, '__name__', result_type)}",
                    payload_type=getattr(result_type, "__name__", str(result_type)),
                    detail={"index": index, "id": hit.get("_id")},
                    cause=exc,
                ) from exc

        total = _total_hits(hits)
        logger.debug("es_search_done", index=index, total=total, returned=len(items))
        return Ok(Page.of(items, total, page_request))


__all__ = ["ElasticSearchService"]
