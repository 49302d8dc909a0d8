"""Elasticsearch adapter – security-audit login log and its paginated query service."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from elasticsearch_dsl import Q
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from es_commons.adapters.elasticsearch.search import ElasticSearchService
from es_commons.adapters.elasticsearch.settings import ElasticsearchSettings
from es_commons.adapters.elasticsearch.sorts import Order, SortableField, Sorts, resolve_sorts, to_es_sort
from es_commons.adapters.elasticsearch.where import ESWhere
from es_commons.application.pagination import Page, PageRequest
from es_commons.kernel.errors import ExternalServiceError
from es_commons.kernel.time import Clock, SystemClock, to_epoch_millis
from es_commons.kernel.types import Result
from es_commons.observability.logging import get_logger

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
INGEST_TIMESTAMP_FIELD = "@timestamp"

logger = get_logger(__name__)


def format_operation_time(moment: datetime) -> str:
    """Render *moment* in the index's ``yyyy-MM-dd HH:mm:ss`` format.

    Naive datetimes are written as-is; aware ones are converted to UTC first,
    since the stored strings carry no offset.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.strftime(DATETIME_FORMAT)


class LoginLogOrderBy(SortableField):
    """Sortable fields of :class:`ApplicationLoginLog`; member names are the request names."""

    operationTime = "operationTime"


class ApplicationLoginLog(BaseModel):
    """A login event as indexed by the log pipeline, doubling as its own query condition.

    Document fields use camelCase on the wire. The fields declared after
    ``type`` only steer the query and are never serialised.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    application_side: int | None = None
    operation_user_name: str | None = None
    operation_user: str | None = None
    operation_time: datetime | None = None
    ip_geographic_address: str | None = None
    ip: str | None = None
    successful: bool | None = None
    remarks: str | None = None
    # set by logstash; kept so that re-indexed documents round-trip
    type: str | None = None

    operation_time_begin: datetime | None = Field(default=None, exclude=True)
    operation_time_end: datetime | None = Field(default=None, exclude=True)
    recently_days: int | None = Field(default=None, ge=1, exclude=True)
    sorts: list[Order] | None = Field(default=None, exclude=True)

    @field_serializer("operation_time")
    def _format_operation_time(self, value: datetime | None) -> str | None:
        return format_operation_time(value) if value is not None else None

    def has_operation_time_range(self) -> bool:
        return self.operation_time_begin is not None or self.operation_time_end is not None

    def where(self, clock: Clock | None = None) -> ESWhere:
        """Translate the populated fields into an AND tree; unset fields add nothing."""
        clock = clock or SystemClock()
        return (
            ESWhere.of()
            .and_(self.id, lambda: Q("ids", values=[self.id]))
            .and_if(self.has_operation_time_range(), lambda: Q("range", operationTime=self._operation_time_bounds()))
            .and_(self.recently_days, lambda: Q("range", **{INGEST_TIMESTAMP_FIELD: self._recent_window(clock)}))
            .and_(self.application_side, lambda: Q("term", applicationSide=self.application_side))
            .and_(self.successful, lambda: Q("term", successful=self.successful))
            .and_if_non_blank(
                self.operation_user_name,
                lambda: Q("wildcard", operationUserName=f"*{self.operation_user_name}*"),
            )
        )

    def _operation_time_bounds(self) -> dict[str, str]:
        bounds: dict[str, str] = {}
        if self.operation_time_begin is not None:
            bounds["gte"] = format_operation_time(self.operation_time_begin)
        if self.operation_time_end is not None:
            bounds["lte"] = format_operation_time(self.operation_time_end)
        return bounds

    def _recent_window(self, clock: Clock) -> dict[str, int]:
        now = clock.now()
        return {
            "gt": to_epoch_millis(now - timedelta(days=self.recently_days or 0)),
            "lt": to_epoch_millis(now),
        }

    def parse_sorts(self) -> list[Sorts]:
        return resolve_sorts(LoginLogOrderBy, self.sorts)

    def build_es_sort(self) -> list[dict[str, dict[str, str]]]:
        """Raw sort clauses for the requested ``sorts``; ``[]`` when none were requested."""
        return to_es_sort(self.parse_sorts())


class SecurityAuditService:
    """Paginated queries over the login-log export index."""

    def __init__(self, search_service: ElasticSearchService, export_index: str, clock: Clock | None = None) -> None:
        self._search = search_service
        self._export_index = export_index
        self._clock = clock or SystemClock()

    @classmethod
    def from_settings(
        cls, search_service: ElasticSearchService, settings: ElasticsearchSettings, clock: Clock | None = None
    ) -> "SecurityAuditService":
        return cls(search_service, settings.export_index, clock)

    def login_log_page(
        self, condition: ApplicationLoginLog, page_request: PageRequest
    ) -> Result[Page[ApplicationLoginLog], ExternalServiceError]:
        # newest first unless the caller asked for something else
        if condition.sorts is None:
            condition = condition.model_copy(update={"sorts": [LoginLogOrderBy.operationTime.desc_order()]})
        sorts = condition.parse_sorts()
        predicate = condition.where(self._clock).to_predicate()
        logger.debug("login_log_page", index=self._export_index, page=page_request.page, size=page_request.size)
        return self._search.query_for_page(
            self._export_index,
            predicate,
            page_request,
            ApplicationLoginLog,
            sorts,
            id_field="id",
        )


__all__ = [
    "ApplicationLoginLog",
    "DATETIME_FORMAT",
    "INGEST_TIMESTAMP_FIELD",
    "LoginLogOrderBy",
    "SecurityAuditService",
    "format_operation_time",
]
