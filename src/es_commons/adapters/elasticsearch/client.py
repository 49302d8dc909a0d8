"""Elasticsearch adapter – ElasticsearchClientFactory."""
from __future__ import annotations

from typing import Any

from elasticsearch import Elasticsearch

from es_commons.adapters.elasticsearch.settings import ElasticsearchSettings
from es_commons.observability.logging import get_logger

logger = get_logger(__name__)


class ElasticsearchClientFactory:
    """Owns the process-wide synchronous :class:`Elasticsearch` client.

    The client (and its connection pool) is built once, on ``init()`` or on
    first access of :attr:`client`, and shared by every caller until
    ``close()``. Retries are disabled: a failed call fails once.
    """

    def __init__(self, settings: ElasticsearchSettings, **client_kwargs: Any) -> None:
        self._settings = settings
        self._client_kwargs = client_kwargs
        self._client: Elasticsearch | None = None

    @property
    def settings(self) -> ElasticsearchSettings:
        return self._settings

    def init(self) -> Elasticsearch:
        if self._client is None:
            self._client = Elasticsearch(
                hosts=self._settings.hosts,
                request_timeout=self._settings.request_timeout,
                connections_per_node=self._settings.connections_per_node,
                max_retries=0,
                retry_on_timeout=False,
                **self._client_kwargs,
            )
            logger.info(
                "es_client_initialised",
                hosts=self._settings.hosts,
                request_timeout=self._settings.request_timeout,
                connections_per_node=self._settings.connections_per_node,
            )
        return self._client

    @property
    def client(self) -> Elasticsearch:
        return self.init()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("es_client_closed")

    def __enter__(self) -> Elasticsearch:
        return self.init()

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = ["ElasticsearchClientFactory"]
