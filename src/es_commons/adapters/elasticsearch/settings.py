"""Elasticsearch adapter – ElasticsearchSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from es_commons.config.settings import Settings
from es_commons.config.validation import InvalidSettingValueError


def parse_host_port(uri: str) -> tuple[str, int]:
    """Split ``host:port``; raises ``ValueError`` on anything else."""
    host, sep, port = uri.strip().rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"expected 'host:port', got {uri!r}")
    return host, int(port)


@dataclasses.dataclass
class ElasticsearchSettings(Settings):
    """Connection settings, read from ``ELASTICSEARCH_*`` environment variables.

    ``uris`` is a comma separated ``host:port`` list. The socket timeout bounds
    every request; the per-route and total connection caps size the pool of
    each node.
    """

    _prefix: ClassVar[str] = "ELASTICSEARCH"

    export_index: str
    uris: list[str] = dataclasses.field(default_factory=lambda: ["localhost:9200"])
    scheme: str = "http"
    socket_timeout_millis: int = 30000
    max_conn_per_route: int = 10
    max_conn_total: int = 30

    def _validate(self) -> None:
        if not self.export_index.strip():
            raise InvalidSettingValueError("export_index", self.export_index, "must not be blank")
        if not self.uris:
            raise InvalidSettingValueError("uris", self.uris, "at least one host is required")
        for uri in self.uris:
            try:
                parse_host_port(uri)
            except ValueError as exc:
                raise InvalidSettingValueError("uris", uri, str(exc)) from exc
        if self.scheme not in ("http", "https"):
            raise InvalidSettingValueError("scheme", self.scheme, "must be 'http' or 'https'")
        for name in ("socket_timeout_millis", "max_conn_per_route", "max_conn_total"):
            if getattr(self, name) <= 0:
                raise InvalidSettingValueError(name, getattr(self, name), "must be positive")
        if self.max_conn_per_route > self.max_conn_total:
            raise InvalidSettingValueError(
                "max_conn_per_route",
                self.max_conn_per_route,
                f"must not exceed max_conn_total ({self.max_conn_total})",
            )

    @property
    def hosts(self) -> list[str]:
        hosts = []
        for uri in self.uris:
            host, port = parse_host_port(uri)
            hosts.append(f"{self.scheme}://{host}:{port}")
        return hosts

    @property
    def request_timeout(self) -> float:
        return self.socket_timeout_millis / 1000

    @property
    def connections_per_node(self) -> int:
        """Per-route cap, lowered so that all nodes together stay within the total cap."""
        return max(1, min(self.max_conn_per_route, self.max_conn_total // len(self.uris)))


__all__ = ["ElasticsearchSettings", "parse_host_port"]
