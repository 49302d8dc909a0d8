"""Testing fakes – FakeElasticsearch search client."""
from __future__ import annotations

from typing import Any


def search_response(sources: list[dict[str, Any]], total: int | None = None, index: str = "test") -> dict[str, Any]:
    """Build a search response body holding *sources* as hits."""
    return {
        "took": 1,
        "timed_out": False,
        "hits": {
            "total": {"value": len(sources) if total is None else total, "relation": "eq"},
            "max_score": None,
            "hits": [
                {"_index": index, "_id": str(i), "_score": None, "_source": source}
                for i, source in enumerate(sources, start=1)
            ],
        },
    }


class FakeElasticsearch:
    """Records ``search`` calls and answers them with a canned response or error."""

    def __init__(self, response: dict[str, Any] | None = None, error: BaseException | None = None) -> None:
        self.response = response if response is not None else search_response([])
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def search(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_body(self) -> dict[str, Any]:
        return self.calls[-1]["body"]

    def close(self) -> None:
        pass


__all__ = ["FakeElasticsearch", "search_response"]
