"""Testing fakes."""
from es_commons.testing.fakes.clock import FAKE_NOW, FakeClock
from es_commons.testing.fakes.elasticsearch import FakeElasticsearch, search_response

__all__ = ["FAKE_NOW", "FakeClock", "FakeElasticsearch", "search_response"]
