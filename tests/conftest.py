"""Shared pytest fixtures for scrollgoat tests."""

import pytest

from scrollgoat.config import ElasticSettings


BASE_URL = "http://search.test:9200"


def make_page(scroll_id, n_hits, start=0):
    """Build a search response body with n_hits hits."""
    return {
        "_scroll_id": scroll_id,
        "took": 1,
        "timed_out": False,
        "hits": {
            "total": {"value": 5, "relation": "eq"},
            "hits": [
                {"_index": "logs", "_id": str(i), "_score": 1.0, "_source": {"n": i}}
                for i in range(start, start + n_hits)
            ],
        },
    }


class FakeScrollClient:
    """In-memory stand-in for SearchClient that records every call."""
    
    def __init__(self, search_response=None, scroll_responses=(), clear_error=None):
        self.search_response = search_response if search_response is not None else {}
        self.scroll_responses = list(scroll_responses)
        self.clear_error = clear_error
        self.calls = []
    
    def search(self, params):
        self.calls.append(("search", params))
        return self.search_response
    
    def scroll(self, scroll_id, scroll=None):
        self.calls.append(("scroll", scroll_id, scroll))
        return self.scroll_responses.pop(0)
    
    def clear_scroll(self, scroll_id, ignore=(404,)):
        self.calls.append(("clear_scroll", scroll_id, ignore))
        if self.clear_error is not None:
            raise self.clear_error
    
    def cleared(self):
        return [call[1] for call in self.calls if call[0] == "clear_scroll"]


@pytest.fixture
def mock_settings():
    """Return test settings pointing at a fake cluster."""
    return ElasticSettings(url=BASE_URL + "/")


@pytest.fixture
def base_url():
    """Base URL for mocked API."""
    return BASE_URL


@pytest.fixture
def scenario_client():
    """Three pages: 3 hits (H1), 2 hits (H2), then empty (H3)."""
    return FakeScrollClient(
        search_response=make_page("H1", 3),
        scroll_responses=[make_page("H2", 2, start=3), make_page("H3", 0)],
    )
