"""
scrollgoat - Walk Elasticsearch scroll searches from Python. Get pages, hits, DataFrames.

Quick Start
-----------
    from scrollgoat import SearchClient

    client = SearchClient()
    df = client.query({"index": "logs", "body": {"query": {"match_all": {}}}})

Configuration
-------------
Set these environment variables (or use a .env file):

    ELASTICSEARCH_URL         - Cluster URL (default: http://localhost:9200)
    ELASTICSEARCH_API_KEY     - Encoded API key
    ELASTICSEARCH_USERNAME    - Basic auth user (with ELASTICSEARCH_PASSWORD)
    ELASTICSEARCH_PASSWORD    - Basic auth password

Cursor Workflow
---------------
    with client.scroll_cursor({"index": "logs", "size": 500}, scroll="2m") as cursor:
        cursor.restart()
        while cursor.has_current():
            process(cursor.current.hits)
            cursor.advance()

Exceptions
----------
    RequestError          - Request rejected (4xx) or never answered
    ResponseError         - Server failed the request (5xx)
    AuthenticationError   - Invalid or missing credentials
    RateLimitError        - Too many requests (see retry_after)
    ScrollStateError      - advance() without an open scroll
"""

__version__ = "0.1.0"

from scrollgoat.client import SearchClient
from scrollgoat.config import ElasticSettings
from scrollgoat.models import SearchPage, SearchParams
from scrollgoat.pagination import ScrollCursor
from scrollgoat.exceptions import (
    ScrollGoatError,
    RequestError,
    ResponseError,
    ClientResponseError,
    ServerResponseError,
    TransportError,
    AuthenticationError,
    RateLimitError,
    ScrollStateError,
)

__all__ = [
    "SearchClient",
    "ScrollCursor",
    "ElasticSettings",
    "SearchParams",
    "SearchPage",
    "ScrollGoatError",
    "RequestError",
    "ResponseError",
    "ClientResponseError",
    "ServerResponseError",
    "TransportError",
    "AuthenticationError",
    "RateLimitError",
    "ScrollStateError",
    "__version__",
]
