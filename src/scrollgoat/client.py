"""SearchClient - main entry point for scrollgoat."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Union

import httpx
import pandas as pd

from scrollgoat.auth import CredentialProvider
from scrollgoat.config import ElasticSettings
from scrollgoat.exceptions import (
    AuthenticationError,
    ClientResponseError,
    RateLimitError,
    ServerResponseError,
    TransportError,
)
from scrollgoat.models import SearchParams
from scrollgoat.pagination import ScrollCursor

logger = logging.getLogger(__name__)


class SearchClient:
    """
    Client for scroll searches against an Elasticsearch-compatible cluster.
    
    Reads configuration from environment variables (ELASTICSEARCH_*) automatically.
    Exposes the three raw calls a ScrollCursor needs (search, scroll,
    clear_scroll) and convenience methods built on top of them.
    
    Example:
        client = SearchClient()
        df = client.query({"index": "logs", "body": {"query": {"match_all": {}}}})
        
    Cursor Example:
        with SearchClient() as client:
            with client.scroll_cursor({"index": "logs"}, scroll="2m") as cursor:
                for page in cursor:
                    print(cursor.index, len(page.hits))
            
    Attributes:
        settings: ElasticSettings instance with connection configuration
    """
    
    def __init__(self, settings: Optional[ElasticSettings] = None):
        """
        Initialize the search client.
        
        Args:
            settings: Optional ElasticSettings instance. If not provided,
                     settings are loaded from environment variables.
        """
        self.settings = settings or ElasticSettings()
        self._credentials = CredentialProvider(self.settings)
        self._client: Optional[httpx.Client] = None
    
    def __enter__(self) -> "SearchClient":
        """Context manager entry."""
        self._get_client()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
    
    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client:
            self._client.close()
            self._client = None
    
    def _get_client(self) -> httpx.Client:
        """Get or create httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.timeout,
                verify=self.settings.verify_certs,
            )
        return self._client
    
    def _get_headers(self) -> dict:
        """Get request headers with credentials."""
        return {
            **self._credentials.get_headers(),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
    
    # -------------------------------------------------------------------------
    # Raw scroll API
    # -------------------------------------------------------------------------
    
    def search(self, params: Union[SearchParams, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Run a search, opening a scroll context when params.scroll is set.
        
        Args:
            params: SearchParams or a mapping with index, body, scroll, size
                    and any further query-string options
            
        Returns:
            Response body, including _scroll_id when scrolling
            
        Raises:
            ClientResponseError: If the request is rejected (4xx)
            ServerResponseError: If the cluster fails the search (5xx)
            TransportError: If no response was received
        """
        params = SearchParams.coerce(params)
        logger.debug("search %s params=%s", params.path, params.query_params())
        response = self._request(
            "POST",
            params.path,
            params=params.query_params(),
            json=params.body,
        )
        return response.json()
    
    def scroll(self, scroll_id: str, scroll: Optional[str] = None) -> Dict[str, Any]:
        """
        Fetch the next page of an open scroll context.
        
        Args:
            scroll_id: Handle returned by the previous search or scroll
            scroll: Time-to-live to extend the context by; omitted if None
            
        Returns:
            Response body with the next hits and a (possibly new) _scroll_id
        """
        body: Dict[str, Any] = {"scroll_id": scroll_id}
        if scroll is not None:
            body["scroll"] = scroll
        logger.debug("scroll scroll_id=%s ttl=%s", scroll_id, scroll)
        response = self._request("POST", "/_search/scroll", json=body)
        return response.json()
    
    def clear_scroll(self, scroll_id: str, ignore: Iterable[int] = (404,)) -> None:
        """
        Release a scroll context on the server.
        
        Args:
            scroll_id: Handle to release
            ignore: HTTP statuses treated as success (default: 404, since the
                    context may already have expired)
        """
        logger.debug("clear_scroll scroll_id=%s", scroll_id)
        self._request(
            "DELETE",
            "/_search/scroll",
            json={"scroll_id": scroll_id},
            ignore=tuple(ignore),
        )
    
    # -------------------------------------------------------------------------
    # Convenience API
    # -------------------------------------------------------------------------
    
    def scroll_cursor(
        self,
        params: Union[SearchParams, Mapping[str, Any]],
        scroll: Optional[str] = None,
    ) -> ScrollCursor:
        """
        Create a ScrollCursor bound to this client.
        
        Args:
            params: Initial search parameters
            scroll: Scroll time-to-live; overrides params.scroll when given
            
        Returns:
            ScrollCursor, not yet started
        """
        params = SearchParams.coerce(params)
        if scroll is not None:
            params = params.model_copy(update={"scroll": scroll})
        return ScrollCursor(self, params)
    
    def scan(
        self,
        params: Union[SearchParams, Mapping[str, Any]],
        scroll: Optional[str] = None,
    ) -> Iterator[dict]:
        """
        Yield every hit of a search, scrolling through all pages.
        
        The scroll context is released when the generator finishes or is closed.
        
        Args:
            params: Initial search parameters
            scroll: Scroll time-to-live (default: params.scroll, then
                    settings.default_scroll)
            
        Yields:
            Individual hit dictionaries
        """
        params = SearchParams.coerce(params)
        ttl = scroll or params.scroll or self.settings.default_scroll
        with self.scroll_cursor(params, scroll=ttl) as cursor:
            yield from cursor.iter_hits()
    
    def query(
        self,
        params: Union[SearchParams, Mapping[str, Any]],
        scroll: Optional[str] = None,
        include_meta: bool = True,
    ) -> pd.DataFrame:
        """
        Run a scroll search and return every hit as a DataFrame.
        
        Args:
            params: Initial search parameters
            scroll: Scroll time-to-live
            include_meta: Keep _id, _index and _score columns
            
        Returns:
            pandas DataFrame with one row per hit
        """
        params = SearchParams.coerce(params)
        ttl = scroll or params.scroll or self.settings.default_scroll
        with self.scroll_cursor(params, scroll=ttl) as cursor:
            return cursor.to_dataframe(include_meta=include_meta)
    
    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------
    
    def _request(
        self,
        method: str,
        path: str,
        ignore: tuple = (),
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Send a request and map error statuses onto the exception hierarchy.
        
        Raises:
            AuthenticationError: On 401/403
            RateLimitError: On 429
            ClientResponseError: On any other 4xx
            ServerResponseError: On 5xx
            TransportError: If the request could not be sent or timed out
        """
        url = f"{self.settings.base_url}{path}"
        client = self._get_client()
        
        try:
            response = client.request(method, url, headers=self._get_headers(), **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e
        
        status = response.status_code
        if status in ignore or status < 400:
            return response
        
        if status in (401, 403):
            raise AuthenticationError(
                f"Authentication failed: {status} - {response.text}",
                status_code=status,
                body=response.text,
            )
        if status == 429:
            retry_after = int(response.headers.get("Retry-After", 60))
            raise RateLimitError(
                "Rate limit exceeded", retry_after=retry_after, body=response.text
            )
        if status < 500:
            raise ClientResponseError(
                f"{method} {path} rejected: {status} - {response.text}",
                status_code=status,
                body=response.text,
            )
        raise ServerResponseError(
            f"{method} {path} failed: {status} - {response.text}",
            status_code=status,
            body=response.text,
        )
