"""Scroll-based pagination over search results."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Optional, Protocol, Union

from scrollgoat.exceptions import ScrollStateError
from scrollgoat.models import SearchPage, SearchParams
from scrollgoat._utils.dataframe import hits_to_dataframe

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class ScrollCapable(Protocol):
    """The three client calls a ScrollCursor relies on."""
    
    def search(self, params: SearchParams) -> Mapping[str, Any]: ...
    
    def scroll(self, scroll_id: str, scroll: Optional[str] = None) -> Mapping[str, Any]: ...
    
    def clear_scroll(self, scroll_id: str, ignore: tuple = (404,)) -> None: ...


class ScrollCursor:
    """
    Forward-only cursor over the pages of a scroll search.
    
    restart() runs the initial search, advance() fetches the next page with
    the latest scroll handle, and has_current() turns false once the server
    returns a page without hits. The server-side scroll context is released
    on exit from a ``with`` block, when iteration is exhausted, or by
    release() directly.
    
    A cursor is not safe for concurrent use; serialize access externally.
    
    Example:
        params = {"index": "logs", "body": {"query": {"match_all": {}}}, "scroll": "1m"}
        with ScrollCursor(client, params) as cursor:
            for page in cursor:
                print(cursor.index, len(page.hits))
    
    Manual stepping:
        cursor.restart()
        while cursor.has_current():
            handle(cursor.current.raw)
            cursor.advance()
        cursor.release()
    """
    
    def __init__(
        self,
        client: ScrollCapable,
        params: Union[SearchParams, Mapping[str, Any]],
    ):
        """
        Args:
            client: Object exposing search, scroll and clear_scroll
            params: Initial search parameters; a "scroll" option becomes
                    the default scroll time-to-live
        """
        self._client = client
        self._params = SearchParams.coerce(params)
        self._scroll_ttl: Optional[str] = self._params.scroll
        self._scroll_id: Optional[str] = None
        self._current: Optional[SearchPage] = None
        self._index = 0
    
    def __enter__(self) -> "ScrollCursor":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
    
    def __del__(self) -> None:
        # Attributes may be missing if __init__ raised
        if getattr(self, "_scroll_id", None) is None:
            return
        logger.warning(
            "ScrollCursor garbage collected while holding scroll %s; releasing",
            self._scroll_id,
        )
        try:
            self.release()
        except Exception as e:
            logger.warning("Failed to clear scroll during cleanup: %s", e)
    
    def __iter__(self) -> Iterator[SearchPage]:
        """Restart and yield every non-empty page, releasing at the end."""
        self.restart()
        try:
            while self.has_current():
                yield self._current  # type: ignore[misc]
                self.advance()
        finally:
            self.release()
    
    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------
    
    def set_scroll_timeout(self, time_to_live: str) -> "ScrollCursor":
        """
        Set the scroll window sent with every subsequent scroll request.
        
        Args:
            time_to_live: Duration string such as "30s" or "5m"
            
        Returns:
            This cursor, for chaining
        """
        self._scroll_ttl = time_to_live
        return self
    
    @property
    def scroll_timeout(self) -> Optional[str]:
        return self._scroll_ttl
    
    @property
    def params(self) -> SearchParams:
        return self._params
    
    # -------------------------------------------------------------------------
    # Cursor state
    # -------------------------------------------------------------------------
    
    @property
    def current(self) -> Optional[SearchPage]:
        """The most recently fetched page, None before the first fetch."""
        return self._current
    
    @property
    def index(self) -> int:
        """Zero-based number of the current page."""
        return self._index
    
    @property
    def scroll_id(self) -> Optional[str]:
        """Scroll handle from the latest fetch, None when nothing is held."""
        return self._scroll_id
    
    def has_current(self) -> bool:
        """True if the current page holds at least one hit."""
        return self._current is not None and self._current.has_hits
    
    # -------------------------------------------------------------------------
    # Remote operations
    # -------------------------------------------------------------------------
    
    def restart(self) -> None:
        """
        Start a fresh scroll by running the initial search.
        
        Any held scroll context is released first, so a cursor never owns
        more than one server-side context.
        
        Raises:
            RequestError: If the search request is rejected
            ResponseError: If the server fails the search
        """
        self.release()
        self._index = 0
        self._store(self._client.search(self._params))
        logger.debug("Scroll started: %d hits, scroll_id=%s", len(self._current.hits), self._scroll_id)
    
    def advance(self) -> None:
        """
        Fetch the next page with the current scroll handle.
        
        Raises:
            ScrollStateError: If no scroll handle is held
            RequestError: If the scroll request is rejected
            ResponseError: If the server fails the scroll
        """
        if self._scroll_id is None:
            raise ScrollStateError(
                "No scroll handle available; call restart() with a 'scroll' option first"
            )
        self._store(self._client.scroll(self._scroll_id, self._scroll_ttl))
        self._index += 1
        logger.debug("Scroll page %d: %d hits", self._index, len(self._current.hits))
    
    def release(self) -> None:
        """
        Clear the held scroll context on the server.
        
        A 404 from the server counts as success since the context may have
        already expired. Safe to call repeatedly; does nothing when no
        handle is held. The local handle is dropped even if the request
        fails, so it is never cleared twice.
        
        Raises:
            RequestError: If the clear request is rejected
            ResponseError: If the server fails the clear
        """
        scroll_id = self._scroll_id
        if scroll_id is None:
            return
        self._scroll_id = None
        logger.debug("Clearing scroll %s", scroll_id)
        self._client.clear_scroll(scroll_id, ignore=(404,))
    
    clear_scroll = release
    close = release
    
    # -------------------------------------------------------------------------
    # Hit-level helpers
    # -------------------------------------------------------------------------
    
    def iter_hits(self) -> Iterator[dict]:
        """
        Yield every hit across all pages.
        
        Yields:
            Individual hit dictionaries
        """
        for page in self:
            yield from page.hits
    
    def to_dataframe(self, include_meta: bool = True) -> "pd.DataFrame":
        """
        Collect every hit into a pandas DataFrame.
        
        Args:
            include_meta: Keep _id, _index and _score columns
        """
        return hits_to_dataframe(self.iter_hits(), include_meta=include_meta)
    
    def _store(self, payload: Mapping[str, Any]) -> None:
        if not isinstance(payload, dict):
            payload = dict(payload)
        page = SearchPage.from_response(payload)
        self._current = page
        self._scroll_id = page.scroll_id
