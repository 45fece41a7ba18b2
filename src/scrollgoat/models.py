"""Structured records for scroll search requests and result pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SearchParams(BaseModel):
    """
    Parameters of the initial search request.
    
    Named fields cover what the scroll cursor inspects; any other option
    is kept verbatim and sent as a query-string parameter.
    
    Attributes:
        index: Index name, list of names, or None for all indices
        body: Query DSL body, sent as JSON
        scroll: Scroll time-to-live (e.g. "1m"); the server only opens a
                scroll context when this is set
        size: Hits per page
        
    Example:
        params = SearchParams(index="logs", body={"query": {"match_all": {}}}, scroll="1m")
        params = SearchParams.coerce({"index": "logs", "scroll": "30s", "preference": "_local"})
    """
    
    model_config = ConfigDict(extra="allow")
    
    index: Optional[Union[str, List[str]]] = None
    body: Dict[str, Any] = Field(default_factory=dict)
    scroll: Optional[str] = None
    size: Optional[int] = None
    
    @classmethod
    def coerce(cls, params: Union["SearchParams", Mapping[str, Any]]) -> "SearchParams":
        """Return params as a SearchParams, validating plain mappings."""
        if isinstance(params, cls):
            return params
        return cls.model_validate(dict(params))
    
    @property
    def options(self) -> Dict[str, Any]:
        """Options without a named field, passed through unmodified."""
        return dict(self.model_extra or {})
    
    @property
    def path(self) -> str:
        """Request path for the search endpoint."""
        if not self.index:
            return "/_search"
        if isinstance(self.index, str):
            return f"/{self.index}/_search"
        return f"/{','.join(self.index)}/_search"
    
    def query_params(self) -> Dict[str, Any]:
        """Query-string parameters: scroll, size and pass-through options."""
        params: Dict[str, Any] = {}
        if self.scroll is not None:
            params["scroll"] = self.scroll
        if self.size is not None:
            params["size"] = self.size
        for key, value in self.options.items():
            if value is not None:
                params[key] = value
        return params


@dataclass(frozen=True)
class SearchPage:
    """
    One page of search results.
    
    Attributes:
        scroll_id: Handle for the next scroll request, None if the server
                   did not open a scroll context
        hits: Hit records from hits.hits (empty if the field is missing)
        total: Total number of matches, when reported
        raw: The response payload exactly as received
    """
    
    scroll_id: Optional[str] = None
    hits: List[Dict[str, Any]] = field(default_factory=list)
    total: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    
    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "SearchPage":
        """Build a page from a search or scroll response body."""
        envelope = payload.get("hits")
        if not isinstance(envelope, dict):
            envelope = {}
        
        hits = envelope.get("hits")
        if not isinstance(hits, list):
            hits = []
        
        # Newer clusters report {"value": n, "relation": "eq"}
        total = envelope.get("total")
        if isinstance(total, dict):
            total = total.get("value")
        
        return cls(
            scroll_id=payload.get("_scroll_id") or None,
            hits=hits,
            total=total,
            raw=payload,
        )
    
    @property
    def has_hits(self) -> bool:
        """True if the page holds at least one hit."""
        return len(self.hits) > 0
