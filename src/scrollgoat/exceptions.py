"""Exception hierarchy for scrollgoat."""

from __future__ import annotations

from typing import Optional


class ScrollGoatError(Exception):
    """Base exception for all scrollgoat errors."""
    pass


class RequestError(ScrollGoatError):
    """
    The request was rejected before the server could act on it.
    
    Raised for malformed requests (HTTP 4xx) and for transport failures
    where no response was received at all.
    """
    pass


class ResponseError(ScrollGoatError):
    """
    The server accepted the request but failed while processing it.
    """
    pass


class ClientResponseError(RequestError):
    """
    The search service answered with an HTTP 4xx status.
    
    The status_code and raw response body are available on this exception.
    """
    
    def __init__(self, message: str, status_code: int = 400, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthenticationError(ClientResponseError):
    """
    Credentials were missing, incomplete or rejected (HTTP 401/403).
    
    Common causes:
    - Invalid ELASTICSEARCH_API_KEY
    - ELASTICSEARCH_USERNAME set without ELASTICSEARCH_PASSWORD
    - Missing read privileges on the target index
    """
    
    def __init__(self, message: str, status_code: int = 401, body: Optional[str] = None):
        super().__init__(message, status_code=status_code, body=body)


class RateLimitError(ClientResponseError):
    """
    Too many requests (HTTP 429).
    
    The retry_after attribute indicates how many seconds to wait.
    """
    
    def __init__(self, message: str, retry_after: int = 60, body: Optional[str] = None):
        super().__init__(message, status_code=429, body=body)
        self.retry_after = retry_after


class TransportError(RequestError):
    """
    The request never got a response (connection refused, DNS, timeout).
    """
    pass


class ServerResponseError(ResponseError):
    """
    The search service answered with an HTTP 5xx status.
    """
    
    def __init__(self, message: str, status_code: int = 500, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ScrollStateError(ScrollGoatError):
    """
    A scroll operation was attempted without an open scroll context.
    
    Call restart() (or iterate the cursor) before advance(), and make sure
    the initial search carries a scroll duration.
    """
    pass
