"""Authorization headers for the search cluster."""

import base64
from typing import Dict, Optional

from scrollgoat.config import ElasticSettings
from scrollgoat.exceptions import AuthenticationError


class CredentialProvider:
    """
    Builds the Authorization header from configured credentials.
    
    An API key takes precedence over basic auth. With neither configured,
    requests are sent unauthenticated (typical for a local cluster).
    
    Attributes:
        settings: ElasticSettings instance with credentials
        
    Example:
        provider = CredentialProvider(ElasticSettings())
        headers = provider.get_headers()
    """
    
    def __init__(self, settings: ElasticSettings):
        self.settings = settings
        self._headers: Optional[Dict[str, str]] = None
    
    def get_headers(self) -> Dict[str, str]:
        """
        Return the authorization headers, computing them on first use.
        
        Raises:
            AuthenticationError: If a username is set without a password
        """
        if self._headers is None:
            self._headers = self._build()
        return dict(self._headers)
    
    def _build(self) -> Dict[str, str]:
        settings = self.settings
        if settings.api_key is not None:
            return {"Authorization": f"ApiKey {settings.api_key.get_secret_value()}"}
        
        if settings.username:
            if settings.password is None:
                raise AuthenticationError(
                    "ELASTICSEARCH_USERNAME is set but ELASTICSEARCH_PASSWORD is missing"
                )
            raw = f"{settings.username}:{settings.password.get_secret_value()}"
            token = base64.b64encode(raw.encode("utf-8")).decode("ascii")
            return {"Authorization": f"Basic {token}"}
        
        return {}
    
    def clear(self) -> None:
        """Drop cached headers, forcing a rebuild on next request."""
        self._headers = None
