"""Configuration management via environment variables."""

from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ElasticSettings(BaseSettings):
    """
    Search cluster connection configuration.
    
    All values are read from environment variables prefixed with ELASTICSEARCH_.
    A .env file in the current directory is loaded automatically.
    
    Attributes:
        url: Base URL of the cluster (default: http://localhost:9200)
        api_key: Encoded API key, sent as "Authorization: ApiKey ..."
        username: Basic auth user name
        password: Basic auth password (stored securely)
        timeout: Per-request timeout in seconds
        verify_certs: Verify TLS certificates
        default_scroll: Scroll time-to-live used when none is given
    
    Example:
        # ELASTICSEARCH_URL=https://search.example.com:9200
        # ELASTICSEARCH_API_KEY=your-key
        
        settings = ElasticSettings()
        print(settings.base_url)
    """
    
    url: str = "http://localhost:9200"
    api_key: Optional[SecretStr] = None
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    timeout: float = 30.0
    verify_certs: bool = True
    default_scroll: str = "1m"
    
    model_config = SettingsConfigDict(
        env_prefix="ELASTICSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    
    @property
    def base_url(self) -> str:
        """Cluster URL without a trailing slash."""
        return self.url.rstrip("/")
