"""Configuration models for contentful-kit.

Settings can be passed explicitly or read from ``CONTENTFUL_*`` environment
variables (nested settings use ``__``, e.g. ``CONTENTFUL_RETRY__MAX_ATTEMPTS``).
"""

from typing import Literal

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APIName = Literal["management", "delivery", "preview"]

DEFAULT_BASE_URLS: dict[str, str] = {
    "management": "https://api.contentful.com",
    "delivery": "https://cdn.contentful.com",
    "preview": "https://preview.contentful.com",
}

DEFAULT_UPLOAD_URL = "https://upload.contentful.com"

RATE_LIMIT_RESET_HEADER = "X-Contentful-RateLimit-Reset"


class RetryConfig(BaseModel):
    """Rate-limit retry configuration.

    Rate-limited requests are retried after the number of seconds the server
    reports in ``reset_header``. Responses without that header are not
    retried.

    Attributes:
        max_attempts: Maximum number of attempts per request, or None to
            retry for as long as the server keeps rate limiting
        reset_header: Response header carrying seconds until quota reset
    """

    max_attempts: int | None = Field(None, ge=1, le=100)
    reset_header: str = RATE_LIMIT_RESET_HEADER


class ContentfulConfig(BaseSettings):
    """Contentful client configuration.

    Example:
        ```python
        config = ContentfulConfig(
            access_token="CFPAT-...",
            environment="staging",
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENTFUL_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    access_token: SecretStr = Field(..., description="Bearer access token")
    api: APIName = Field("management", description="Which Contentful API to talk to")
    base_url: str | None = Field(None, description="Override the API host for `api`")
    upload_url: str = Field(DEFAULT_UPLOAD_URL, description="Upload API host")
    environment: str | None = Field(None, description="Environment ID for scoped paths")
    organization_id: str | None = Field(None, description="Organization for space creation")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(10, ge=1, description="Connection pool size")
    verify_ssl: bool = True
    debug: bool = Field(False, description="Log curl reproductions of requests")
    query_params: dict[str, str] = Field(
        default_factory=dict, description="Query parameters added to every request"
    )
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @field_validator("base_url", "upload_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str | None:
        return value.rstrip("/") if value else value

    def get_base_url(self) -> str:
        """Get the API host for the configured API."""
        return self.base_url or DEFAULT_BASE_URLS[self.api]

    def get_upload_url(self) -> str:
        """Get the upload host."""
        return self.upload_url

    def get_access_token(self) -> str:
        """Get the access token as plain text."""
        return self.access_token.get_secret_value()
