"""Protocols for dependency injection.

Clients depend on these structural interfaces rather than concrete classes,
so tests and applications can inject their own transport, authentication or
configuration source.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx

if TYPE_CHECKING:
    from .models.config import APIName, RetryConfig


@runtime_checkable
class AuthProvider(Protocol):
    """Supplies authentication headers."""

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        ...

    def validate_token(self) -> bool:
        """Check that credentials are usable."""
        ...


@runtime_checkable
class ConfigProvider(Protocol):
    """Supplies client configuration."""

    def get_base_url(self) -> str:
        ...

    def get_upload_url(self) -> str:
        ...

    def get_access_token(self) -> str:
        ...

    @property
    def api(self) -> "APIName":
        ...

    @property
    def environment(self) -> str | None:
        ...

    @property
    def organization_id(self) -> str | None:
        ...

    @property
    def timeout(self) -> float:
        ...

    @property
    def max_connections(self) -> int:
        ...

    @property
    def verify_ssl(self) -> bool:
        ...

    @property
    def debug(self) -> bool:
        ...

    @property
    def query_params(self) -> dict[str, str]:
        ...

    @property
    def retry(self) -> "RetryConfig":
        ...


@runtime_checkable
class HTTPClient(Protocol):
    """Synchronous transport that sends prepared requests."""

    def send(self, request: httpx.Request, **kwargs: Any) -> httpx.Response:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Asynchronous transport that sends prepared requests."""

    async def send(self, request: httpx.Request, **kwargs: Any) -> httpx.Response:
        ...

    async def aclose(self) -> None:
        ...
