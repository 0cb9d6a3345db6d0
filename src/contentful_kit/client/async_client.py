"""Asynchronous HTTP client for the Contentful API.

This module provides non-blocking I/O operations for high-concurrency
applications and batch operations.
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any, TypeVar

import httpx
from tenacity import AsyncRetrying

from ..exceptions import ConnectionError as ContentfulConnectionError
from ..exceptions import NetworkError, RequestCancelledError
from ..exceptions import TimeoutError as ContentfulTimeoutError
from ..models.request.query import Query
from ..models.resources import Entry
from ..operations.collection import AsyncCollection
from ..protocols import AsyncHTTPClient, AuthProvider, ConfigProvider
from ..services import (
    APIKeysService,
    AssetsService,
    ContentTypesService,
    EntriesService,
    LocalesService,
    ScheduledActionsService,
    SpacesService,
    TagsService,
    UploadsService,
    WebhooksService,
)
from .base import BaseClient

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entry)


async def _backoff(seconds: float, cancel: asyncio.Event | None = None) -> None:
    """Sleep before a rate-limit retry, aborting early when cancelled."""
    if cancel is None:
        await asyncio.sleep(seconds)
        return
    try:
        await asyncio.wait_for(cancel.wait(), timeout=seconds)
    except asyncio.TimeoutError:
        return
    raise RequestCancelledError("Request cancelled during rate-limit backoff")


class AsyncClient(BaseClient):
    """Asynchronous HTTP client for the Contentful API.

    Services are shared with ``SyncClient``; here every operation returns an
    awaitable and collections are ``AsyncCollection`` instances.

    Example:
        ```python
        import asyncio
        from contentful_kit import AsyncClient, ContentfulConfig

        async def main():
            config = ContentfulConfig(access_token="CFPAT-...")

            async with AsyncClient(config) as client:
                entries = await client.entries.list("space-id").drain_all()
                print(len(entries.items))

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: AsyncHTTPClient | None = None,
        auth: AuthProvider | None = None,
    ) -> None:
        """Initialize the asynchronous client with dependency injection.

        Args:
            config: Configuration provider (typically ContentfulConfig)
            http_client: HTTP client (defaults to httpx.AsyncClient with pooling)
            auth: Authentication provider (passed to BaseClient)
        """
        super().__init__(config, auth=auth)

        self._client: AsyncHTTPClient | httpx.AsyncClient = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

        self.spaces = SpacesService(self)
        self.api_keys = APIKeysService(self)
        self.assets = AssetsService(self)
        self.content_types = ContentTypesService(self)
        self.entries: EntriesService[Entry] = EntriesService(self)
        self.locales = LocalesService(self)
        self.tags = TagsService(self)
        self.uploads = UploadsService(self)
        self.webhooks = WebhooksService(self)
        self.scheduled_actions = ScheduledActionsService(self)

    def _create_default_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    async def __aenter__(self) -> "AsyncClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client and release connections.

        Only closes the client if it was created by this instance.
        """
        if self._owns_client:
            await self._client.aclose()
        logger.info("Closed asynchronous Contentful client")

    def entries_of(self, model: type[E]) -> EntriesService[E]:
        """Entries service that decodes entries into ``model``."""
        return EntriesService(self, model)

    async def execute(
        self,
        request: httpx.Request,
        model: Any = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Any:
        """Send a request, retrying while Contentful reports a rate limit.

        Args:
            request: Prepared request
            model: Type to decode a successful body into; None to ignore it
            cancel: Event that aborts a pending rate-limit backoff

        Returns:
            Decoded body, or None

        Raises:
            APIError: Classified API error
            NetworkError: On transport failures
            FormatError: If a body cannot be decoded
            RequestCancelledError: If ``cancel`` is set
        """
        if cancel is not None and cancel.is_set():
            raise RequestCancelledError("Request cancelled before it was sent")

        # Buffer the body so retries can send it again
        await request.aread()

        async def sleep(seconds: float) -> None:
            await _backoff(seconds, cancel)

        retrying = AsyncRetrying(sleep=sleep, **self._retry_options())
        return await retrying(self._send, request, model)

    async def _send(self, request: httpx.Request, model: Any) -> Any:
        self._log_request(request)
        try:
            response = await self._client.send(request)
            await response.aread()
        except httpx.ConnectError as e:
            raise ContentfulConnectionError(f"Failed to connect to {request.url.host}: {e}") from e
        except httpx.TimeoutException as e:
            raise ContentfulTimeoutError(
                f"Request timed out after {self.config.timeout}s: {e}"
            ) from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error for {request.method} {request.url}: {e}") from e

        return self._handle_response(request, response, model)

    async def execute_each(
        self,
        requests: Iterable[httpx.Request],
        model: Any = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> None:
        """Execute requests one after another, stopping at the first error."""
        for request in requests:
            await self.execute(request, model, cancel=cancel)

    def collection(
        self,
        request: httpx.Request,
        item_type: Any = dict[str, Any],
        *,
        query: Query | None = None,
        limit: int | None = None,
        sync_token: str | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncCollection[Any]:
        """Create an async collection over a list or sync endpoint."""
        initial = self.default_query()
        if query is not None:
            initial.update(query)
        return AsyncCollection(
            self,
            request,
            item_type,
            query=initial,
            limit=limit,
            sync_token=sync_token,
            cancel=cancel,
        )

    async def request(
        self,
        method: str,
        path: str,
        params: Query | dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        model: Any = dict[str, Any],
    ) -> Any:
        """Make a raw request to an API path and decode the response."""
        return await self.execute(
            self.build_request(method, path, params=params, content=content, headers=headers),
            model,
        )
