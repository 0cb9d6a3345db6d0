"""Synchronous HTTP client for the Contentful API.

This module provides blocking I/O operations for simpler scripts
and applications that don't require concurrency.
"""

import functools
import logging
import threading
import time
from collections.abc import Iterable
from typing import Any, TypeVar

import httpx
from tenacity import Retrying

from ..exceptions import ConnectionError as ContentfulConnectionError
from ..exceptions import NetworkError, RequestCancelledError
from ..exceptions import TimeoutError as ContentfulTimeoutError
from ..models.request.query import Query
from ..models.resources import Entry
from ..operations.collection import Collection
from ..protocols import AuthProvider, ConfigProvider, HTTPClient
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


def _backoff(seconds: float, cancel: threading.Event | None = None) -> None:
    """Sleep before a rate-limit retry, aborting early when cancelled."""
    if cancel is None:
        time.sleep(seconds)
        return
    if cancel.wait(seconds):
        raise RequestCancelledError("Request cancelled during rate-limit backoff")


class SyncClient(BaseClient):
    """Synchronous HTTP client for the Contentful API.

    Resource operations are grouped in services (``client.entries``,
    ``client.assets``, ...). Rate-limited requests are retried after the
    delay reported by Contentful.

    Example:
        ```python
        from contentful_kit import ContentfulConfig, SyncClient

        config = ContentfulConfig(access_token="CFPAT-...", environment="master")

        with SyncClient(config) as client:
            space = client.spaces.get("space-id")
            for page in client.entries.list("space-id").iter_pages():
                print(len(page.items))
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: HTTPClient | None = None,
        auth: AuthProvider | None = None,
    ) -> None:
        """Initialize the synchronous client with dependency injection.

        Args:
            config: Configuration provider (typically ContentfulConfig)
            http_client: HTTP client (defaults to httpx.Client with pooling)
            auth: Authentication provider (passed to BaseClient)
        """
        super().__init__(config, auth=auth)

        self._client: HTTPClient | httpx.Client = (
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

    def _create_default_http_client(self) -> httpx.Client:
        """Create default HTTP client with connection pooling."""
        return httpx.Client(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    def __enter__(self) -> "SyncClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release connections.

        Only closes the client if it was created by this instance
        (not injected from outside).
        """
        if self._owns_client:
            self._client.close()
        logger.info("Closed synchronous Contentful client")

    def entries_of(self, model: type[E]) -> EntriesService[E]:
        """Entries service that decodes entries into ``model``.

        Example:
            ```python
            class Article(Entry):
                fields: ArticleFields

            articles = client.entries_of(Article).list("space-id").drain_all()
            ```
        """
        return EntriesService(self, model)

    def execute(
        self,
        request: httpx.Request,
        model: Any = None,
        *,
        cancel: threading.Event | None = None,
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
        request.read()

        retrying = Retrying(
            sleep=functools.partial(_backoff, cancel=cancel), **self._retry_options()
        )
        return retrying(self._send, request, model)

    def _send(self, request: httpx.Request, model: Any) -> Any:
        self._log_request(request)
        try:
            response = self._client.send(request)
        except httpx.ConnectError as e:
            raise ContentfulConnectionError(f"Failed to connect to {request.url.host}: {e}") from e
        except httpx.TimeoutException as e:
            raise ContentfulTimeoutError(
                f"Request timed out after {self.config.timeout}s: {e}"
            ) from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error for {request.method} {request.url}: {e}") from e

        return self._handle_response(request, response, model)

    def execute_each(
        self,
        requests: Iterable[httpx.Request],
        model: Any = None,
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        """Execute requests one after another, stopping at the first error."""
        for request in requests:
            self.execute(request, model, cancel=cancel)

    def collection(
        self,
        request: httpx.Request,
        item_type: Any = dict[str, Any],
        *,
        query: Query | None = None,
        limit: int | None = None,
        sync_token: str | None = None,
        cancel: threading.Event | None = None,
    ) -> Collection[Any]:
        """Create a collection over a list or sync endpoint.

        Args:
            request: Request template for the endpoint
            item_type: Type each item is decoded into
            query: Initial query parameters (merged over configured defaults)
            limit: Page size
            sync_token: Resume a sync from this token
            cancel: Event that aborts pending rate-limit backoffs

        Returns:
            Collection positioned before its first page
        """
        initial = self.default_query()
        if query is not None:
            initial.update(query)
        return Collection(
            self,
            request,
            item_type,
            query=initial,
            limit=limit,
            sync_token=sync_token,
            cancel=cancel,
        )

    def request(
        self,
        method: str,
        path: str,
        params: Query | dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        model: Any = dict[str, Any],
    ) -> Any:
        """Make a raw request to an API path.

        Args:
            method: HTTP method
            path: API path (e.g. "/spaces/abc")
            params: Query parameters
            content: Raw request body
            headers: Additional headers
            model: Type to decode the response into

        Returns:
            Decoded response body
        """
        return self.execute(
            self.build_request(method, path, params=params, content=content, headers=headers),
            model,
        )
