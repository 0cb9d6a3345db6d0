"""Unit tests for the HTTP clients and the request executor."""

import asyncio
import threading

import httpx
import pytest
import respx

from contentful_kit import AsyncClient, ContentfulConfig, Entry, RetryConfig, SyncClient
from contentful_kit.client import async_client, sync_client
from contentful_kit.exceptions import (
    ConnectionError as ContentfulConnectionError,
)
from contentful_kit.exceptions import (
    FormatError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestCancelledError,
)
from contentful_kit.exceptions import (
    TimeoutError as ContentfulTimeoutError,
)

ENTRY_URL = "https://api.contentful.com/spaces/sp/entries/e1"
RESET_HEADER = "X-Contentful-RateLimit-Reset"


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record rate-limit backoffs instead of sleeping."""
    recorded: list[float] = []

    def fake_backoff(seconds: float, cancel: threading.Event | None = None) -> None:
        recorded.append(seconds)

    monkeypatch.setattr(sync_client, "_backoff", fake_backoff)
    return recorded


def _rate_limited(reset: str | None = "2") -> httpx.Response:
    headers = {RESET_HEADER: reset} if reset is not None else {}
    return httpx.Response(
        429,
        json={"sys": {"type": "Error", "id": "RateLimitExceeded"}, "message": "slow down"},
        headers=headers,
    )


class TestSyncClient:
    """Test cases for SyncClient."""

    def test_initialization(self, contentful_config: ContentfulConfig) -> None:
        client = SyncClient(contentful_config)
        assert client.base_url == "https://api.contentful.com"
        assert client.upload_url == "https://upload.contentful.com"
        assert client.config == contentful_config
        client.close()

    def test_blank_token_rejected(self) -> None:
        with pytest.raises(ValueError, match="Access token"):
            SyncClient(ContentfulConfig(access_token="   "))

    def test_context_manager(self, contentful_config: ContentfulConfig) -> None:
        with SyncClient(contentful_config) as client:
            assert client.entries is not None

    @respx.mock
    def test_management_headers(self, contentful_config: ContentfulConfig, make_entry) -> None:
        route = respx.get(ENTRY_URL).mock(return_value=httpx.Response(200, json=make_entry("e1")))

        with SyncClient(contentful_config) as client:
            entry = client.entries.get("sp", "e1")

        assert isinstance(entry, Entry)
        assert entry.id == "e1"
        headers = route.calls[0].request.headers
        assert headers["Authorization"] == "Bearer test-token-12345678"
        assert headers["Content-Type"] == "application/vnd.contentful.management.v1+json"
        assert headers["X-Contentful-User-Agent"].startswith("sdk contentful-kit/")

    @respx.mock
    def test_delivery_headers(self, make_entry) -> None:
        config = ContentfulConfig(access_token="cda-token", api="delivery")
        route = respx.get("https://cdn.contentful.com/spaces/sp/entries/e1").mock(
            return_value=httpx.Response(200, json=make_entry("e1"))
        )

        with SyncClient(config) as client:
            client.entries.get("sp", "e1")

        headers = route.calls[0].request.headers
        assert headers["Content-Type"] == "application/vnd.contentful.delivery.v1+json"
        assert "X-Contentful-User-Agent" not in headers

    def test_preview_host(self) -> None:
        with SyncClient(ContentfulConfig(access_token="cpa", api="preview")) as client:
            assert client.base_url == "https://preview.contentful.com"

    @respx.mock
    def test_default_query_params_are_merged(self, make_entry) -> None:
        config = ContentfulConfig(access_token="token", query_params={"locale": "de-DE"})
        route = respx.get(ENTRY_URL).mock(return_value=httpx.Response(200, json=make_entry("e1")))

        with SyncClient(config) as client:
            client.entries.get("sp", "e1")

        assert route.calls[0].request.url.params["locale"] == "de-DE"

    @respx.mock
    def test_explicit_params_override_defaults(self, make_entry) -> None:
        config = ContentfulConfig(access_token="token", query_params={"locale": "de-DE"})
        route = respx.get(ENTRY_URL).mock(return_value=httpx.Response(200, json=make_entry("e1")))

        with SyncClient(config) as client:
            client.entries.get("sp", "e1", locale="en-US")

        assert route.calls[0].request.url.params.get_list("locale") == ["en-US"]

    @respx.mock
    def test_not_found(self, contentful_config: ContentfulConfig) -> None:
        respx.get(ENTRY_URL).mock(
            return_value=httpx.Response(404, json={"sys": {"type": "Error", "id": "NotFound"}})
        )

        with SyncClient(contentful_config) as client:
            with pytest.raises(NotFoundError):
                client.entries.get("sp", "e1")

    @respx.mock
    def test_redirect_range_counts_as_success(self, contentful_config: ContentfulConfig) -> None:
        respx.get(ENTRY_URL).mock(return_value=httpx.Response(304))

        with SyncClient(contentful_config) as client:
            assert client.entries.get("sp", "e1") is None

    @respx.mock
    def test_no_content(self, contentful_config: ContentfulConfig) -> None:
        respx.delete(ENTRY_URL).mock(return_value=httpx.Response(204))

        with SyncClient(contentful_config) as client:
            assert client.entries.delete("sp", "e1") is None

    @respx.mock
    def test_undecodable_success_body(self, contentful_config: ContentfulConfig) -> None:
        respx.get(ENTRY_URL).mock(return_value=httpx.Response(200, content=b"{not json"))

        with SyncClient(contentful_config) as client:
            with pytest.raises(FormatError):
                client.entries.get("sp", "e1")

    @respx.mock
    def test_raw_request(self, contentful_config: ContentfulConfig) -> None:
        respx.get("https://api.contentful.com/spaces/sp").mock(
            return_value=httpx.Response(200, json={"name": "Blog"})
        )

        with SyncClient(contentful_config) as client:
            assert client.request("GET", "/spaces/sp") == {"name": "Blog"}


class TestRateLimitRetry:
    """Rate-limited requests wait for the reported reset delay."""

    @respx.mock
    def test_retries_after_reset_delay(
        self, contentful_config: ContentfulConfig, sleeps: list[float], make_entry
    ) -> None:
        route = respx.get(ENTRY_URL)
        route.side_effect = [_rate_limited("2"), httpx.Response(200, json=make_entry("e1"))]

        with SyncClient(contentful_config) as client:
            entry = client.entries.get("sp", "e1")

        assert entry.id == "e1"
        assert route.call_count == 2
        assert sleeps == [2.0]

    @respx.mock
    def test_retries_until_success(
        self, contentful_config: ContentfulConfig, sleeps: list[float], make_entry
    ) -> None:
        route = respx.get(ENTRY_URL)
        route.side_effect = [
            _rate_limited("1"),
            _rate_limited("3"),
            httpx.Response(200, json=make_entry("e1")),
        ]

        with SyncClient(contentful_config) as client:
            client.entries.get("sp", "e1")

        assert route.call_count == 3
        assert sleeps == [1.0, 3.0]

    @respx.mock
    def test_no_retry_without_reset_header(
        self, contentful_config: ContentfulConfig, sleeps: list[float]
    ) -> None:
        route = respx.get(ENTRY_URL).mock(return_value=_rate_limited(None))

        with SyncClient(contentful_config) as client:
            with pytest.raises(RateLimitError) as exc_info:
                client.entries.get("sp", "e1")

        assert exc_info.value.reset_seconds is None
        assert route.call_count == 1
        assert sleeps == []

    @respx.mock
    def test_max_attempts_bounds_retries(self, sleeps: list[float]) -> None:
        config = ContentfulConfig(access_token="token", retry=RetryConfig(max_attempts=2))
        route = respx.get(ENTRY_URL).mock(return_value=_rate_limited("1"))

        with SyncClient(config) as client:
            with pytest.raises(RateLimitError):
                client.entries.get("sp", "e1")

        assert route.call_count == 2
        assert sleeps == [1.0]

    @respx.mock
    def test_body_is_resent(
        self, contentful_config: ContentfulConfig, sleeps: list[float], make_entry
    ) -> None:
        route = respx.put(ENTRY_URL)
        route.side_effect = [_rate_limited("1"), httpx.Response(200, json=make_entry("e1", version=2))]
        entry = Entry.model_validate(make_entry("e1"))

        with SyncClient(contentful_config) as client:
            updated = client.entries.upsert("sp", entry)

        assert updated.version == 2
        first, second = (call.request for call in route.calls)
        assert first.content == second.content
        assert b'"title"' in second.content

    def test_cancel_before_send(self, contentful_config: ContentfulConfig) -> None:
        cancel = threading.Event()
        cancel.set()

        with respx.mock(assert_all_called=False) as router:
            route = router.get(ENTRY_URL).mock(return_value=httpx.Response(200, json={}))

            with SyncClient(contentful_config) as client:
                request = client.build_request("GET", "/spaces/sp/entries/e1")
                with pytest.raises(RequestCancelledError):
                    client.execute(request, cancel=cancel)

        assert route.call_count == 0

    @respx.mock
    def test_cancel_during_backoff(self, contentful_config: ContentfulConfig) -> None:
        cancel = threading.Event()

        def rate_limit_and_cancel(request: httpx.Request) -> httpx.Response:
            cancel.set()
            return _rate_limited("30")

        route = respx.get(ENTRY_URL).mock(side_effect=rate_limit_and_cancel)

        with SyncClient(contentful_config) as client:
            request = client.build_request("GET", "/spaces/sp/entries/e1")
            with pytest.raises(RequestCancelledError):
                client.execute(request, cancel=cancel)

        assert route.call_count == 1


class TestTransportErrors:
    """Transport failures are never reported as API errors."""

    @respx.mock
    def test_connect_error(self, contentful_config: ContentfulConfig) -> None:
        respx.get(ENTRY_URL).mock(side_effect=httpx.ConnectError("refused"))

        with SyncClient(contentful_config) as client:
            with pytest.raises(ContentfulConnectionError):
                client.entries.get("sp", "e1")

    @respx.mock
    def test_timeout(self, contentful_config: ContentfulConfig) -> None:
        respx.get(ENTRY_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with SyncClient(contentful_config) as client:
            with pytest.raises(ContentfulTimeoutError):
                client.entries.get("sp", "e1")

    @respx.mock
    def test_other_transport_error(self, contentful_config: ContentfulConfig) -> None:
        respx.get(ENTRY_URL).mock(side_effect=httpx.ReadError("reset"))

        with SyncClient(contentful_config) as client:
            with pytest.raises(NetworkError) as exc_info:
                client.entries.get("sp", "e1")

        assert isinstance(exc_info.value.__cause__, httpx.ReadError)


class TestAsyncClient:
    """Test cases for AsyncClient."""

    @pytest.mark.asyncio
    async def test_context_manager(self, contentful_config: ContentfulConfig) -> None:
        async with AsyncClient(contentful_config) as client:
            assert client.base_url == "https://api.contentful.com"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_entry(self, contentful_config: ContentfulConfig, make_entry) -> None:
        respx.get(ENTRY_URL).mock(return_value=httpx.Response(200, json=make_entry("e1")))

        async with AsyncClient(contentful_config) as client:
            entry = await client.entries.get("sp", "e1")

        assert isinstance(entry, Entry)
        assert entry.content_type_id == "article"

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_retry(
        self,
        contentful_config: ContentfulConfig,
        monkeypatch: pytest.MonkeyPatch,
        make_entry,
    ) -> None:
        recorded: list[float] = []

        async def fake_backoff(seconds: float, cancel=None) -> None:
            recorded.append(seconds)

        monkeypatch.setattr(async_client, "_backoff", fake_backoff)
        route = respx.get(ENTRY_URL)
        route.side_effect = [_rate_limited("4"), httpx.Response(200, json=make_entry("e1"))]

        async with AsyncClient(contentful_config) as client:
            entry = await client.entries.get("sp", "e1")

        assert entry.id == "e1"
        assert recorded == [4.0]

    @pytest.mark.asyncio
    @respx.mock
    async def test_cancel_during_backoff(self, contentful_config: ContentfulConfig) -> None:
        cancel = asyncio.Event()

        def rate_limit_and_cancel(request: httpx.Request) -> httpx.Response:
            cancel.set()
            return _rate_limited("30")

        respx.get(ENTRY_URL).mock(side_effect=rate_limit_and_cancel)

        async with AsyncClient(contentful_config) as client:
            request = client.build_request("GET", "/spaces/sp/entries/e1")
            with pytest.raises(RequestCancelledError):
                await client.execute(request, cancel=cancel)

    @pytest.mark.asyncio
    @respx.mock
    async def test_connect_error(self, contentful_config: ContentfulConfig) -> None:
        respx.get(ENTRY_URL).mock(side_effect=httpx.ConnectError("refused"))

        async with AsyncClient(contentful_config) as client:
            with pytest.raises(ContentfulConnectionError):
                await client.entries.get("sp", "e1")
