"""Tests for sync token extraction and curl rendering."""

import httpx
import pytest

from contentful_kit.utils import extract_sync_token, to_curl


class TestExtractSyncToken:
    @pytest.mark.parametrize(
        ("url", "token"),
        [
            ("https://cdn.contentful.com/spaces/x/sync?sync_token=abc123", "abc123"),
            ("https://cdn.contentful.com/spaces/x/sync?sync_token=A-b_C&limit=5", "A-b_C"),
            ("/spaces/x/sync?locale=en&sync_token=w5ZGw6JFwqZmVcKsE8Kow4grw45QdybC", "w5ZGw6JFwqZmVcKsE8Kow4grw45QdybC"),
        ],
    )
    def test_extracts_token(self, url: str, token: str) -> None:
        assert extract_sync_token(url) == token

    def test_first_token_wins(self) -> None:
        assert extract_sync_token("?sync_token=one&sync_token=two") == "one"

    def test_stops_at_disallowed_characters(self) -> None:
        assert extract_sync_token("?sync_token=abc%3Ddef") == "abc"

    @pytest.mark.parametrize("url", ["", "https://cdn.contentful.com/spaces/x/sync", "?sync_token="])
    def test_missing_token(self, url: str) -> None:
        assert extract_sync_token(url) is None


class TestToCurl:
    def test_get_request(self) -> None:
        request = httpx.Request(
            "GET",
            "https://api.contentful.com/spaces/sp/entries?limit=1",
            headers={"Authorization": "Bearer secret", "X-Custom": "yes"},
        )

        command = to_curl(request)

        assert command.startswith("curl -X GET")
        assert "'X-Custom: yes'" in command
        assert "secret" not in command
        assert "'https://api.contentful.com/spaces/sp/entries?limit=1'" in command

    def test_body_is_included(self) -> None:
        request = httpx.Request("PUT", "https://api.contentful.com/x", content=b'{"a": 1}')
        request.read()

        assert "--data-raw '{\"a\": 1}'" in to_curl(request)
