"""Pytest configuration and shared fixtures."""

import os
from typing import Any

import pytest

from contentful_kit import ContentfulConfig

BASE_URL = "https://api.contentful.com"
UPLOAD_URL = "https://upload.contentful.com"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CONTENTFUL_* variables of the developer machine out of tests."""
    for name in list(os.environ):
        if name.startswith("CONTENTFUL_"):
            monkeypatch.delenv(name)


@pytest.fixture
def contentful_config() -> ContentfulConfig:
    """Create a test Contentful configuration.

    Returns:
        Test configuration with mock values
    """
    return ContentfulConfig(
        access_token="test-token-12345678",
        base_url=BASE_URL,
    )


@pytest.fixture
def env_config() -> ContentfulConfig:
    """Configuration scoped to the "staging" environment."""
    return ContentfulConfig(
        access_token="test-token-12345678",
        base_url=BASE_URL,
        environment="staging",
    )


def _page(
    items: list[Any],
    total: int | None = None,
    skip: int = 0,
    limit: int = 100,
    **extra: Any,
) -> dict[str, Any]:
    """Build a collection page payload."""
    page: dict[str, Any] = {
        "sys": {"type": "Array"},
        "skip": skip,
        "limit": limit,
        "items": items,
    }
    if total is not None:
        page["total"] = total
    page.update(extra)
    return page


def _error(kind: str, message: str = "", **extra: Any) -> dict[str, Any]:
    """Build an error envelope payload."""
    envelope: dict[str, Any] = {
        "sys": {"type": "Error", "id": kind},
        "message": message,
        "requestId": "req-123",
    }
    envelope.update(extra)
    return envelope


def _entry(entry_id: str, content_type: str = "article", version: int = 1) -> dict[str, Any]:
    """Build an entry payload."""
    return {
        "sys": {
            "id": entry_id,
            "type": "Entry",
            "version": version,
            "createdAt": "2024-01-01T00:00:00.000Z",
            "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": content_type}},
        },
        "fields": {"title": {"en-US": f"Entry {entry_id}"}},
    }


@pytest.fixture
def make_page() -> Any:
    return _page


@pytest.fixture
def make_error() -> Any:
    return _error


@pytest.fixture
def make_entry() -> Any:
    return _entry
