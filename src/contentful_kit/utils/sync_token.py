"""Sync token extraction.

List and sync responses point at the next page with ``nextPageUrl`` /
``nextSyncUrl``; the continuation cursor is the ``sync_token`` query
parameter embedded in those URLs.
"""

import re

SYNC_TOKEN_PATTERN = re.compile(r"sync_token=([A-Za-z0-9_-]+)")


def extract_sync_token(url: str) -> str | None:
    """Extract the sync token from a next-page or next-sync URL.

    Args:
        url: URL returned by the API

    Returns:
        The first ``sync_token`` value in the URL, or None if there is none

    Example:
        >>> extract_sync_token("https://cdn.contentful.com/spaces/x/sync?sync_token=AbC-12_3")
        'AbC-12_3'
    """
    match = SYNC_TOKEN_PATTERN.search(url)
    return match.group(1) if match else None
