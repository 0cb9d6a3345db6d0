"""Utility modules for contentful-kit.

This package contains helper utilities including:
- Sync token extraction
- curl rendering for debug logging
"""

from contentful_kit.utils.curl import to_curl
from contentful_kit.utils.sync_token import SYNC_TOKEN_PATTERN, extract_sync_token

__all__ = [
    "SYNC_TOKEN_PATTERN",
    "extract_sync_token",
    "to_curl",
]
