"""contentful-kit: A typed Python client for the Contentful APIs.

This package provides a comprehensive interface for the Contentful
Management, Delivery and Preview APIs, including:
- Synchronous and asynchronous clients
- Paginating and syncing collections
- Classified API errors
- Type-safe data models with Pydantic
- Automatic rate-limit backoff
"""

from .__version__ import __version__
from .auth import AccessTokenAuth
from .client import AsyncClient, SyncClient
from .exceptions import (
    APIError,
    ConnectionError,
    ContentfulError,
    FormatError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestCancelledError,
    TimeoutError,
    UnauthorizedError,
    ValidationError,
    VersionConflictError,
)
from .models import (
    APIKey,
    Asset,
    ContentfulConfig,
    ContentType,
    ContentTypeField,
    Entry,
    Link,
    Locale,
    Query,
    RetryConfig,
    ScheduledAction,
    Space,
    Sys,
    Tag,
    Upload,
    Webhook,
)
from .operations.collection import AsyncCollection, Collection
from .operations.streaming import stream_items, stream_items_async
from .protocols import AsyncHTTPClient, AuthProvider, ConfigProvider, HTTPClient
from .utils.sync_token import extract_sync_token

__all__ = [
    "__version__",
    # Clients
    "SyncClient",
    "AsyncClient",
    # Configuration
    "ContentfulConfig",
    "RetryConfig",
    "AccessTokenAuth",
    # Collections
    "Collection",
    "AsyncCollection",
    "Query",
    "extract_sync_token",
    # Streaming
    "stream_items",
    "stream_items_async",
    # Models
    "Sys",
    "Link",
    "Space",
    "Entry",
    "Asset",
    "ContentType",
    "ContentTypeField",
    "Locale",
    "Webhook",
    "APIKey",
    "Tag",
    "Upload",
    "ScheduledAction",
    # Protocols (for dependency injection)
    "AuthProvider",
    "ConfigProvider",
    "HTTPClient",
    "AsyncHTTPClient",
    # Exceptions
    "ContentfulError",
    "APIError",
    "NotFoundError",
    "UnauthorizedError",
    "RateLimitError",
    "ValidationError",
    "VersionConflictError",
    "NetworkError",
    "ConnectionError",
    "TimeoutError",
    "FormatError",
    "RequestCancelledError",
]
