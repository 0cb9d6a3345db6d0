"""HTTP clients for the Contentful API."""

from .async_client import AsyncClient
from .base import BaseClient
from .sync_client import SyncClient

__all__ = ["AsyncClient", "BaseClient", "SyncClient"]
