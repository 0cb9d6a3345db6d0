"""Streaming pagination utilities for large result sets.

This module provides generators that walk a collection page by page,
allowing memory-efficient iteration over large datasets.
"""

from collections.abc import AsyncGenerator, Generator
from typing import TypeVar

from .collection import AsyncCollection, Collection

T = TypeVar("T")


def stream_items(collection: Collection[T]) -> Generator[T, None, None]:
    """Stream items from a collection with automatic pagination.

    Only one page is held in memory at a time.

    Args:
        collection: Collection positioned before its first page

    Yields:
        Items one at a time

    Example:
        >>> with SyncClient(config) as client:
        ...     for entry in stream_items(client.entries.list("space-id")):
        ...         print(entry.sys.id)
    """
    for page in collection.iter_pages():
        yield from page.items


async def stream_items_async(collection: AsyncCollection[T]) -> AsyncGenerator[T, None]:
    """Async version of stream_items.

    Example:
        >>> async with AsyncClient(config) as client:
        ...     async for entry in stream_items_async(client.entries.list("space-id")):
        ...         print(entry.sys.id)
    """
    async for page in collection.iter_pages():
        for item in page.items:
            yield item
