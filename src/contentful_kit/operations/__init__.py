"""Operations module for contentful-kit.

Collections (paging and sync cursors) and streaming helpers built on them.
"""

from contentful_kit.operations.collection import AsyncCollection, BaseCollection, Collection
from contentful_kit.operations.streaming import stream_items, stream_items_async

__all__ = [
    "AsyncCollection",
    "BaseCollection",
    "Collection",
    "stream_items",
    "stream_items_async",
]
