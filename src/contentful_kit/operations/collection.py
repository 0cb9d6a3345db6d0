"""Paginating and synchronizing collections.

A collection is a stateful cursor over the pages of a list or sync
endpoint. It owns the query parameters, advances either by ``skip`` or by
sync token, and keeps the fields of the most recently fetched page.

Paging modes:
    - skip paging: ``skip = limit * (page - 1)`` is sent with the query
    - sync paging: once a ``sync_token`` is known, every advance sends only
      that token and never ``skip``

Example:
    ```python
    with SyncClient(config) as client:
        entries = client.entries.list("space-id").drain_all()
        for entry in entries.items:
            print(entry.sys.id)
    ```
"""

import asyncio
import json
import logging
import threading
from collections.abc import AsyncGenerator, Generator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import FormatError
from ..models.request.query import Query
from ..models.resources import Asset, Entry, IncludeAsset
from ..models.response.collection import CollectionPage
from ..models.response.error import ErrorDetails, StructuralError
from ..models.sys import Sys
from ..utils.sync_token import extract_sync_token

if TYPE_CHECKING:
    from ..client.async_client import AsyncClient
    from ..client.sync_client import SyncClient

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M")

DEFAULT_LIMIT = 100


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def recode(values: Any, model: type[M]) -> list[M]:
    """Re-serialize values to JSON and decode them as a list of ``model``.

    Args:
        values: Decoded items (plain JSON values or pydantic models)
        model: Target item type

    Returns:
        Typed list

    Raises:
        FormatError: If the values do not fit the target type
    """
    if isinstance(values, list):
        values = [_to_jsonable(v) for v in values]
    raw = json.dumps(values)
    try:
        return TypeAdapter(list[model]).validate_json(raw)  # type: ignore[valid-type]
    except PydanticValidationError as e:
        name = getattr(model, "__name__", str(model))
        raise FormatError(f"Could not cast collection items to {name}: {e}") from e


def _index_by_id(values: list[M]) -> dict[str, M]:
    index: dict[str, M] = {}
    for value in values:
        sys = getattr(value, "sys", None)
        entity_id = getattr(sys, "id", None)
        if entity_id:
            index[entity_id] = value
    return index


class BaseCollection(Generic[T]):
    """Cursor state shared by the sync and async collections.

    Attributes:
        limit: Page size, fixed for the lifetime of the collection
        page: 1-based count of pages fetched by ``advance``
        sync_token: Continuation cursor; non-empty switches to sync paging
        query: Parameters sent with the next fetch
        total: Server-reported item count
        skip: Offset of the current page
        items: Items of the current page (replaced on every fetch)
        includes: Side-loaded entities keyed by type ("Entry", "Asset")
        next_page_url: Raw continuation URL for the next page
        next_sync_url: Raw continuation URL for the next sync
        errors: Structural per-item errors; informational, never raised
        details: Validation details embedded in the payload
    """

    def __init__(
        self,
        request: httpx.Request,
        item_type: Any = dict[str, Any],
        *,
        query: Query | None = None,
        limit: int | None = None,
        sync_token: str | None = None,
    ) -> None:
        """Initialize the collection.

        Args:
            request: Request template (method, URL, headers)
            item_type: Type each item is decoded into
            query: Initial query parameters
            limit: Page size (the query's limit, else 100)
            sync_token: Resume a sync from this token
        """
        self._request = request
        self.item_type = item_type
        self.query = query.copy() if query is not None else Query()
        if limit is None:
            sent = self.query.get("limit")
            limit = int(sent[0]) if sent else DEFAULT_LIMIT
        self.limit = limit
        self.query.limit(self.limit)
        self.page = 1
        self.sync_token = sync_token or ""

        self.sys: Sys | None = None
        self.total = 0
        self.skip = 0
        self.items: list[T] = []
        self.includes: dict[str, Any] = {}
        self.next_page_url: str | None = None
        self.next_sync_url: str | None = None
        self.errors: list[StructuralError] = []
        self.details: ErrorDetails | None = None
        self._reported_total: int | None = None

    @property
    def request(self) -> httpx.Request:
        """Request template the collection fetches from."""
        return self._request

    @property
    def is_syncing(self) -> bool:
        """Whether advances use the sync token instead of ``skip``."""
        return bool(self.sync_token)

    def _page_model(self) -> Any:
        return CollectionPage[self.item_type]  # type: ignore[name-defined]

    def _build_request(self) -> httpx.Request:
        template = self._request
        url = template.url.copy_with(params=self.query.to_query_params())
        return httpx.Request(
            template.method, url, headers=template.headers, extensions=template.extensions
        )

    def _prepare_advance(self) -> None:
        if self.sync_token:
            self.query = Query().sync_token(self.sync_token)
        else:
            self.query.skip(self.limit * (self.page - 1))

    def _sent_skip(self) -> int:
        values = self.query.get("skip")
        return int(values[0]) if values else 0

    def _apply(self, page: "CollectionPage[T] | None") -> None:
        """Overwrite the current fields with a freshly decoded page."""
        if page is None:
            page = CollectionPage()
        self.sys = page.sys
        self._reported_total = page.total
        self.total = page.total or 0
        self.skip = page.skip if page.skip is not None else self._sent_skip()
        self.items = list(page.items)
        self.includes = dict(page.includes)
        self.next_page_url = page.next_page_url
        self.next_sync_url = page.next_sync_url
        self.errors = list(page.errors)
        self.details = page.details

        if self.errors:
            logger.debug(f"Page carries {len(self.errors)} structural error(s)")

    def _complete_advance(self) -> None:
        self.page += 1
        if self.next_page_url:
            self.sync_token = self._token_from(self.next_page_url)
        elif self.next_sync_url:
            self.sync_token = self._token_from(self.next_sync_url)

    @staticmethod
    def _token_from(url: str) -> str:
        token = extract_sync_token(url)
        if token is None:
            raise FormatError(f"Continuation URL has no sync_token: {url}")
        return token

    def _is_last_page(self, skip_paging: bool) -> bool:
        if len(self.items) < self.limit:
            return True
        if skip_paging and self._reported_total is not None:
            return self.skip + len(self.items) >= self._reported_total
        return False

    # Casting helpers

    def cast(self, model: type[M]) -> list[M]:
        """Decode the current items into ``model``."""
        return recode(self.items, model)

    def items_map(self, model: type[M]) -> dict[str, M]:
        """Decode the current items into ``model`` keyed by ``sys.id``."""
        return _index_by_id(self.cast(model))

    def cast_includes(self, type_name: str, model: type[M]) -> list[M]:
        """Decode side-loaded entities of one type into ``model``."""
        return recode(self.includes.get(type_name, []), model)

    def includes_map(self, type_name: str, model: type[M]) -> dict[str, M]:
        """Decode side-loaded entities of one type keyed by ``sys.id``."""
        return _index_by_id(self.cast_includes(type_name, model))

    def to_entries(self) -> list[Entry]:
        return self.cast(Entry)

    def to_assets(self) -> list[Asset]:
        return self.cast(Asset)

    def includes_entries(self) -> list[Entry]:
        return self.cast_includes("Entry", Entry)

    def includes_entry_map(self) -> dict[str, Entry]:
        return self.includes_map("Entry", Entry)

    def includes_assets(self) -> list[IncludeAsset]:
        return self.cast_includes("Asset", IncludeAsset)

    def includes_asset_map(self) -> dict[str, IncludeAsset]:
        return self.includes_map("Asset", IncludeAsset)

    def includes_localized_asset_map(self) -> dict[str, Asset]:
        return self.includes_map("Asset", Asset)

    def __repr__(self) -> str:
        mode = "sync" if self.is_syncing else "skip"
        return (
            f"{type(self).__name__}(url={str(self._request.url)!r}, mode={mode}, "
            f"page={self.page}, limit={self.limit}, items={len(self.items)})"
        )


class Collection(BaseCollection[T]):
    """Collection driven by the synchronous client."""

    def __init__(
        self,
        client: "SyncClient",
        request: httpx.Request,
        item_type: Any = dict[str, Any],
        *,
        query: Query | None = None,
        limit: int | None = None,
        sync_token: str | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        super().__init__(request, item_type, query=query, limit=limit, sync_token=sync_token)
        self._client = client
        self._cancel = cancel

    def _fetch(self) -> None:
        page = self._client.execute(self._build_request(), self._page_model(), cancel=self._cancel)
        self._apply(page)

    def fetch_once(self) -> "Collection[T]":
        """Fetch with the current query as-is, without moving the cursor."""
        self._fetch()
        return self

    def advance(self) -> "Collection[T]":
        """Fetch the next page.

        Returns:
            This collection, holding the new page

        Raises:
            ContentfulError: If the fetch fails
        """
        self._prepare_advance()
        self._fetch()
        self._complete_advance()
        return self

    def iter_pages(self) -> Generator["Collection[T]", None, None]:
        """Advance page by page, yielding the collection after each fetch."""
        while True:
            skip_paging = not self.sync_token
            self.advance()
            yield self
            if self._is_last_page(skip_paging):
                return

    def drain_all(self) -> "Collection[T]":
        """Fetch every remaining page and keep all items - beware of memory usage!

        Returns:
            This collection with ``items`` holding every fetched item in order
        """
        self.query.limit(self.limit)
        accumulated: list[T] = []
        for page in self.iter_pages():
            accumulated.extend(page.items)
        self.items = accumulated
        logger.debug(f"Drained {len(accumulated)} item(s) in {self.page - 1} page(s)")
        return self


class AsyncCollection(BaseCollection[T]):
    """Collection driven by the asynchronous client."""

    def __init__(
        self,
        client: "AsyncClient",
        request: httpx.Request,
        item_type: Any = dict[str, Any],
        *,
        query: Query | None = None,
        limit: int | None = None,
        sync_token: str | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        super().__init__(request, item_type, query=query, limit=limit, sync_token=sync_token)
        self._client = client
        self._cancel = cancel

    async def _fetch(self) -> None:
        page = await self._client.execute(
            self._build_request(), self._page_model(), cancel=self._cancel
        )
        self._apply(page)

    async def fetch_once(self) -> "AsyncCollection[T]":
        """Fetch with the current query as-is, without moving the cursor."""
        await self._fetch()
        return self

    async def advance(self) -> "AsyncCollection[T]":
        """Fetch the next page."""
        self._prepare_advance()
        await self._fetch()
        self._complete_advance()
        return self

    async def iter_pages(self) -> AsyncGenerator["AsyncCollection[T]", None]:
        """Advance page by page, yielding the collection after each fetch."""
        while True:
            skip_paging = not self.sync_token
            await self.advance()
            yield self
            if self._is_last_page(skip_paging):
                return

    async def drain_all(self) -> "AsyncCollection[T]":
        """Fetch every remaining page and keep all items - beware of memory usage!"""
        self.query.limit(self.limit)
        accumulated: list[T] = []
        async for page in self.iter_pages():
            accumulated.extend(page.items)
        self.items = accumulated
        logger.debug(f"Drained {len(accumulated)} item(s) in {self.page - 1} page(s)")
        return self
