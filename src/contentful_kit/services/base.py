"""Shared plumbing for resource services.

Services only build requests. Execution is delegated to the owning client,
so the same service code returns plain values on ``SyncClient`` and
awaitables on ``AsyncClient``.
"""

import json
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, TypeVar, Union

from ..exceptions import VERSION_HEADER
from ..models.request.query import Query
from ..models.sys import VersionedModel
from ..operations.collection import AsyncCollection, Collection

if TYPE_CHECKING:
    from ..client.async_client import AsyncClient
    from ..client.sync_client import SyncClient

R = TypeVar("R")

Result = Union[R, Awaitable[R]]
AnyCollection = Union[Collection[R], AsyncCollection[R]]


def require_id(entity: VersionedModel) -> str:
    """Return the entity's ``sys.id``.

    Raises:
        ValueError: If the entity has not been given an ID yet
    """
    if not entity.id:
        raise ValueError(f"{type(entity).__name__} needs sys.id for this operation")
    return entity.id


def version_headers(entity: VersionedModel | None) -> dict[str, str]:
    """Optimistic concurrency header for a mutation (version 1 when unknown)."""
    version = entity.version if entity is not None else 1
    return {VERSION_HEADER: str(version)}


class BaseService:
    """Base class for request-building resource services."""

    def __init__(self, client: "SyncClient | AsyncClient") -> None:
        self._client = client

    def _space_path(self, space_id: str, *segments: str, scoped: bool = True) -> str:
        """Build ``/spaces/{space}[/environments/{env}]/{segments}``."""
        environment = self._client.environment_path() if scoped else ""
        suffix = "".join(f"/{segment}" for segment in segments)
        return f"/spaces/{space_id}{environment}{suffix}"

    def _execute(
        self,
        method: str,
        path: str,
        model: Any = None,
        *,
        body: dict[str, Any] | None = None,
        params: Query | dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        content = json.dumps(body).encode("utf-8") if body is not None else None
        request = self._client.build_request(
            method, path, params=params, content=content, headers=headers
        )
        return self._client.execute(request, model)

    def _collection(
        self,
        path: str,
        item_type: Any,
        query: Query | None = None,
        sync_token: str | None = None,
        limit: int | None = None,
    ) -> Any:
        request = self._client.build_request("GET", path)
        return self._client.collection(
            request, item_type, query=query, limit=limit, sync_token=sync_token
        )
