"""Delivery API key operations (space level)."""

from ..models.request.query import Query
from ..models.resources import APIKey
from .base import AnyCollection, BaseService, Result, require_id, version_headers


class APIKeysService(BaseService):
    def _path(self, space_id: str, *segments: str) -> str:
        return self._space_path(space_id, "api_keys", *segments, scoped=False)

    def list(
        self, space_id: str, query: Query | None = None, limit: int | None = None
    ) -> AnyCollection[APIKey]:
        return self._collection(self._path(space_id), APIKey, query, limit=limit)

    def get(self, space_id: str, api_key_id: str) -> Result[APIKey]:
        return self._execute("GET", self._path(space_id, api_key_id), APIKey)

    def upsert(self, space_id: str, api_key: APIKey) -> Result[APIKey]:
        if api_key.is_persisted:
            method, path = "PUT", self._path(space_id, require_id(api_key))
        else:
            method, path = "POST", self._path(space_id)
        return self._execute(
            method, path, APIKey, body=api_key.to_payload(), headers=version_headers(api_key)
        )

    def delete(self, space_id: str, api_key: APIKey) -> Result[None]:
        return self._execute(
            "DELETE", self._path(space_id, require_id(api_key)), headers=version_headers(api_key)
        )
