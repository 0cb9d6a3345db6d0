"""Asset operations."""

from ..models.request.query import Query
from ..models.resources import Asset
from .base import AnyCollection, BaseService, Result, require_id, version_headers


class AssetsService(BaseService):
    """Manage assets of a space environment."""

    def _asset_path(self, space_id: str, asset_id: str, *segments: str) -> str:
        return self._space_path(space_id, "assets", asset_id, *segments)

    def list(
        self, space_id: str, query: Query | None = None, limit: int | None = None
    ) -> AnyCollection[Asset]:
        return self._collection(self._space_path(space_id, "assets"), Asset, query, limit=limit)

    def get(self, space_id: str, asset_id: str, locale: str | None = None) -> Result[Asset]:
        params = Query().locale(locale) if locale else None
        return self._execute("GET", self._asset_path(space_id, asset_id), Asset, params=params)

    def upsert(self, space_id: str, asset: Asset) -> Result[Asset]:
        """Create or update an asset (PUT when it has an ID, POST otherwise)."""
        if asset.id:
            method, path = "PUT", self._asset_path(space_id, asset.id)
        else:
            method, path = "POST", self._space_path(space_id, "assets")
        return self._execute(
            method, path, Asset, body=asset.to_payload(), headers=version_headers(asset)
        )

    def delete(self, space_id: str, asset: Asset) -> Result[None]:
        return self._execute(
            "DELETE", self._asset_path(space_id, require_id(asset)), headers=version_headers(asset)
        )

    def process(self, space_id: str, asset: Asset) -> Result[None]:
        """Trigger file processing for every locale that has a file.

        One request is sent per locale, in order; the first failure stops
        the remaining requests.
        """
        headers = version_headers(asset)
        requests = [
            self._client.build_request(
                "PUT",
                self._asset_path(space_id, require_id(asset), "files", locale, "process"),
                headers=headers,
            )
            for locale in asset.fields.file
        ]
        return self._client.execute_each(requests)

    def publish(self, space_id: str, asset: Asset) -> Result[Asset]:
        return self._execute(
            "PUT",
            self._asset_path(space_id, require_id(asset), "published"),
            Asset,
            headers=version_headers(asset),
        )

    def unpublish(self, space_id: str, asset: Asset) -> Result[Asset]:
        return self._execute(
            "DELETE",
            self._asset_path(space_id, require_id(asset), "published"),
            Asset,
            headers=version_headers(asset),
        )
