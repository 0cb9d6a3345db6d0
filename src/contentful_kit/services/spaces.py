"""Space operations."""

from ..models.request.query import Query
from ..models.resources import Space
from .base import AnyCollection, BaseService, Result, require_id, version_headers


class SpacesService(BaseService):
    """List, create, update and delete spaces."""

    def list(self, query: Query | None = None, limit: int | None = None) -> AnyCollection[Space]:
        """Collection of every space the token can access."""
        return self._collection("/spaces", Space, query, limit=limit)

    def get(self, space_id: str) -> Result[Space]:
        return self._execute("GET", f"/spaces/{space_id}", Space)

    def upsert(self, space: Space) -> Result[Space]:
        """Create a space, or update it when it already exists on the server.

        New spaces are created in the organization configured on the client.
        """
        if space.is_persisted:
            return self._execute(
                "PUT",
                f"/spaces/{require_id(space)}",
                Space,
                body=space.to_payload(),
                headers=version_headers(space),
            )
        return self._execute(
            "POST", "/spaces", Space, body=space.to_payload(), headers=version_headers(space)
        )

    def delete(self, space: Space) -> Result[None]:
        path = f"/spaces/{require_id(space)}"
        return self._execute("DELETE", path, headers=version_headers(space))
