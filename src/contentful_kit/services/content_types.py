"""Content type operations."""

from ..models.request.query import Query
from ..models.resources import ContentType
from .base import AnyCollection, BaseService, Result, require_id, version_headers


class ContentTypesService(BaseService):
    """Manage content types of a space environment."""

    def list(
        self, space_id: str, query: Query | None = None, limit: int | None = None
    ) -> AnyCollection[ContentType]:
        path = self._space_path(space_id, "content_types")
        return self._collection(path, ContentType, query, limit=limit)

    def get(self, space_id: str, content_type_id: str) -> Result[ContentType]:
        return self._execute(
            "GET", self._space_path(space_id, "content_types", content_type_id), ContentType
        )

    def upsert(self, space_id: str, content_type: ContentType) -> Result[ContentType]:
        """Create or update a content type.

        A content type that already has an ID is written with PUT to that ID,
        otherwise it is created with POST and the server assigns the ID.
        """
        if content_type.id:
            method, path = "PUT", self._space_path(space_id, "content_types", content_type.id)
        else:
            method, path = "POST", self._space_path(space_id, "content_types")
        return self._execute(
            method,
            path,
            ContentType,
            body=content_type.to_payload(),
            headers=version_headers(content_type),
        )

    def delete(self, space_id: str, content_type: ContentType) -> Result[None]:
        return self._execute(
            "DELETE",
            self._space_path(space_id, "content_types", require_id(content_type)),
            headers=version_headers(content_type),
        )

    def activate(self, space_id: str, content_type: ContentType) -> Result[ContentType]:
        """Publish a content type so entries can use it."""
        return self._execute(
            "PUT",
            self._space_path(space_id, "content_types", require_id(content_type), "published"),
            ContentType,
            headers=version_headers(content_type),
        )

    def deactivate(self, space_id: str, content_type: ContentType) -> Result[ContentType]:
        return self._execute(
            "DELETE",
            self._space_path(space_id, "content_types", require_id(content_type), "published"),
            ContentType,
            headers=version_headers(content_type),
        )
