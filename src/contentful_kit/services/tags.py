"""Content tag operations."""

from ..models.request.query import Query
from ..models.resources import Tag
from .base import AnyCollection, BaseService, Result, require_id, version_headers


class TagsService(BaseService):
    def list(
        self, space_id: str, query: Query | None = None, limit: int | None = None
    ) -> AnyCollection[Tag]:
        return self._collection(self._space_path(space_id, "tags"), Tag, query, limit=limit)

    def get(self, space_id: str, tag_id: str) -> Result[Tag]:
        return self._execute("GET", self._space_path(space_id, "tags", tag_id), Tag)

    def upsert(self, space_id: str, tag: Tag) -> Result[Tag]:
        """Create or update a tag.

        Tag IDs are chosen by the caller, so both cases are a PUT to the ID.

        Raises:
            ValueError: If the tag has no ``sys.id``
        """
        if not tag.id:
            raise ValueError("Tag needs sys.id to be created or updated")
        return self._execute(
            "PUT",
            self._space_path(space_id, "tags", tag.id),
            Tag,
            body=tag.to_payload(),
            headers=version_headers(tag),
        )

    def delete(self, space_id: str, tag: Tag) -> Result[None]:
        path = self._space_path(space_id, "tags", require_id(tag))
        return self._execute("DELETE", path, headers=version_headers(tag))
