"""Entry operations, including the sync endpoint."""

from typing import Any, Generic, TypeVar

from ..models.request.query import Query
from ..models.resources import Entry
from .base import AnyCollection, BaseService, Result, require_id, version_headers

CONTENT_TYPE_HEADER = "X-Contentful-Content-Type"

E = TypeVar("E", bound=Entry)


class EntriesService(BaseService, Generic[E]):
    """Manage entries of a space environment.

    Items are decoded into ``model``; pass an ``Entry`` subclass with typed
    ``fields`` to get typed entries (see ``client.entries_of``).
    """

    def __init__(self, client: Any, model: type[E] = Entry) -> None:  # type: ignore[assignment]
        super().__init__(client)
        self._model = model

    def _entry_path(self, space_id: str, entry_id: str, *segments: str) -> str:
        return self._space_path(space_id, "entries", entry_id, *segments)

    def list(
        self, space_id: str, query: Query | None = None, limit: int | None = None
    ) -> AnyCollection[E]:
        path = self._space_path(space_id, "entries")
        return self._collection(path, self._model, query, limit=limit)

    def sync(
        self,
        space_id: str,
        initial: bool = True,
        sync_token: str | None = None,
        sync_type: str | None = None,
        limit: int | None = None,
    ) -> AnyCollection[dict[str, Any]]:
        """Collection over the sync endpoint.

        Sync pages mix entries, assets and deletions, so items stay plain
        dicts; use ``cast`` to decode them. Pass the ``sync_token`` of a
        previous sync to receive only changes since then.

        Args:
            space_id: Space ID
            initial: Start a fresh initial sync
            sync_token: Resume from this token instead
            sync_type: Restrict to "Entry", "Asset", "Deletion", ...
            limit: Page size

        Returns:
            Collection in sync mode once the first page is fetched
        """
        query = Query()
        if initial and not sync_token:
            query.initial()
        if sync_type:
            query.sync_type(sync_type)
        return self._collection(
            self._space_path(space_id, "sync"),
            dict[str, Any],
            query,
            sync_token=sync_token,
            limit=limit,
        )

    def get(self, space_id: str, entry_id: str, locale: str | None = None) -> Result[E]:
        params = Query().locale(locale) if locale else None
        path = self._entry_path(space_id, entry_id)
        return self._execute("GET", path, self._model, params=params)

    def upsert(self, space_id: str, entry: E) -> Result[E]:
        """Create or update an entry.

        Raises:
            ValueError: If the entry has no content type link
        """
        content_type_id = entry.content_type_id
        if not content_type_id:
            raise ValueError("Entry needs sys.contentType to be created or updated")

        headers = version_headers(entry)
        headers[CONTENT_TYPE_HEADER] = content_type_id

        if entry.id:
            method, path = "PUT", self._entry_path(space_id, entry.id)
        else:
            method, path = "POST", self._space_path(space_id, "entries")
        return self._execute(method, path, self._model, body=entry.to_payload(), headers=headers)

    def delete(self, space_id: str, entry: E | str) -> Result[None]:
        """Delete an entry given the entry itself or its ID."""
        if isinstance(entry, str):
            return self._execute("DELETE", self._entry_path(space_id, entry))
        return self._execute(
            "DELETE", self._entry_path(space_id, require_id(entry)), headers=version_headers(entry)
        )

    def publish(self, space_id: str, entry: E) -> Result[E]:
        return self._execute(
            "PUT",
            self._entry_path(space_id, require_id(entry), "published"),
            self._model,
            headers=version_headers(entry),
        )

    def unpublish(self, space_id: str, entry: E) -> Result[E]:
        return self._execute(
            "DELETE",
            self._entry_path(space_id, require_id(entry), "published"),
            self._model,
            headers=version_headers(entry),
        )

    def archive(self, space_id: str, entry: E) -> Result[E]:
        return self._execute(
            "PUT",
            self._entry_path(space_id, require_id(entry), "archived"),
            self._model,
            headers=version_headers(entry),
        )

    def unarchive(self, space_id: str, entry: E) -> Result[E]:
        return self._execute(
            "DELETE",
            self._entry_path(space_id, require_id(entry), "archived"),
            self._model,
            headers=version_headers(entry),
        )
