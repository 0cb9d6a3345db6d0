"""Locale operations."""

from ..models.request.query import Query
from ..models.resources import Locale
from .base import AnyCollection, BaseService, Result, require_id, version_headers


class LocalesService(BaseService):
    def list(
        self, space_id: str, query: Query | None = None, limit: int | None = None
    ) -> AnyCollection[Locale]:
        return self._collection(self._space_path(space_id, "locales"), Locale, query, limit=limit)

    def get(self, space_id: str, locale_id: str) -> Result[Locale]:
        return self._execute("GET", self._space_path(space_id, "locales", locale_id), Locale)

    def upsert(self, space_id: str, locale: Locale) -> Result[Locale]:
        """Create a locale, or update it when the server already created it."""
        if locale.is_persisted:
            method, path = "PUT", self._space_path(space_id, "locales", require_id(locale))
        else:
            method, path = "POST", self._space_path(space_id, "locales")
        return self._execute(
            method, path, Locale, body=locale.to_payload(), headers=version_headers(locale)
        )

    def delete(self, space_id: str, locale: Locale) -> Result[None]:
        return self._execute(
            "DELETE",
            self._space_path(space_id, "locales", require_id(locale)),
            headers=version_headers(locale),
        )
