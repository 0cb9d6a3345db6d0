"""Query builder for Contentful list and sync endpoints.

Parameters are kept as an ordered mapping from name to values and are
serialized into the request URL right before each request.

Example:
    >>> query = (Query()
    ...     .content_type("article")
    ...     .equal("fields.slug", "hello-world")
    ...     .order("-sys.createdAt")
    ...     .limit(10))
    >>> query.to_query_params()
    [('content_type', 'article'), ('fields.slug', 'hello-world'), ('order', '-sys.createdAt'), ('limit', '10')]
"""

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlencode

MAX_LIMIT = 1000


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


class Query:
    """Fluent, ordered query parameter builder."""

    def __init__(self, params: dict[str, Any] | None = None) -> None:
        """Initialize the query.

        Args:
            params: Optional initial parameters (name -> value)
        """
        self._params: dict[str, list[str]] = {}
        for name, value in (params or {}).items():
            self.set(name, value)

    def set(self, name: str, *values: Any) -> "Query":
        """Set a parameter, replacing previous values."""
        self._params[name] = [_format_value(v) for v in values]
        return self

    def add(self, name: str, value: Any) -> "Query":
        """Append a value to a parameter."""
        self._params.setdefault(name, []).append(_format_value(value))
        return self

    def update(self, other: "Query | dict[str, Any]") -> "Query":
        """Copy parameters from another query or mapping, replacing clashes."""
        if isinstance(other, Query):
            for name, values in other._params.items():
                self._params[name] = list(values)
        else:
            for name, value in other.items():
                self.set(name, value)
        return self

    def remove(self, name: str) -> "Query":
        """Remove a parameter if present."""
        self._params.pop(name, None)
        return self

    def get(self, name: str) -> list[str] | None:
        """Get the values of a parameter."""
        values = self._params.get(name)
        return list(values) if values is not None else None

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"Query({self._params!r})"

    def __str__(self) -> str:
        return urlencode(self.to_query_params())

    def copy(self) -> "Query":
        """Return an independent copy of this query."""
        clone = Query()
        clone._params = {name: list(values) for name, values in self._params.items()}
        return clone

    def to_query_params(self) -> list[tuple[str, str]]:
        """Serialize to ordered ``(name, value)`` pairs."""
        return [(name, value) for name, values in self._params.items() for value in values]

    # Paging

    def limit(self, limit: int) -> "Query":
        """Set the page size.

        Raises:
            ValueError: If limit is outside 1..1000
        """
        if not 1 <= limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}, got {limit}")
        return self.set("limit", limit)

    def skip(self, skip: int) -> "Query":
        """Set the offset of the first item."""
        if skip < 0:
            raise ValueError(f"skip must be non-negative, got {skip}")
        return self.set("skip", skip)

    # Sync

    def sync_token(self, token: str) -> "Query":
        """Continue a sync from a token."""
        return self.set("sync_token", token)

    def initial(self, initial: bool = True) -> "Query":
        """Request an initial sync."""
        return self.set("initial", initial)

    def sync_type(self, sync_type: str) -> "Query":
        """Restrict a sync to one entity type (e.g. "Entry", "Asset", "Deletion")."""
        return self.set("type", sync_type)

    # Selection

    def content_type(self, content_type_id: str) -> "Query":
        """Filter entries by content type."""
        return self.set("content_type", content_type_id)

    def select(self, fields: Iterable[str]) -> "Query":
        """Return only the given fields."""
        return self.set("select", list(fields))

    def order(self, *fields: str) -> "Query":
        """Order by fields; prefix a field with ``-`` for descending order."""
        return self.set("order", list(fields))

    def locale(self, code: str) -> "Query":
        """Return content for a locale (``*`` for all locales)."""
        return self.set("locale", code)

    def include(self, depth: int) -> "Query":
        """Resolve linked entities up to ``depth`` levels."""
        if not 0 <= depth <= 10:
            raise ValueError(f"include depth must be between 0 and 10, got {depth}")
        return self.set("include", depth)

    def search(self, text: str) -> "Query":
        """Full-text search across all text fields."""
        return self.set("query", text)

    # Field filters

    def equal(self, field: str, value: Any) -> "Query":
        return self.set(field, value)

    def not_equal(self, field: str, value: Any) -> "Query":
        return self.set(f"{field}[ne]", value)

    def all(self, field: str, values: Iterable[Any]) -> "Query":
        return self.set(f"{field}[all]", list(values))

    def in_(self, field: str, values: Iterable[Any]) -> "Query":
        return self.set(f"{field}[in]", list(values))

    def not_in(self, field: str, values: Iterable[Any]) -> "Query":
        return self.set(f"{field}[nin]", list(values))

    def exists(self, field: str, exists: bool = True) -> "Query":
        return self.set(f"{field}[exists]", exists)

    def less_than(self, field: str, value: Any) -> "Query":
        return self.set(f"{field}[lt]", value)

    def less_than_or_equal(self, field: str, value: Any) -> "Query":
        return self.set(f"{field}[lte]", value)

    def greater_than(self, field: str, value: Any) -> "Query":
        return self.set(f"{field}[gt]", value)

    def greater_than_or_equal(self, field: str, value: Any) -> "Query":
        return self.set(f"{field}[gte]", value)

    def match(self, field: str, text: str) -> "Query":
        """Full-text search on a single field."""
        return self.set(f"{field}[match]", text)

    def links_to_entry(self, entry_id: str) -> "Query":
        return self.set("links_to_entry", entry_id)

    def links_to_asset(self, asset_id: str) -> "Query":
        return self.set("links_to_asset", asset_id)

    def mime_type_group(self, group: str) -> "Query":
        """Filter assets by MIME type group (e.g. "image")."""
        return self.set("mimetype_group", group)
