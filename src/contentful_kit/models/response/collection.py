"""Collection page model.

A single page of a list or sync response::

    {
        "sys": {"type": "Array"},
        "total": 250, "skip": 100, "limit": 100,
        "items": [...],
        "includes": {"Entry": [...], "Asset": [...]},
        "nextPageUrl": "https://cdn.contentful.com/spaces/x/sync?sync_token=...",
        "errors": [...]
    }
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from ..sys import Sys
from .error import ErrorDetails, StructuralError

T = TypeVar("T")


class CollectionPage(BaseModel, Generic[T]):
    """One decoded page; ``items`` are decoded into ``T``."""

    sys: Sys | None = None
    total: int | None = None
    skip: int | None = None
    limit: int | None = None
    items: list[T] = Field(default_factory=list)
    includes: dict[str, Any] = Field(default_factory=dict)
    next_page_url: str | None = Field(None, alias="nextPageUrl")
    next_sync_url: str | None = Field(None, alias="nextSyncUrl")
    errors: list[StructuralError] = Field(default_factory=list)
    details: ErrorDetails | None = None

    model_config = {"populate_by_name": True}

    @field_validator("details", mode="before")
    @classmethod
    def _structured_details_only(cls, value: Any) -> Any:
        if isinstance(value, dict) and isinstance(value.get("errors"), list):
            return value
        return None
