"""System metadata models shared by every Contentful entity.

Every resource returned by Contentful carries a ``sys`` object describing its
identity, type and version. Links to other entities are expressed as
``{"sys": {"type": "Link", "linkType": "...", "id": "..."}}``.
"""

from typing import Any

from pydantic import BaseModel, Field


class Sys(BaseModel):
    """Entity system metadata."""

    id: str | None = None
    type: str | None = None
    link_type: str | None = Field(None, alias="linkType")
    created_at: str | None = Field(None, alias="createdAt")
    updated_at: str | None = Field(None, alias="updatedAt")
    created_by: "Link | None" = Field(None, alias="createdBy")
    updated_by: "Link | None" = Field(None, alias="updatedBy")
    version: int | None = None
    revision: int | None = None
    archived_at: str | None = Field(None, alias="archivedAt")
    archived_by: "Link | None" = Field(None, alias="archivedBy")
    archived_version: int | None = Field(None, alias="archivedVersion")
    published_at: str | None = Field(None, alias="publishedAt")
    published_by: "Link | None" = Field(None, alias="publishedBy")
    published_version: int | None = Field(None, alias="publishedVersion")
    published_counter: int | None = Field(None, alias="publishedCounter")
    first_published_at: str | None = Field(None, alias="firstPublishedAt")
    content_type: "Link | None" = Field(None, alias="contentType")
    space: "Link | None" = None
    environment: "Link | None" = None
    locale: str | None = None
    visibility: str | None = None
    status: str | None = None

    model_config = {"populate_by_name": True}


class Link(BaseModel):
    """Reference to another entity."""

    sys: Sys

    @classmethod
    def to(cls, link_type: str, entity_id: str) -> "Link":
        """Build a link to an entity.

        Args:
            link_type: Linked entity type (e.g. "ContentType", "Space")
            entity_id: Linked entity ID

        Returns:
            Link instance
        """
        return cls(sys=Sys(id=entity_id, type="Link", link_type=link_type))


Sys.model_rebuild()


class VersionedModel(BaseModel):
    """Base for entities that take part in optimistic concurrency.

    Mutations send the entity's current version in the
    ``X-Contentful-Version`` header; entities without a version count as
    version 1.
    """

    sys: Sys | None = None

    model_config = {"populate_by_name": True}

    @property
    def version(self) -> int:
        """Current entity version (1 when unknown)."""
        if self.sys is None or self.sys.version is None:
            return 1
        return self.sys.version

    @property
    def id(self) -> str | None:
        """Entity ID from ``sys``."""
        return self.sys.id if self.sys else None

    @property
    def is_persisted(self) -> bool:
        """Whether the server has already created this entity."""
        return bool(self.sys and self.sys.created_at)

    def to_payload(self) -> dict[str, Any]:
        """Serialize the writable part of the entity as a request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"sys"})
