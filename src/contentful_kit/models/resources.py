"""Resource models for Contentful entities.

These are thin pydantic shapes over the JSON the API returns. Each
versioned entity exposes ``version`` (used for the ``X-Contentful-Version``
header) and ``to_payload()`` (the request body sent on create/update).
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from .sys import Link, Sys, VersionedModel

# Content type field types
FIELD_TYPE_SYMBOL = "Symbol"
FIELD_TYPE_TEXT = "Text"
FIELD_TYPE_RICH_TEXT = "RichText"
FIELD_TYPE_ARRAY = "Array"
FIELD_TYPE_LINK = "Link"
FIELD_TYPE_INTEGER = "Integer"
FIELD_TYPE_NUMBER = "Number"
FIELD_TYPE_LOCATION = "Location"
FIELD_TYPE_BOOLEAN = "Boolean"
FIELD_TYPE_DATE = "Date"
FIELD_TYPE_OBJECT = "Object"


class Metadata(BaseModel):
    """Entity metadata (tags)."""

    tags: list[Link] = Field(default_factory=list)


class Space(VersionedModel):
    """Space model."""

    name: str | None = None
    default_locale: str | None = Field(None, alias="defaultLocale")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, include={"name", "default_locale"}
        )


class Entry(VersionedModel):
    """Entry model; ``fields`` maps field IDs to (localized) values."""

    metadata: Metadata | None = None
    fields: dict[str, Any] = Field(default_factory=dict)

    @property
    def content_type_id(self) -> str | None:
        """ID of the entry's content type."""
        if self.sys and self.sys.content_type:
            return self.sys.content_type.sys.id
        return None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, include={"fields", "metadata"}
        )


class FileImage(BaseModel):
    width: int | None = None
    height: int | None = None


class FileDetail(BaseModel):
    size: int | None = None
    image: FileImage | None = None


class File(BaseModel):
    """Asset file metadata."""

    file_name: str | None = Field(None, alias="fileName")
    content_type: str | None = Field(None, alias="contentType")
    url: str | None = None
    upload: str | None = None
    upload_from: Link | None = Field(None, alias="uploadFrom")
    details: FileDetail | None = None

    model_config = {"populate_by_name": True}


class FileFields(BaseModel):
    """Localized asset fields, each keyed by locale code."""

    title: dict[str, str] = Field(default_factory=dict)
    description: dict[str, str] = Field(default_factory=dict)
    file: dict[str, File] = Field(default_factory=dict)


class LocalizedFileFields(BaseModel):
    """Asset fields for a single locale."""

    title: str | None = None
    description: str | None = None
    file: File | None = None


class LocalizedAsset(BaseModel):
    """Single-locale view of an asset."""

    sys: Sys | None = None
    fields: LocalizedFileFields = Field(default_factory=LocalizedFileFields)


_FILE_KEYS = {"url", "fileName", "contentType", "upload", "uploadFrom", "details"}


def _is_single_locale(fields: dict[str, Any]) -> bool:
    title = fields.get("title")
    if isinstance(title, str):
        return True
    file_value = fields.get("file")
    return isinstance(file_value, dict) and bool(_FILE_KEYS & file_value.keys())


class Asset(VersionedModel):
    """Asset model.

    Delivery and preview responses for a single locale carry plain field
    values; they are normalized into locale maps keyed by ``sys.locale``.
    """

    metadata: Metadata | None = None
    fields: FileFields = Field(default_factory=FileFields)

    @model_validator(mode="before")
    @classmethod
    def _localize_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = data.get("fields")
        sys = data.get("sys")
        if not isinstance(fields, dict) or not isinstance(sys, dict) or not sys.get("locale"):
            return data
        if not _is_single_locale(fields):
            return data

        locale = sys["locale"]
        localized = {name: {locale: value} for name, value in fields.items() if value is not None}
        return {**data, "fields": localized}

    def localized(self, locale: str | None = None) -> LocalizedAsset | None:
        """Return the single-locale view of this asset.

        Args:
            locale: Locale code; defaults to ``sys.locale``

        Returns:
            Localized asset, or None when no locale is known
        """
        code = locale or (self.sys.locale if self.sys else None)
        if not code:
            return None
        return LocalizedAsset(
            sys=self.sys,
            fields=LocalizedFileFields(
                title=self.fields.title.get(code),
                description=self.fields.description.get(code),
                file=self.fields.file.get(code),
            ),
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, include={"fields", "metadata"}
        )


class IncludeAsset(LocalizedAsset):
    """Asset side-loaded in ``includes`` (single locale)."""

    pass


class FieldItems(BaseModel):
    """Item definition of an Array field."""

    type: str | None = None
    link_type: str | None = Field(None, alias="linkType")
    validations: list[dict[str, Any]] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _accept_lowercase_link_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and "linktype" in data and "linkType" not in data:
            data = {**data, "linkType": data["linktype"]}
        return data


class ContentTypeField(BaseModel):
    """Field definition of a content type."""

    id: str | None = None
    name: str
    type: str
    link_type: str | None = Field(None, alias="linkType")
    items: FieldItems | None = None
    required: bool = False
    localized: bool = False
    disabled: bool = False
    omitted: bool = False
    validations: list[dict[str, Any]] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class ContentType(VersionedModel):
    """Content type model."""

    name: str | None = None
    description: str | None = None
    display_field: str | None = Field(None, alias="displayField")
    fields: list[ContentTypeField] = Field(default_factory=list)

    def get_field(self, field_id: str) -> ContentTypeField | None:
        """Find a field definition by ID."""
        for field in self.fields:
            if field.id == field_id:
                return field
        return None


class Locale(VersionedModel):
    """Locale model."""

    name: str | None = None
    code: str | None = None
    fallback_code: str | None = Field(None, alias="fallbackCode")
    default: bool = False
    optional: bool = False
    content_delivery_api: bool = Field(False, alias="contentDeliveryApi")
    content_management_api: bool = Field(False, alias="contentManagementApi")


class WebhookHeader(BaseModel):
    key: str
    value: str | None = None
    secret: bool | None = None


class Webhook(VersionedModel):
    """Webhook definition model."""

    name: str | None = None
    url: str | None = None
    topics: list[str] = Field(default_factory=list)
    http_basic_username: str | None = Field(None, alias="httpBasicUsername")
    http_basic_password: str | None = Field(None, alias="httpBasicPassword")
    headers: list[WebhookHeader] = Field(default_factory=list)
    active: bool | None = None


class APIKeyPolicy(BaseModel):
    effect: str | None = None
    actions: str | None = None


class PreviewAPIKey(BaseModel):
    sys: Sys | None = None


class APIKey(VersionedModel):
    """Delivery API key model."""

    name: str | None = None
    description: str | None = None
    access_token: str | None = Field(None, alias="accessToken")
    policies: list[APIKeyPolicy] = Field(default_factory=list)
    preview_api_key: PreviewAPIKey | None = None
    environments: list[Link] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.description:
            payload["description"] = self.description
        if self.environments:
            payload["environments"] = [
                env.model_dump(mode="json", by_alias=True, exclude_none=True)
                for env in self.environments
            ]
        return payload


class Tag(VersionedModel):
    """Content tag model."""

    name: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.sys and self.sys.id:
            payload["sys"] = {
                "id": self.sys.id,
                "type": "Tag",
                "visibility": self.sys.visibility or "private",
            }
        return payload


class ScheduledAction(VersionedModel):
    """Scheduled action (e.g. publish an entry at a given time)."""

    action: str | None = None
    entity: Link | None = None
    environment: Link | None = None
    scheduled_for: dict[str, Any] | None = Field(None, alias="scheduledFor")
    error: dict[str, Any] | None = None

    @property
    def status(self) -> str | None:
        """Action status from ``sys.status``."""
        return self.sys.status if self.sys else None


class Upload(BaseModel):
    """Upload reference returned by the upload endpoint."""

    sys: Sys

    def as_link(self) -> Link:
        """Link usable as ``File.upload_from``."""
        return Link.to("Upload", self.sys.id or "")
