"""Data models for contentful-kit."""

from .config import ContentfulConfig, RetryConfig
from .request.query import Query
from .resources import (
    APIKey,
    Asset,
    ContentType,
    ContentTypeField,
    Entry,
    FieldItems,
    File,
    FileFields,
    IncludeAsset,
    LocalizedAsset,
    Locale,
    Metadata,
    ScheduledAction,
    Space,
    Tag,
    Upload,
    Webhook,
    WebhookHeader,
)
from .sys import Link, Sys, VersionedModel

__all__ = [
    "ContentfulConfig",
    "RetryConfig",
    "Query",
    "Sys",
    "Link",
    "VersionedModel",
    "APIKey",
    "Asset",
    "ContentType",
    "ContentTypeField",
    "Entry",
    "FieldItems",
    "File",
    "FileFields",
    "IncludeAsset",
    "LocalizedAsset",
    "Locale",
    "Metadata",
    "ScheduledAction",
    "Space",
    "Tag",
    "Upload",
    "Webhook",
    "WebhookHeader",
]
