"""Resource services.

Each service builds the requests for one family of Contentful resources and
hands them to the owning client for execution.
"""

from .api_keys import APIKeysService
from .assets import AssetsService
from .base import BaseService
from .content_types import ContentTypesService
from .entries import EntriesService
from .locales import LocalesService
from .scheduled_actions import ScheduledActionsService
from .spaces import SpacesService
from .tags import TagsService
from .uploads import UploadsService
from .webhooks import WebhooksService

__all__ = [
    "APIKeysService",
    "AssetsService",
    "BaseService",
    "ContentTypesService",
    "EntriesService",
    "LocalesService",
    "ScheduledActionsService",
    "SpacesService",
    "TagsService",
    "UploadsService",
    "WebhooksService",
]
