"""Webhook definition operations.

Webhooks live on the space itself, not on an environment.
"""

from ..models.request.query import Query
from ..models.resources import Webhook
from .base import AnyCollection, BaseService, Result, require_id, version_headers


class WebhooksService(BaseService):
    def _path(self, space_id: str, *segments: str) -> str:
        return self._space_path(space_id, "webhook_definitions", *segments, scoped=False)

    def list(
        self, space_id: str, query: Query | None = None, limit: int | None = None
    ) -> AnyCollection[Webhook]:
        return self._collection(self._path(space_id), Webhook, query, limit=limit)

    def get(self, space_id: str, webhook_id: str) -> Result[Webhook]:
        return self._execute("GET", self._path(space_id, webhook_id), Webhook)

    def upsert(self, space_id: str, webhook: Webhook) -> Result[Webhook]:
        if webhook.is_persisted:
            method, path = "PUT", self._path(space_id, require_id(webhook))
        else:
            method, path = "POST", self._path(space_id)
        return self._execute(
            method, path, Webhook, body=webhook.to_payload(), headers=version_headers(webhook)
        )

    def delete(self, space_id: str, webhook: Webhook) -> Result[None]:
        return self._execute(
            "DELETE", self._path(space_id, require_id(webhook)), headers=version_headers(webhook)
        )
