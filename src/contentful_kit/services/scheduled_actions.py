"""Scheduled actions (publish or unpublish an entity at a given time)."""

from collections.abc import Iterable

from ..models.request.query import Query
from ..models.resources import ScheduledAction
from .base import AnyCollection, BaseService, Result

DEFAULT_ENVIRONMENT = "master"


class ScheduledActionsService(BaseService):
    """Scheduled actions are addressed on the space and filtered by environment."""

    def _environment_id(self, environment_id: str | None) -> str:
        return environment_id or self._client.environment or DEFAULT_ENVIRONMENT

    def _path(self, space_id: str, *segments: str) -> str:
        return self._space_path(space_id, "scheduled_actions", *segments, scoped=False)

    def list(
        self,
        space_id: str,
        entity_id: str | None = None,
        environment_id: str | None = None,
        statuses: Iterable[str] | None = None,
        limit: int | None = None,
    ) -> AnyCollection[ScheduledAction]:
        """Collection of scheduled actions in an environment.

        Args:
            space_id: Space ID
            entity_id: Only actions targeting this entity
            environment_id: Environment (defaults to the client's, then "master")
            statuses: Only actions in these states (e.g. "scheduled", "canceled")
            limit: Page size
        """
        query = Query().equal("environment.sys.id", self._environment_id(environment_id))
        if entity_id:
            query.equal("entity.sys.id", entity_id)
        if statuses:
            query.in_("sys.status", statuses)
        return self._collection(self._path(space_id), ScheduledAction, query, limit=limit)

    def create(self, space_id: str, action: ScheduledAction) -> Result[ScheduledAction]:
        return self._execute(
            "POST", self._path(space_id), ScheduledAction, body=action.to_payload()
        )

    def cancel(
        self, space_id: str, action_id: str, environment_id: str | None = None
    ) -> Result[ScheduledAction]:
        params = Query().equal("environment.sys.id", self._environment_id(environment_id))
        return self._execute(
            "DELETE", self._path(space_id, action_id), ScheduledAction, params=params
        )
