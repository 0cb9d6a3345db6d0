"""Error envelope models.

Failure responses carry an envelope of the form::

    {
        "sys": {"type": "Error", "id": "ValidationFailed"},
        "message": "Validation error",
        "requestId": "...",
        "details": {"errors": [{"name": "...", "path": [...], "details": "..."}]}
    }

Successful collection responses may also contain structural ``errors``
(e.g. unresolvable links) which are data, not failures.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..sys import Sys


class ErrorDetail(BaseModel):
    """Single field-level validation failure."""

    id: str | None = None
    name: str | None = None
    path: Any = None
    details: Any = None
    value: Any = None


class ErrorDetails(BaseModel):
    """Container for validation failure details."""

    errors: list[ErrorDetail] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Decoded error envelope."""

    sys: Sys | None = None
    message: str | None = None
    request_id: str | None = Field(None, alias="requestId")
    details: ErrorDetails | None = None

    model_config = {"populate_by_name": True}

    @field_validator("details", mode="before")
    @classmethod
    def _ignore_unstructured_details(cls, value: Any) -> Any:
        # NotFound and friends send free-form details ({"type": ..., "id": ...})
        if isinstance(value, dict):
            errors = value.get("errors")
            return {"errors": errors if isinstance(errors, list) else []}
        return None

    @property
    def kind(self) -> str:
        """Error discriminator (``sys.id``), empty when absent."""
        if self.sys is None or self.sys.id is None:
            return ""
        return self.sys.id


class StructuralError(BaseModel):
    """Per-item error reported inside a successful response.

    Example: an entry links to an asset that cannot be resolved. The
    response is still usable; inspect these to decide how to proceed.
    """

    sys: Sys | None = None
    details: dict[str, Any] = Field(default_factory=dict)
