"""Exception hierarchy for contentful-kit.

API errors are classified from the ``sys.id`` discriminator of the error
envelope returned by Contentful. Every classified error keeps the request
that was sent, the response that was received and the decoded envelope so
callers can inspect headers, status codes and request IDs.

Transport and decoding failures form a separate branch of the hierarchy and
are never reclassified as API errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from .models.response.error import ErrorResponse

VERSION_HEADER = "X-Contentful-Version"

NOT_FOUND_MESSAGE = "the requested resource can not be found"


class ContentfulError(Exception):
    """Base exception for all contentful-kit errors.

    Attributes:
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class APIError(ContentfulError):
    """Error reported by the Contentful API.

    Used directly for error envelopes whose discriminator is not recognized;
    the message is then the full envelope serialized back to JSON.
    """

    def __init__(
        self,
        request: httpx.Request,
        response: httpx.Response,
        envelope: ErrorResponse,
        message: str | None = None,
    ) -> None:
        self.request = request
        self.response = response
        self.envelope = envelope
        if message is None:
            message = envelope.model_dump_json(by_alias=True, exclude_none=True)
        details = envelope.details.model_dump() if envelope.details is not None else None
        super().__init__(message, details=details)

    @property
    def status_code(self) -> int:
        """HTTP status code of the failed response."""
        return self.response.status_code

    @property
    def request_id(self) -> str | None:
        """Contentful request ID for support correlation."""
        return self.envelope.request_id

    @property
    def kind(self) -> str:
        """Error discriminator from the envelope (``sys.id``)."""
        return self.envelope.kind


class NotFoundError(APIError):
    """Requested resource does not exist (``NotFound``)."""

    def __init__(
        self, request: httpx.Request, response: httpx.Response, envelope: ErrorResponse
    ) -> None:
        super().__init__(request, response, envelope, message=NOT_FOUND_MESSAGE)


class UnauthorizedError(APIError):
    """Access token is invalid or expired (``AccessTokenInvalid``)."""

    def __init__(
        self, request: httpx.Request, response: httpx.Response, envelope: ErrorResponse
    ) -> None:
        super().__init__(request, response, envelope, message=envelope.message or "")


class RateLimitError(APIError):
    """Rate limit exceeded (``RateLimitExceeded``).

    Attributes:
        reset_seconds: Seconds until the quota resets, or None when the
            response did not carry a usable reset header
    """

    def __init__(
        self,
        request: httpx.Request,
        response: httpx.Response,
        envelope: ErrorResponse,
        reset_seconds: int | None = None,
    ) -> None:
        super().__init__(request, response, envelope, message=envelope.message or "")
        self.reset_seconds = reset_seconds


class ValidationError(APIError):
    """Payload failed validation (``ValidationFailed`` or ``UnresolvedLinks``).

    The message is built from the envelope's detail list:

    - ``uniqueFieldIds`` / ``uniqueFieldApiNames`` blank the whole message
    - ``notResolvable`` adds ``errorName: notResolvable, path: /a/b``
    - any other entry adds its detail text followed by a newline
    """

    def __init__(
        self, request: httpx.Request, response: httpx.Response, envelope: ErrorResponse
    ) -> None:
        super().__init__(
            request, response, envelope, message=format_validation_message(envelope)
        )

    @property
    def errors(self) -> list[Any]:
        """Field-level validation failures."""
        if self.envelope.details is None:
            return []
        return list(self.envelope.details.errors)


class VersionConflictError(APIError):
    """Optimistic-concurrency violation (``VersionMismatch`` or ``Conflict``).

    The message references the version that was sent in the
    ``X-Contentful-Version`` request header.
    """

    def __init__(
        self, request: httpx.Request, response: httpx.Response, envelope: ErrorResponse
    ) -> None:
        self.sent_version = request.headers.get(VERSION_HEADER, "")
        super().__init__(
            request, response, envelope, message=f"Version {self.sent_version} is mismatched"
        )


class NetworkError(ContentfulError):
    """Transport-level failure before a response was received."""

    pass


class ConnectionError(NetworkError):
    """Failed to connect to the Contentful API."""

    pass


class TimeoutError(NetworkError):
    """Request timed out."""

    pass


class FormatError(ContentfulError):
    """Response body could not be decoded into the expected shape."""

    pass


class RequestCancelledError(ContentfulError):
    """A pending rate-limit backoff was cancelled by the caller."""

    pass


def format_validation_message(envelope: ErrorResponse) -> str:
    """Compose the message of a validation error from its detail list.

    Args:
        envelope: Decoded error envelope

    Returns:
        Message text, empty when unique-field errors are reported
    """
    if envelope.details is None:
        return ""

    parts: list[str] = []
    for detail in envelope.details.errors:
        if detail.name in ("uniqueFieldIds", "uniqueFieldApiNames"):
            return ""
        if detail.name == "notResolvable":
            if isinstance(detail.path, list):
                path = "".join(f"/{segment}" for segment in detail.path if isinstance(segment, str))
                parts.append(f"errorName: {detail.name}, path: {path}")
        else:
            text = "" if detail.details is None else str(detail.details)
            parts.append(f"{text}\n")

    return "".join(parts)
