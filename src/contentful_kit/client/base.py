"""Base HTTP client for Contentful API communication.

This module provides the foundation shared by the synchronous and
asynchronous clients: request building, authentication headers, response
decoding, error classification and the rate-limit retry policy.
"""

import logging
import posixpath
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from tenacity import RetryCallState, retry_if_exception, stop_after_attempt, stop_never

from ..__version__ import __version__
from ..auth.api_token import AccessTokenAuth
from ..exceptions import (
    APIError,
    ContentfulError,
    FormatError,
    NotFoundError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
    VersionConflictError,
)
from ..models.config import RATE_LIMIT_RESET_HEADER
from ..models.request.query import Query
from ..models.response.error import ErrorResponse
from ..protocols import AuthProvider, ConfigProvider
from ..utils.curl import to_curl

logger = logging.getLogger(__name__)

USER_AGENT = f"sdk contentful-kit/{__version__}"

CONTENT_TYPES: dict[str, str] = {
    "management": "application/vnd.contentful.management.v1+json",
    "delivery": "application/vnd.contentful.delivery.v1+json",
}

UPLOAD_SEGMENT = "uploads"


def parse_reset_seconds(response: httpx.Response, header: str = RATE_LIMIT_RESET_HEADER) -> int | None:
    """Read the whole number of seconds until the rate limit resets.

    Args:
        response: Rate-limited response
        header: Name of the reset header

    Returns:
        Seconds to wait, or None when the header is missing or not a
        non-negative integer
    """
    value = response.headers.get(header)
    if value is None:
        return None
    value = value.strip()
    if not value.isdigit():
        return None
    return int(value)


def classify_error(
    request: httpx.Request,
    response: httpx.Response,
    reset_header: str = RATE_LIMIT_RESET_HEADER,
) -> ContentfulError:
    """Map a failed response to a classified error.

    The error kind depends only on the envelope's ``sys.id`` discriminator,
    not on the HTTP status code.

    Args:
        request: Request that was sent
        response: Failed response
        reset_header: Header carrying the rate-limit reset delay

    Returns:
        Classified API error, or FormatError when the body is not an
        error envelope
    """
    try:
        envelope = ErrorResponse.model_validate_json(response.content)
    except PydanticValidationError as e:
        return FormatError(
            f"Could not decode error response (HTTP {response.status_code}): {e}",
            details={"body_preview": response.text[:500]},
        )

    kind = envelope.kind
    if kind == "NotFound":
        return NotFoundError(request, response, envelope)
    if kind == "RateLimitExceeded":
        return RateLimitError(
            request, response, envelope, reset_seconds=parse_reset_seconds(response, reset_header)
        )
    if kind == "AccessTokenInvalid":
        return UnauthorizedError(request, response, envelope)
    if kind in ("ValidationFailed", "UnresolvedLinks"):
        return ValidationError(request, response, envelope)
    if kind in ("VersionMismatch", "Conflict"):
        return VersionConflictError(request, response, envelope)
    return APIError(request, response, envelope)


def _is_retryable_rate_limit(error: BaseException) -> bool:
    return isinstance(error, RateLimitError) and error.reset_seconds is not None


def _wait_for_reset(retry_state: RetryCallState) -> float:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    if isinstance(error, RateLimitError) and error.reset_seconds is not None:
        return float(error.reset_seconds)
    return 0.0


def _log_backoff(retry_state: RetryCallState) -> None:
    delay = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        f"Rate limit exceeded, retrying in {delay:g}s (attempt {retry_state.attempt_number})"
    )


class BaseClient:
    """Base HTTP client for Contentful API operations.

    This class provides the foundation for both synchronous and asynchronous
    clients with:
    - Bearer token authentication
    - Upload host selection and environment-scoped paths
    - Error classification
    - Rate-limit backoff policy
    - Request/response logging

    Not intended to be used directly - use SyncClient or AsyncClient instead.
    """

    def __init__(self, config: ConfigProvider, auth: AuthProvider | None = None) -> None:
        """Initialize the base client.

        Args:
            config: Client configuration
            auth: Authentication provider (defaults to bearer token auth)

        Raises:
            ValueError: If the access token is empty
        """
        self.config = config
        self.base_url = config.get_base_url().rstrip("/")
        self.upload_url = config.get_upload_url().rstrip("/")
        self.auth: AuthProvider = auth or AccessTokenAuth(config.get_access_token())

        if not self.auth.validate_token():
            raise ValueError("Access token is required and cannot be empty")

        logger.info(f"Initialized Contentful client for {self.base_url} (api: {config.api})")

    @property
    def environment(self) -> str | None:
        """Environment ID inserted into space-scoped paths."""
        return self.config.environment

    def environment_path(self) -> str:
        """Path fragment for the configured environment (empty when unset)."""
        if self.environment:
            return f"/environments/{self.environment}"
        return ""

    def _get_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers with authentication.

        Args:
            extra_headers: Additional headers to include

        Returns:
            Complete headers dictionary
        """
        headers = dict(self.auth.get_headers())

        content_type = CONTENT_TYPES.get(self.config.api)
        if content_type:
            headers["Content-Type"] = content_type
        if self.config.api == "management":
            headers["X-Contentful-User-Agent"] = USER_AGENT
        if self.config.organization_id:
            headers["X-Contentful-Organization"] = self.config.organization_id

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _select_host(self, path: str) -> str:
        """Pick the upload host for upload paths, the API host otherwise."""
        clean = posixpath.normpath(path.split("?", 1)[0])
        if posixpath.basename(clean) == UPLOAD_SEGMENT:
            return self.upload_url
        return self.base_url

    def default_query(self) -> Query:
        """Query pre-filled with the configured default parameters."""
        return Query(dict(self.config.query_params))

    def build_request(
        self,
        method: str,
        path: str,
        params: Query | dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Build a request for an API path.

        Args:
            method: HTTP method
            path: API path (e.g. "/spaces/abc/entries")
            params: Query parameters, merged over the configured defaults
            content: Raw request body
            headers: Additional headers

        Returns:
            Prepared request
        """
        path = path.split("?", 1)[0]
        query = self.default_query()
        if params:
            query.update(params)

        url = httpx.URL(f"{self._select_host(path)}{path}")
        url = url.copy_with(params=query.to_query_params())

        return httpx.Request(
            method,
            url,
            headers=self._get_headers(headers),
            content=content,
            extensions={"timeout": httpx.Timeout(self.config.timeout).as_dict()},
        )

    def _log_request(self, request: httpx.Request) -> None:
        logger.debug(f"{request.method} {request.url}")
        if self.config.debug:
            logger.debug(f"curl: {to_curl(request)}")

    def _retry_options(self) -> dict[str, Any]:
        """Options for the tenacity retrying controller.

        Only rate-limit errors carrying a reset delay are retried; the wait
        is exactly the delay reported by the server.
        """
        max_attempts = self.config.retry.max_attempts
        return {
            "retry": retry_if_exception(_is_retryable_rate_limit),
            "wait": _wait_for_reset,
            "stop": stop_never if max_attempts is None else stop_after_attempt(max_attempts),
            "before_sleep": _log_backoff,
            "reraise": True,
        }

    def _handle_response(
        self, request: httpx.Request, response: httpx.Response, model: Any = None
    ) -> Any:
        """Decode a successful response or raise the classified error.

        Args:
            request: Request that was sent
            response: Received response (body already read)
            model: Type to decode the body into; None to ignore the body

        Returns:
            Decoded value, or None

        Raises:
            ContentfulError: Classified error for non-success responses
        """
        logger.debug(f"Response: {response.status_code}")

        if not 200 <= response.status_code < 400:
            raise classify_error(request, response, self.config.retry.reset_header)

        if model is None or not response.content:
            return None

        try:
            return TypeAdapter(model).validate_json(response.content)
        except PydanticValidationError as e:
            name = getattr(model, "__name__", str(model))
            raise FormatError(
                f"Could not decode response into {name}: {e}",
                details={"body_preview": response.text[:500]},
            ) from e
