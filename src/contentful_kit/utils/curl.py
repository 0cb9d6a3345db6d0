"""Render requests as curl commands for debugging."""

import shlex

import httpx

# Set by httpx itself; noise in a reproduction
_SKIPPED_HEADERS = {"host", "content-length", "accept-encoding", "connection", "user-agent"}
_REDACTED_HEADERS = {"authorization"}


def to_curl(request: httpx.Request) -> str:
    """Build a copy-pasteable curl command reproducing a request.

    The request body must already be buffered (``request.read()``).

    Args:
        request: Prepared request

    Returns:
        Shell command string
    """
    parts = ["curl", "-X", request.method]
    encoding = request.headers.encoding
    for raw_name, raw_value in request.headers.raw:
        name, value = raw_name.decode(encoding), raw_value.decode(encoding)
        if name.lower() in _SKIPPED_HEADERS:
            continue
        if name.lower() in _REDACTED_HEADERS:
            value = "<redacted>"
        parts += ["-H", f"{name}: {value}"]

    body = request.content
    if body:
        try:
            parts += ["--data-raw", body.decode("utf-8")]
        except UnicodeDecodeError:
            parts += ["--data-binary", "@-"]

    parts.append(str(request.url))
    return " ".join(shlex.quote(part) for part in parts)
