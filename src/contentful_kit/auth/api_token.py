"""Static bearer token authentication."""


class AccessTokenAuth:
    """Authenticates requests with a Contentful access token.

    Management tokens (CMA), delivery tokens (CDA) and preview tokens (CPA)
    are all sent as ``Authorization: Bearer <token>``.
    """

    def __init__(self, token: str) -> None:
        """Initialize with an access token.

        Args:
            token: Contentful access token
        """
        self._token = token

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {"Authorization": f"Bearer {self._token}"}

    def validate_token(self) -> bool:
        """Check that a non-blank token was provided."""
        return bool(self._token and self._token.strip())
