"""Authentication providers for contentful-kit."""

from .api_token import AccessTokenAuth

__all__ = ["AccessTokenAuth"]
