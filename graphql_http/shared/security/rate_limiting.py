"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on the GraphQL routes.
The limit is attached to each route with ``Limiter.limit``.
Protects the GraphQL endpoint against resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from graphql_http.core.config import Settings
from graphql_http.interfaces.graphql.responses import error_response

HTTP_429 = 429


def build_limiter(app_settings: Settings) -> Limiter:
    """Build a limiter keyed on the client address."""
    return Limiter(
        key_func=get_remote_address,
        enabled=app_settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a GraphQL-shaped response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return error_response(HTTP_429, f"Rate limit exceeded: {exc.detail}")
