"""Bearer-token gate for protected API routes.

The gate is a router-level FastAPI dependency: it runs before every handler of
the router it is attached to and short-circuits with 401 when the
`Authorization` header is not accepted by the configured token validator.
"""

from __future__ import annotations

import hmac
import logging
from typing import Callable, Protocol

from fastapi import Security
from fastapi.security import APIKeyHeader

from .errors import AppError

logger = logging.getLogger(__name__)

# Expected Authorization header value for development.
DEV_TOKEN = "Bearer dev_token"

UNAUTHORIZED_MESSAGE = "Unauthorized"

authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    scheme_name="BearerToken",
    description=f"Full header value, e.g. `{DEV_TOKEN}`",
)


class TokenValidatorPort(Protocol):
    """Port definition for bearer token verification."""

    def validate(self, token: str) -> bool:
        """Return whether the `Authorization` header value is accepted.

        Args:
            token: Raw `Authorization` header value.

        Returns:
            bool: True when the request may proceed.
        """


class StaticTokenValidator:
    """Validator accepting exactly one fixed header value."""

    def __init__(self, expected_token: str = DEV_TOKEN):
        if not expected_token:
            raise ValueError("expected_token must not be blank")
        self._expected_token = expected_token.encode("utf-8")

    def validate(self, token: str) -> bool:
        return hmac.compare_digest(token.encode("utf-8"), self._expected_token)


def api_create_auth_dependency(token_validator: TokenValidatorPort) -> Callable[[str | None], None]:
    """Create a dependency that rejects requests with an unaccepted token.

    Missing and mismatched headers are treated the same way.

    Args:
        token_validator: Validator deciding which header values are accepted.

    Returns:
        Callable[[str | None], None]: Dependency callable for `APIRouter(dependencies=...)`.

    Raises:
        ValueError: Raised when token_validator is invalid.
    """

    if token_validator is None:
        raise ValueError("token_validator must not be None")

    def api_require_bearer_token(authorization: str | None = Security(authorization_header)) -> None:
        """Reject the request unless its `Authorization` header is accepted.

        Raises:
            AppError: 401 when the header is missing or not accepted.
        """

        if authorization is None or not token_validator.validate(authorization):
            logger.debug("Rejected request with missing or invalid bearer token")
            raise AppError.unauthorized(UNAUTHORIZED_MESSAGE)

    return api_require_bearer_token
