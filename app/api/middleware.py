"""Panic-recovery middleware for the composed API application."""

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from .errors import INTERNAL_SERVER_ERROR_MESSAGE, AppError

logger = logging.getLogger(__name__)


class PanicRecoveryMiddleware(BaseHTTPMiddleware):
    """Convert uncaught handler failures into a generic 500 response.

    Responses produced downstream, including handled error responses, pass
    through unchanged. The failure cause is logged and never sent to the client.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Panic occurred while handling %s %s", request.method, request.url.path)
            return AppError.internal_error(INTERNAL_SERVER_ERROR_MESSAGE).to_response()
