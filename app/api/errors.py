"""Uniform API error type and its JSON response formatting.

Every error leaving the service has the body shape
`{"error": {"status": <int>, "message": <str>}}` with the same status code on
the HTTP response.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"

UNAUTHORIZED_RESPONSE_DOC: dict[int | str, dict[str, str]] = {
    status.HTTP_401_UNAUTHORIZED: {"description": "Missing or invalid bearer token"},
}


class AppError(Exception):
    """HTTP-facing error carrying a status code and client-safe message.

    Attributes:
        status_code: HTTP status code for the response.
        message: Message rendered in the error body.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"Error ({self.status_code}): {self.message}"

    @classmethod
    def internal_error(cls, message: str) -> AppError:
        return cls(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    @classmethod
    def not_found(cls, message: str) -> AppError:
        return cls(status.HTTP_404_NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: str) -> AppError:
        return cls(status.HTTP_401_UNAUTHORIZED, message)

    @classmethod
    def bad_request(cls, message: str) -> AppError:
        return cls(status.HTTP_400_BAD_REQUEST, message)

    @classmethod
    def conflict(cls, message: str) -> AppError:
        return cls(status.HTTP_409_CONFLICT, message)

    def to_payload(self) -> dict[str, dict[str, int | str]]:
        """Return the JSON-serializable error body."""

        return {"error": {"status": self.status_code, "message": self.message}}

    def to_response(self) -> JSONResponse:
        """Render the error as a JSON response with matching status code.

        Returns:
            JSONResponse: Error body and status code.
        """

        return JSONResponse(content=self.to_payload(), status_code=self.status_code)


def api_error_from_exception(error: BaseException) -> AppError:
    """Convert an arbitrary exception into an internal `AppError`.

    Args:
        error: Exception raised by lower layers.

    Returns:
        AppError: Internal error carrying the exception text.
    """

    logger.error("Internal error: %r", error)
    return AppError.internal_error(f"{INTERNAL_SERVER_ERROR_MESSAGE}: {error}")


async def api_handle_app_error(_request: Request, error: AppError) -> JSONResponse:
    """Exception handler rendering raised `AppError` instances."""

    return error.to_response()


async def api_handle_http_exception(request: Request, error: StarletteHTTPException) -> JSONResponse:
    """Reformat framework HTTP errors into the uniform error body.

    A 404 raised before any route matched (no `endpoint` in the request scope)
    is reported as `Route not found`. Every other HTTP error, including a 404
    raised by a matched handler, keeps its status code and detail text.

    Args:
        request: Incoming request, inspected for a matched endpoint.
        error: Framework HTTP exception.

    Returns:
        JSONResponse: Uniform error response, preserving framework headers.
    """

    if error.status_code == status.HTTP_404_NOT_FOUND and "endpoint" not in request.scope:
        app_error = AppError.not_found(ROUTE_NOT_FOUND_MESSAGE)
    else:
        app_error = AppError(error.status_code, str(error.detail))

    response = app_error.to_response()
    if error.headers:
        response.headers.update(error.headers)
    return response


def api_register_error_handlers(application: FastAPI) -> None:
    """Register uniform error formatting on the application.

    Args:
        application: FastAPI application to configure.

    Returns:
        None: Handlers are registered in place.
    """

    application.add_exception_handler(AppError, api_handle_app_error)
    application.add_exception_handler(StarletteHTTPException, api_handle_http_exception)
