"""FastAPI application factory.

Route composition order: public routes, then the `/api` sub-tree (public
health, auth-gated clients, generated docs), then panic recovery around the
whole application, then uniform error handlers including the 404 fallback.
"""

import logging

from fastapi import APIRouter, FastAPI

from app.config import AppSettings

from .auth import StaticTokenValidator, TokenValidatorPort, api_create_auth_dependency
from .errors import api_register_error_handlers
from .middleware import PanicRecoveryMiddleware
from .routers import api_create_clients_router, api_create_health_router, api_create_secured_clients_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

OPENAPI_TAGS = [
    {"name": "health", "description": "Health check endpoints"},
    {"name": "clients", "description": "Client management endpoints"},
]


def api_create_api_router(token_validator: TokenValidatorPort) -> APIRouter:
    """Create the `/api` sub-tree router.

    Args:
        token_validator: Validator gating the clients branch.

    Returns:
        APIRouter: Router with public health and auth-gated clients branches.
    """

    api_router = APIRouter(prefix=API_PREFIX)
    api_router.include_router(api_create_health_router())
    api_router.include_router(
        api_create_secured_clients_router(auth_dependency=api_create_auth_dependency(token_validator))
    )
    return api_router


def create_api_application(
    settings: AppSettings,
    token_validator: TokenValidatorPort | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings, attached to application state.
        token_validator: Optional validator for protected routes. Defaults to
            the fixed development token.

    Returns:
        FastAPI: Fully composed application.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    resolved_token_validator = token_validator or StaticTokenValidator()
    logger.debug("Composing API application for run mode %s", settings.run_mode)

    application = FastAPI(
        title="Starter API",
        version="0.1.0",
        description="A starter template for FastAPI-based REST APIs",
        openapi_tags=OPENAPI_TAGS,
        docs_url=f"{API_PREFIX}/docs",
        openapi_url=f"{API_PREFIX}/openapi.json",
        redoc_url=None,
    )
    application.state.settings = settings

    application.include_router(api_create_health_router())
    application.include_router(api_create_clients_router())
    application.include_router(api_create_api_router(resolved_token_validator))

    application.add_middleware(PanicRecoveryMiddleware)
    api_register_error_handlers(application)

    return application
