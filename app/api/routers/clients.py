"""Clients router composition for the public listing and the secured endpoint."""

from typing import Any, Callable

from fastapi import APIRouter, Depends

from app.api.errors import UNAUTHORIZED_RESPONSE_DOC
from app.domain import Client, ClientResponse

EXAMPLE_CLIENTS = (Client(id="1", name="Example Client"),)


def api_create_clients_router() -> APIRouter:
    """Create public clients router.

    Returns:
        APIRouter: Router exposing `/clients` listing endpoint.
    """

    router = APIRouter(tags=["clients"])

    @router.get("/clients", response_model=list[Client])
    def api_clients_list() -> list[Client]:
        """List known clients."""

        return list(EXAMPLE_CLIENTS)

    return router


def api_create_secured_clients_router(auth_dependency: Callable[..., Any]) -> APIRouter:
    """Create clients router gated by bearer token authentication.

    Args:
        auth_dependency: Dependency run before every route of this router.

    Returns:
        APIRouter: Router exposing `/clients` behind the auth gate.

    Raises:
        ValueError: Raised when auth_dependency is invalid.
    """

    if auth_dependency is None:
        raise ValueError("auth_dependency must not be None")

    router = APIRouter(
        tags=["clients"],
        dependencies=[Depends(auth_dependency)],
        responses=UNAUTHORIZED_RESPONSE_DOC,
    )

    @router.get("/clients", response_model=ClientResponse)
    def api_clients_secured() -> ClientResponse:
        """Secured clients endpoint returning a status message."""

        return ClientResponse(message="Clients endpoint")

    return router
