"""API router package for endpoint composition."""

from .clients import api_create_clients_router, api_create_secured_clients_router
from .health import api_create_health_router

__all__ = ["api_create_clients_router", "api_create_health_router", "api_create_secured_clients_router"]
