"""Domain models used across application layer boundaries."""

from .models import Client, ClientResponse, HealthResponse

__all__ = ["Client", "ClientResponse", "HealthResponse"]
