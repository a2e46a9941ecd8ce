"""Typed response contracts shared across runtime layers.

These are plain frozen dataclasses; FastAPI renders them as JSON and
publishes them as OpenAPI schemas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HealthResponse:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
    """

    status: str


@dataclass(frozen=True)
class Client:
    """One client record exposed by the clients resource.

    Attributes:
        id: Client identifier.
        name: Human-readable client name.
    """

    id: str
    name: str


@dataclass(frozen=True)
class ClientResponse:
    """Message wrapper returned by the secured clients endpoint."""

    message: str
