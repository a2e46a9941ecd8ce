"""Health endpoint router composition."""

from fastapi import APIRouter

from app.domain import HealthResponse


def api_create_health_router() -> APIRouter:
    """Create health-check router.

    Returns:
        APIRouter: Router exposing `/health` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        responses={200: {"description": "Service is healthy"}},
    )
    def api_health_status() -> HealthResponse:
        """Health check endpoint.

        Returns the current status of the service.
        """

        return HealthResponse(status="ok")

    return router
