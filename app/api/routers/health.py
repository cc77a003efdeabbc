"""Health endpoint router composition for application and component checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.registry import GREETING_COMPONENT_NAME, ComponentNotFoundError, ComponentRegistry


def api_create_health_router(registry: ComponentRegistry) -> APIRouter:
    """Create health-check router reporting application and component status.

    Args:
        registry: Component registry to verify.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when registry is None.
    """

    if registry is None:
        raise ValueError("registry must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health and registered component names.

        Returns:
            JSONResponse: 200 when the greeting component resolves, 503 otherwise.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        try:
            component_health = registry.component_check_health(GREETING_COMPONENT_NAME)
            payload = {
                "status": component_health.status,
                "app": "up",
                "components": list(registry.component_names()),
                "detail": component_health.detail,
            }
            return JSONResponse(content=payload, status_code=status.HTTP_200_OK)
        except ComponentNotFoundError as error:
            payload = {
                "status": "degraded",
                "app": "up",
                "components": list(registry.component_names()),
                "detail": str(error),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return router
