"""Greeting endpoint router backed by the registered greeting component."""

from fastapi import APIRouter, HTTPException, status

from app.domain import GreetingPort
from app.observability import get_logger
from app.registry import GREETING_COMPONENT_NAME, ComponentNotFoundError, ComponentRegistry

logger = get_logger(__name__)


def api_create_greeting_router(registry: ComponentRegistry) -> APIRouter:
    """Create router serving the configured greeting.

    Args:
        registry: Component registry holding the greeting component.

    Returns:
        APIRouter: Router exposing `/greeting` endpoint.

    Raises:
        ValueError: Raised when registry is None.
    """

    if registry is None:
        raise ValueError("registry must not be None")

    router = APIRouter(tags=["greeting"])

    @router.get("/greeting")
    def api_greeting_get() -> dict[str, str]:
        """Return the configured greeting.

        Returns:
            dict[str, str]: Payload with the greeting text.

        Raises:
            HTTPException: 503 when no greeting component is registered.
        """

        try:
            greeting_component: GreetingPort = registry.component_get(GREETING_COMPONENT_NAME)
        except ComponentNotFoundError as error:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=str(error),
            ) from error

        logger.debug("Resolved component %s", GREETING_COMPONENT_NAME)
        return {"greeting": greeting_component.greeting_get()}

    return router
