"""FastAPI application factory for the greeting service.

This module defines API application composition used by the runtime.
"""

from fastapi import FastAPI

from app.config import AppSettings
from app.domain import AppMetadata
from app.registry import ComponentRegistry

from .routers import api_create_greeting_router, api_create_health_router


def create_api_application(settings: AppSettings, registry: ComponentRegistry) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        registry: Component registry populated during bootstrap.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when registry is None.
    """

    if registry is None:
        raise ValueError("registry must not be None")

    metadata = AppMetadata(
        application_name=settings.application_name,
        environment_name=settings.environment_name,
    )
    application = FastAPI(title=metadata.application_name)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal response for bootstrap verification.

        Returns:
            dict[str, str]: Service identification payload.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        return {
            "service": metadata.application_name,
            "status": "ready",
            "environment": metadata.environment_name,
        }

    application.include_router(api_create_health_router(registry=registry))
    application.include_router(api_create_greeting_router(registry=registry))

    return application
