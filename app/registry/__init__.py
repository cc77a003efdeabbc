"""Component registry package for name-based component lookup."""

from .components import (
    GREETING_COMPONENT_NAME,
    ComponentAlreadyRegisteredError,
    ComponentNotFoundError,
    ComponentRegistry,
)

__all__ = [
    "GREETING_COMPONENT_NAME",
    "ComponentAlreadyRegisteredError",
    "ComponentNotFoundError",
    "ComponentRegistry",
]
