"""Named component registry used to look up runtime components by identifier."""

from typing import Any, TypeVar

from app.domain import HealthStatus

GREETING_COMPONENT_NAME = "greeting"

ComponentT = TypeVar("ComponentT")


class ComponentNotFoundError(LookupError):
    """Raised when no component is registered under the requested name."""


class ComponentAlreadyRegisteredError(RuntimeError):
    """Raised when a component name is registered more than once."""


class ComponentRegistry:
    """In-memory mapping from registration identifiers to component instances.

    Components are registered once during bootstrap and read afterwards.
    """

    def __init__(self) -> None:
        """Initialize an empty registry.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._components: dict[str, Any] = {}

    def component_register(self, name: str, component: Any) -> None:
        """Register a component instance under a unique name.

        Args:
            name: Registration identifier used for lookups.
            component: Component instance.

        Raises:
            ValueError: Raised when name is blank or component is None.
            ComponentAlreadyRegisteredError: Raised when name is already taken.
        """

        if not name or not name.strip():
            raise ValueError("component name must not be blank")
        if component is None:
            raise ValueError("component must not be None")
        if name in self._components:
            raise ComponentAlreadyRegisteredError(f"component already registered: {name}")
        self._components[name] = component

    def component_get(self, name: str) -> Any:
        """Return the component registered under the given name.

        Args:
            name: Registration identifier.

        Returns:
            Any: Registered component instance.

        Raises:
            ComponentNotFoundError: Raised when no component uses this name.
        """

        try:
            return self._components[name]
        except KeyError as error:
            raise ComponentNotFoundError(f"no component registered under name: {name}") from error

    def component_get_typed(self, name: str, expected_type: type[ComponentT]) -> ComponentT:
        """Return the named component after checking its type.

        Args:
            name: Registration identifier.
            expected_type: Class the component must be an instance of.

        Returns:
            ComponentT: Registered component instance.

        Raises:
            ComponentNotFoundError: Raised when no component uses this name.
            TypeError: Raised when the component has an unexpected type.
        """

        component = self.component_get(name)
        if not isinstance(component, expected_type):
            raise TypeError(
                f"component {name} is {type(component).__name__}, expected {expected_type.__name__}"
            )
        return component

    def component_check_health(self, name: str) -> HealthStatus:
        """Verify that the named component resolves.

        Args:
            name: Registration identifier.

        Returns:
            HealthStatus: Health payload with status and diagnostic detail.

        Raises:
            ComponentNotFoundError: Raised when no component uses this name.
        """

        component = self.component_get(name)
        return HealthStatus(status="ok", detail=f"component {name} resolved to {type(component).__name__}")

    def component_names(self) -> tuple[str, ...]:
        """Return registered component names in sorted order.

        Returns:
            tuple[str, ...]: Registered names.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return tuple(sorted(self._components))

    def __contains__(self, name: object) -> bool:
        """Return whether a component is registered under the given name.

        Args:
            name: Registration identifier.

        Returns:
            bool: True when the name is registered.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return name in self._components
