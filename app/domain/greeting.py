"""Greeting component contract and its configuration-backed implementation."""

from typing import Protocol


class GreetingPort(Protocol):
    """Port definition for components that provide a greeting."""

    def greeting_get(self) -> str:
        """Return the greeting text.

        Returns:
            str: Greeting text.

        Raises:
            RuntimeError: Raised when the greeting is unavailable.
        """


class ConfiguredGreetingService(GreetingPort):
    """Greeting component holding a value injected from configuration at startup.

    The value is set once at construction and returned unchanged on every read.
    """

    def __init__(self, greeting: str):
        """Initialize greeting component.

        Args:
            greeting: Configured greeting text, kept verbatim.

        Raises:
            ValueError: Raised when greeting is None.
        """

        if greeting is None:
            raise ValueError("greeting must not be None")
        self._greeting = greeting

    def greeting_get(self) -> str:
        """Return the configured greeting exactly as it was provided.

        Returns:
            str: Configured greeting text.

        Raises:
            RuntimeError: This component does not raise runtime errors.
        """

        return self._greeting

    def __repr__(self) -> str:
        """Return a debug representation including the configured greeting.

        Returns:
            str: Representation string.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return f"ConfiguredGreetingService(greeting={self._greeting!r})"
