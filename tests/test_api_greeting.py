"""Tests for the greeting endpoint."""

from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.config import AppSettings
from app.registry import GREETING_COMPONENT_NAME, ComponentRegistry


class _GreetingStub:
    """Greeting component stub returning a fixed value."""

    def __init__(self, greeting: str):
        """Initialize greeting stub.

        Args:
            greeting: Fixed greeting returned on every read.

        Raises:
            ValueError: This stub does not raise value errors.
        """

        self._greeting = greeting
        self.calls = 0

    def greeting_get(self) -> str:
        """Return the fixed greeting and count the read.

        Returns:
            str: Fixed greeting.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        self.calls += 1
        return self._greeting


def _build_settings() -> AppSettings:
    """Create test settings object.

    Returns:
        AppSettings: Deterministic test settings for API creation.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    return AppSettings(environment_name="test", greeting="unused", _env_file=None)


def test_api_greeting_returns_value_from_registered_component() -> None:
    """Serve the value provided by the component registered as `greeting`."""

    greeting_stub = _GreetingStub("Hello from stub")
    registry = ComponentRegistry()
    registry.component_register(GREETING_COMPONENT_NAME, greeting_stub)
    client = TestClient(create_api_application(_build_settings(), registry))

    response = client.get("/greeting")

    assert response.status_code == 200
    assert response.json() == {"greeting": "Hello from stub"}
    assert greeting_stub.calls == 1


def test_api_greeting_returns_service_unavailable_without_component() -> None:
    """Return HTTP 503 when no greeting component is registered."""

    client = TestClient(create_api_application(_build_settings(), ComponentRegistry()))

    response = client.get("/greeting")

    assert response.status_code == 503
    assert GREETING_COMPONENT_NAME in response.json()["detail"]
