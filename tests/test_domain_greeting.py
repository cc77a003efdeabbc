"""Tests for the configuration-backed greeting component."""

import pytest

from app.domain import ConfiguredGreetingService


@pytest.mark.parametrize("configured_greeting", ["Hello World", "  padded  ", "", "こんにちは"])
def test_greeting_get_returns_configured_value_unchanged(configured_greeting: str) -> None:
    """Return exactly the value the component was constructed with."""

    greeting_service = ConfiguredGreetingService(greeting=configured_greeting)

    assert greeting_service.greeting_get() == configured_greeting


def test_greeting_get_is_stable_across_reads() -> None:
    """Return the same value on every read."""

    greeting_service = ConfiguredGreetingService(greeting="Hello")

    assert greeting_service.greeting_get() == greeting_service.greeting_get() == "Hello"


def test_greeting_service_rejects_none() -> None:
    """Reject construction without a greeting value."""

    with pytest.raises(ValueError):
        ConfiguredGreetingService(greeting=None)  # type: ignore[arg-type]
