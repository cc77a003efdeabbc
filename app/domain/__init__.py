"""Domain models used across application layer boundaries."""

from .greeting import ConfiguredGreetingService, GreetingPort
from .models import AppMetadata, HealthStatus

__all__ = ["AppMetadata", "ConfiguredGreetingService", "GreetingPort", "HealthStatus"]
