"""Application bootstrap wiring for startup validation and component assembly."""

import argparse
from collections.abc import Sequence

import uvicorn
from fastapi import FastAPI

from app.api import create_api_application
from app.config import AppSettings, config_load_settings
from app.domain import ConfiguredGreetingService
from app.observability import configure_logging, get_logger
from app.registry import GREETING_COMPONENT_NAME, ComponentRegistry

logger = get_logger(__name__)


def bootstrap_create_registry(settings: AppSettings) -> ComponentRegistry:
    """Build the component registry from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        ComponentRegistry: Registry with the greeting component registered.

    Raises:
        RuntimeError: This builder does not raise runtime errors.
    """

    registry = ComponentRegistry()
    registry.component_register(GREETING_COMPONENT_NAME, ConfiguredGreetingService(greeting=settings.greeting))
    logger.info("Registered component %s", GREETING_COMPONENT_NAME)
    return registry


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    registry = bootstrap_create_registry(resolved_settings)
    return create_api_application(settings=resolved_settings, registry=registry)


def bootstrap_build_argument_parser() -> argparse.ArgumentParser:
    """Build the command-line parser for the runtime.

    Returns:
        argparse.ArgumentParser: Parser for runtime commands and setting overrides.

    Raises:
        RuntimeError: This builder does not raise runtime errors.
    """

    argument_parser = argparse.ArgumentParser(
        prog="greeting-service",
        description="Greeting service runtime entrypoint",
    )
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "greet"),
        help="Runtime command: `serve` starts the HTTP server, `greet` prints the configured greeting",
        type=str,
    )
    argument_parser.add_argument("--greeting", dest="greeting", type=str, help="Override GREETING")
    argument_parser.add_argument("--host", dest="application_host", type=str, help="Override APPLICATION_HOST")
    argument_parser.add_argument("--port", dest="application_port", type=int, help="Override APPLICATION_PORT")
    argument_parser.add_argument("--log-level", dest="log_level", type=str, help="Override LOG_LEVEL")
    return argument_parser


def bootstrap_run(argv: Sequence[str]) -> int:
    """Start the runtime with the given command-line arguments.

    Args:
        argv: Command-line arguments without the program name.

    Returns:
        int: Process exit code.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    parsed_arguments = bootstrap_build_argument_parser().parse_args(list(argv))
    overrides = {
        field_name: value
        for field_name, value in vars(parsed_arguments).items()
        if field_name != "command" and value is not None
    }
    settings = config_load_settings(**overrides)
    configure_logging(settings.log_level)

    if parsed_arguments.command == "greet":
        registry = bootstrap_create_registry(settings)
        greeting_component = registry.component_get_typed(GREETING_COMPONENT_NAME, ConfiguredGreetingService)
        print(greeting_component.greeting_get())
        return 0

    application = create_api_application(settings=settings, registry=bootstrap_create_registry(settings))
    logger.info(
        "Starting %s on %s:%s (environment=%s)",
        settings.application_name,
        settings.application_host,
        settings.application_port,
        settings.environment_name,
    )
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level.lower(),
    )
    return 0
