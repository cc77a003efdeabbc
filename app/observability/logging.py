"""Process-wide logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once per process.

    Later calls only adjust the level.

    Args:
        level: Standard library level name such as `INFO` or `DEBUG`.

    Returns:
        None: Configures the root logger as side effect.

    Raises:
        ValueError: Raised when level is not a known level name.
    """

    global _configured

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger.

    Args:
        name: Logger name, usually `__name__`.

    Returns:
        logging.Logger: Named logger.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return logging.getLogger(name)
