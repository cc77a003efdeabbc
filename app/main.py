"""Main module entrypoint for local runtime execution.

This module forwards command-line arguments to the application bootstrap.
"""

import sys
from collections.abc import Sequence

from app.bootstrap import bootstrap_run
from app.config import SettingsLoadError
from app.observability import configure_logging, get_logger

logger = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the application with the process arguments.

    Args:
        argv: Arguments to forward; defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with a non-zero code when startup fails.
    """

    forwarded_arguments = sys.argv[1:] if argv is None else argv
    try:
        exit_code = bootstrap_run(forwarded_arguments)
    except SettingsLoadError as error:
        configure_logging()
        logger.error("%s", error)
        raise SystemExit(1) from error

    if exit_code != 0:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
