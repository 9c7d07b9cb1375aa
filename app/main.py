"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import logging
from collections.abc import Sequence

import uvicorn

from app.bootstrap import bootstrap_create_application
from app.config import SettingsLoadError, config_load_settings
from app.observability import observability_setup_logging

logger = logging.getLogger("app.main")


def main(argv: Sequence[str] | None = None) -> None:
    """Validate startup configuration and serve the API until terminated.

    Args:
        argv: Optional command-line arguments; defaults to `sys.argv`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Hello service runtime entrypoint")
    argument_parser.add_argument(
        "--check-config",
        dest="check_config",
        action="store_true",
        help="Validate configuration and exit without starting the server",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    observability_setup_logging()
    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        for described_error in error.errors:
            logger.error("Invalid configuration: %s", described_error)
        logger.critical("Startup aborted: configuration validation failed")
        raise SystemExit(1) from error

    observability_setup_logging(settings.log_level)
    if parsed_arguments.check_config:
        logger.info("Configuration valid for environment %s", settings.node_env)
        return

    application = bootstrap_create_application(settings=settings)
    logger.info(
        "Starting server on %s:%s (environment %s)",
        settings.application_host,
        settings.port,
        settings.node_env,
    )
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.port,
        log_config=None,
        server_header=False,
    )


if __name__ == "__main__":
    main()
