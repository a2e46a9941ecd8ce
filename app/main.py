"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import logging

import uvicorn

from app.bootstrap import bootstrap_create_application
from app.config import SettingsLoadError, config_load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the API server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration cannot be loaded.
    """

    argument_parser = argparse.ArgumentParser(description="Starter API runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional bind host override for `application_host`",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="Optional bind port override for `application_port`",
    )
    parsed_arguments = argument_parser.parse_args()

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Failed to load configuration: %s", error)
        raise SystemExit(1) from error

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    host = parsed_arguments.host if parsed_arguments.host is not None else settings.application_host
    port = parsed_arguments.port if parsed_arguments.port is not None else settings.application_port

    application = bootstrap_create_application(settings=settings)
    logger.info("Starting server in %s mode, listening on %s:%s", settings.run_mode, host, port)
    uvicorn.run(application, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
