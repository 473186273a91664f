"""
Server Entry Point - Main Layer

Command line entry point: loads the monitor configuration, fails fast when
it is invalid, and serves the application with uvicorn. uvicorn turns
SIGINT/SIGTERM into a lifespan shutdown, which stops the checker.
"""

import argparse
import sys
from typing import Optional, Sequence

import uvicorn

from kenko.domain.entities.errors import ConfigurationError
from kenko.infrastructure.config import load_monitor_config
from kenko.main.config import get_settings
from kenko.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kenko", description="Periodic HTTP health checker"
    )
    parser.add_argument(
        "--config",
        "-config",
        dest="config",
        default=None,
        help="path to config file (default: CHECKER_CONFIG_PATH or config.yaml)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the checker service."""
    args = parse_args(argv)

    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    if args.config:
        settings.checker.config_path = args.config

    try:
        monitor_config = load_monitor_config(settings.checker.config_path)
    except ConfigurationError as exc:
        logger.error("config.load.failed", error=exc.message, **exc.details)
        sys.exit(1)

    from kenko.main.app import create_app

    app = create_app(settings)

    logger.info("server.starting", host=settings.server.host, port=monitor_config.port)
    uvicorn.run(app, host=settings.server.host, port=monitor_config.port, log_config=None)
    logger.info("server.stopped")


if __name__ == "__main__":
    main()
