"""
Logging Configuration - Shared Layer

Kenko logs through structlog on top of the standard ``logging`` module, so
third-party loggers (uvicorn, httpx, redis) end up in the same stream and
format as the checker's own structured events.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from kenko.shared.consts import EnumEnvironment


def _build_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _build_handlers(file_path: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if file_path:
        handlers.append(logging.FileHandler(file_path))
    return handlers


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure stdlib logging and structlog for the process.

    Called once at import time of the entry points with values taken from
    the environment, and again once the settings are loaded.

    Args:
        level: Log level name. Falls back to ``LOG_LEVEL`` then ``INFO``.
        file_path: Optional log file. Falls back to ``LOG_FILE_PATH``.
        environment: Deployment environment; production renders JSON.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).info(
        "logging.configured", extra={"level": log_level, "file": log_file}
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from a fully loaded ``AppSettings``."""
    try:
        log_level = settings.logging.level
        environment = settings.environment
        configure_logging(
            level=getattr(log_level, "value", log_level),
            file_path=settings.logging.file_path,
            environment=getattr(environment, "value", environment),
        )
    except (AttributeError, OSError) as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
