"""
Shared module - Cross-cutting concerns / Shared Layer

Enums, constants and the logging setup used by every other layer of
Kenko. Nothing in here may depend on Infrastructure or Frameworks
beyond the logging libraries themselves.
"""

from .consts import DEFAULT_RESULTS_KEY, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_RESULTS_KEY",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
