"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import ConfigurationError, DomainError
from .health import CheckResult, CheckStatus, Target

__all__ = [
    "Target",
    "CheckStatus",
    "CheckResult",
    "DomainError",
    "ConfigurationError",
]
