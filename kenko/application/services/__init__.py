"""Application services package."""

from .check_scheduler import CheckerState, CheckScheduler

__all__ = ["CheckerState", "CheckScheduler"]
