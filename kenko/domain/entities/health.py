"""
Health domain entities.

Value objects describing what Kenko checks (``Target``) and what a single
check produced (``CheckResult``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional


class CheckStatus(str, Enum):
    """Outcome of a single probe."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass(frozen=True, slots=True)
class Target:
    """A named HTTP endpoint to be health-checked."""

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class CheckResult:
    """
    Outcome of one probe against one target.

    ``error`` is only set when no status code could be obtained (bad URL,
    transport failure, timeout, cancellation). A response with a status
    code of 400 or above is unhealthy but carries no error.
    """

    target: str
    url: str
    status: CheckStatus
    latency: timedelta
    status_code: Optional[int] = None
    error: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_healthy(self) -> bool:
        return self.status is CheckStatus.HEALTHY

    @classmethod
    def from_response(
        cls, target: Target, status_code: int, latency: timedelta
    ) -> "CheckResult":
        """Classify a completed HTTP exchange."""
        status = CheckStatus.HEALTHY if status_code < 400 else CheckStatus.UNHEALTHY
        return cls(
            target=target.name,
            url=target.url,
            status=status,
            status_code=status_code,
            latency=latency,
        )

    @classmethod
    def from_failure(
        cls, target: Target, error: str, latency: timedelta
    ) -> "CheckResult":
        """Build the result of a probe that never obtained a status code."""
        return cls(
            target=target.name,
            url=target.url,
            status=CheckStatus.UNHEALTHY,
            error=error,
            latency=latency,
        )
