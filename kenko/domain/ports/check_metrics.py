"""Domain abstraction for recording per-check metrics."""

from __future__ import annotations

from typing import Protocol

from kenko.domain.entities.health import CheckResult


class ICheckMetrics(Protocol):
    def observe(self, result: CheckResult) -> None:
        """Record latency, outcome and up/down state. Must not raise."""
        ...
