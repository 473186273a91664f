"""
Prometheus check metrics.

Collectors are registered on an explicitly provided registry so several
checkers (or tests) can live in the same process.
"""

from __future__ import annotations

from typing import Optional, Tuple

import structlog
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from kenko.domain.entities.health import CheckResult
from kenko.domain.ports.check_metrics import ICheckMetrics

logger = structlog.get_logger(__name__)

CHECK_DURATION_BUCKETS = (0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)


class PrometheusCheckMetrics(ICheckMetrics):
    """Duration histogram, outcome counter and up gauge, keyed by target."""

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        self.registry = registry or CollectorRegistry()

        self.check_duration_seconds = Histogram(
            "kenko_check_duration_seconds",
            "duration of health checks",
            ["target"],
            buckets=CHECK_DURATION_BUCKETS,
            registry=self.registry,
        )
        self.check_total = Counter(
            "kenko_check_total",
            "total number of health checks",
            ["target", "status"],
            registry=self.registry,
        )
        self.target_up = Gauge(
            "kenko_target_up",
            "whether a target is healthy (1) or not (0)",
            ["target"],
            registry=self.registry,
        )

    def observe(self, result: CheckResult) -> None:
        try:
            self.check_duration_seconds.labels(target=result.target).observe(
                result.latency.total_seconds()
            )
            self.check_total.labels(
                target=result.target, status=result.status.value
            ).inc()
            self.target_up.labels(target=result.target).set(
                1 if result.is_healthy else 0
            )
        except (ValueError, TypeError) as exc:
            logger.error("metrics.observe.failed", target=result.target, error=str(exc))

    def render(self) -> Tuple[bytes, str]:
        """Text exposition of every collector on the registry."""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
