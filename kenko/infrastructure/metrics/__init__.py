"""Prometheus metrics for completed checks."""

from .prometheus_metrics import CHECK_DURATION_BUCKETS, PrometheusCheckMetrics

__all__ = ["CHECK_DURATION_BUCKETS", "PrometheusCheckMetrics"]
