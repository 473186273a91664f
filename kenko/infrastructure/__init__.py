"""
Infrastructure Layer Package

Implementations of the domain ports backed by external systems: httpx for
probes, Redis for the result mirror, prometheus_client for metrics and
PyYAML for the target configuration.
"""

from kenko.infrastructure import config, metrics, repositories, services

__all__ = ["config", "metrics", "repositories", "services"]
