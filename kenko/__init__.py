"""
Kenko - periodic HTTP health checker.

Layer Structure:
- Domain: targets, check results and the ports the checker relies on
- Application: the check scheduler, query use cases and DTOs
- Infrastructure: httpx prober, result store, Redis mirror, Prometheus
  metrics and the YAML target configuration
- Presentation: FastAPI routers for /health, /status and /metrics
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""

__version__ = "1.0.0"
