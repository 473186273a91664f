"""
Domain Layer Package

Targets, check results and the ports the checker depends on. Nothing here
knows about HTTP clients, Redis or Prometheus.
"""

# Re-export submodules
from kenko.domain import entities, ports

__all__ = ["entities", "ports"]
