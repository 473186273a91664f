"""
Application Layer Package

The check scheduler and the use cases of the query interface. It
orchestrates domain entities through ports and never touches HTTP
clients, Redis or Prometheus directly.
"""

# Re-export submodules
from kenko.application import dtos, services, use_cases

__all__ = ["dtos", "services", "use_cases"]
