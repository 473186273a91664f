"""
Use Cases Package - Application Layer

Use cases backing the query interface. They read through the domain ports
and hand DTOs back to the presentation layer.
"""

from .health_use_cases import GetLivenessUseCase, GetTargetStatusUseCase

__all__ = ["GetLivenessUseCase", "GetTargetStatusUseCase"]
