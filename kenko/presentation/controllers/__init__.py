"""
Controllers Package - Presentation Layer

FastAPI routers exposing the query interface and the metrics scrape
endpoint. Controllers only map use case output to HTTP responses.
"""

from .metrics_controller import router as metrics_router
from .system_controller import router as system_router

__all__ = ["system_router", "metrics_router"]
