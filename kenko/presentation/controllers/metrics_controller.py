"""Prometheus scrape endpoint."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response

from kenko.infrastructure.metrics import PrometheusCheckMetrics

router = APIRouter(tags=["Metrics"])


@router.get("/metrics", response_class=Response)
@inject
async def metrics(
    check_metrics: PrometheusCheckMetrics = Depends(Provide["check_metrics"]),
) -> Response:
    payload, content_type = check_metrics.render()
    return Response(content=payload, media_type=content_type)
