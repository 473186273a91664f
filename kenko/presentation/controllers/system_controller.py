"""System endpoints exposing liveness and the latest target results."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from kenko.application.dtos.health_dto import LivenessDTO, StatusDTO
from kenko.application.use_cases.health_use_cases import (
    GetLivenessUseCase,
    GetTargetStatusUseCase,
)
from kenko.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=LivenessDTO)
@inject
async def health(
    get_liveness_use_case: GetLivenessUseCase = Depends(
        Provide["get_liveness_use_case"]
    ),
) -> LivenessDTO:
    """Report that the process is alive."""
    return await get_liveness_use_case.execute()


@router.get("/status", response_model=StatusDTO, response_model_exclude_none=True)
@inject
async def target_status(
    get_target_status_use_case: GetTargetStatusUseCase = Depends(
        Provide["get_target_status_use_case"]
    ),
) -> StatusDTO:
    """Return the latest check result of every target."""
    try:
        status_response = await get_target_status_use_case.execute()
        logger.debug("status.retrieved", targets=len(status_response.targets))
        return status_response
    except Exception as exc:
        logger.error("status.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve target status",
        ) from exc
