"""Use cases for the liveness and target status endpoints."""

from kenko.application.dtos.health_dto import LivenessDTO, StatusDTO
from kenko.domain.ports.result_reader import IResultReader


class GetLivenessUseCase:
    """Use case answering whether the process is alive."""

    async def execute(self) -> LivenessDTO:
        return LivenessDTO(status="healthy")


class GetTargetStatusUseCase:
    """Use case returning the latest known result of every target."""

    def __init__(self, result_reader: IResultReader) -> None:
        self._result_reader = result_reader

    async def execute(self) -> StatusDTO:
        results = await self._result_reader.read_all()
        return StatusDTO.from_results(results)
