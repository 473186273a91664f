from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import pytest

from kenko.application.use_cases.health_use_cases import (
    GetLivenessUseCase,
    GetTargetStatusUseCase,
)
from kenko.domain.entities.health import CheckResult, CheckStatus
from kenko.infrastructure.repositories.result_readers import MirroredResultReader


@dataclass
class _StubReader:
    results: Dict[str, CheckResult] = field(default_factory=dict)

    async def read_all(self) -> Dict[str, CheckResult]:
        return self.results


@pytest.mark.asyncio
async def test_get_liveness_use_case_is_always_healthy() -> None:
    dto = await GetLivenessUseCase().execute()

    assert dto.status == "healthy"


@pytest.mark.asyncio
async def test_get_target_status_use_case_returns_sorted_targets(make_result) -> None:
    reader = _StubReader(
        {
            "web": make_result("web"),
            "api": make_result(
                "api", status=CheckStatus.UNHEALTHY, status_code=500
            ),
        }
    )

    dto = await GetTargetStatusUseCase(result_reader=reader).execute()

    assert [target.name for target in dto.targets] == ["api", "web"]
    assert dto.targets[0].status is CheckStatus.UNHEALTHY
    assert dto.targets[0].status_code == 500


@pytest.mark.asyncio
async def test_get_target_status_use_case_with_no_results() -> None:
    dto = await GetTargetStatusUseCase(result_reader=_StubReader()).execute()

    assert dto.targets == []


@pytest.mark.asyncio
async def test_get_target_status_falls_back_to_memory_when_mirror_down(
    stub_store, stub_mirror, make_result
) -> None:
    for name in ("ok", "fail", "down"):
        stub_store.update(name, make_result(name))
    stub_mirror.available = False

    use_case = GetTargetStatusUseCase(MirroredResultReader(stub_mirror, stub_store))
    dto = await use_case.execute()

    assert [target.name for target in dto.targets] == ["down", "fail", "ok"]
